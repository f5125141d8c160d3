import sys

from grid_crucible.cli import main

sys.exit(main())
