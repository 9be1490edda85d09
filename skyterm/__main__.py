import sys

from skyterm.cli import main

sys.exit(main())
