import sys

from numfuncs.cli import main

sys.exit(main())
