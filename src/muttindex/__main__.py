import sys

from muttindex.cli import main

sys.exit(main())
