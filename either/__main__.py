import sys

from either.cli import main

sys.exit(main())
