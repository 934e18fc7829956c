import sys

from stripmd.cli import main

sys.exit(main())
