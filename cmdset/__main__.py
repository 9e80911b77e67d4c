import sys

from cmdset.cli import main

sys.exit(main())
