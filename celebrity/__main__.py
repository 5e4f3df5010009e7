import sys

from celebrity.cli import main

sys.exit(main())
