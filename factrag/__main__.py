import sys

from factrag.cli import main

sys.exit(main())
