import sys

from pattern_demos.cli import main

sys.exit(main())
