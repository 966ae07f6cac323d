import sys

from namesort.cli import main

sys.exit(main())
