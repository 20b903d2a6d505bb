import sys

from gpstrips.cli import main

sys.exit(main())
