import sys

from disc_categorizer.cli import main

sys.exit(main())
