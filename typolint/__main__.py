import sys

from typolint.cli import main

sys.exit(main())
