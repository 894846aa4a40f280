"""Allow ``python -m create_nodality``."""

import sys

from create_nodality.cli import main

if __name__ == "__main__":
    sys.exit(main())
