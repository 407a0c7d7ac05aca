"""Allow ``python -m glow``."""

import sys

from glow.cli import main

if __name__ == "__main__":
    sys.exit(main())
