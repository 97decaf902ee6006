"""Allow running as ``python -m phonopass``."""

import sys

from .cli import main

sys.exit(main())
