"""Allow ``python -m infix_calc``."""

import sys

from .cli import main

sys.exit(main())
