"""Allow ``python -m coding_analytics``."""

import sys

from .main import main

sys.exit(main())
