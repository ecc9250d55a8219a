"""Entry point for ``python -m teamlex``."""

import sys

from teamlex.cli import main

sys.exit(main())
