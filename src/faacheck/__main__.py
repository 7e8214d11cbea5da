"""Entry point for python -m faacheck."""

import sys

from faacheck.presentation.cli import main

sys.exit(main())
