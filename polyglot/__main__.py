"""Allow ``python -m polyglot``."""

import sys

from .cli import main

sys.exit(main())
