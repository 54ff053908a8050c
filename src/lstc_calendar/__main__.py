"""Allow ``python -m lstc_calendar``."""
import sys

from .cli import main

sys.exit(main())
