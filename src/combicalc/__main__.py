"""Allow ``python -m combicalc``."""

import sys

from combicalc.cli import main

sys.exit(main())
