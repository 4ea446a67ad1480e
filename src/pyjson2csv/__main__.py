"""Allow ``python -m pyjson2csv``."""

import sys

from pyjson2csv.cli import main

sys.exit(main())
