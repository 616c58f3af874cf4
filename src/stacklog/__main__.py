"""Allow ``python -m stacklog``."""

import sys

from stacklog.cli import main

sys.exit(main())
