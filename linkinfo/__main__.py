"""Allow running as python -m linkinfo."""

import sys

from linkinfo.cli import main

sys.exit(main())
