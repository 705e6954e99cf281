"""Allow ``python -m uni_finder``."""

import sys

from uni_finder.cli import main

sys.exit(main())
