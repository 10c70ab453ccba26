"""Allow ``python -m submodule_sync``."""

import sys

from submodule_sync.cli import main

sys.exit(main())
