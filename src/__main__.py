"""Allow `python -m modscore`."""

import sys

from modscore.main import main

sys.exit(main())
