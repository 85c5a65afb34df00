"""Copy SharedFiles into every ProductTasks/<product>/<task> directory.

Both roots are siblings of this script's directory.
"""

from __future__ import annotations

import sys

from sharedfiles.__main__ import main
from sharedfiles.infrastructure.config import LayoutConfig

if __name__ == "__main__":
    sys.exit(main(LayoutConfig.for_script(__file__)))
