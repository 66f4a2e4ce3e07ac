# =============================================================================
# spam-detect Entry Point for `python -m spam_detect`
# =============================================================================
# This module allows spam-detect to be run as a Python module:
#
#   python -m spam_detect
#
# This is equivalent to running the 'spam-detect' command after installation.
# =============================================================================

import sys

from spam_detect.app import main

if __name__ == "__main__":
    sys.exit(main())
