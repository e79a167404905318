# =============================================================================
# Spam Blaster Entry Point for `python -m spam_blaster`
# =============================================================================
# This module allows Spam Blaster to be run as a Python module:
#
#   python -m spam_blaster
#
# This is equivalent to running the 'spam-blaster' command after installation.
# =============================================================================

import sys

from spam_blaster.app import main

if __name__ == "__main__":
    sys.exit(main())
