# =============================================================================
# Spam Blaster: A Self-Training Bayesian Spam Filter
# =============================================================================
#
# Spam Blaster learns from a directory of spam and a directory of ham, then
# sorts a directory of unfiltered messages, learning from its own verdicts
# as it goes.
#
# Features:
#   - Body-only tokenization (headers are skipped)
#   - Per-token spamicity from spam/ham document frequencies
#   - Verdicts from the 15 most extreme tokens, combined in log-odds space
#   - Textual TUI and a plain console mode
#   - XDG Base Directory compliant configuration
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "spam-blaster"

# Main entry point - this is what gets called by the 'spam-blaster' command
from spam_blaster.app import main

__all__ = ["main", "__version__", "__app_name__"]
