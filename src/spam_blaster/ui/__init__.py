# =============================================================================
# UI Module
# =============================================================================
# Textual-based user interface for Spam Blaster.
#
# Structure:
#   - screens/: Full-screen and modal views
#
# The UI is a thin layer over spam_blaster.session.FilterSession; it holds
# no classifier state between runs.
# =============================================================================

from spam_blaster.ui.screens.directory_picker import DirectoryPickerScreen
from spam_blaster.ui.screens.main import MainScreen

__all__ = [
    "MainScreen",
    "DirectoryPickerScreen",
]
