# =============================================================================
# UI Screens
# =============================================================================
# Full-screen views for the application.
#
#   - MainScreen: Directory inputs, run button and results log
#   - DirectoryPickerScreen: Modal browser for choosing a corpus directory
# =============================================================================

from spam_blaster.ui.screens.directory_picker import DirectoryPickerScreen
from spam_blaster.ui.screens.main import MainScreen

__all__ = ["MainScreen", "DirectoryPickerScreen"]
