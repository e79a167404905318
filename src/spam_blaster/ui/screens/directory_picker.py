# =============================================================================
# Directory Picker Screen
# =============================================================================
# A simple directory browser for choosing a corpus directory.
#
# Features:
#   - Navigate directories with keyboard
#   - Show how many files a directory holds
#   - Quick path input
# =============================================================================

from pathlib import Path
from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import DirectoryTree, Input, Static, Button
from textual.containers import Vertical, Horizontal


class DirectoryPickerScreen(ModalScreen[str | None]):
    """
    Modal screen for picking a directory.

    Returns the selected directory path, or None if cancelled.
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    CSS = """
    DirectoryPickerScreen {
        align: center middle;
    }

    #picker-container {
        width: 80%;
        height: 80%;
        min-width: 60;
        min-height: 20;
        background: $surface;
        border: thick $primary;
        padding: 1;
    }

    #picker-title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    #path-input {
        margin-bottom: 1;
    }

    #directory-tree {
        height: 1fr;
        border: tall $primary;
    }

    #directory-info {
        height: 2;
        margin-top: 1;
        color: $text-muted;
    }

    #picker-buttons {
        height: auto;
        margin-top: 1;
        align: center middle;
    }

    #picker-buttons Button {
        margin: 0 1;
    }
    """

    def __init__(self, title: str = "Select Directory", start_path: str | None = None) -> None:
        """
        Initialize the directory picker.

        Args:
            title: Heading shown above the tree.
            start_path: Starting directory path. Defaults to home.
        """
        super().__init__()
        self._title = title
        start = Path(start_path).expanduser() if start_path else None
        self._start_path = start if start is not None and start.is_dir() else Path.home()
        self._selected_path: Path | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="picker-container"):
            yield Static(self._title, id="picker-title")
            yield Input(
                value=str(self._start_path),
                placeholder="Enter path or browse below",
                id="path-input"
            )
            yield DirectoryTree(str(self._start_path), id="directory-tree")
            yield Static("Select a directory", id="directory-info")
            with Horizontal(id="picker-buttons"):
                yield Button("Select", id="select-btn", variant="primary")
                yield Button("Cancel", id="cancel-btn")

    def on_mount(self) -> None:
        """Focus the directory tree on mount."""
        tree = self.query_one("#directory-tree", DirectoryTree)
        tree.focus()

    def on_directory_tree_directory_selected(
        self, event: DirectoryTree.DirectorySelected
    ) -> None:
        """Handle directory selection - update path input."""
        self._selected_path = event.path
        path_input = self.query_one("#path-input", Input)
        path_input.value = str(event.path)
        self._update_directory_info(event.path)

    def _update_directory_info(self, path: Path) -> None:
        """Update the directory info display."""
        try:
            file_count = sum(1 for entry in path.iterdir() if entry.is_file())
        except OSError as e:
            info = f"Cannot read {path.name}: {e.strerror}"
        else:
            info = f"Selected: {path.name} ({file_count} files)"
        self.query_one("#directory-info", Static).update(info)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle path input submission."""
        if event.input.id == "path-input":
            path = Path(event.value).expanduser()
            if path.is_dir():
                # Navigate to directory
                self._selected_path = path
                self._update_directory_info(path)
                tree = self.query_one("#directory-tree", DirectoryTree)
                tree.path = path

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "select-btn":
            self.action_select()
        elif event.button.id == "cancel-btn":
            self.action_cancel()

    def action_select(self) -> None:
        """Select the current directory and return."""
        # First check if there's a path in the input
        path_input = self.query_one("#path-input", Input)
        input_path = Path(path_input.value).expanduser()

        if input_path.is_dir():
            self.dismiss(str(input_path))
        elif self._selected_path and self._selected_path.is_dir():
            self.dismiss(str(self._selected_path))
        else:
            self.notify("Please select a directory", severity="warning")

    def action_cancel(self) -> None:
        """Cancel and return None."""
        self.dismiss(None)
