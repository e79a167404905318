# =============================================================================
# Main Screen
# =============================================================================
# The default view: pick the three corpus directories and run the filter.
#
# Layout:
#   ┌───────────────────────────────────────────────────┐
#   │ Spam directory        [.................] [Browse]│
#   │ Ham directory         [.................] [Browse]│
#   │ Unfiltered directory  [.................] [Browse]│
#   │ [Run filter]  status line                          │
#   ├───────────────────────────────────────────────────┤
#   │ results log                                        │
#   └───────────────────────────────────────────────────┘
#
# Every run starts from a fresh classifier: train spam, train ham, recompute
# spamicity, then classify the unfiltered directory. The run happens in a
# worker thread so the screen stays responsive on large corpora.
# =============================================================================

import logging

from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input, Label, RichLog, Static

from spam_blaster.core import CorpusError
from spam_blaster.session import BatchReport, FilterSession, Verdict
from spam_blaster.spam import ClassifierStats
from spam_blaster.ui.screens.directory_picker import DirectoryPickerScreen

logger = logging.getLogger(__name__)

# (input key, label) for each corpus directory, in run order
DIRECTORY_FIELDS = [
    ("spam", "Spam directory"),
    ("ham", "Ham directory"),
    ("unfiltered", "Unfiltered directory"),
]


class MainScreen(Screen):
    """
    Main screen for training and running the filter.

    Attributes:
        last_report: Report of the most recent successful run.
    """

    BINDINGS = [
        Binding("ctrl+r", "run", "Run filter"),
        Binding("ctrl+l", "clear_log", "Clear log"),
    ]

    CSS = """
    #main-container {
        height: auto;
        padding: 1 2;
    }

    .directory-row {
        height: auto;
        margin-bottom: 1;
    }

    .directory-label {
        width: 22;
        padding: 1 0;
    }

    .directory-row Input {
        width: 1fr;
    }

    .directory-row Button {
        margin-left: 1;
    }

    #run-row {
        height: auto;
    }

    #status {
        padding: 1 2;
        color: $text-muted;
    }

    #results {
        height: 1fr;
        border: tall $primary;
        margin: 0 2 1 2;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self.last_report: BatchReport | None = None

    def compose(self) -> ComposeResult:
        directories = self.app.config.directories

        yield Header()
        with Vertical(id="main-container"):
            for key, label in DIRECTORY_FIELDS:
                with Horizontal(classes="directory-row"):
                    yield Label(label, classes="directory-label")
                    yield Input(
                        value=getattr(directories, key),
                        placeholder=f"Path to {label.lower()}",
                        id=f"{key}-dir",
                    )
                    yield Button("Browse", id=f"browse-{key}")
            with Horizontal(id="run-row"):
                yield Button("Run filter", id="run-btn", variant="primary")
                yield Static("Not trained", id="status")
        yield RichLog(id="results", markup=False, highlight=False, wrap=True)
        yield Footer()

    # -------------------------------------------------------------------------
    # Event Handlers
    # -------------------------------------------------------------------------

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        button_id = event.button.id or ""

        if button_id == "run-btn":
            self.action_run()
        elif button_id.startswith("browse-"):
            self._browse(button_id.removeprefix("browse-"))

    def _browse(self, key: str) -> None:
        """Open the directory picker for one of the directory inputs."""
        path_input = self.query_one(f"#{key}-dir", Input)
        label = dict(DIRECTORY_FIELDS)[key]

        def set_directory(path: str | None) -> None:
            if path:
                path_input.value = path

        self.app.push_screen(
            DirectoryPickerScreen(title=f"Select {label}", start_path=path_input.value or None),
            set_directory,
        )

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def action_run(self) -> None:
        """Train from the spam and ham directories and filter the third."""
        spam_dir, ham_dir, unfiltered_dir = (
            self.query_one(f"#{key}-dir", Input).value.strip()
            for key, _ in DIRECTORY_FIELDS
        )
        if not (spam_dir and ham_dir and unfiltered_dir):
            self.notify("Set all three directories first", severity="warning")
            return

        self._set_status("Running...")
        self._run_filter(spam_dir, ham_dir, unfiltered_dir)

    def action_clear_log(self) -> None:
        """Clear the results log."""
        self.query_one("#results", RichLog).clear()

    # -------------------------------------------------------------------------
    # Workers
    # -------------------------------------------------------------------------

    @work(exclusive=True, thread=True)
    def _run_filter(self, spam_dir: str, ham_dir: str, unfiltered_dir: str) -> None:
        """Run a filter session off the event loop.

        Widgets are only touched through ``call_from_thread``.
        """
        session = FilterSession(config=self.app.config)

        try:
            added = session.train_spam_directory(spam_dir)
            self._write(f"Added {added} spam files to filter")
            added = session.train_ham_directory(ham_dir)
            self._write(f"Added {added} ham files to filter")

            session.update_spamicity()
            report = session.filter_directory(unfiltered_dir, on_verdict=self._log_verdict)
        except (CorpusError, OSError) as e:
            logger.error(f"Filter run failed: {e}")
            self._write(f"Error: {e}")
            self.app.call_from_thread(self.notify, str(e), severity="error", timeout=10)
            self.app.call_from_thread(self._set_status, "Run failed")
            return

        self._write(report.summary())
        self.app.call_from_thread(self._finish_run, report, session.classifier.stats)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _write(self, line: str) -> None:
        """Append a line to the results log from the worker thread."""
        self.app.call_from_thread(self._append_result, line)

    def _append_result(self, line: str) -> None:
        self.query_one("#results", RichLog).write(line)

    def _set_status(self, status: str) -> None:
        self.query_one("#status", Static).update(status)

    def _log_verdict(self, verdict: Verdict) -> None:
        if verdict.is_spam:
            self._write(f"Spam detected: {verdict.path}")

    def _finish_run(self, report: BatchReport, stats: ClassifierStats) -> None:
        self.last_report = report
        self._update_status(stats)

    def _update_status(self, stats: ClassifierStats) -> None:
        status = (
            f"Trained on {stats.spam_count} spam / {stats.ham_count} ham | "
            f"{stats.scored_tokens} scored tokens | ledger: {stats.ledger_mode.value}"
        )
        self.query_one("#status", Static).update(status)
