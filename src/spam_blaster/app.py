# =============================================================================
# Spam Blaster Main Application
# =============================================================================
# Entry point for both ways of running the filter:
#
#   - The Textual TUI (default): pick directories, run, read the results
#   - The console (--prompt, or three directories on the command line):
#     the classic prompt sequence, printing each spam file found and a
#     final count
#
# Either way a run is: train spam, train ham, recompute spamicity, then
# classify every file of the unfiltered directory.
# =============================================================================

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from textual.app import App
from textual.binding import Binding
from textual.logging import TextualHandler

from spam_blaster import __version__, __app_name__
from spam_blaster.config import Config, ConfigError, print_paths
from spam_blaster.core import CorpusError
from spam_blaster.session import FilterSession, Verdict
from spam_blaster.ui.screens.main import MainScreen

logger = logging.getLogger(__name__)

# Console prompts, in the order the directories are needed
SPAM_PROMPT = "Set directory with spam emails: "
HAM_PROMPT = "Set directory with ham emails: "
UNFILTERED_PROMPT = "Set directory with unfiltered emails: "

# First line of --prompt output: program name and version
BANNER = f"Spam Blaster {__version__}"


class SpamBlasterApp(App):
    """
    The Spam Blaster TUI.

    Attributes:
        config: The loaded application configuration.
        TITLE: Window title shown in terminal.
        SUB_TITLE: Subtitle shown in header.
        BINDINGS: Global keyboard shortcuts.
    """

    # Application metadata
    TITLE = "Spam Blaster"
    SUB_TITLE = "Bayesian spam filter"

    # Global keybindings - these work from any screen
    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("f1", "show_help", "Help"),
    ]

    # Set MainScreen as the default screen
    SCREENS = {"main": MainScreen}

    def __init__(self, config: Config | None = None) -> None:
        """
        Initialize the application.

        Args:
            config: Optional pre-loaded configuration. If not provided,
                    configuration will be loaded from the default location.
        """
        super().__init__()

        # Initialize config error tracking
        self._config_error: str | None = None

        # Load configuration if not provided
        if config is None:
            try:
                self.config = Config.load()
            except ConfigError as e:
                self.config = Config()
                self._config_error = str(e)
        else:
            self.config = config

    async def on_mount(self) -> None:
        """Called when the application is mounted and ready."""
        self.theme = "textual-light" if self.config.ui.theme == "light" else "textual-dark"

        # Check for config errors
        if self._config_error:
            self.notify(
                f"Config error: {self._config_error}",
                severity="error",
                timeout=10,
            )

        # Push the main screen
        await self.push_screen("main")

    def action_show_help(self) -> None:
        """Show the help notification."""
        self.notify(
            "Fill in the three directories (or Browse), then Ctrl+R to run. Ctrl+Q quits.",
            timeout=10,
        )


# =============================================================================
# Console Runner
# =============================================================================

def run_console(config: Config, ask: Callable[[str], str]) -> int:
    """
    Run the filter on the console.

    Args:
        config: Configuration for the classifier.
        ask: Returns the directory for a prompt (input() for the
             interactive loop).

    Returns:
        Exit code (0 for success, 1 if a directory or file couldn't be read).
    """
    session = FilterSession(config=config)

    def report_spam(verdict: Verdict) -> None:
        if verdict.is_spam:
            print(f"Spam detected: {verdict.path}")

    try:
        added = session.train_spam_directory(ask(SPAM_PROMPT))
        print(f"Added {added} spam files to filter")

        added = session.train_ham_directory(ask(HAM_PROMPT))
        print(f"Added {added} ham files to filter")

        # Process spamicity values
        session.update_spamicity()

        report = session.filter_directory(ask(UNFILTERED_PROMPT), on_verdict=report_spam)
    except EOFError:
        print()
        return 1
    except (CorpusError, OSError) as e:
        logger.error(f"Filter run failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(report.summary())
    return 0


# =============================================================================
# CLI Entry Point
# =============================================================================

def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="Spam Blaster: a self-training Bayesian spam filter",
    )

    parser.add_argument(
        "directories",
        nargs="*",
        metavar="DIR",
        help="Spam, ham and unfiltered directories (runs without the TUI)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--prompt",
        action="store_true",
        help="Ask for the directories on the console instead of starting the TUI",
    )

    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print configuration paths and exit",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: XDG config location)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (verbose logging)",
    )

    args = parser.parse_args(argv)
    if args.directories and len(args.directories) != 3:
        parser.error("expected exactly three directories: SPAM HAM UNFILTERED")
    if args.directories and args.prompt:
        parser.error("--prompt can't be combined with directories")
    return args


def setup_logging(debug: bool, tui: bool) -> None:
    """Route log records to stderr, or to the Textual devtools console in the TUI."""
    level = logging.DEBUG if debug else logging.WARNING
    if tui:
        logging.basicConfig(level=level, handlers=[TextualHandler()])
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for Spam Blaster.

    This function:
        1. Parses command-line arguments
        2. Handles special commands (--paths, --version)
        3. Loads configuration
        4. Runs the console filter or starts the Textual application

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = parse_args(argv)
    tui = not (args.prompt or args.directories)
    setup_logging(args.debug, tui)

    # Handle --paths flag
    if args.paths:
        print_paths()
        return 0

    # Load configuration
    try:
        config = Config.load(args.config)
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 1

    if args.prompt:
        print(BANNER)
        return run_console(config, input)

    if args.directories:
        directories = iter(args.directories)
        return run_console(config, lambda prompt: next(directories))

    # Create and run the application
    app = SpamBlasterApp(config=config)
    app.run()

    return 0


if __name__ == "__main__":
    sys.exit(main())
