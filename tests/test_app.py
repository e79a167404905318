import asyncio

import pytest
from textual.widgets import Input

from spam_blaster import __version__
from spam_blaster.app import SpamBlasterApp, main, parse_args
from spam_blaster.config import Config, DirectoryConfig
from spam_blaster.ui import DirectoryPickerScreen, MainScreen


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, temp_dir):
    """Keep the CLI away from the real user config."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(temp_dir / "xdg"))


def directory_args(corpus_dirs):
    return [str(corpus_dirs[name]) for name in ("spam", "ham", "unfiltered")]


# =============================================================================
# Console
# =============================================================================

def test_batch_run(corpus_dirs, capsys):
    assert main(directory_args(corpus_dirs)) == 0

    out = capsys.readouterr().out
    assert "Added 2 spam files to filter" in out
    assert "Added 2 ham files to filter" in out
    assert out.rstrip().endswith("Detected 0 / 3 spam messages")


def test_batch_run_reports_spam(corpus_dirs, capsys, monkeypatch, fixed_estimator):
    monkeypatch.setattr(
        "spam_blaster.spam.classifier.SpamicityEstimator",
        lambda: fixed_estimator({"buy": 0.9, "cheap": 0.9, "pills": 0.9, "now": 0.9}),
    )

    assert main(directory_args(corpus_dirs)) == 0

    out = capsys.readouterr().out
    assert f"Spam detected: {corpus_dirs['unfiltered'] / 'c.txt'}" in out
    assert "Detected 1 / 3 spam messages" in out


def test_batch_run_missing_directory(corpus_dirs, temp_dir, capsys):
    args = directory_args(corpus_dirs)
    args[1] = str(temp_dir / "missing")

    assert main(args) == 1
    assert "Directory not found" in capsys.readouterr().err


def test_prompt_loop(corpus_dirs, capsys, monkeypatch):
    answers = iter(directory_args(corpus_dirs))
    prompts = []

    def fake_input(prompt=""):
        prompts.append(prompt)
        return next(answers)

    monkeypatch.setattr("builtins.input", fake_input)

    assert main(["--prompt"]) == 0

    assert prompts == [
        "Set directory with spam emails: ",
        "Set directory with ham emails: ",
        "Set directory with unfiltered emails: ",
    ]
    out = capsys.readouterr().out
    assert out.splitlines()[0] == f"Spam Blaster {__version__}"
    assert "Detected 0 / 3 spam messages" in out


def test_prompt_loop_end_of_input(monkeypatch):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)

    assert main(["--prompt"]) == 1


def test_invalid_config_file(temp_dir, corpus_dirs, capsys):
    path = temp_dir / "bad.toml"
    path.write_text('[classifier]\nledger_mode = "merge"\n')

    assert main(["--config", str(path), *directory_args(corpus_dirs)]) == 1
    assert "Config error" in capsys.readouterr().err


def test_paths(capsys, temp_dir):
    assert main(["--paths"]) == 0
    assert str(temp_dir / "xdg" / "spam-blaster" / "config.toml") in capsys.readouterr().out


@pytest.mark.parametrize("argv", [
    ["only", "two"],
    ["a", "b", "c", "d"],
    ["--prompt", "a", "b", "c"],
])
def test_bad_arguments(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)


# =============================================================================
# TUI
# =============================================================================

def make_app(corpus_dirs=None) -> SpamBlasterApp:
    config = Config()
    if corpus_dirs is not None:
        config.directories = DirectoryConfig(*directory_args(corpus_dirs))
    return SpamBlasterApp(config=config)


def test_tui_runs_filter(corpus_dirs):
    async def scenario():
        app = make_app(corpus_dirs)
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            screen = app.screen
            assert isinstance(screen, MainScreen)

            screen.action_run()
            await app.workers.wait_for_complete()
            await pilot.pause()
            return screen.last_report

    report = asyncio.run(scenario())

    assert report is not None
    assert report.total == 3
    assert report.spam_count == 0


def test_tui_run_button_starts_worker(corpus_dirs):
    async def scenario():
        app = make_app(corpus_dirs)
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            screen = app.screen

            await pilot.click("#run-btn")
            await app.workers.wait_for_complete()
            await pilot.pause()
            return screen.last_report

    report = asyncio.run(scenario())

    assert report is not None
    assert report.total == 3


def test_tui_run_binding_writes_results(corpus_dirs):
    async def scenario():
        app = make_app(corpus_dirs)
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            screen = app.screen
            screen.set_focus(None)

            await pilot.press("ctrl+r")
            await app.workers.wait_for_complete()
            await pilot.pause()
            lines = [strip.text.rstrip() for strip in screen.query_one("#results").lines]
            return lines, screen.last_report

    lines, report = asyncio.run(scenario())

    assert report is not None
    assert "Added 2 spam files to filter" in lines
    assert "Added 2 ham files to filter" in lines
    assert lines[-1] == "Detected 0 / 3 spam messages"


def test_tui_run_with_missing_directory(corpus_dirs, temp_dir):
    async def scenario():
        app = make_app(corpus_dirs)
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            screen = app.screen
            screen.query_one("#unfiltered-dir", Input).value = str(temp_dir / "missing")

            screen.action_run()
            await app.workers.wait_for_complete()
            await pilot.pause()
            return screen.last_report

    assert asyncio.run(scenario()) is None


def test_tui_requires_all_directories():
    async def scenario():
        app = make_app()
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            screen = app.screen
            screen.action_run()
            await app.workers.wait_for_complete()
            await pilot.pause()
            return screen.last_report

    assert asyncio.run(scenario()) is None


def test_browse_fills_directory_input(corpus_dirs):
    async def scenario():
        app = make_app()
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            main_screen = app.screen
            main_screen.query_one("#spam-dir", Input).value = str(corpus_dirs["spam"])

            await pilot.click("#browse-spam")
            await pilot.pause()
            assert isinstance(app.screen, DirectoryPickerScreen)

            await pilot.click("#select-btn")
            await pilot.pause()
            assert app.screen is main_screen
            return main_screen.query_one("#spam-dir", Input).value

    assert asyncio.run(scenario()) == str(corpus_dirs["spam"])


def test_directory_picker_cancel():
    async def scenario():
        app = make_app()
        results = []
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            app.push_screen(DirectoryPickerScreen(), results.append)
            await pilot.pause()

            await pilot.press("escape")
            await pilot.pause()
        return results

    assert asyncio.run(scenario()) == [None]
