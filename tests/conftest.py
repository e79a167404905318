# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the Spam Blaster test suite.
# =============================================================================

import pytest
import tempfile
from pathlib import Path

from spam_blaster.spam import SpamicityEstimator, SpamicityTable


class FixedEstimator(SpamicityEstimator):
    """Estimator that always returns the same table, whatever the ledgers say."""

    def __init__(self, values: dict[str, float]) -> None:
        self.values = values

    def recompute(self, spam, ham) -> SpamicityTable:
        return SpamicityTable(self.values)


def write_message(directory: Path, name: str, body: str, subject: str = "Hello") -> Path:
    """Write a message file with a small header block and the given body."""
    path = directory / name
    path.write_text(f"From: someone@example.com\nSubject: {subject}\n\n{body}\n")
    return path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fixed_estimator():
    """Factory for estimators returning a fixed spamicity table."""
    return FixedEstimator


@pytest.fixture
def spam_document():
    """A spam message as lines."""
    return [
        "From: winner@totallylegit.com",
        "Subject: URGENT!!! You've WON",
        "",
        "win free money now",
    ]


@pytest.fixture
def ham_document():
    """A ham message as lines."""
    return [
        "From: boss@example.com",
        "Subject: Tomorrow",
        "",
        "meeting scheduled for tomorrow",
    ]


@pytest.fixture
def corpus_dirs(temp_dir):
    """
    Spam, ham and unfiltered corpus directories.

    Returns a dict with "spam", "ham" and "unfiltered" paths. The
    unfiltered directory holds three messages and a subdirectory that must
    be ignored.
    """
    dirs = {name: temp_dir / name for name in ("spam", "ham", "unfiltered")}
    for path in dirs.values():
        path.mkdir()

    write_message(dirs["spam"], "001.txt", "win free money now", subject="WIN!!!")
    write_message(dirs["spam"], "002.txt", "cheap pills, buy now")

    write_message(dirs["ham"], "001.txt", "meeting scheduled for tomorrow")
    write_message(dirs["ham"], "002.txt", "lunch at noon")

    write_message(dirs["unfiltered"], "a.txt", "free money win now")
    write_message(dirs["unfiltered"], "b.txt", "see you at the meeting")
    write_message(dirs["unfiltered"], "c.txt", "buy cheap pills now")
    (dirs["unfiltered"] / "archive").mkdir()
    write_message(dirs["unfiltered"] / "archive", "old.txt", "not read")

    return dirs
