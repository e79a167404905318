# =============================================================================
# Corpus Directories
# =============================================================================
# A corpus on disk is a flat directory of message files, one message per
# file. Only regular files directly inside the directory count; hidden files
# are included, subdirectories are not descended into.
#
# Files are returned sorted by name. Training order matters to the filter
# (see FrequencyLedger), so it must not depend on the filesystem's listing
# order.
# =============================================================================

import logging
from pathlib import Path

from spam_blaster.core.document import Document

logger = logging.getLogger(__name__)


def list_documents(directory: Path | str) -> list[Path]:
    """
    Return the regular files directly inside a directory.

    Args:
        directory: Corpus directory.

    Returns:
        Absolute file paths, sorted by name.

    Raises:
        CorpusError: If the directory doesn't exist or isn't a directory.
    """
    folder = Path(directory).expanduser()

    if not folder.exists():
        raise CorpusError(f"Directory not found: {folder}")
    if not folder.is_dir():
        raise CorpusError(f"Not a directory: {folder}")

    files = sorted(
        (entry.absolute() for entry in folder.iterdir() if entry.is_file()),
        key=lambda p: p.name,
    )
    logger.debug(f"Found {len(files)} files in {folder}")
    return files


def load_documents(directory: Path | str) -> list[Document]:
    """
    Read every file of a corpus directory.

    Raises:
        CorpusError: If the directory can't be listed.
        OSError: If one of its files can't be read.
    """
    return [Document.from_path(path) for path in list_documents(directory)]


# =============================================================================
# Exceptions
# =============================================================================

class CorpusError(Exception):
    """Raised when a corpus directory can't be used."""
    pass
