# =============================================================================
# Document Model
# =============================================================================
# A document is the unit the filter trains on and classifies: an identifier
# (usually the file path it came from) and its text as a list of lines.
#
# Lines are stored without their terminators. Files are read with universal
# newlines, so "\n", "\r\n" and "\r" all end a line.
# =============================================================================

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Document:
    """
    A line-oriented text document.

    Iterating a Document yields its lines, so it can be handed straight to
    the tokenizer or classifier.

    Attributes:
        identifier: Where the document came from (file path or any label).
        lines: The document's lines, without line terminators.

    Example:
        >>> doc = Document.from_text("inline", "Subject: hi\\n\\nwin free money\\n")
        >>> doc.lines
        ['Subject: hi', '', 'win free money']
    """
    identifier: str
    lines: list[str] = field(default_factory=list)

    @classmethod
    def from_path(
        cls,
        path: Path | str,
        encoding: str = "utf-8",
        errors: str = "replace",
    ) -> "Document":
        """
        Read a document from a file.

        Args:
            path: File to read.
            encoding: Text encoding of the file.
            errors: How undecodable bytes are handled (see open()).

        Returns:
            The loaded document, identified by its path.

        Raises:
            OSError: If the file can't be read.
        """
        path = Path(path)
        with open(path, encoding=encoding, errors=errors) as f:
            lines = [line.rstrip("\n") for line in f]
        return cls(identifier=str(path), lines=lines)

    @classmethod
    def from_text(cls, identifier: str, text: str) -> "Document":
        """Build a document from an in-memory string."""
        lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        if lines[-1] == "":
            # A final terminator doesn't start another line
            lines.pop()
        return cls(identifier=identifier, lines=lines)

    @property
    def name(self) -> str:
        """Short display name (file name for path identifiers)."""
        return Path(self.identifier).name or self.identifier

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)
