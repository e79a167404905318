# =============================================================================
# Frequency Ledger
# =============================================================================
# Per-corpus record of token document frequencies.
#
# The classifier keeps two ledgers, one for spam and one for ham. Each maps
# a token to the number of documents it appeared in, plus the number of
# documents the corpus has been trained on.
#
# Ingest modes:
#   - REPLACE: the mapping is rebuilt from the newest document only, while
#              the document count keeps growing. This is the classic
#              behavior of the filter and the default.
#   - ACCUMULATE: counts are merged across every ingested document.
# =============================================================================

import logging
from collections.abc import Iterable, Iterator
from enum import Enum

logger = logging.getLogger(__name__)


class LedgerMode(str, Enum):
    """How a ledger folds a new document into its counts."""
    REPLACE = "replace"         # Keep only the newest document's tokens
    ACCUMULATE = "accumulate"   # Merge counts across documents


class FrequencyLedger:
    """
    Token document-frequency counts for one corpus.

    Attributes:
        name: Corpus label used in log output ("spam", "ham").
        mode: Ingest mode, see LedgerMode.
        counts: Token -> number of documents containing it. Every stored
                count is at least 1.
        document_count: Number of documents ingested so far.
    """

    def __init__(self, name: str = "", mode: LedgerMode = LedgerMode.REPLACE) -> None:
        self.name = name
        self.mode = LedgerMode(mode)
        self.counts: dict[str, int] = {}
        self.document_count = 0

    def ingest(self, tokens: Iterable[str]) -> None:
        """
        Train the ledger with one document's tokens.

        Args:
            tokens: The document's token set. Each token counts once.
        """
        distinct = set(tokens)

        if self.mode is LedgerMode.REPLACE:
            self.counts = {token: 1 for token in distinct}
        else:
            for token in distinct:
                self.counts[token] = self.counts.get(token, 0) + 1

        self.document_count += 1
        logger.debug(
            f"Ingested {len(distinct)} tokens into {self.name or 'ledger'} "
            f"({self.mode.value}), {self.document_count} documents"
        )

    def count(self, token: str) -> int:
        """Number of documents containing token (0 if never seen)."""
        return self.counts.get(token, 0)

    def reset(self) -> None:
        """Forget all training."""
        self.counts = {}
        self.document_count = 0

    def __contains__(self, token: object) -> bool:
        return token in self.counts

    def __iter__(self) -> Iterator[str]:
        return iter(self.counts)

    def __len__(self) -> int:
        return len(self.counts)

    def __repr__(self) -> str:
        return (
            f"FrequencyLedger(name={self.name!r}, mode={self.mode.value!r}, "
            f"tokens={len(self.counts)}, documents={self.document_count})"
        )
