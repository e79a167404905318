# =============================================================================
# Spamicity Estimation
# =============================================================================
# Derives a per-token spamicity from the spam and ham ledgers.
#
# For each token in the spam ledger:
#
#   s = spam_count(token) / spam_documents
#   h = ham_count(token)  / ham_documents
#   value = s / (s + h)            (0.5 if the token was never seen in ham)
#   spamicity = |0.5 - value|
#
# Spamicity is therefore a magnitude in [0, 0.5]: how far the token sits from
# neutral, without saying in which direction.
#
# The table is a snapshot. Training the ledgers does not change it; call
# SpamicityEstimator.recompute() again to pick up new training.
# =============================================================================

import logging
from collections.abc import Iterator, Mapping

from spam_blaster.spam.ledger import FrequencyLedger

logger = logging.getLogger(__name__)

# Estimate for a token carrying no evidence either way
NEUTRAL = 0.5


class SpamicityTable(Mapping[str, float]):
    """
    Read-only token -> spamicity mapping produced by the estimator.

    Usage:
        >>> table = SpamicityTable({"buy": 0.0})
        >>> table.lookup("buy")
        0.0
        >>> table.lookup("hello")
        Traceback (most recent call last):
        ...
        spam_blaster.spam.spamicity.UnknownTokenError: 'hello'
    """

    def __init__(self, values: Mapping[str, float] | None = None) -> None:
        self._values = dict(values or {})

    def lookup(self, token: str) -> float:
        """
        Return the spamicity of token.

        Raises:
            UnknownTokenError: If the token has no score in this table.
        """
        try:
            return self._values[token]
        except KeyError:
            raise UnknownTokenError(token) from None

    def __getitem__(self, token: str) -> float:
        return self._values[token]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"SpamicityTable({len(self._values)} tokens)"


class SpamicityEstimator:
    """Builds SpamicityTable snapshots from a pair of ledgers."""

    def recompute(self, spam: FrequencyLedger, ham: FrequencyLedger) -> SpamicityTable:
        """
        Compute spamicity for every token in the spam ledger.

        Args:
            spam: The spam corpus ledger.
            ham: The ham corpus ledger.

        Returns:
            A fresh table holding exactly the spam ledger's tokens.
        """
        values: dict[str, float] = {}

        for token in spam:
            value = NEUTRAL
            if token in ham:
                value = self.estimate(spam, ham, token)
            values[token] = abs(NEUTRAL - value)

        logger.debug(f"Recomputed spamicity for {len(values)} tokens")
        return SpamicityTable(values)

    @staticmethod
    def estimate(spam: FrequencyLedger, ham: FrequencyLedger, token: str) -> float:
        """
        Relative spam frequency s / (s + h) of a token seen in both corpora.

        A zero denominator (empty corpus, or no occurrences on either side)
        has no meaningful ratio and is treated as NEUTRAL.
        """
        if not spam.document_count or not ham.document_count:
            return NEUTRAL

        s = spam.count(token) / spam.document_count
        h = ham.count(token) / ham.document_count
        if s + h == 0:
            return NEUTRAL
        return s / (s + h)


# =============================================================================
# Exceptions
# =============================================================================

class UnknownTokenError(KeyError):
    """Raised when a token has no entry in the spamicity table."""
    pass
