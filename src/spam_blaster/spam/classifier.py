# =============================================================================
# Bayesian Spam Classifier
# =============================================================================
# Combines per-token spamicity into a verdict for a whole document.
#
# How it works:
#   1. Training documents are tokenized into the spam or ham ledger
#   2. update_spamicity() snapshots a spamicity for each spam-ledger token
#   3. To score a document, its tokens are looked up in that snapshot and
#      the MAX_NUM_TOKENS most extreme ones are combined:
#         n = Σ ln(1 - p) - ln(p)
#         P(spam) = 1 / (1 + e^n)
#   4. P(spam) > 0.5 means spam
#
# Scoring is pure (score()). classify() additionally feeds the document back
# into the ledger matching its verdict, so the filter keeps training itself
# on everything it sees. The spamicity snapshot only moves on the next
# update_spamicity() call.
# =============================================================================

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from spam_blaster.spam.ledger import FrequencyLedger, LedgerMode
from spam_blaster.spam.spamicity import SpamicityEstimator, SpamicityTable, UnknownTokenError
from spam_blaster.spam.tokenizer import Tokenizer

logger = logging.getLogger(__name__)

# Number of most extreme tokens combined into the message score
MAX_NUM_TOKENS = 15

# Score given to a token missing from the spamicity table under the
# "neutral" policy
NEUTRAL_SPAMICITY = 0.0

# Message spamicity must be strictly above this to be spam
SPAM_THRESHOLD = 0.5


class UnknownTokenPolicy(str, Enum):
    """What score() does with a token that has no spamicity."""
    NEUTRAL = "neutral"     # Score it as NEUTRAL_SPAMICITY
    RAISE = "raise"         # Propagate UnknownTokenError


@dataclass
class ClassifierConfig:
    """
    Configuration for the classifier.

    Attributes:
        max_tokens: How many of the most extreme tokens are combined.
        ledger_mode: Ingest mode for both ledgers ("replace" or "accumulate").
        unknown_tokens: Policy for tokens without a spamicity
                        ("neutral" or "raise").
        epsilon: Spamicities are clamped to [epsilon, 1 - epsilon] before
                 taking logarithms, so 0 never reaches ln().
    """
    max_tokens: int = MAX_NUM_TOKENS
    ledger_mode: LedgerMode = LedgerMode.REPLACE
    unknown_tokens: UnknownTokenPolicy = UnknownTokenPolicy.NEUTRAL
    epsilon: float = 1e-6

    def __post_init__(self) -> None:
        self.ledger_mode = LedgerMode(self.ledger_mode)
        self.unknown_tokens = UnknownTokenPolicy(self.unknown_tokens)

        if not isinstance(self.max_tokens, int) or isinstance(self.max_tokens, bool) or self.max_tokens < 1:
            raise ValueError(f"max_tokens must be a positive integer, got {self.max_tokens!r}")

        eps = self.epsilon
        if not isinstance(eps, (int, float)) or isinstance(eps, bool) or not math.isfinite(eps) or not 0 < eps < 0.5:
            raise ValueError(f"epsilon must be between 0 and 0.5, got {eps!r}")


@dataclass
class ClassifierStats:
    """
    Statistics about the classifier.

    Attributes:
        spam_count: Number of documents trained as spam.
        ham_count: Number of documents trained as ham.
        spam_tokens: Tokens currently held by the spam ledger.
        ham_tokens: Tokens currently held by the ham ledger.
        scored_tokens: Tokens in the current spamicity snapshot.
        ledger_mode: Active ledger ingest mode.
    """
    spam_count: int = 0
    ham_count: int = 0
    spam_tokens: int = 0
    ham_tokens: int = 0
    scored_tokens: int = 0
    ledger_mode: LedgerMode = LedgerMode.REPLACE


@dataclass(frozen=True)
class TokenScore:
    """A token together with the spamicity it was scored with."""
    token: str
    spamicity: float


@dataclass
class ClassificationResult:
    """
    Outcome of scoring one document.

    Attributes:
        message_spamicity: Combined probability that the document is spam.
        is_spam: The verdict (message_spamicity > 0.5).
        selected: The tokens that went into the combination, most extreme
                  first.
        unknown_tokens: Tokens that had no spamicity and were scored as
                        neutral.
        token_count: Number of distinct tokens in the document.
    """
    message_spamicity: float
    is_spam: bool
    selected: list[TokenScore] = field(default_factory=list)
    unknown_tokens: frozenset[str] = frozenset()
    token_count: int = 0


class SpamClassifier:
    """
    Self-training Bayesian spam filter.

    Usage:
        >>> classifier = SpamClassifier()
        >>> classifier.add_spam(["", "win free money now"])
        >>> classifier.add_ham(["", "meeting scheduled for tomorrow"])
        >>> table = classifier.update_spamicity()
        >>> classifier.classify(["", "free money win now"])
        False

    Attributes:
        tokenizer: Tokenizer used for every document.
        config: Classifier configuration.
        spam: Spam corpus ledger.
        ham: Ham corpus ledger.
    """

    def __init__(
        self,
        tokenizer: Tokenizer | None = None,
        config: ClassifierConfig | None = None,
        estimator: SpamicityEstimator | None = None,
    ) -> None:
        """
        Initialize the classifier.

        Args:
            tokenizer: Tokenizer instance. Creates default if None.
            config: Classifier configuration. Uses defaults if None.
            estimator: Spamicity estimator. Creates default if None.
        """
        self.tokenizer = tokenizer or Tokenizer()
        self.config = config or ClassifierConfig()

        self.spam = FrequencyLedger("spam", self.config.ledger_mode)
        self.ham = FrequencyLedger("ham", self.config.ledger_mode)

        self._estimator = estimator or SpamicityEstimator()
        self._spamicity = SpamicityTable()

    @property
    def spamicity(self) -> SpamicityTable:
        """The spamicity snapshot from the last update_spamicity() call."""
        return self._spamicity

    @property
    def stats(self) -> ClassifierStats:
        """Get classifier statistics."""
        return ClassifierStats(
            spam_count=self.spam.document_count,
            ham_count=self.ham.document_count,
            spam_tokens=len(self.spam),
            ham_tokens=len(self.ham),
            scored_tokens=len(self._spamicity),
            ledger_mode=self.config.ledger_mode,
        )

    @property
    def is_trained(self) -> bool:
        """Returns True if both corpora have seen at least one document."""
        return self.spam.document_count > 0 and self.ham.document_count > 0

    # -------------------------------------------------------------------------
    # Training
    # -------------------------------------------------------------------------

    def train(self, lines: Iterable[str], *, is_spam: bool) -> None:
        """
        Train the matching ledger with one document.

        Does not touch the spamicity snapshot; call update_spamicity()
        afterwards for the training to affect scoring.

        Args:
            lines: The document's lines.
            is_spam: True to train as spam, False as ham.
        """
        self._ingest(self.tokenizer.tokenize(lines), is_spam=is_spam)

    def add_spam(self, lines: Iterable[str]) -> None:
        """Train the filter with one spam document."""
        self.train(lines, is_spam=True)

    def add_ham(self, lines: Iterable[str]) -> None:
        """Train the filter with one ham document."""
        self.train(lines, is_spam=False)

    def add_spam_documents(self, documents: Iterable[Iterable[str]]) -> None:
        """Train the filter with spam documents, in order."""
        for document in documents:
            self.add_spam(document)

    def add_ham_documents(self, documents: Iterable[Iterable[str]]) -> None:
        """Train the filter with ham documents, in order."""
        for document in documents:
            self.add_ham(document)

    def update_spamicity(self) -> SpamicityTable:
        """
        Recompute the spamicity snapshot from the current ledgers.

        Returns:
            The new snapshot.
        """
        self._spamicity = self._estimator.recompute(self.spam, self.ham)
        logger.info(
            f"Spamicity updated: {len(self._spamicity)} tokens from "
            f"{self.spam.document_count} spam / {self.ham.document_count} ham documents"
        )
        return self._spamicity

    def reset(self) -> None:
        """Reset the classifier to untrained state."""
        self.spam.reset()
        self.ham.reset()
        self._spamicity = SpamicityTable()

    # -------------------------------------------------------------------------
    # Classification
    # -------------------------------------------------------------------------

    def score(self, lines: Iterable[str]) -> ClassificationResult:
        """
        Score a document without training on it.

        Args:
            lines: The document's lines.

        Returns:
            The classification result.

        Raises:
            UnknownTokenError: If a token has no spamicity and the policy is
                               "raise".
        """
        return self._score_tokens(self.tokenizer.tokenize(lines))

    def process(self, lines: Iterable[str]) -> ClassificationResult:
        """
        Score a document, then train the ledger matching the verdict.

        Args:
            lines: The document's lines.

        Returns:
            The classification result.
        """
        tokens = self.tokenizer.tokenize(lines)
        result = self._score_tokens(tokens)
        self._ingest(tokens, is_spam=result.is_spam)
        return result

    def classify(self, lines: Iterable[str]) -> bool:
        """
        Classify a document and learn from the verdict.

        Args:
            lines: The document's lines.

        Returns:
            True if the document is spam.
        """
        return self.process(lines).is_spam

    def _score_tokens(self, tokens: frozenset[str]) -> ClassificationResult:
        scored: list[TokenScore] = []
        unknown: set[str] = set()

        for token in tokens:
            try:
                spamicity = self._spamicity.lookup(token)
            except UnknownTokenError:
                if self.config.unknown_tokens is UnknownTokenPolicy.RAISE:
                    raise
                unknown.add(token)
                spamicity = NEUTRAL_SPAMICITY
            scored.append(TokenScore(token, spamicity))

        if unknown:
            logger.debug(f"{len(unknown)} unknown tokens scored as neutral")

        # Most extreme first; equal scores fall back to token order
        scored.sort(key=lambda ts: (-ts.spamicity, ts.token))
        selected = scored[:self.config.max_tokens]

        n = sum(self._log_odds(ts.spamicity) for ts in selected)
        message_spamicity = self._combine(n)

        return ClassificationResult(
            message_spamicity=message_spamicity,
            is_spam=message_spamicity > SPAM_THRESHOLD,
            selected=selected,
            unknown_tokens=frozenset(unknown),
            token_count=len(tokens),
        )

    def _log_odds(self, spamicity: float) -> float:
        """ln(1 - p) - ln(p), with p clamped away from 0 and 1."""
        eps = self.config.epsilon
        p = min(max(spamicity, eps), 1.0 - eps)
        return math.log(1.0 - p) - math.log(p)

    @staticmethod
    def _combine(n: float) -> float:
        """1 / (1 + e^n)."""
        try:
            return 1.0 / (1.0 + math.exp(n))
        except OverflowError:
            return 0.0

    def _ingest(self, tokens: frozenset[str], *, is_spam: bool) -> None:
        ledger = self.spam if is_spam else self.ham
        ledger.ingest(tokens)
