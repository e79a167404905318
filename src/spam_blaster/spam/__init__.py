# =============================================================================
# Spam Module
# =============================================================================
# Bayesian spam filtering over plain-text documents.
#
# Pieces, leaves first:
#   - Tokenizer: document body -> set of tokens
#   - FrequencyLedger: per-corpus token document counts
#   - SpamicityEstimator: ledgers -> per-token spamicity snapshot
#   - SpamClassifier: combines token spamicity into a spam/ham verdict and
#     trains itself on every document it classifies
# =============================================================================

from spam_blaster.spam.classifier import (
    MAX_NUM_TOKENS,
    ClassificationResult,
    ClassifierConfig,
    ClassifierStats,
    SpamClassifier,
    TokenScore,
    UnknownTokenPolicy,
)
from spam_blaster.spam.ledger import FrequencyLedger, LedgerMode
from spam_blaster.spam.spamicity import SpamicityEstimator, SpamicityTable, UnknownTokenError
from spam_blaster.spam.tokenizer import Tokenizer, TokenizerConfig

__all__ = [
    "MAX_NUM_TOKENS",
    "ClassificationResult",
    "ClassifierConfig",
    "ClassifierStats",
    "FrequencyLedger",
    "LedgerMode",
    "SpamClassifier",
    "SpamicityEstimator",
    "SpamicityTable",
    "TokenScore",
    "Tokenizer",
    "TokenizerConfig",
    "UnknownTokenError",
    "UnknownTokenPolicy",
]
