# =============================================================================
# Document Tokenizer for Spam Classification
# =============================================================================
# Converts a document's lines into the set of tokens the classifier scores.
#
# Only the message body is tokenized. Everything up to and including the
# first empty line is treated as the header block and skipped, even though
# the headers themselves are never parsed.
#
# Body lines are split on runs of delimiter characters (space, comma, period
# and hyphen by default). Tokens are NOT normalized: case and any other
# punctuation are kept exactly as they appear.
# =============================================================================

import re
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class TokenizerConfig:
    """
    Configuration for document tokenization.

    Attributes:
        delimiters: Characters that separate tokens. Any run of one or more
                    of these characters counts as a single separator.
    """
    delimiters: str = " ,.-"


class Tokenizer:
    """
    Splits a document body into a deduplicated set of tokens.

    Usage:
        >>> tokenizer = Tokenizer()
        >>> sorted(tokenizer.tokenize(["Subject: hi", "", "free free, money"]))
        ['free', 'money']
    """

    def __init__(self, config: TokenizerConfig | None = None) -> None:
        """
        Initialize the tokenizer.

        Args:
            config: Tokenizer configuration.
        """
        self.config = config or TokenizerConfig()
        self._separator = re.compile(f"[{re.escape(self.config.delimiters)}]+")

    def tokenize(self, lines: Iterable[str]) -> frozenset[str]:
        """
        Tokenize the body of a document.

        Args:
            lines: The document's lines, in order. Trailing line terminators
                   are ignored.

        Returns:
            The distinct tokens found in the body. Empty if the document has
            no empty line (the body is never reached).
        """
        tokens: set[str] = set()
        in_body = False

        for line in lines:
            line = line.rstrip("\r\n")

            if not in_body:
                # The first empty line ends the header block
                in_body = line == ""
                continue

            tokens.update(self.split(line))

        return frozenset(tokens)

    def split(self, line: str) -> list[str]:
        """
        Split one body line into fragments.

        A line without any delimiter comes back whole, so an empty line gives
        the empty token. A separator at the start of a line produces a
        leading empty fragment; empty fragments at the end are dropped.
        """
        fragments = self._separator.split(line)
        if len(fragments) == 1:
            return fragments

        while fragments and not fragments[-1]:
            fragments.pop()
        return fragments
