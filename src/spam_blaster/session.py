# =============================================================================
# Filter Session
# =============================================================================
# Drives one run of the filter over corpus directories:
#
#   1. Train with every file of the spam directory
#   2. Train with every file of the ham directory
#   3. Recompute spamicity
#   4. Classify every file of the unfiltered directory, in name order
#
# Step 4 is self-training: each classified file is added to the corpus its
# verdict names, but spamicity stays as computed in step 3 for the whole
# batch.
#
# Both the prompt loop and the TUI run through this class.
# =============================================================================

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from spam_blaster.config import Config
from spam_blaster.core import Document, load_documents
from spam_blaster.spam import SpamClassifier, Tokenizer

logger = logging.getLogger(__name__)


@dataclass
class Verdict:
    """
    Classification outcome for one file.

    Attributes:
        path: The classified file.
        is_spam: True if the file was judged spam.
        message_spamicity: The combined score behind the verdict.
        unknown_tokens: Number of tokens that had no spamicity.
    """
    path: Path
    is_spam: bool
    message_spamicity: float
    unknown_tokens: int = 0


@dataclass
class BatchReport:
    """
    Results of filtering one directory.

    Attributes:
        directory: The filtered directory.
        verdicts: One Verdict per file, in classification order.
    """
    directory: Path
    verdicts: list[Verdict] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of files classified."""
        return len(self.verdicts)

    @property
    def spam_count(self) -> int:
        """Number of files judged spam."""
        return sum(1 for v in self.verdicts if v.is_spam)

    @property
    def spam_documents(self) -> list[Path]:
        """Paths of the files judged spam."""
        return [v.path for v in self.verdicts if v.is_spam]

    def summary(self) -> str:
        return f"Detected {self.spam_count} / {self.total} spam messages"


class FilterSession:
    """
    Trains a classifier from corpus directories and filters a directory.

    Usage:
        >>> session = FilterSession()
        >>> session.train_spam_directory("corpus/spam")
        >>> session.train_ham_directory("corpus/ham")
        >>> session.update_spamicity()
        >>> report = session.filter_directory("inbox")
        >>> print(report.summary())

    Attributes:
        classifier: The classifier being trained and applied.
    """

    def __init__(
        self,
        classifier: SpamClassifier | None = None,
        config: Config | None = None,
    ) -> None:
        """
        Initialize the session.

        Args:
            classifier: Classifier to use. Built from config if None.
            config: Configuration for a new classifier. Defaults if None.
        """
        if classifier is None:
            config = config or Config()
            classifier = SpamClassifier(
                tokenizer=Tokenizer(config.tokenizer),
                config=config.classifier,
            )
        self.classifier = classifier

    def train_spam_directory(self, directory: Path | str) -> int:
        """
        Train with every file in a spam directory.

        Returns:
            Number of files added.

        Raises:
            CorpusError: If the directory can't be listed.
            OSError: If a file can't be read.
        """
        documents = load_documents(directory)
        self.classifier.add_spam_documents(documents)
        logger.info(f"Added {len(documents)} spam files from {directory}")
        return len(documents)

    def train_ham_directory(self, directory: Path | str) -> int:
        """
        Train with every file in a ham directory.

        Returns:
            Number of files added.
        """
        documents = load_documents(directory)
        self.classifier.add_ham_documents(documents)
        logger.info(f"Added {len(documents)} ham files from {directory}")
        return len(documents)

    def update_spamicity(self) -> None:
        self.classifier.update_spamicity()

    def filter_directory(
        self,
        directory: Path | str,
        on_verdict: Callable[[Verdict], None] | None = None,
    ) -> BatchReport:
        """
        Classify every file in a directory.

        Args:
            directory: Directory of unfiltered files.
            on_verdict: Called with each Verdict as soon as it's known.

        Returns:
            The batch report.
        """
        report = BatchReport(directory=Path(directory))

        for document in load_documents(directory):
            verdict = self.classify_document(document)
            report.verdicts.append(verdict)
            if on_verdict is not None:
                on_verdict(verdict)

        logger.info(f"{directory}: {report.summary()}")
        return report

    def classify_document(self, document: Document) -> Verdict:
        """Classify one document, training on the verdict."""
        result = self.classifier.process(document)

        if result.is_spam:
            logger.info(f"Spam detected: {document.identifier}")
        else:
            logger.debug(f"Ham: {document.identifier} ({result.message_spamicity:.4f})")

        return Verdict(
            path=Path(document.identifier),
            is_spam=result.is_spam,
            message_spamicity=result.message_spamicity,
            unknown_tokens=len(result.unknown_tokens),
        )

    def run(
        self,
        spam_directory: Path | str,
        ham_directory: Path | str,
        unfiltered_directory: Path | str,
        on_verdict: Callable[[Verdict], None] | None = None,
    ) -> BatchReport:
        """
        Train from the spam and ham directories, then filter a directory.

        Returns:
            The batch report for the unfiltered directory.
        """
        self.train_spam_directory(spam_directory)
        self.train_ham_directory(ham_directory)
        self.update_spamicity()
        return self.filter_directory(unfiltered_directory, on_verdict=on_verdict)
