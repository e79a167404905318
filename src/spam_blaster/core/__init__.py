# =============================================================================
# Spam Blaster Core Module
# =============================================================================
# Documents and the corpus directories they are read from. This is the I/O
# edge of the filter: everything here reads from disk, while the spam
# package only ever sees lines of text.
#
#   - Document: A line-oriented text document
#   - list_documents / load_documents: Flat directory -> documents
# =============================================================================

from spam_blaster.core.corpus import CorpusError, list_documents, load_documents
from spam_blaster.core.document import Document

__all__ = [
    "CorpusError",
    "Document",
    "list_documents",
    "load_documents",
]
