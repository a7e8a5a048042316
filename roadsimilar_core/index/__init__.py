"""RoadSimilar Index Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from roadsimilar_core.index.term import Term, TermFreqVector
from roadsimilar_core.index.document import Document, FieldOptions, StoredDocument
from roadsimilar_core.index.reader import FieldOption, IndexReader
from roadsimilar_core.index.memory import InMemoryIndexReader, Posting, PostingList

__all__ = [
    "Term",
    "TermFreqVector",
    "Document",
    "FieldOptions",
    "StoredDocument",
    "FieldOption",
    "IndexReader",
    "InMemoryIndexReader",
    "Posting",
    "PostingList",
]
