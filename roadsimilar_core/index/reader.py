"""RoadSimilar Index Reader - Read-side Contract of an Index.

Everything the "more like this" machinery needs from an index:
corpus statistics, document frequencies, stored values and optional
per-document term vectors.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Optional, Set

from roadsimilar_core.index.document import StoredDocument
from roadsimilar_core.index.term import Term, TermFreqVector


class FieldOption(Enum):
    """Which field names to report."""

    ALL = auto()
    INDEXED = auto()
    STORED = auto()
    TERM_VECTOR = auto()


class IndexReader(ABC):
    """Abstract read access to an index."""

    @abstractmethod
    def num_docs(self) -> int:
        """Number of live documents in the corpus."""
        pass

    @abstractmethod
    def doc_freq(self, term: Term) -> int:
        """Number of documents containing term."""
        pass

    @abstractmethod
    def term_freq_vector(self, doc_id: str, field_name: str) -> Optional[TermFreqVector]:
        """Term vector of a document field, or None if not recorded."""
        pass

    @abstractmethod
    def document(self, doc_id: str) -> StoredDocument:
        """Stored values of a document.

        Raises:
            DocumentNotFoundError: if doc_id is unknown
        """
        pass

    @abstractmethod
    def field_names(self, option: FieldOption = FieldOption.ALL) -> Set[str]:
        """Field names known to the index, filtered by option."""
        pass


__all__ = ["FieldOption", "IndexReader"]
