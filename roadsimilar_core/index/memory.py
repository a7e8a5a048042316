"""RoadSimilar In-Memory Index - Reference Index Reader.

Analyzes documents into per-field inverted indexes, keeps stored
values and optional term vectors, and serves them through the
IndexReader contract.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import threading
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Set

from roadsimilar_core.analyzers import Analyzer, StandardAnalyzer, get_analyzer
from roadsimilar_core.errors import DocumentNotFoundError
from roadsimilar_core.index.document import Document, FieldOptions, StoredDocument
from roadsimilar_core.index.reader import FieldOption, IndexReader
from roadsimilar_core.index.term import Term, TermFreqVector

logger = logging.getLogger(__name__)


@dataclass
class Posting:
    """A posting (term occurrence) in a document.

    Attributes:
        doc_id: Document ID
        term_freq: Occurrences of the term in the document field
        positions: Token positions of the occurrences
    """

    doc_id: str
    term_freq: int = 0
    positions: List[int] = field(default_factory=list)


class PostingList:
    """Postings of one term, keyed by document id."""

    def __init__(self, term: Term):
        self.term = term
        self._postings: Dict[str, Posting] = {}

    def add(self, posting: Posting) -> None:
        existing = self._postings.get(posting.doc_id)
        if existing:
            existing.term_freq += posting.term_freq
            existing.positions.extend(posting.positions)
        else:
            self._postings[posting.doc_id] = posting

    def remove(self, doc_id: str) -> bool:
        return self._postings.pop(doc_id, None) is not None

    def __len__(self) -> int:
        return len(self._postings)

    def __iter__(self) -> Iterator[Posting]:
        return iter(self._postings.values())


class InMemoryIndexReader(IndexReader):
    """In-memory index implementing the IndexReader contract.

    Fast but not persistent. Suitable for testing and small corpora.
    """

    def __init__(
        self,
        analyzer: Optional[Analyzer] = None,
        fields: Optional[List[FieldOptions]] = None,
    ):
        """Initialize index.

        Args:
            analyzer: Analyzer for every field; when None each field uses
                the registered analyzer named in its FieldOptions
            fields: Field mappings; undefined fields get default options
        """
        self.analyzer = analyzer
        self._field_options: Dict[str, FieldOptions] = {}
        self._postings: Dict[str, Dict[str, PostingList]] = {}
        self._stored: Dict[str, Dict[str, List[str]]] = {}
        self._vectors: Dict[str, Dict[str, TermFreqVector]] = {}
        self._doc_ids: Set[str] = set()
        self._deleted_docs: Set[str] = set()
        self._lock = threading.RLock()

        for options in fields or []:
            self.define_field(options)

    def define_field(self, options: FieldOptions) -> None:
        """Define or replace a field mapping."""
        with self._lock:
            self._field_options[options.name] = options

    def field_options(self, field_name: str) -> FieldOptions:
        options = self._field_options.get(field_name)
        if options is None:
            options = FieldOptions(name=field_name)
            self._field_options[field_name] = options
        return options

    def _analyzer_for(self, options: FieldOptions) -> Analyzer:
        if self.analyzer is not None:
            return self.analyzer
        analyzer = get_analyzer(options.analyzer)
        if analyzer is None:
            logger.warning(f"Unknown analyzer {options.analyzer!r}, using standard")
            analyzer = StandardAnalyzer()
        return analyzer

    def add_document(self, document: Document) -> str:
        """Analyze and index a document.

        Re-adding an existing id replaces the previous version.

        Returns:
            Document ID
        """
        with self._lock:
            if document.id in self._doc_ids:
                self._remove(document.id)

            stored: Dict[str, List[str]] = {}
            vectors: Dict[str, TermFreqVector] = {}

            for field_name in document.fields:
                values = document.values(field_name)
                if not values:
                    continue
                options = self.field_options(field_name)

                if options.stored:
                    stored[field_name] = values
                if options.indexed:
                    counts = self._index_field(document.id, options, values)
                    if options.term_vectors:
                        vectors[field_name] = TermFreqVector.from_counts(field_name, counts)

            self._stored[document.id] = stored
            self._vectors[document.id] = vectors
            self._doc_ids.add(document.id)
            self._deleted_docs.discard(document.id)

            logger.debug(f"Indexed document: {document.id}")
            return document.id

    def add_documents(self, documents: List[Document]) -> List[str]:
        return [self.add_document(doc) for doc in documents]

    def _index_field(
        self,
        doc_id: str,
        options: FieldOptions,
        values: List[str],
    ) -> Counter:
        analyzer = self._analyzer_for(options)
        field_index = self._postings.setdefault(options.name, {})
        positions: Dict[str, List[int]] = {}

        position = 0
        for value in values:
            for term_text in analyzer.token_stream(options.name, value):
                positions.setdefault(term_text, []).append(position)
                position += 1

        counts: Counter = Counter()
        for term_text, occurrences in positions.items():
            if term_text not in field_index:
                field_index[term_text] = PostingList(Term(options.name, term_text))
            field_index[term_text].add(Posting(
                doc_id=doc_id,
                term_freq=len(occurrences),
                positions=occurrences,
            ))
            counts[term_text] = len(occurrences)
        return counts

    def delete_document(self, doc_id: str) -> bool:
        """Mark a document as deleted.

        Deleted documents stop counting toward num_docs immediately;
        their postings are dropped by purge_deleted().
        """
        with self._lock:
            if doc_id in self._doc_ids and doc_id not in self._deleted_docs:
                self._deleted_docs.add(doc_id)
                return True
            return False

    def purge_deleted(self) -> int:
        """Remove deleted documents from the index.

        Returns:
            Number of documents purged
        """
        with self._lock:
            count = len(self._deleted_docs)
            for doc_id in list(self._deleted_docs):
                self._remove(doc_id)
            self._deleted_docs.clear()
            return count

    def _remove(self, doc_id: str) -> None:
        for field_index in self._postings.values():
            empty = []
            for term_text, posting_list in field_index.items():
                posting_list.remove(doc_id)
                if len(posting_list) == 0:
                    empty.append(term_text)
            for term_text in empty:
                del field_index[term_text]
        self._stored.pop(doc_id, None)
        self._vectors.pop(doc_id, None)
        self._doc_ids.discard(doc_id)

    def _check_live(self, doc_id: str) -> None:
        if doc_id not in self._doc_ids or doc_id in self._deleted_docs:
            raise DocumentNotFoundError(doc_id)

    def num_docs(self) -> int:
        return len(self._doc_ids) - len(self._deleted_docs)

    def doc_freq(self, term: Term) -> int:
        posting_list = self._postings.get(term.field, {}).get(term.text)
        if not posting_list:
            return 0
        return sum(1 for p in posting_list if p.doc_id not in self._deleted_docs)

    def term_freq_vector(self, doc_id: str, field_name: str) -> Optional[TermFreqVector]:
        self._check_live(doc_id)
        return self._vectors.get(doc_id, {}).get(field_name)

    def document(self, doc_id: str) -> StoredDocument:
        self._check_live(doc_id)
        content = self._stored.get(doc_id, {})
        return StoredDocument(
            doc_id=doc_id,
            content={name: list(values) for name, values in content.items()},
        )

    def field_names(self, option: FieldOption = FieldOption.ALL) -> Set[str]:
        with self._lock:
            options = self._field_options.values()
            if option == FieldOption.INDEXED:
                return {o.name for o in options if o.indexed}
            if option == FieldOption.STORED:
                return {o.name for o in options if o.stored}
            if option == FieldOption.TERM_VECTOR:
                return {o.name for o in options if o.indexed and o.term_vectors}
            return {o.name for o in options}

    def get_stats(self) -> Dict[str, Any]:
        """Get index statistics."""
        return {
            "document_count": self.num_docs(),
            "deleted_count": len(self._deleted_docs),
            "fields": sorted(self._field_options),
            "term_count": sum(len(terms) for terms in self._postings.values()),
        }


__all__ = ["Posting", "PostingList", "InMemoryIndexReader"]
