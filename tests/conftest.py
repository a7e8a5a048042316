"""Shared fixtures for RoadSimilar tests."""

from typing import Dict, Optional, Set

import pytest

from roadsimilar_core.analyzers import StandardAnalyzer, WhitespaceAnalyzer
from roadsimilar_core.errors import DocumentNotFoundError
from roadsimilar_core.index import (
    Document,
    FieldOption,
    FieldOptions,
    InMemoryIndexReader,
    IndexReader,
    StoredDocument,
    Term,
    TermFreqVector,
)


class StubIndexReader(IndexReader):
    """Index reader with hand-set statistics."""

    def __init__(
        self,
        num_docs: int = 100,
        doc_freqs: Optional[Dict[Term, int]] = None,
        vectors: Optional[Dict[str, Dict[str, TermFreqVector]]] = None,
        stored: Optional[Dict[str, Dict[str, list]]] = None,
        fields: Optional[Set[str]] = None,
    ):
        self._num_docs = num_docs
        self.doc_freqs = doc_freqs or {}
        self.vectors = vectors or {}
        self.stored = stored or {}
        self.fields = fields or set()
        self.doc_freq_calls = []

    def num_docs(self) -> int:
        return self._num_docs

    def doc_freq(self, term: Term) -> int:
        self.doc_freq_calls.append(term)
        return self.doc_freqs.get(term, 0)

    def term_freq_vector(self, doc_id, field_name):
        return self.vectors.get(doc_id, {}).get(field_name)

    def document(self, doc_id):
        if doc_id not in self.stored and doc_id not in self.vectors:
            raise DocumentNotFoundError(doc_id)
        return StoredDocument(doc_id=doc_id, content=self.stored.get(doc_id, {}))

    def field_names(self, option=FieldOption.ALL):
        return set(self.fields)


@pytest.fixture
def stub_reader():
    return StubIndexReader()


@pytest.fixture
def whitespace_analyzer():
    return WhitespaceAnalyzer()


@pytest.fixture
def corpus_reader():
    """Small in-memory corpus about fruit and databases."""
    reader = InMemoryIndexReader(
        analyzer=StandardAnalyzer(),
        fields=[
            FieldOptions(name="title", term_vectors=True),
            FieldOptions(name="body"),
            FieldOptions(name="tag", indexed=False),
        ],
    )
    reader.add_documents([
        Document(id="1", fields={
            "title": "Apple orchards",
            "body": "apple apple apple orchard harvest apple pie",
            "tag": "fruit",
        }),
        Document(id="2", fields={
            "title": "Apple pie recipe",
            "body": "apple pie with cinnamon and a buttery crust",
        }),
        Document(id="3", fields={
            "title": "Orchard care",
            "body": "pruning the orchard before the harvest",
        }),
        Document(id="4", fields={
            "title": "Database indexing",
            "body": "an inverted index maps terms to documents",
        }),
        Document(id="5", fields={
            "title": "Search engines",
            "body": ["index terms and postings", "search the index quickly"],
        }),
    ])
    return reader
