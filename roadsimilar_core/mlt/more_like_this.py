"""RoadSimilar MoreLikeThis - Similarity Query Generation.

Generates "more like this" queries: the source document (or text) is
reduced to its most interesting terms, weighted by tf * idf, and those
terms are OR-ed together into a boolean query.

Interesting terms are found with a few heuristics that keep the
number of document frequency lookups small:

- ignore terms occurring fewer than min_term_freq times in the source
- ignore terms found in fewer than min_doc_freq or more than
  max_doc_freq documents
- ignore stop words and words outside [min_word_len, max_word_len]
- keep at most max_query_terms terms

Example:
    >>> reader = InMemoryIndexReader()
    >>> mlt = MoreLikeThis(reader, analyzer=StandardAnalyzer())
    >>> mlt.params.field_names = ("title", "body")
    >>> query = mlt.like("doc-42")

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from roadsimilar_core.analyzers import Analyzer
from roadsimilar_core.index.reader import FieldOption, IndexReader
from roadsimilar_core.mlt.builder import build_query, interesting_terms
from roadsimilar_core.mlt.config import MoreLikeThisParams
from roadsimilar_core.mlt.frequencies import (
    FrequencyTable,
    TermFrequencyAccumulator,
    TextSource,
)
from roadsimilar_core.mlt.selector import TermScoreQueue, TermSelector
from roadsimilar_core.query.queries import DEFAULT_MAX_CLAUSE_COUNT, BooleanQuery
from roadsimilar_core.ranking.similarity import DefaultSimilarity, Similarity

logger = logging.getLogger(__name__)


class MoreLikeThis:
    """Generates "more like this" similarity queries.

    Parameters live in ``params`` and may be changed between calls.
    They are not validated here; a threshold of zero or below disables
    its filter. Each call works on its own copy, so resolving the field
    set from the index never changes the shared parameters.
    """

    def __init__(
        self,
        reader: IndexReader,
        similarity: Optional[Similarity] = None,
        analyzer: Optional[Analyzer] = None,
        params: Optional[MoreLikeThisParams] = None,
        max_clause_count: int = DEFAULT_MAX_CLAUSE_COUNT,
    ):
        """Initialize query generator.

        Args:
            reader: Index to read statistics and documents from
            similarity: idf model (DefaultSimilarity if None)
            analyzer: Analyzer for fields without term vectors and for
                ad hoc text
            params: Query generation parameters
            max_clause_count: Clause cap of generated queries
        """
        self.reader = reader
        self.similarity = similarity or DefaultSimilarity()
        self.analyzer = analyzer
        self.params = params or MoreLikeThisParams()
        self.max_clause_count = max_clause_count

    def set_max_doc_freq_pct(self, max_percentage: int) -> None:
        """Set max_doc_freq as a percentage of the current corpus size."""
        self.params.max_doc_freq = max_percentage * self.reader.num_docs() // 100

    def describe_params(self) -> str:
        """Describe the parameters that control how the query is formed."""
        return self.params.describe()

    def _call_params(self, resolve_fields: bool = False) -> MoreLikeThisParams:
        params = self.params.copy_with()
        if resolve_fields and not params.field_names:
            params = params.with_field_names(self.reader.field_names(FieldOption.INDEXED))
            if not params.field_names:
                logger.warning("No indexed fields to find interesting terms in")
        return params

    def _create_queue(self, table: FrequencyTable, params: MoreLikeThisParams) -> TermScoreQueue:
        return TermSelector(self.reader, self.similarity, params).create_queue(table)

    def _create_query(self, queue: TermScoreQueue, params: MoreLikeThisParams) -> BooleanQuery:
        return build_query(
            queue,
            boost=params.boost,
            boost_factor=params.boost_factor,
            max_clause_count=self.max_clause_count,
        )

    def _document_queue(self, doc_id: str, params: MoreLikeThisParams) -> TermScoreQueue:
        accumulator = TermFrequencyAccumulator(params, self.analyzer)
        table = accumulator.for_document(self.reader, doc_id, params.field_names)
        return self._create_queue(table, params)

    def _texts_queue(
        self,
        field_name: str,
        texts: Iterable[TextSource],
        params: MoreLikeThisParams,
    ) -> TermScoreQueue:
        accumulator = TermFrequencyAccumulator(params, self.analyzer)
        table = accumulator.for_texts(field_name, texts)
        return self._create_queue(table, params)

    def like(self, doc_id: str) -> BooleanQuery:
        """Query for documents like an indexed document.

        Args:
            doc_id: Id of the source document

        Returns:
            Disjunction of the document's most interesting terms

        Raises:
            AnalyzerRequiredError: if a field has no term vector and no
                analyzer is configured
        """
        params = self._call_params(resolve_fields=True)
        query = self._create_query(self._document_queue(doc_id, params), params)
        logger.debug(f"More like {doc_id}: {len(query)} clauses")
        return query

    def like_texts(self, field_name: str, texts: Iterable[TextSource]) -> BooleanQuery:
        """Query for documents like the given values of one field.

        Args:
            field_name: Field the values belong to
            texts: Strings or readable objects, e.g. the values of a
                multi-valued field
        """
        params = self._call_params()
        query = self._create_query(self._texts_queue(field_name, texts, params), params)
        logger.debug(f"More like text in {field_name!r}: {len(query)} clauses")
        return query

    def like_text(self, text: TextSource, field_name: str) -> BooleanQuery:
        """Query for documents like a single text."""
        return self.like_texts(field_name, [text])

    def retrieve_terms(self, doc_id: str) -> TermScoreQueue:
        """Scored interesting terms of an indexed document.

        Each entry carries the term, its score, idf, document frequency
        and frequency in the source. Popping yields the best first.
        """
        params = self._call_params(resolve_fields=True)
        return self._document_queue(doc_id, params)

    def retrieve_terms_from_texts(
        self,
        field_name: str,
        texts: Iterable[TextSource],
    ) -> TermScoreQueue:
        return self._texts_queue(field_name, texts, self._call_params())

    def retrieve_terms_from_text(self, text: TextSource, field_name: str) -> TermScoreQueue:
        return self.retrieve_terms_from_texts(field_name, [text])

    def retrieve_interesting_terms(self, doc_id: str) -> List[str]:
        """Most interesting words of an indexed document, best first."""
        params = self._call_params(resolve_fields=True)
        return interesting_terms(self._document_queue(doc_id, params), params.max_query_terms)

    def retrieve_interesting_terms_from_texts(
        self,
        field_name: str,
        texts: Iterable[TextSource],
    ) -> List[str]:
        params = self._call_params()
        return interesting_terms(
            self._texts_queue(field_name, texts, params),
            params.max_query_terms,
        )

    def retrieve_interesting_terms_from_text(self, text: TextSource, field_name: str) -> List[str]:
        """Most interesting words of a text, best first.

        Args:
            text: Source text
            field_name: Field passed to the analyzer
        """
        return self.retrieve_interesting_terms_from_texts(field_name, [text])


__all__ = ["MoreLikeThis"]
