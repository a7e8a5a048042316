"""RoadSimilar Term Frequency Accumulation.

Builds per-field term frequency tables for a source document, either
from stored term vectors or by re-analyzing stored text.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Protocol, Union

from roadsimilar_core.analyzers import Analyzer
from roadsimilar_core.errors import AnalyzerRequiredError
from roadsimilar_core.index.reader import IndexReader
from roadsimilar_core.index.term import TermFreqVector
from roadsimilar_core.mlt.config import MoreLikeThisParams
from roadsimilar_core.mlt.noise import is_noise_word

logger = logging.getLogger(__name__)

# field name -> term text -> occurrences
FrequencyTable = Dict[str, Dict[str, int]]


class SupportsRead(Protocol):
    def read(self) -> str: ...


# a string, or any object with a read() method returning one
TextSource = Union[str, SupportsRead]


def read_text(source: TextSource) -> str:
    """Return the text held by a text source."""
    if isinstance(source, str):
        return source
    return source.read()


def count_terms(table: FrequencyTable) -> int:
    """Number of distinct (field, term) pairs in a table."""
    return sum(len(terms) for terms in table.values())


class TermFrequencyAccumulator:
    """Accumulates term frequencies into a FrequencyTable.

    Noise words are dropped the same way whether frequencies come from
    a term vector or from analysis.
    """

    def __init__(
        self,
        params: MoreLikeThisParams,
        analyzer: Optional[Analyzer] = None,
    ):
        self.params = params
        self.analyzer = analyzer

    def add_vector(
        self,
        table: FrequencyTable,
        field_name: str,
        vector: TermFreqVector,
    ) -> None:
        """Add the frequencies of a stored term vector."""
        term_freqs = table.setdefault(field_name, {})
        for term, freq in vector:
            if is_noise_word(term, self.params):
                continue
            term_freqs[term] = term_freqs.get(term, 0) + freq

    def add_text(
        self,
        table: FrequencyTable,
        field_name: str,
        source: TextSource,
        max_tokens: Optional[int] = None,
    ) -> int:
        """Analyze text and count its terms.

        Args:
            table: Table to update
            field_name: Field passed to the analyzer
            source: Text to analyze
            max_tokens: Tokens to read at most (max_num_tokens_parsed if None)

        Returns:
            Number of tokens read, noise words included

        Raises:
            AnalyzerRequiredError: if no analyzer is configured
        """
        if self.analyzer is None:
            raise AnalyzerRequiredError()

        limit = self.params.max_num_tokens_parsed if max_tokens is None else max_tokens
        term_freqs = table.setdefault(field_name, {})

        token_count = 0
        for term in self.analyzer.token_stream(field_name, read_text(source)):
            if token_count >= limit:
                logger.debug(f"Stopped analyzing {field_name!r} after {limit} tokens")
                break
            token_count += 1
            if is_noise_word(term, self.params):
                continue
            term_freqs[term] = term_freqs.get(term, 0) + 1

        return token_count

    def add_texts(
        self,
        table: FrequencyTable,
        field_name: str,
        sources: Iterable[TextSource],
    ) -> None:
        """Analyze several values of one field under a shared token budget."""
        if self.analyzer is None:
            raise AnalyzerRequiredError()

        table.setdefault(field_name, {})
        remaining = self.params.max_num_tokens_parsed
        for source in sources:
            if remaining <= 0:
                break
            remaining -= self.add_text(table, field_name, source, max_tokens=remaining)

    def for_document(
        self,
        reader: IndexReader,
        doc_id: str,
        field_names: Iterable[str],
    ) -> FrequencyTable:
        """Frequency table of a stored document.

        Uses each field's term vector when the index has one, otherwise
        re-analyzes the stored values of the field.
        """
        table: FrequencyTable = {}
        stored = None
        for field_name in field_names:
            vector = reader.term_freq_vector(doc_id, field_name)
            if vector is not None:
                self.add_vector(table, field_name, vector)
                continue

            if stored is None:
                stored = reader.document(doc_id)
            self.add_texts(table, field_name, stored.get_values(field_name))
        return table

    def for_texts(
        self,
        field_name: str,
        sources: Iterable[TextSource],
    ) -> FrequencyTable:
        """Frequency table of ad hoc text values for one field."""
        table: FrequencyTable = {}
        self.add_texts(table, field_name, sources)
        return table


__all__ = [
    "FrequencyTable",
    "TextSource",
    "TermFrequencyAccumulator",
    "count_terms",
    "read_text",
]
