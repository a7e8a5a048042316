"""RoadSimilar Term Selection - Scoring and Top-K Queue.

Scores every candidate term of a frequency table by tf * idf and keeps
the best ones in a bounded priority queue.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from roadsimilar_core.index.reader import IndexReader
from roadsimilar_core.index.term import Term
from roadsimilar_core.mlt.config import MoreLikeThisParams
from roadsimilar_core.mlt.frequencies import FrequencyTable, count_terms
from roadsimilar_core.ranking.similarity import Similarity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoredTerm:
    """A candidate term with its score.

    Attributes:
        term: Field and text of the term
        score: tf * idf
        idf: idf of the term in the corpus
        doc_freq: Documents containing the term
        term_freq: Occurrences in the source
    """

    term: Term
    score: float
    idf: float = 0.0
    doc_freq: int = 0
    term_freq: int = 0

    @property
    def field(self) -> str:
        return self.term.field

    @property
    def text(self) -> str:
        return self.term.text

    def outranks(self, other: "ScoredTerm") -> bool:
        """Higher score wins; equal scores prefer the smaller term."""
        if self.score != other.score:
            return self.score > other.score
        return self.term < other.term

    def __lt__(self, other: "ScoredTerm") -> bool:
        """Worse-ranked terms sort first, so a heap keeps the worst on top."""
        return other.outranks(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.term.text,
            "field": self.term.field,
            "score": self.score,
            "idf": self.idf,
            "doc_freq": self.doc_freq,
            "term_freq": self.term_freq,
        }


class TermScoreQueue:
    """Bounded priority queue keeping the best scored terms.

    A min-heap whose root is the worst retained term. Popping returns
    the best remaining term, so draining yields terms best first.
    """

    def __init__(self, capacity: int):
        """Initialize queue.

        Args:
            capacity: Maximum number of retained terms
        """
        self.capacity = max(0, capacity)
        self._heap: List[ScoredTerm] = []
        self._sorted = True

    def offer(self, scored: ScoredTerm) -> bool:
        """Insert a term if it ranks among the best seen.

        Returns:
            True if retained
        """
        if len(self._heap) < self.capacity:
            heapq.heappush(self._heap, scored)
            self._sorted = False
            return True
        if self._heap and scored.outranks(self._heap[0]):
            heapq.heapreplace(self._heap, scored)
            self._sorted = False
            return True
        return False

    def top(self) -> Optional[ScoredTerm]:
        """Worst retained term, None if empty."""
        return self._heap[0] if self._heap else None

    def pop(self) -> Optional[ScoredTerm]:
        """Remove and return the best retained term, None if empty."""
        if not self._heap:
            return None
        if not self._sorted:
            # an ascending list is still a valid heap
            self._heap.sort()
            self._sorted = True
        return self._heap.pop()

    def drain(self) -> Iterator[ScoredTerm]:
        """Pop every term, best first."""
        while self._heap:
            yield self.pop()

    def to_list(self) -> List[ScoredTerm]:
        """Retained terms best first, without consuming the queue."""
        return sorted(self._heap, reverse=True)

    @property
    def min_score(self) -> Optional[float]:
        return self._heap[0].score if self._heap else None

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


class TermSelector:
    """Selects the most interesting terms of a frequency table."""

    def __init__(
        self,
        reader: IndexReader,
        similarity: Similarity,
        params: MoreLikeThisParams,
    ):
        self.reader = reader
        self.similarity = similarity
        self.params = params

    def create_queue(self, table: FrequencyTable) -> TermScoreQueue:
        """Score candidate terms and keep the best max_query_terms."""
        params = self.params
        num_docs = self.reader.num_docs()
        queue = TermScoreQueue(min(params.max_query_terms, count_terms(table)))

        considered = 0
        for field_name, term_freqs in table.items():
            for text, tf in term_freqs.items():
                if params.min_term_freq > 0 and tf < params.min_term_freq:
                    continue

                term = Term(field_name, text)
                doc_freq = self.reader.doc_freq(term)
                if doc_freq == 0:
                    logger.debug(f"Skipping {term}: zero document frequency, index out of date?")
                    continue
                if params.min_doc_freq > 0 and doc_freq < params.min_doc_freq:
                    continue
                if params.max_doc_freq is not None and doc_freq > params.max_doc_freq:
                    continue

                idf = self.similarity.idf(doc_freq, num_docs)
                considered += 1
                queue.offer(ScoredTerm(
                    term=term,
                    score=tf * idf,
                    idf=idf,
                    doc_freq=doc_freq,
                    term_freq=tf,
                ))

        logger.debug(
            f"Scored {considered} of {count_terms(table)} candidate terms, "
            f"kept {len(queue)}"
        )
        return queue


__all__ = ["ScoredTerm", "TermScoreQueue", "TermSelector"]
