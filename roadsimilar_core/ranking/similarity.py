"""RoadSimilar Similarity - Inverse Document Frequency Models.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict


class Similarity(ABC):
    """Base relevance model.

    Only the idf component is needed to weigh candidate terms.
    """

    @abstractmethod
    def idf(self, doc_freq: int, num_docs: int) -> float:
        """Inverse document frequency of a term.

        Args:
            doc_freq: Documents containing the term
            num_docs: Documents in the corpus

        Returns:
            idf weight, larger for rarer terms
        """
        pass

    def explain(self, doc_freq: int, num_docs: int) -> Dict[str, Any]:
        return {
            "value": self.idf(doc_freq, num_docs),
            "description": f"idf(docFreq={doc_freq}, numDocs={num_docs})",
        }


class DefaultSimilarity(Similarity):
    """Classic TF-IDF idf: ln(numDocs / (docFreq + 1)) + 1."""

    def idf(self, doc_freq: int, num_docs: int) -> float:
        # a reader may report df > 0 for an empty corpus while out of date
        return math.log(max(num_docs, 1) / (doc_freq + 1)) + 1.0


class BM25Similarity(Similarity):
    """Okapi BM25 idf, always positive."""

    def idf(self, doc_freq: int, num_docs: int) -> float:
        return math.log(1.0 + (num_docs - doc_freq + 0.5) / (doc_freq + 0.5))

    def explain(self, doc_freq: int, num_docs: int) -> Dict[str, Any]:
        return {
            "value": self.idf(doc_freq, num_docs),
            "description": f"BM25 idf(docFreq={doc_freq}, numDocs={num_docs})",
        }


class FunctionSimilarity(Similarity):
    """Adapts any (doc_freq, num_docs) -> float callable."""

    def __init__(self, func: Callable[[int, int], float]):
        self.func = func

    def idf(self, doc_freq: int, num_docs: int) -> float:
        return float(self.func(doc_freq, num_docs))


__all__ = [
    "Similarity",
    "DefaultSimilarity",
    "BM25Similarity",
    "FunctionSimilarity",
]
