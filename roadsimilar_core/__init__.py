"""RoadSimilar - "More Like This" Query Generation for BlackRoad OS.

Finds the statistically interesting terms of a document or text and
turns them into a weighted disjunctive similarity query.

Architecture:
┌─────────────────────────────────────────────────────────────────────────────┐
│                              MoreLikeThis                                   │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌────────────┐   ┌──────────────┐   ┌──────────────┐   ┌────────────┐     │
│   │  Document  │   │  Frequency   │   │   Term       │   │   Query    │     │
│   │  or Text   │ → │  Accumulator │ → │   Selector   │ → │   Builder  │     │
│   └────────────┘   └──────────────┘   └──────────────┘   └────────────┘     │
│                          │                   │                 │            │
│                    ┌───────────┐      ┌────────────┐    ┌─────────────┐     │
│                    │ Analyzer  │      │ Index      │    │ BooleanQuery│     │
│                    │ + Noise   │      │ Reader +   │    │ (SHOULD     │     │
│                    │ Filter    │      │ Similarity │    │  clauses)   │     │
│                    └───────────┘      └────────────┘    └─────────────┘     │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Key Features:
- Term frequencies from stored term vectors or by re-analyzing text
- tf * idf scoring with pluggable similarity (classic TF-IDF, BM25)
- Bounded top-K term selection with deterministic tie-breaking
- Optional score-relative clause boosting
- Best-effort query assembly under a clause cap
- Reference analyzers and in-memory index reader

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

# More like this
from roadsimilar_core.mlt import (
    MoreLikeThis,
    MoreLikeThisParams,
    ScoredTerm,
    TermFrequencyAccumulator,
    TermScoreQueue,
    TermSelector,
    build_query,
    interesting_terms,
    is_noise_word,
)

# Errors
from roadsimilar_core.errors import (
    RoadSimilarError,
    ConfigurationError,
    AnalyzerRequiredError,
    TooManyClausesError,
    DocumentNotFoundError,
)

# Index components
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

# Query components
from roadsimilar_core.query import (
    BooleanClause,
    BooleanQuery,
    ClauseStatus,
    Occur,
    QueryNode,
    TermQuery,
)

# Analyzers
from roadsimilar_core.analyzers import (
    Analyzer,
    KeywordAnalyzer,
    PerFieldAnalyzer,
    SimpleAnalyzer,
    StandardAnalyzer,
    StopAnalyzer,
    WhitespaceAnalyzer,
)

# Ranking
from roadsimilar_core.ranking import (
    BM25Similarity,
    DefaultSimilarity,
    FunctionSimilarity,
    Similarity,
)

__all__ = [
    # More like this
    "MoreLikeThis",
    "MoreLikeThisParams",
    "ScoredTerm",
    "TermFrequencyAccumulator",
    "TermScoreQueue",
    "TermSelector",
    "build_query",
    "interesting_terms",
    "is_noise_word",
    # Errors
    "RoadSimilarError",
    "ConfigurationError",
    "AnalyzerRequiredError",
    "TooManyClausesError",
    "DocumentNotFoundError",
    # Index
    "Document",
    "FieldOption",
    "FieldOptions",
    "InMemoryIndexReader",
    "IndexReader",
    "StoredDocument",
    "Term",
    "TermFreqVector",
    # Query
    "BooleanClause",
    "BooleanQuery",
    "ClauseStatus",
    "Occur",
    "QueryNode",
    "TermQuery",
    # Analyzers
    "Analyzer",
    "KeywordAnalyzer",
    "PerFieldAnalyzer",
    "SimpleAnalyzer",
    "StandardAnalyzer",
    "StopAnalyzer",
    "WhitespaceAnalyzer",
    # Ranking
    "BM25Similarity",
    "DefaultSimilarity",
    "FunctionSimilarity",
    "Similarity",
]
