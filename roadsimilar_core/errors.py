"""RoadSimilar Errors - Exception Hierarchy.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations


class RoadSimilarError(Exception):
    """Base class for all RoadSimilar errors."""


class ConfigurationError(RoadSimilarError):
    """Raised when parameters or collaborators are misconfigured."""


class AnalyzerRequiredError(ConfigurationError):
    """Raised when text must be tokenized but no analyzer is set."""

    def __init__(self, message: str = ""):
        super().__init__(
            message
            or "To use MoreLikeThis without term vectors, you must provide an Analyzer"
        )


class TooManyClausesError(RoadSimilarError):
    """Raised when a boolean query exceeds its maximum clause count."""

    def __init__(self, max_clause_count: int):
        self.max_clause_count = max_clause_count
        super().__init__(f"maxClauseCount is set to {max_clause_count}")


class DocumentNotFoundError(RoadSimilarError, KeyError):
    """Raised when a document id is unknown to the index reader."""

    def __init__(self, doc_id: str):
        self.doc_id = doc_id
        super().__init__(f"Document not found: {doc_id}")

    def __str__(self) -> str:
        return self.args[0]


__all__ = [
    "RoadSimilarError",
    "ConfigurationError",
    "AnalyzerRequiredError",
    "TooManyClausesError",
    "DocumentNotFoundError",
]
