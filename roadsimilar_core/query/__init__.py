"""RoadSimilar Query Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from roadsimilar_core.query.queries import (
    DEFAULT_MAX_CLAUSE_COUNT,
    BooleanClause,
    BooleanQuery,
    ClauseStatus,
    Occur,
    QueryNode,
    QueryType,
    TermQuery,
)

__all__ = [
    "DEFAULT_MAX_CLAUSE_COUNT",
    "BooleanClause",
    "BooleanQuery",
    "ClauseStatus",
    "Occur",
    "QueryNode",
    "QueryType",
    "TermQuery",
]
