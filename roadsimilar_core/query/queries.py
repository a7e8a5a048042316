"""RoadSimilar Queries - Query Node Types.

Term and boolean query nodes. Boolean queries cap their number of
clauses; adding past the cap reports a status instead of growing.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List

from roadsimilar_core.errors import TooManyClausesError
from roadsimilar_core.index.term import Term

logger = logging.getLogger(__name__)

DEFAULT_MAX_CLAUSE_COUNT = 1024


class QueryType(Enum):
    """Query type enumeration."""

    TERM = auto()
    BOOLEAN = auto()


class Occur(Enum):
    """How a clause participates in a boolean query."""

    MUST = "+"
    SHOULD = ""
    MUST_NOT = "-"


class ClauseStatus(Enum):
    """Outcome of adding a clause to a boolean query."""

    ADDED = auto()
    TOO_MANY_CLAUSES = auto()


class QueryNode(ABC):
    """Abstract base class for query nodes."""

    query_type: QueryType
    boost: float

    @abstractmethod
    def to_string(self) -> str:
        """Convert to query string representation."""
        pass

    @abstractmethod
    def get_terms(self) -> List[Term]:
        """Get all terms in this query."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.query_type.name,
            "boost": self.boost,
        }

    def __str__(self) -> str:
        return self.to_string()


@dataclass
class TermQuery(QueryNode):
    """Single term query.

    Matches documents containing the specified term in its field.
    """

    term: Term
    boost: float = 1.0
    query_type: QueryType = field(default=QueryType.TERM, init=False, repr=False)

    @property
    def field(self) -> str:
        return self.term.field

    @property
    def text(self) -> str:
        return self.term.text

    def to_string(self) -> str:
        result = self.term.to_string()
        if self.boost != 1.0:
            result = f"{result}^{self.boost}"
        return result

    def get_terms(self) -> List[Term]:
        return [self.term]

    def to_dict(self) -> Dict[str, Any]:
        return {
            **super().to_dict(),
            "field": self.term.field,
            "term": self.term.text,
        }


@dataclass
class BooleanClause:
    """A sub-query together with its occurrence."""

    query: QueryNode
    occur: Occur = Occur.SHOULD

    def to_string(self) -> str:
        return f"{self.occur.value}{self.query.to_string()}"


@dataclass
class BooleanQuery(QueryNode):
    """Boolean query combining multiple clauses.

    Attributes:
        clauses: Clauses in insertion order
        boost: Query boost
        minimum_should_match: SHOULD clauses required to match
        max_clause_count: Maximum number of clauses accepted
    """

    clauses: List[BooleanClause] = field(default_factory=list)
    boost: float = 1.0
    minimum_should_match: int = 0
    max_clause_count: int = DEFAULT_MAX_CLAUSE_COUNT
    query_type: QueryType = field(default=QueryType.BOOLEAN, init=False, repr=False)

    def add(self, query: QueryNode, occur: Occur = Occur.SHOULD) -> ClauseStatus:
        """Add a clause unless the clause cap has been reached."""
        if len(self.clauses) >= self.max_clause_count:
            return ClauseStatus.TOO_MANY_CLAUSES
        self.clauses.append(BooleanClause(query, occur))
        return ClauseStatus.ADDED

    def _add_or_raise(self, query: QueryNode, occur: Occur) -> None:
        if self.add(query, occur) is ClauseStatus.TOO_MANY_CLAUSES:
            raise TooManyClausesError(self.max_clause_count)

    def add_must(self, query: QueryNode) -> None:
        """Add a MUST clause.

        Raises:
            TooManyClausesError: if the clause cap has been reached
        """
        self._add_or_raise(query, Occur.MUST)

    def add_should(self, query: QueryNode) -> None:
        """Add a SHOULD clause.

        Raises:
            TooManyClausesError: if the clause cap has been reached
        """
        self._add_or_raise(query, Occur.SHOULD)

    def add_must_not(self, query: QueryNode) -> None:
        """Add a MUST NOT clause.

        Raises:
            TooManyClausesError: if the clause cap has been reached
        """
        self._add_or_raise(query, Occur.MUST_NOT)

    def _queries(self, occur: Occur) -> List[QueryNode]:
        return [c.query for c in self.clauses if c.occur == occur]

    @property
    def must(self) -> List[QueryNode]:
        return self._queries(Occur.MUST)

    @property
    def should(self) -> List[QueryNode]:
        return self._queries(Occur.SHOULD)

    @property
    def must_not(self) -> List[QueryNode]:
        return self._queries(Occur.MUST_NOT)

    def __len__(self) -> int:
        return len(self.clauses)

    def __iter__(self):
        return iter(self.clauses)

    def to_string(self) -> str:
        result = " ".join(clause.to_string() for clause in self.clauses)
        if self.boost != 1.0:
            result = f"({result})^{self.boost}"
        return result

    def get_terms(self) -> List[Term]:
        terms = []
        for clause in self.clauses:
            terms.extend(clause.query.get_terms())
        return terms

    def to_dict(self) -> Dict[str, Any]:
        return {
            **super().to_dict(),
            "must": [q.to_dict() for q in self.must],
            "should": [q.to_dict() for q in self.should],
            "must_not": [q.to_dict() for q in self.must_not],
            "minimum_should_match": self.minimum_should_match,
        }


__all__ = [
    "DEFAULT_MAX_CLAUSE_COUNT",
    "QueryType",
    "Occur",
    "ClauseStatus",
    "QueryNode",
    "TermQuery",
    "BooleanClause",
    "BooleanQuery",
]
