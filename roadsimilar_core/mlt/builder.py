"""RoadSimilar Query Building - From Scored Terms to Queries.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from roadsimilar_core.mlt.selector import TermScoreQueue
from roadsimilar_core.query.queries import (
    DEFAULT_MAX_CLAUSE_COUNT,
    BooleanQuery,
    ClauseStatus,
    Occur,
    TermQuery,
)

logger = logging.getLogger(__name__)


def build_query(
    queue: TermScoreQueue,
    boost: bool = False,
    boost_factor: float = 1.0,
    max_clause_count: Optional[int] = None,
    query: Optional[BooleanQuery] = None,
) -> BooleanQuery:
    """Drain a term queue into a disjunction of term queries.

    With boost enabled the best term gets boost_factor and every other
    term boost_factor * score / best_score. Terms that would exceed the
    clause cap are left out; the remaining terms are still offered.

    Args:
        queue: Selected terms, consumed by this call
        boost: Weight clauses by relative score
        boost_factor: Boost of the best term
        max_clause_count: Clause cap of a new query (DEFAULT_MAX_CLAUSE_COUNT if None)
        query: Query to add clauses to instead of a new one

    Returns:
        Boolean query of SHOULD clauses, possibly empty
    """
    if query is None:
        query = BooleanQuery(
            max_clause_count=DEFAULT_MAX_CLAUSE_COUNT if max_clause_count is None else max_clause_count,
        )
    best_score: Optional[float] = None

    for scored in queue.drain():
        term_query = TermQuery(scored.term)
        if boost:
            if best_score is None:
                best_score = scored.score
            if best_score:
                term_query.boost = boost_factor * scored.score / best_score
            else:
                term_query.boost = boost_factor

        if query.add(term_query, Occur.SHOULD) is ClauseStatus.TOO_MANY_CLAUSES:
            logger.debug(f"Dropped clause {term_query.to_string()}: more than {query.max_clause_count} clauses")

    return query


def interesting_terms(queue: TermScoreQueue, limit: int) -> List[str]:
    """Texts of the best terms in a queue, best first.

    Args:
        queue: Selected terms, consumed by this call
        limit: Maximum number of terms returned
    """
    terms: List[str] = []
    while len(terms) < limit:
        scored = queue.pop()
        if scored is None:
            break
        terms.append(scored.text)
    return terms


__all__ = ["build_query", "interesting_terms"]
