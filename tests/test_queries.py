"""Tests for query nodes."""

import pytest

from roadsimilar_core.errors import TooManyClausesError
from roadsimilar_core.index import Term
from roadsimilar_core.query import BooleanQuery, ClauseStatus, Occur, QueryType, TermQuery


class TestTermQuery:
    """Tests for TermQuery."""

    def test_to_string(self):
        assert TermQuery(Term("body", "apple")).to_string() == "body:apple"
        assert str(TermQuery(Term("body", "apple"), boost=2.5)) == "body:apple^2.5"

    def test_accessors(self):
        query = TermQuery(Term("body", "apple"))

        assert query.field == "body"
        assert query.text == "apple"
        assert query.query_type is QueryType.TERM
        assert query.get_terms() == [Term("body", "apple")]

    def test_to_dict(self):
        assert TermQuery(Term("body", "apple"), boost=2.0).to_dict() == {
            "type": "TERM",
            "boost": 2.0,
            "field": "body",
            "term": "apple",
        }


class TestBooleanQuery:
    """Tests for BooleanQuery."""

    def test_add_reports_status(self):
        query = BooleanQuery(max_clause_count=1)

        assert query.add(TermQuery(Term("f", "a"))) is ClauseStatus.ADDED
        assert query.add(TermQuery(Term("f", "b"))) is ClauseStatus.TOO_MANY_CLAUSES
        assert len(query) == 1

    def test_raising_adders(self):
        query = BooleanQuery(max_clause_count=2)
        query.add_must(TermQuery(Term("f", "a")))
        query.add_must_not(TermQuery(Term("f", "b")))

        with pytest.raises(TooManyClausesError) as exc_info:
            query.add_should(TermQuery(Term("f", "c")))

        assert exc_info.value.max_clause_count == 2
        assert str(exc_info.value) == "maxClauseCount is set to 2"

    def test_clauses_by_occur(self):
        query = BooleanQuery()
        query.add(TermQuery(Term("f", "a")), Occur.MUST)
        query.add(TermQuery(Term("f", "b")))
        query.add(TermQuery(Term("f", "c")), Occur.MUST_NOT)

        assert [q.text for q in query.must] == ["a"]
        assert [q.text for q in query.should] == ["b"]
        assert [q.text for q in query.must_not] == ["c"]
        assert query.to_string() == "+f:a f:b -f:c"
        assert [t.text for t in query.get_terms()] == ["a", "b", "c"]

    def test_nested_query(self):
        inner = BooleanQuery()
        inner.add(TermQuery(Term("f", "a")))
        inner.add(TermQuery(Term("f", "b")))
        inner.boost = 2.0
        outer = BooleanQuery()
        outer.add(inner, Occur.MUST)

        assert outer.to_string() == "+(f:a f:b)^2.0"

    def test_iteration_in_insertion_order(self):
        query = BooleanQuery()
        for text in "cab":
            query.add(TermQuery(Term("f", text)))

        assert [clause.query.text for clause in query] == ["c", "a", "b"]

    def test_to_dict(self):
        query = BooleanQuery(minimum_should_match=1)
        query.add(TermQuery(Term("f", "a")))

        data = query.to_dict()

        assert data["type"] == "BOOLEAN"
        assert data["should"] == [{"type": "TERM", "boost": 1.0, "field": "f", "term": "a"}]
        assert data["must"] == []
        assert data["minimum_should_match"] == 1
