"""Tests for the MoreLikeThis facade."""

import logging

import pytest

from roadsimilar_core import MoreLikeThis
from roadsimilar_core.analyzers import StandardAnalyzer, WhitespaceAnalyzer
from roadsimilar_core.errors import AnalyzerRequiredError, DocumentNotFoundError
from roadsimilar_core.index import Term, TermFreqVector
from roadsimilar_core.mlt import MoreLikeThisParams
from roadsimilar_core.query import BooleanQuery, Occur
from roadsimilar_core.ranking import BM25Similarity, FunctionSimilarity

from tests.conftest import StubIndexReader


@pytest.fixture
def apple_reader():
    return StubIndexReader(
        num_docs=100,
        doc_freqs={Term("body", "apple"): 3, Term("body", "xyz"): 1},
        vectors={"doc": {"body": TermFreqVector.from_counts("body", {"apple": 5, "the": 10, "xyz": 1})}},
    )


@pytest.fixture
def apple_mlt(apple_reader):
    params = MoreLikeThisParams(
        min_term_freq=2,
        min_doc_freq=1,
        max_doc_freq=1000,
        stop_words={"the"},
        field_names=("body",),
    )
    return MoreLikeThis(apple_reader, similarity=FunctionSimilarity(lambda df, n: 2.0), params=params)


@pytest.fixture
def corpus_mlt(corpus_reader):
    params = MoreLikeThisParams(min_term_freq=1, min_doc_freq=1)
    return MoreLikeThis(corpus_reader, analyzer=StandardAnalyzer(), params=params)


class TestMoreLikeThisWithStubIndex:
    """Behavior against hand-set index statistics."""

    def test_like_selects_frequent_non_stop_terms(self, apple_mlt):
        query = apple_mlt.like("doc")

        assert isinstance(query, BooleanQuery)
        assert len(query) == 1
        clause = query.clauses[0]
        assert clause.occur is Occur.SHOULD
        assert clause.query.term == Term("body", "apple")
        assert clause.query.boost == 1.0

    def test_retrieve_terms_scores(self, apple_mlt):
        queue = apple_mlt.retrieve_terms("doc")

        best = queue.pop()
        assert best.text == "apple"
        assert best.field == "body"
        assert best.score == 10.0
        assert best.idf == 2.0
        assert best.doc_freq == 3
        assert queue.pop() is None

    def test_boosted_top_clause_gets_boost_factor(self, apple_mlt):
        apple_mlt.params.boost = True
        apple_mlt.params.boost_factor = 3.0

        query = apple_mlt.like("doc")

        assert query.clauses[0].query.boost == 3.0

    def test_vectors_need_no_analyzer(self, apple_mlt):
        assert apple_mlt.analyzer is None
        assert apple_mlt.retrieve_interesting_terms("doc") == ["apple"]

    def test_lowering_min_term_freq_admits_more_terms(self, apple_mlt):
        apple_mlt.params.min_term_freq = 1
        assert apple_mlt.retrieve_interesting_terms("doc") == ["apple", "xyz"]

    def test_no_indexed_fields(self, caplog):
        mlt = MoreLikeThis(StubIndexReader(vectors={"doc": {}}))

        with caplog.at_level(logging.WARNING):
            query = mlt.like("doc")

        assert len(query) == 0
        assert "No indexed fields" in caplog.text

    def test_negative_min_term_freq_disables_filter(self, apple_mlt):
        apple_mlt.params.min_term_freq = -1
        apple_mlt.params.min_doc_freq = 2

        query = apple_mlt.like("doc")

        assert [c.query.term for c in query.clauses] == [Term("body", "apple")]

    def test_zero_max_query_terms_selects_nothing(self, apple_mlt):
        apple_mlt.params.max_query_terms = 0

        assert len(apple_mlt.like("doc")) == 0
        assert apple_mlt.retrieve_interesting_terms("doc") == []

    def test_negative_word_length_disables_filter(self, apple_mlt):
        apple_mlt.params.min_word_len = -3
        apple_mlt.params.max_word_len = -1

        assert len(apple_mlt.like("doc")) == 1

    def test_interesting_terms_limit_fixed_at_call_start(self, apple_reader):
        params = MoreLikeThisParams(
            min_term_freq=1, min_doc_freq=1, stop_words={"the"}, field_names=("body",)
        )
        mlt = MoreLikeThis(apple_reader, params=params)

        def idf(doc_freq, num_docs):
            mlt.params.max_query_terms = 1
            return 2.0

        mlt.similarity = FunctionSimilarity(idf)

        assert mlt.retrieve_interesting_terms("doc") == ["apple", "xyz"]
        assert mlt.params.max_query_terms == 1


class TestMoreLikeThisWithCorpus:
    """End-to-end behavior against the in-memory index."""

    def test_like_document(self, corpus_mlt):
        query = corpus_mlt.like("1")

        assert query.to_string() == (
            "body:apple title:orchards body:harvest body:orchard body:pie title:apple"
        )

    def test_interesting_terms(self, corpus_mlt):
        assert corpus_mlt.retrieve_interesting_terms("1") == [
            "apple", "orchards", "harvest", "orchard", "pie", "apple",
        ]

    def test_interesting_terms_limited_by_max_query_terms(self, corpus_mlt):
        corpus_mlt.params.max_query_terms = 2
        assert corpus_mlt.retrieve_interesting_terms("1") == ["apple", "orchards"]

    def test_unindexed_fields_ignored(self, corpus_mlt):
        terms = {scored.term for scored in corpus_mlt.retrieve_terms("1").drain()}
        assert all(term.field != "tag" for term in terms)

    def test_field_resolution_leaves_params_untouched(self, corpus_mlt):
        corpus_mlt.like("1")
        assert corpus_mlt.params.field_names == ()

    def test_explicit_fields(self, corpus_mlt):
        corpus_mlt.params.field_names = ("title",)
        assert corpus_mlt.retrieve_interesting_terms("1") == ["orchards", "apple"]

    def test_repeated_calls_agree(self, corpus_mlt):
        assert corpus_mlt.like("2").to_string() == corpus_mlt.like("2").to_string()

    def test_default_thresholds_too_strict_for_small_corpus(self, corpus_reader):
        mlt = MoreLikeThis(corpus_reader, analyzer=StandardAnalyzer())
        assert len(mlt.like("1")) == 0

    def test_stored_text_requires_analyzer(self, corpus_reader):
        mlt = MoreLikeThis(corpus_reader, params=MoreLikeThisParams(field_names=("body",)))

        with pytest.raises(AnalyzerRequiredError) as exc_info:
            mlt.like("1")

        assert "you must provide an Analyzer" in str(exc_info.value)

    def test_term_vector_field_without_analyzer(self, corpus_reader):
        params = MoreLikeThisParams(min_term_freq=1, min_doc_freq=1, field_names=("title",))
        mlt = MoreLikeThis(corpus_reader, params=params)

        assert mlt.retrieve_interesting_terms("1") == ["orchards", "apple"]

    def test_unknown_document(self, corpus_mlt):
        with pytest.raises(DocumentNotFoundError):
            corpus_mlt.like("missing")

    def test_deleted_document_not_found(self, corpus_reader, corpus_mlt):
        corpus_reader.delete_document("1")
        with pytest.raises(DocumentNotFoundError):
            corpus_mlt.like("1")

    def test_max_clause_count(self, corpus_reader):
        params = MoreLikeThisParams(min_term_freq=1, min_doc_freq=1)
        mlt = MoreLikeThis(corpus_reader, analyzer=StandardAnalyzer(), params=params, max_clause_count=2)

        assert mlt.like("1").to_string() == "body:apple title:orchards"

    def test_max_doc_freq_pct(self, corpus_mlt):
        corpus_mlt.set_max_doc_freq_pct(20)

        assert corpus_mlt.params.max_doc_freq == 1
        assert corpus_mlt.retrieve_interesting_terms("1") == ["orchards"]

    def test_other_similarity(self, corpus_reader):
        params = MoreLikeThisParams(min_term_freq=1, min_doc_freq=1, field_names=("body",))
        mlt = MoreLikeThis(corpus_reader, similarity=BM25Similarity(), analyzer=StandardAnalyzer(), params=params)

        assert mlt.retrieve_interesting_terms("1")[0] == "apple"


class TestMoreLikeText:
    """Queries built from ad hoc text."""

    def test_like_text(self, corpus_mlt):
        query = corpus_mlt.like_text("Apple pie, apple crumble", "body")

        # crumble is not in the index
        assert query.to_string() == "body:apple body:pie"

    def test_like_texts_counts_all_values(self, corpus_mlt):
        terms = corpus_mlt.retrieve_terms_from_texts("body", ["index terms", "index search"])

        best = terms.pop()
        assert best.term == Term("body", "index")
        assert best.term_freq == 2

    def test_like_text_accepts_readers(self, corpus_mlt):
        import io

        assert corpus_mlt.retrieve_interesting_terms_from_text(io.StringIO("harvest orchard"), "body") == [
            "harvest", "orchard",
        ]

    def test_text_requires_analyzer(self, corpus_reader):
        mlt = MoreLikeThis(corpus_reader)

        with pytest.raises(AnalyzerRequiredError):
            mlt.like_text("apple", "body")

    def test_empty_text(self, corpus_mlt):
        assert len(corpus_mlt.like_text("", "body")) == 0
        assert corpus_mlt.retrieve_interesting_terms_from_texts("body", []) == []

    def test_field_names_ignored_for_text(self, corpus_mlt):
        corpus_mlt.params.field_names = ("title",)
        assert corpus_mlt.retrieve_interesting_terms_from_text("apple", "body") == ["apple"]

    def test_token_budget(self, corpus_reader):
        params = MoreLikeThisParams(min_term_freq=1, min_doc_freq=1, max_num_tokens_parsed=1)
        mlt = MoreLikeThis(corpus_reader, analyzer=WhitespaceAnalyzer(), params=params)

        assert mlt.retrieve_interesting_terms_from_texts("body", ["apple pie", "harvest"]) == ["apple"]


class TestDescribeParams:
    """Tests for describe_params."""

    def test_describe(self, corpus_mlt):
        corpus_mlt.params.field_names = ("title", "body")

        assert corpus_mlt.describe_params() == (
            "\tmaxQueryTerms  : 25\n"
            "\tminWordLen     : 0\n"
            "\tmaxWordLen     : 0\n"
            "\tfieldNames     : title, body\n"
            "\tboost          : False\n"
            "\tminTermFreq    : 1\n"
            "\tminDocFreq     : 1\n"
        )
