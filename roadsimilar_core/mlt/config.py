"""RoadSimilar MoreLikeThis Parameters.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple

from roadsimilar_core.errors import ConfigurationError

DEFAULT_MAX_NUM_TOKENS_PARSED = 5000
DEFAULT_MIN_TERM_FREQ = 2
DEFAULT_MIN_DOC_FREQ = 5
DEFAULT_MAX_DOC_FREQ: Optional[int] = None  # unbounded
DEFAULT_BOOST = False
DEFAULT_BOOST_FACTOR = 1.0
DEFAULT_MIN_WORD_LENGTH = 0
DEFAULT_MAX_WORD_LENGTH = 0
DEFAULT_MAX_QUERY_TERMS = 25


@dataclass
class MoreLikeThisParams:
    """Parameters controlling how a "more like this" query is formed.

    Attributes:
        min_term_freq: Ignore terms occurring fewer times in the source (<= 0 disables)
        min_doc_freq: Ignore terms found in fewer documents (<= 0 disables)
        max_doc_freq: Ignore terms found in more documents (None disables)
        boost: Boost each clause by its score relative to the best term
        boost_factor: Boost given to the best term when boosting
        field_names: Fields to mine; empty means every indexed field
        min_word_len: Ignore shorter words (<= 0 disables)
        max_word_len: Ignore longer words (<= 0 disables)
        max_query_terms: Maximum number of terms in the query (<= 0 selects none)
        max_num_tokens_parsed: Tokens analyzed per field value without a term vector
        stop_words: Words never selected
    """

    min_term_freq: int = DEFAULT_MIN_TERM_FREQ
    min_doc_freq: int = DEFAULT_MIN_DOC_FREQ
    max_doc_freq: Optional[int] = DEFAULT_MAX_DOC_FREQ
    boost: bool = DEFAULT_BOOST
    boost_factor: float = DEFAULT_BOOST_FACTOR
    field_names: Tuple[str, ...] = ()
    min_word_len: int = DEFAULT_MIN_WORD_LENGTH
    max_word_len: int = DEFAULT_MAX_WORD_LENGTH
    max_query_terms: int = DEFAULT_MAX_QUERY_TERMS
    max_num_tokens_parsed: int = DEFAULT_MAX_NUM_TOKENS_PARSED
    stop_words: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        self.field_names = tuple(self.field_names)
        self.stop_words = frozenset(self.stop_words)

    def validate(self) -> "MoreLikeThisParams":
        """Strict range check for parameters read from outside.

        Queries never call this: out-of-range values there just disable
        a filter or select no terms. from_dict() applies it.

        Raises:
            ConfigurationError: on the first invalid parameter
        """
        for name in ("min_term_freq", "min_doc_freq", "min_word_len",
                     "max_word_len", "max_num_tokens_parsed"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must be >= 0")
        if self.max_doc_freq is not None and self.max_doc_freq < 0:
            raise ConfigurationError("max_doc_freq must be >= 0")
        if self.max_query_terms < 1:
            raise ConfigurationError("max_query_terms must be >= 1")
        if self.boost_factor <= 0:
            raise ConfigurationError("boost_factor must be > 0")
        if 0 < self.max_word_len < self.min_word_len:
            raise ConfigurationError("max_word_len must be >= min_word_len")
        return self

    def copy_with(self, **changes: Any) -> "MoreLikeThisParams":
        """Independent copy with some parameters replaced."""
        return replace(self, **changes)

    def with_field_names(self, field_names: Iterable[str]) -> "MoreLikeThisParams":
        return self.copy_with(field_names=tuple(sorted(field_names)))

    def describe(self) -> str:
        """Human-readable dump of the parameters that shape the query."""
        lines = [
            f"\tmaxQueryTerms  : {self.max_query_terms}",
            f"\tminWordLen     : {self.min_word_len}",
            f"\tmaxWordLen     : {self.max_word_len}",
            f"\tfieldNames     : {', '.join(self.field_names)}",
            f"\tboost          : {self.boost}",
            f"\tminTermFreq    : {self.min_term_freq}",
            f"\tminDocFreq     : {self.min_doc_freq}",
        ]
        return "\n".join(lines) + "\n"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "min_term_freq": self.min_term_freq,
            "min_doc_freq": self.min_doc_freq,
            "max_doc_freq": self.max_doc_freq,
            "boost": self.boost,
            "boost_factor": self.boost_factor,
            "field_names": list(self.field_names),
            "min_word_len": self.min_word_len,
            "max_word_len": self.max_word_len,
            "max_query_terms": self.max_query_terms,
            "max_num_tokens_parsed": self.max_num_tokens_parsed,
            "stop_words": sorted(self.stop_words),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MoreLikeThisParams":
        return cls(
            min_term_freq=data.get("min_term_freq", DEFAULT_MIN_TERM_FREQ),
            min_doc_freq=data.get("min_doc_freq", DEFAULT_MIN_DOC_FREQ),
            max_doc_freq=data.get("max_doc_freq", DEFAULT_MAX_DOC_FREQ),
            boost=data.get("boost", DEFAULT_BOOST),
            boost_factor=data.get("boost_factor", DEFAULT_BOOST_FACTOR),
            field_names=tuple(data.get("field_names", ())),
            min_word_len=data.get("min_word_len", DEFAULT_MIN_WORD_LENGTH),
            max_word_len=data.get("max_word_len", DEFAULT_MAX_WORD_LENGTH),
            max_query_terms=data.get("max_query_terms", DEFAULT_MAX_QUERY_TERMS),
            max_num_tokens_parsed=data.get("max_num_tokens_parsed", DEFAULT_MAX_NUM_TOKENS_PARSED),
            stop_words=frozenset(data.get("stop_words", ())),
        ).validate()


__all__ = [
    "MoreLikeThisParams",
    "DEFAULT_MAX_NUM_TOKENS_PARSED",
    "DEFAULT_MIN_TERM_FREQ",
    "DEFAULT_MIN_DOC_FREQ",
    "DEFAULT_MAX_DOC_FREQ",
    "DEFAULT_BOOST",
    "DEFAULT_BOOST_FACTOR",
    "DEFAULT_MIN_WORD_LENGTH",
    "DEFAULT_MAX_WORD_LENGTH",
    "DEFAULT_MAX_QUERY_TERMS",
]
