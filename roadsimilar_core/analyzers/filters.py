"""RoadSimilar Token Filters.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import replace
from typing import FrozenSet, Iterable, Optional

from roadsimilar_core.analyzers.base import Token, TokenFilter, TokenStream

ENGLISH_STOP_WORDS: FrozenSet[str] = frozenset("""
    a an and are as at be but by for if in into is it no not of on or
    such that the their then there these they this to was will with
""".split())


class LowercaseFilter(TokenFilter):
    def apply(self, stream: TokenStream) -> TokenStream:
        return stream.map(lambda token: replace(token, text=token.text.lower()))


class StopwordFilter(TokenFilter):
    """Drops stop words.

    Args:
        stopwords: Words to drop (ENGLISH_STOP_WORDS if None)
        ignore_case: Compare lowercased token text
    """

    def __init__(self, stopwords: Optional[Iterable[str]] = None, ignore_case: bool = True):
        words = ENGLISH_STOP_WORDS if stopwords is None else stopwords
        self.ignore_case = ignore_case
        self.stopwords = frozenset(w.lower() for w in words) if ignore_case else frozenset(words)

    def is_stopword(self, token: Token) -> bool:
        text = token.text.lower() if self.ignore_case else token.text
        return text in self.stopwords

    def apply(self, stream: TokenStream) -> TokenStream:
        return stream.filter(lambda token: not self.is_stopword(token))


class LengthFilter(TokenFilter):
    """Keeps tokens whose length lies in [min_length, max_length]."""

    def __init__(self, min_length: int = 1, max_length: int = 255):
        self.min_length = min_length
        self.max_length = max_length

    def apply(self, stream: TokenStream) -> TokenStream:
        return stream.filter(lambda token: self.min_length <= len(token.text) <= self.max_length)


__all__ = [
    "ENGLISH_STOP_WORDS",
    "LowercaseFilter",
    "StopwordFilter",
    "LengthFilter",
]
