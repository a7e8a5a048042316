"""RoadSimilar Analyzers - Ready-made Analysis Chains.

Each chain is registered by name so that index field options can refer
to it as a string.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Mapping, Optional

from roadsimilar_core.analyzers.base import Analyzer, Token, TokenStream, register_analyzer
from roadsimilar_core.analyzers.filters import LowercaseFilter, StopwordFilter
from roadsimilar_core.analyzers.tokenizers import (
    LetterTokenizer,
    StandardTokenizer,
    WhitespaceTokenizer,
)


@register_analyzer("standard")
class StandardAnalyzer(Analyzer):
    """Standard tokens, lowercased, English stop words removed.

    Args:
        stopwords: Stop words replacing the English defaults
        max_token_length: Longer tokens are skipped
    """

    def __init__(self, stopwords: Optional[Iterable[str]] = None, max_token_length: int = 255):
        super().__init__(
            StandardTokenizer(max_token_length),
            [LowercaseFilter(), StopwordFilter(stopwords)],
        )


@register_analyzer("simple")
class SimpleAnalyzer(Analyzer):
    """Lowercased runs of letters."""

    def __init__(self):
        super().__init__(LetterTokenizer(), [LowercaseFilter()])


@register_analyzer("stop")
class StopAnalyzer(Analyzer):
    """Lowercased runs of letters without stop words."""

    def __init__(self, stopwords: Optional[Iterable[str]] = None):
        super().__init__(LetterTokenizer(), [LowercaseFilter(), StopwordFilter(stopwords)])


@register_analyzer("whitespace")
class WhitespaceAnalyzer(Analyzer):
    """Whitespace-separated tokens, case and punctuation kept."""

    def __init__(self):
        super().__init__(WhitespaceTokenizer())


@register_analyzer("keyword")
class KeywordAnalyzer(Analyzer):
    """The whole value is one term."""

    def analyze(self, text: str) -> TokenStream:
        return TokenStream([Token(text, 0, 0, len(text))] if text else [])


class PerFieldAnalyzer(Analyzer):
    """Dispatches each field to its own analyzer.

    Fields without an entry use the default analyzer.
    """

    def __init__(self, default: Analyzer, field_analyzers: Optional[Mapping[str, Analyzer]] = None):
        super().__init__()
        self.default = default
        self.field_analyzers: Dict[str, Analyzer] = dict(field_analyzers or {})

    def add_analyzer(self, field_name: str, analyzer: Analyzer) -> None:
        self.field_analyzers[field_name] = analyzer

    def analyzer_for(self, field_name: str) -> Analyzer:
        return self.field_analyzers.get(field_name, self.default)

    def analyze(self, text: str) -> TokenStream:
        return self.default.analyze(text)

    def token_stream(self, field_name: str, text: str) -> Iterator[str]:
        return self.analyzer_for(field_name).token_stream(field_name, text)


__all__ = [
    "StandardAnalyzer",
    "SimpleAnalyzer",
    "StopAnalyzer",
    "WhitespaceAnalyzer",
    "KeywordAnalyzer",
    "PerFieldAnalyzer",
]
