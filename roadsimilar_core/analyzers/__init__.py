"""RoadSimilar Analyzers - Text Analysis Pipeline.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from roadsimilar_core.analyzers.base import (
    Analyzer,
    Token,
    TokenFilter,
    TokenStream,
    Tokenizer,
    get_analyzer,
    list_analyzers,
    register_analyzer,
)
from roadsimilar_core.analyzers.tokenizers import (
    LetterTokenizer,
    PatternTokenizer,
    StandardTokenizer,
    WhitespaceTokenizer,
)
from roadsimilar_core.analyzers.filters import (
    ENGLISH_STOP_WORDS,
    LengthFilter,
    LowercaseFilter,
    StopwordFilter,
)
from roadsimilar_core.analyzers.standard import (
    KeywordAnalyzer,
    PerFieldAnalyzer,
    SimpleAnalyzer,
    StandardAnalyzer,
    StopAnalyzer,
    WhitespaceAnalyzer,
)

__all__ = [
    "Analyzer",
    "Token",
    "TokenFilter",
    "TokenStream",
    "Tokenizer",
    "get_analyzer",
    "list_analyzers",
    "register_analyzer",
    "LetterTokenizer",
    "PatternTokenizer",
    "StandardTokenizer",
    "WhitespaceTokenizer",
    "ENGLISH_STOP_WORDS",
    "LengthFilter",
    "LowercaseFilter",
    "StopwordFilter",
    "KeywordAnalyzer",
    "PerFieldAnalyzer",
    "SimpleAnalyzer",
    "StandardAnalyzer",
    "StopAnalyzer",
    "WhitespaceAnalyzer",
]
