"""RoadSimilar Tokenizers.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
from typing import Iterator, Pattern, Union

from roadsimilar_core.analyzers.base import Token, Tokenizer, TokenStream


class PatternTokenizer(Tokenizer):
    """Emits every match of a regular expression as a token.

    Args:
        pattern: Expression matching one token
        max_token_length: Matches longer than this are skipped (0 keeps all)
    """

    def __init__(self, pattern: Union[str, Pattern[str]], max_token_length: int = 0):
        self.pattern = re.compile(pattern)
        self.max_token_length = max_token_length

    def tokenize(self, text: str) -> TokenStream:
        return TokenStream(self._matches(text))

    def _matches(self, text: str) -> Iterator[Token]:
        position = 0
        for match in self.pattern.finditer(text):
            if self.max_token_length and match.end() - match.start() > self.max_token_length:
                continue
            yield Token(match.group(), position, match.start(), match.end())
            position += 1


class StandardTokenizer(PatternTokenizer):
    """Splits on whitespace and punctuation.

    Keeps decimal numbers (3.14) and apostrophe contractions (it's)
    together. Every CJK ideograph or kana is a token of its own.
    """

    WORD_PATTERN = re.compile(
        r"\d+(?:[.,]\d+)+"
        r"|[\u3040-\u30ff\u4e00-\u9fff]"
        r"|[^\W\u3040-\u30ff\u4e00-\u9fff]+(?:'[^\W\u3040-\u30ff\u4e00-\u9fff]+)*"
    )

    def __init__(self, max_token_length: int = 255):
        super().__init__(self.WORD_PATTERN, max_token_length)


class WhitespaceTokenizer(PatternTokenizer):
    """Tokens are maximal runs of non-whitespace."""

    def __init__(self):
        super().__init__(r"\S+")


class LetterTokenizer(PatternTokenizer):
    """Tokens are maximal runs of letters."""

    def __init__(self):
        super().__init__(r"[^\W\d_]+")


__all__ = [
    "PatternTokenizer",
    "StandardTokenizer",
    "WhitespaceTokenizer",
    "LetterTokenizer",
]
