"""RoadSimilar Analysis Base - Tokens, Streams and Analyzers.

An analyzer turns a field value into a lazy sequence of terms. Term
mining reads at most a bounded number of tokens per field, so every
stage of the pipeline is a generator and nothing is analyzed ahead of
the consumer.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Type


@dataclass
class Token:
    """A term produced by a tokenizer.

    Attributes:
        text: Term text
        position: Ordinal of the token in its field value
        start_offset: Offset of the first character in the value
        end_offset: Offset just past the last character
    """

    text: str
    position: int = 0
    start_offset: int = 0
    end_offset: int = 0


class TokenStream:
    """Single-pass iterator over tokens.

    Filters wrap the stream instead of materializing it, so a consumer
    that stops early never pays for the rest of the text.
    """

    def __init__(self, tokens: Iterable[Token] = ()):
        self._it: Iterator[Token] = iter(tokens)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        return next(self._it)

    def filter(self, keep: Callable[[Token], bool]) -> "TokenStream":
        return TokenStream(token for token in self._it if keep(token))

    def map(self, func: Callable[[Token], Token]) -> "TokenStream":
        return TokenStream(func(token) for token in self._it)

    def texts(self) -> Iterator[str]:
        return (token.text for token in self._it)

    def to_list(self) -> List[Token]:
        return list(self._it)


class Tokenizer(ABC):
    """Splits a field value into tokens."""

    @abstractmethod
    def tokenize(self, text: str) -> TokenStream:
        pass


class TokenFilter(ABC):
    """Rewrites or drops tokens of a stream."""

    @abstractmethod
    def apply(self, stream: TokenStream) -> TokenStream:
        pass


class Analyzer:
    """A tokenizer followed by a chain of token filters.

    Subclasses either configure the chain through __init__ or override
    analyze() altogether. Without a tokenizer, text is split on runs of
    whitespace.
    """

    def __init__(
        self,
        tokenizer: Optional[Tokenizer] = None,
        filters: Sequence[TokenFilter] = (),
    ):
        self.tokenizer = tokenizer
        self.filters = list(filters)

    def analyze(self, text: str) -> TokenStream:
        if self.tokenizer is None:
            stream = TokenStream(
                Token(word, position)
                for position, word in enumerate(text.split())
            )
        else:
            stream = self.tokenizer.tokenize(text)
        for token_filter in self.filters:
            stream = token_filter.apply(stream)
        return stream

    def token_stream(self, field_name: str, text: str) -> Iterator[str]:
        """Terms of one field value, produced lazily.

        field_name is unused here; PerFieldAnalyzer dispatches on it.
        """
        return self.analyze(text).texts()

    def get_terms(self, text: str) -> List[str]:
        return list(self.analyze(text).texts())


_ANALYZERS: Dict[str, Type[Analyzer]] = {}


def register_analyzer(name: str) -> Callable[[Type[Analyzer]], Type[Analyzer]]:
    """Class decorator making an analyzer available by name."""
    def decorator(cls: Type[Analyzer]) -> Type[Analyzer]:
        _ANALYZERS[name] = cls
        return cls
    return decorator


def get_analyzer(name: str) -> Optional[Analyzer]:
    """New default-configured analyzer registered under name, or None."""
    cls = _ANALYZERS.get(name)
    return cls() if cls is not None else None


def list_analyzers() -> List[str]:
    return sorted(_ANALYZERS)


__all__ = [
    "Token",
    "TokenStream",
    "Tokenizer",
    "TokenFilter",
    "Analyzer",
    "register_analyzer",
    "get_analyzer",
    "list_analyzers",
]
