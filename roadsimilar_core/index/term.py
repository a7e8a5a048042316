"""RoadSimilar Terms - Term Identity and Term Frequency Vectors.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Mapping, Tuple


@dataclass(frozen=True, order=True)
class Term:
    """A term in the index.

    Ordered by field, then text, which gives a total and deterministic
    order over term identities.

    Attributes:
        field: Field name
        text: Term text
    """

    field: str
    text: str

    def to_string(self) -> str:
        return f"{self.field}:{self.text}"

    def __str__(self) -> str:
        return self.to_string()


@dataclass
class TermFreqVector:
    """Per-document, per-field list of terms with their frequencies.

    Attributes:
        field: Field name
        terms: Term texts, sorted
        frequencies: Frequency of each term, parallel to terms
    """

    field: str
    terms: List[str] = field(default_factory=list)
    frequencies: List[int] = field(default_factory=list)

    def __post_init__(self):
        if len(self.terms) != len(self.frequencies):
            raise ValueError("terms and frequencies must have the same length")

    @classmethod
    def from_counts(cls, field_name: str, counts: Mapping[str, int]) -> "TermFreqVector":
        """Build a vector from a term -> count mapping."""
        terms = sorted(counts)
        return cls(field=field_name, terms=terms, frequencies=[counts[t] for t in terms])

    @property
    def size(self) -> int:
        return len(self.terms)

    def __len__(self) -> int:
        return len(self.terms)

    def __iter__(self) -> Iterator[Tuple[str, int]]:
        return zip(self.terms, self.frequencies)

    def to_dict(self) -> Dict[str, int]:
        return dict(zip(self.terms, self.frequencies))


__all__ = ["Term", "TermFreqVector"]
