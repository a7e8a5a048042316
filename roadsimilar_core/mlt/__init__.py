"""RoadSimilar MoreLikeThis Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from roadsimilar_core.mlt.config import MoreLikeThisParams
from roadsimilar_core.mlt.noise import is_noise_word
from roadsimilar_core.mlt.frequencies import (
    FrequencyTable,
    TermFrequencyAccumulator,
    TextSource,
    count_terms,
)
from roadsimilar_core.mlt.selector import ScoredTerm, TermScoreQueue, TermSelector
from roadsimilar_core.mlt.builder import build_query, interesting_terms
from roadsimilar_core.mlt.more_like_this import MoreLikeThis

__all__ = [
    "MoreLikeThisParams",
    "is_noise_word",
    "FrequencyTable",
    "TermFrequencyAccumulator",
    "TextSource",
    "count_terms",
    "ScoredTerm",
    "TermScoreQueue",
    "TermSelector",
    "build_query",
    "interesting_terms",
    "MoreLikeThis",
]
