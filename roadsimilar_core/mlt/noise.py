"""RoadSimilar Noise Words.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from roadsimilar_core.mlt.config import MoreLikeThisParams


def is_noise_word(term: str, params: MoreLikeThisParams) -> bool:
    """Whether a term should be ignored for "more like this" purposes.

    A term is noise when it is shorter than min_word_len or longer than
    max_word_len (each bound only when positive), or is a stop word.
    """
    length = len(term)
    if params.min_word_len > 0 and length < params.min_word_len:
        return True
    if params.max_word_len > 0 and length > params.max_word_len:
        return True
    return term in params.stop_words


__all__ = ["is_noise_word"]
