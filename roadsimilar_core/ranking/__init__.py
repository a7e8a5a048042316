"""RoadSimilar Ranking Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from roadsimilar_core.ranking.similarity import (
    Similarity,
    DefaultSimilarity,
    BM25Similarity,
    FunctionSimilarity,
)

__all__ = ["Similarity", "DefaultSimilarity", "BM25Similarity", "FunctionSimilarity"]
