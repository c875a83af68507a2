"""
PairRank - Adaptive pairwise-ratio rating

Infers a scalar rating per entity from "A is r times better than B"
answers, asking as few questions as possible while keeping the resulting
least-squares system solvable.

Key Features:
- Spanning-tree seeding so every entity is linked from the start
- Skip replacement that preserves connectivity
- Least-linked-first adaptive questioning
- Normal-equation least squares anchored on a reference entity
- Multi-attribute (attack/defense) and goalie rankings
"""

__version__ = "0.1.0"
__author__ = "PairRank Team"

from pairrank.core.types import Entity, Pair, Observation, Response, RatingVector
from pairrank.core.exceptions import (
    PairRankError,
    ScheduleExhaustedError,
    AbortedBySpanningQuit,
    SingularSystemError,
)
from pairrank.ranking.pipeline import RankingPipeline, compute_ratings

__all__ = [
    # Core
    "Entity",
    "Pair",
    "Observation",
    "Response",
    "RatingVector",
    # Errors
    "PairRankError",
    "ScheduleExhaustedError",
    "AbortedBySpanningQuit",
    "SingularSystemError",
    # Pipeline
    "RankingPipeline",
    "compute_ratings",
]
