"""
Core module for PairRank.

Data model, constants and the error taxonomy shared by scheduling and
solving.
"""

from pairrank.core.types import (
    Entity,
    Pair,
    Observation,
    Response,
    ResponseKind,
    RatingVector,
)
from pairrank.core.exceptions import (
    PairRankError,
    ScheduleExhaustedError,
    AbortedBySpanningQuit,
    SingularSystemError,
)
from pairrank.core.constants import (
    DEFAULT_ATTRIBUTE,
    ATTACK,
    DEFENSE,
    GOALKEEPING,
    confidence_label,
)

__all__ = [
    # Types
    "Entity",
    "Pair",
    "Observation",
    "Response",
    "ResponseKind",
    "RatingVector",
    # Errors
    "PairRankError",
    "ScheduleExhaustedError",
    "AbortedBySpanningQuit",
    "SingularSystemError",
    # Constants
    "DEFAULT_ATTRIBUTE",
    "ATTACK",
    "DEFENSE",
    "GOALKEEPING",
    "confidence_label",
]
