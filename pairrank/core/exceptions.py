"""
Exception taxonomy for PairRank.

All fatal conditions abort the whole ranking session; none of them carries
a partial rating vector. Early termination during the adaptive phase is not
an error and is reported on the schedule result instead.
"""

from typing import Optional

from pairrank.core.types import Pair


class PairRankError(Exception):
    """Base class for fatal ranking-session errors."""


class ScheduleExhaustedError(PairRankError):
    """Raised when a skip leaves no pair that can restore connectivity."""

    def __init__(self, pair: Optional[Pair] = None, phase: str = "spanning", detail: str = ""):
        self.pair = pair
        self.phase = phase
        message = f"No replacement comparison available during the {phase} phase"
        if pair is not None:
            message += f" after skipping {pair!r}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class AbortedBySpanningQuit(PairRankError):
    """Raised when the user quits before the comparison graph is connected."""

    def __init__(self, phase: str = "spanning", answered: int = 0):
        self.phase = phase
        self.answered = answered
        super().__init__(
            f"Session quit during the {phase} phase after {answered} answers; "
            f"ratings cannot be computed from a disconnected comparison graph"
        )


class SingularSystemError(PairRankError):
    """Raised when the normal equations AᵀA x = Aᵀb have no unique solution."""

    def __init__(self, rank: int, size: int, detail: str = ""):
        self.rank = rank
        self.size = size
        message = f"Normal equations are singular (rank {rank} < {size} unknowns)"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
