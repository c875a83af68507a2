"""
Ranking module for PairRank.

Builds the ratio system from observations, solves it by least squares and
exposes the end-to-end ranking pipeline.
"""

from pairrank.ranking.linear_system import (
    LinearSystem,
    LinearSystemBuilder,
    build_system,
    capacity_for,
)
from pairrank.ranking.least_squares import (
    LeastSquaresSolver,
    SolverResult,
    solve_system,
)
from pairrank.ranking.pipeline import (
    RankingPipeline,
    compute_ratings,
)

__all__ = [
    # Linear system
    "LinearSystem",
    "LinearSystemBuilder",
    "build_system",
    "capacity_for",
    # Solver
    "LeastSquaresSolver",
    "SolverResult",
    "solve_system",
    # Pipeline
    "RankingPipeline",
    "compute_ratings",
]
