"""
Ordinary least-squares solve of the ratings system via normal equations.

    x = (AᵀA)⁻¹ Aᵀb

AᵀA is symmetric positive semi-definite, and positive definite exactly
when the comparison graph is connected and anchored, so Cholesky is the
first choice. A general symmetric solve is used if the factorization
fails on round-off. Rank deficiency is reported as SingularSystemError
and never papered over.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
from scipy import linalg

from pairrank.config.params.models import SolverParams
from pairrank.core.exceptions import SingularSystemError
from pairrank.ranking.linear_system import LinearSystem

logger = logging.getLogger(__name__)


@dataclass
class SolverResult:
    """Solution of one linear system."""
    solution: np.ndarray       # Normalized unknowns, anchor column == 1
    residual_norm: float       # ‖A x - b‖ before normalization
    rank: int                  # Rank of A
    method: str                # Method that produced the solution


class LeastSquaresSolver:
    """
    Normal-equations solver with anchor re-normalization.
    """

    def __init__(self, params: Optional[SolverParams] = None):
        self.params = params or SolverParams()

    def solve(self, system: LinearSystem) -> np.ndarray:
        """
        Solve and normalize.

        Returns:
            Unknown vector with `x[system.anchor_column] == 1`

        Raises:
            SingularSystemError: If AᵀA is not invertible
        """
        return self.solve_with_details(system).solution

    def solve_with_details(self, system: LinearSystem) -> SolverResult:
        A, b = system.A, system.b
        size = system.unknowns
        logger.debug(f"Solving {A.shape[0]}x{size} system")

        rank = int(np.linalg.matrix_rank(A, tol=self.params.rank_tolerance))
        if rank < size:
            logger.error(f"Rank-deficient system: rank {rank} for {size} unknowns")
            raise SingularSystemError(rank, size)

        ata = A.T @ A
        atb = A.T @ b

        method = self.params.method
        x = None
        if method == "cholesky":
            try:
                factor = linalg.cho_factor(ata)
                x = linalg.cho_solve(factor, atb)
            except linalg.LinAlgError as e:
                logger.warning(f"Cholesky factorization failed ({e}); using general solver")
                method = "general"

        if x is None:
            try:
                x = linalg.solve(ata, atb, assume_a="sym")
            except linalg.LinAlgError as e:
                raise SingularSystemError(rank, size, str(e)) from e

        if not np.all(np.isfinite(x)):
            raise SingularSystemError(rank, size, "solution is not finite")

        residual_norm = float(np.linalg.norm(system.residuals(x)))

        if self.params.renormalize:
            x = self.normalize(x, system.anchor_column, rank)

        return SolverResult(
            solution=x,
            residual_norm=residual_norm,
            rank=rank,
            method=method,
        )

    @staticmethod
    def normalize(x: np.ndarray, anchor_column: int, rank: int = 0) -> np.ndarray:
        """Divide every component by the anchor's own value."""
        anchor_value = x[anchor_column]
        if anchor_value == 0 or not np.isfinite(anchor_value):
            raise SingularSystemError(
                rank or len(x), len(x), f"anchor value {anchor_value} cannot be normalized"
            )
        return x / anchor_value


def solve_system(system: LinearSystem, params: Optional[SolverParams] = None) -> np.ndarray:
    """
    Convenience function to solve a system with default parameters.

    Args:
        system: Finalized linear system
        params: Optional solver parameters

    Returns:
        Normalized solution vector
    """
    return LeastSquaresSolver(params).solve(system)
