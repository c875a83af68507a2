"""
Linear system assembly from pairwise ratio observations.

Unknowns are laid out dimension-major: column `d * N + i` holds the rating
of entity `i` on dimension `d`. An observation "left is ratio times
right" becomes the row

    x[left] - ratio * x[right] = 0

and a single anchor row x[anchor] = 1 removes the scale ambiguity that
every homogeneous row leaves open.

Rows are written into a pre-sized buffer (upper bound: every pair on every
dimension, one self-comparison per entity for each extra dimension, plus
the anchor), which grows by doubling if a caller exceeds it.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import numpy as np

from pairrank.core.constants import ANCHOR_VALUE
from pairrank.core.types import Observation


@dataclass(frozen=True)
class LinearSystem:
    """Finalized system A x ≈ b."""
    A: np.ndarray
    b: np.ndarray
    entity_count: int
    dimension_count: int
    anchor_column: int

    @property
    def shape(self) -> Tuple[int, int]:
        return self.A.shape

    @property
    def unknowns(self) -> int:
        return self.A.shape[1]

    def column(self, entity: int, dimension: int = 0) -> int:
        return dimension * self.entity_count + entity

    def residuals(self, x: np.ndarray) -> np.ndarray:
        """A x - b for a candidate solution."""
        return self.A @ x - self.b


def capacity_for(entity_count: int, dimension_count: int = 1) -> int:
    """Largest row count a full session can produce."""
    pair_rows = dimension_count * entity_count * (entity_count - 1) // 2
    self_rows = entity_count * (dimension_count - 1)
    return pair_rows + self_rows + 1


class LinearSystemBuilder:
    """
    Append-only row builder for the ratings system.

    Example:
        >>> builder = LinearSystemBuilder(entity_count=2)
        >>> builder.add_observation(Observation(0, 1, 2.0))
        >>> builder.set_anchor(1)
        >>> system = builder.build()
        >>> system.A.tolist()
        [[1.0, -2.0], [0.0, 1.0]]
    """

    def __init__(
        self,
        entity_count: int,
        dimension_count: int = 1,
        capacity: Optional[int] = None
    ):
        if entity_count < 1:
            raise ValueError("Need at least one entity to build a system")
        if dimension_count < 1:
            raise ValueError("Need at least one dimension")

        self.entity_count = entity_count
        self.dimension_count = dimension_count
        self.columns = entity_count * dimension_count

        capacity = capacity if capacity is not None else capacity_for(entity_count, dimension_count)
        self._A = np.zeros((max(capacity, 1), self.columns), dtype=float)
        self._b = np.zeros(max(capacity, 1), dtype=float)
        self._rows = 0
        self._anchor: Optional[Tuple[int, int]] = None

    def __len__(self) -> int:
        """Observation rows added so far (the anchor row is added at build time)."""
        return self._rows

    def column(self, entity: int, dimension: int = 0) -> int:
        if not 0 <= entity < self.entity_count:
            raise ValueError(f"Entity index {entity} out of range for {self.entity_count} entities")
        if not 0 <= dimension < self.dimension_count:
            raise ValueError(f"Dimension {dimension} out of range for {self.dimension_count} dimensions")
        return dimension * self.entity_count + entity

    def add_observation(self, observation: Observation) -> None:
        """Append the row `x[left] - ratio * x[right] = 0`."""
        left = self.column(observation.left, observation.left_dimension)
        right = self.column(observation.right, observation.right_dimension)
        row = self._next_row()
        self._A[row, left] = 1.0
        self._A[row, right] = -observation.ratio

    def add_observations(self, observations: Iterable[Observation]) -> None:
        for observation in observations:
            self.add_observation(observation)

    def set_anchor(self, entity: int, dimension: int = 0) -> None:
        """Choose the reference unknown fixed to 1."""
        if self._anchor is not None:
            raise ValueError("Anchor already set")
        self.column(entity, dimension)
        self._anchor = (entity, dimension)

    def build(self) -> LinearSystem:
        """Copy the filled rows plus the anchor row into a fixed-size system."""
        if self._anchor is None:
            raise ValueError("Anchor must be set before building the system")

        anchor_column = self.column(*self._anchor)
        rows = self._rows + 1

        A = np.zeros((rows, self.columns), dtype=float)
        b = np.zeros(rows, dtype=float)
        A[:self._rows] = self._A[:self._rows]
        b[:self._rows] = self._b[:self._rows]
        A[-1, anchor_column] = 1.0
        b[-1] = ANCHOR_VALUE

        return LinearSystem(
            A=A,
            b=b,
            entity_count=self.entity_count,
            dimension_count=self.dimension_count,
            anchor_column=anchor_column,
        )

    def _next_row(self) -> int:
        if self._rows == self._A.shape[0]:
            grown = self._A.shape[0] * 2
            self._A = np.vstack([self._A, np.zeros((grown - self._A.shape[0], self.columns))])
            self._b = np.concatenate([self._b, np.zeros(grown - self._b.shape[0])])
        row = self._rows
        self._rows += 1
        return row


def build_system(
    entity_count: int,
    observations: Iterable[Observation],
    anchor: int,
    dimension_count: int = 1,
    anchor_dimension: int = 0
) -> LinearSystem:
    """Convenience wrapper: observations plus anchor in one call."""
    builder = LinearSystemBuilder(entity_count, dimension_count)
    builder.add_observations(observations)
    builder.set_anchor(anchor, anchor_dimension)
    return builder.build()
