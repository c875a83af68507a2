"""
Comparison graph state for one ranking session.

Tracks which unordered entity pairs have been answered, skipped, or are
still pending, and answers connectivity questions over them. Pending
pairs count as edges for connectivity: they will eventually be asked.

Invariant: the answered, skipped and upcoming collections are pairwise
disjoint. Every mutation goes through this class and rejects moves that
would break that.
"""

import itertools
from typing import FrozenSet, Iterator, List, Optional, Tuple

from pairrank.core.types import Pair
from pairrank.graph.union_find import UnionFind


ANSWERED = "answered"
SKIPPED = "skipped"
UPCOMING = "upcoming"


class ComparisonGraph:
    """
    Answered / skipped / upcoming pair sets over `size` entities.

    The upcoming pairs form a work queue; `pop_upcoming` takes from the
    end (the queue is shuffled when built, so LIFO order is as good as any).
    """

    def __init__(self, size: int):
        if size < 0:
            raise ValueError("Entity count must be non-negative")
        self.size = size
        self._answered: set = set()
        self._skipped: set = set()
        self._upcoming: List[Pair] = []
        self._connections = [0] * size

    # =========================================================================
    # State views
    # =========================================================================

    @property
    def answered(self) -> FrozenSet[Pair]:
        return frozenset(self._answered)

    @property
    def skipped(self) -> FrozenSet[Pair]:
        return frozenset(self._skipped)

    @property
    def upcoming(self) -> Tuple[Pair, ...]:
        return tuple(self._upcoming)

    def has_upcoming(self) -> bool:
        return bool(self._upcoming)

    def status(self, pair: Pair) -> Optional[str]:
        """Which collection holds `pair` (either orientation), or None."""
        if pair in self._answered:
            return ANSWERED
        if pair in self._skipped:
            return SKIPPED
        if pair in self._upcoming:
            return UPCOMING
        return None

    def is_skipped(self, pair: Pair) -> bool:
        return pair in self._skipped

    def is_known(self, pair: Pair) -> bool:
        return self.status(pair) is not None

    # =========================================================================
    # Mutations
    # =========================================================================

    def enqueue(self, pair: Pair) -> None:
        """Append a new pair to the upcoming queue."""
        self._check_pair(pair)
        current = self.status(pair)
        if current is not None:
            raise ValueError(f"{pair!r} is already {current}")
        self._upcoming.append(pair)

    def pop_upcoming(self) -> Pair:
        """Remove and return the next pending pair."""
        if not self._upcoming:
            raise IndexError("No upcoming pairs")
        return self._upcoming.pop()

    def mark_answered(self, pair: Pair) -> None:
        self._check_pair(pair)
        if pair in self._answered or pair in self._skipped:
            raise ValueError(f"{pair!r} is already {self.status(pair)}")
        self._discard_upcoming(pair)
        self._answered.add(pair)
        self._connections[pair.first] += 1
        self._connections[pair.second] += 1

    def mark_skipped(self, pair: Pair) -> None:
        self._check_pair(pair)
        if pair in self._answered or pair in self._skipped:
            raise ValueError(f"{pair!r} is already {self.status(pair)}")
        self._discard_upcoming(pair)
        self._skipped.add(pair)

    # =========================================================================
    # Queries
    # =========================================================================

    def connection_count(self, entity: int) -> int:
        """Number of answered pairs touching `entity`."""
        return self._connections[entity]

    def link_count(self, pair: Pair) -> int:
        """Mean answered-connection count of the pair's endpoints (integer division)."""
        return (self._connections[pair.first] + self._connections[pair.second]) // 2

    def min_connection_count(self) -> int:
        return min(self._connections) if self._connections else 0

    def linked_edges(self) -> Iterator[Pair]:
        """Pairs that count towards connectivity: answered and upcoming."""
        yield from self._answered
        yield from self._upcoming

    def union_find(self) -> UnionFind:
        return UnionFind.from_edges(self.size, self.linked_edges())

    def connected_components(self) -> List[List[int]]:
        """Partition of entity indices reachable through answered or upcoming pairs."""
        return self.union_find().groups()

    def is_connected(self) -> bool:
        return self.size <= 1 or self.union_find().component_count == 1

    def remaining_pairs(self) -> List[Pair]:
        """Every pair neither answered nor skipped, in index order."""
        return [
            Pair(a, b)
            for a, b in itertools.combinations(range(self.size), 2)
            if Pair(a, b) not in self._answered and Pair(a, b) not in self._skipped
        ]

    # =========================================================================
    # Internals
    # =========================================================================

    def _check_pair(self, pair: Pair) -> None:
        if pair.first >= self.size or pair.second >= self.size:
            raise ValueError(f"{pair!r} is out of range for {self.size} entities")

    def _discard_upcoming(self, pair: Pair) -> None:
        if pair in self._upcoming:
            self._upcoming.remove(pair)

    def __repr__(self) -> str:
        return (
            f"ComparisonGraph(size={self.size}, answered={len(self._answered)}, "
            f"skipped={len(self._skipped)}, upcoming={len(self._upcoming)})"
        )
