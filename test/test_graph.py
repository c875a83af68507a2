"""
Unit tests for pairrank/graph/ modules.

Tests:
- union_find.py: Disjoint sets
- comparison_graph.py: Answered / skipped / upcoming bookkeeping
"""

import pytest


# =============================================================================
# UnionFind Tests (GRAPH-001 to GRAPH-004)
# =============================================================================

class TestUnionFind:
    """Test UnionFind."""

    def test_initial_state(self):
        """GRAPH-001: Every element starts alone."""
        from pairrank.graph.union_find import UnionFind

        uf = UnionFind(4)
        assert uf.component_count == 4
        assert uf.groups() == [[0], [1], [2], [3]]
        assert not uf.connected(0, 1)

    def test_union(self):
        """GRAPH-002: Union merges sets once."""
        from pairrank.graph.union_find import UnionFind

        uf = UnionFind(5)
        assert uf.union(0, 1) is True
        assert uf.union(1, 0) is False
        uf.union(3, 4)
        uf.union(4, 1)

        assert uf.component_count == 2
        assert uf.groups() == [[0, 1, 3, 4], [2]]
        assert uf.members(3) == [0, 1, 3, 4]
        assert uf.connected(0, 3)

    def test_path_compression(self):
        """GRAPH-003: find() points nodes at the root directly."""
        from pairrank.graph.union_find import UnionFind

        uf = UnionFind(4)
        # Build a chain 3 -> 2 -> 1 -> 0 by hand
        uf._parent = [0, 0, 1, 2]
        root = uf.find(3)

        assert root == 0
        assert uf._parent == [0, 0, 0, 0]

    def test_negative_size(self):
        """GRAPH-004: Size must be non-negative."""
        from pairrank.graph.union_find import UnionFind

        with pytest.raises(ValueError):
            UnionFind(-1)


# =============================================================================
# ComparisonGraph Tests (GRAPH-010 to GRAPH-020)
# =============================================================================

class TestComparisonGraph:
    """Test ComparisonGraph."""

    def test_queue_is_lifo(self):
        """GRAPH-010: pop_upcoming takes the last enqueued pair."""
        from pairrank.core.types import Pair
        from pairrank.graph.comparison_graph import ComparisonGraph

        graph = ComparisonGraph(4)
        graph.enqueue(Pair(0, 1))
        graph.enqueue(Pair(2, 3))
        assert graph.pop_upcoming() == Pair(2, 3)
        assert graph.upcoming == (Pair(0, 1),)

        graph.pop_upcoming()
        assert not graph.has_upcoming()
        with pytest.raises(IndexError):
            graph.pop_upcoming()

    def test_mark_answered(self):
        """GRAPH-011: Answering moves a pair out of upcoming and counts connections."""
        from pairrank.core.types import Pair
        from pairrank.graph.comparison_graph import ComparisonGraph, ANSWERED

        graph = ComparisonGraph(3)
        graph.enqueue(Pair(0, 1))
        graph.mark_answered(Pair(1, 0))

        assert graph.upcoming == ()
        assert graph.status(Pair(0, 1)) == ANSWERED
        assert graph.connection_count(0) == 1
        assert graph.connection_count(1) == 1
        assert graph.connection_count(2) == 0

    def test_sets_stay_disjoint(self):
        """GRAPH-012: A pair can live in only one collection."""
        from pairrank.core.types import Pair
        from pairrank.graph.comparison_graph import ComparisonGraph

        graph = ComparisonGraph(3)
        graph.mark_skipped(Pair(0, 1))

        with pytest.raises(ValueError):
            graph.mark_answered(Pair(1, 0))
        with pytest.raises(ValueError):
            graph.enqueue(Pair(0, 1))
        with pytest.raises(ValueError):
            graph.mark_skipped(Pair(0, 1))

        graph.mark_answered(Pair(1, 2))
        with pytest.raises(ValueError):
            graph.mark_answered(Pair(2, 1))
        with pytest.raises(ValueError):
            graph.mark_skipped(Pair(2, 1))

        assert not (graph.answered & graph.skipped)

    def test_skipping_upcoming(self):
        """GRAPH-013: Skipping a pending pair removes it from the queue."""
        from pairrank.core.types import Pair
        from pairrank.graph.comparison_graph import ComparisonGraph

        graph = ComparisonGraph(3)
        graph.enqueue(Pair(0, 2))
        graph.mark_skipped(Pair(2, 0))
        assert graph.upcoming == ()
        assert graph.is_skipped(Pair(0, 2))

    def test_out_of_range(self):
        """GRAPH-014: Pairs must reference known entities."""
        from pairrank.core.types import Pair
        from pairrank.graph.comparison_graph import ComparisonGraph

        graph = ComparisonGraph(3)
        with pytest.raises(ValueError):
            graph.enqueue(Pair(0, 3))

    def test_components_include_upcoming(self):
        """GRAPH-015: Pending pairs count towards connectivity."""
        from pairrank.core.types import Pair
        from pairrank.graph.comparison_graph import ComparisonGraph

        graph = ComparisonGraph(5)
        graph.mark_answered(Pair(0, 1))
        graph.enqueue(Pair(1, 2))
        graph.mark_skipped(Pair(3, 4))

        assert graph.connected_components() == [[0, 1, 2], [3], [4]]
        assert not graph.is_connected()

        graph.enqueue(Pair(2, 3))
        graph.enqueue(Pair(4, 0))
        assert graph.connected_components() == [[0, 1, 2, 3, 4]]
        assert graph.is_connected()

    def test_link_count(self):
        """GRAPH-016: Link count is the integer mean of endpoint connections."""
        from pairrank.core.types import Pair
        from pairrank.graph.comparison_graph import ComparisonGraph

        graph = ComparisonGraph(4)
        graph.mark_answered(Pair(0, 1))
        graph.mark_answered(Pair(0, 2))
        graph.mark_answered(Pair(0, 3))

        assert graph.link_count(Pair(1, 2)) == 1
        assert graph.link_count(Pair(0, 1)) == 2
        assert graph.link_count(Pair(2, 3)) == 1
        assert graph.min_connection_count() == 1

    def test_remaining_pairs(self):
        """GRAPH-017: Remaining pairs exclude answered and skipped ones."""
        from pairrank.core.types import Pair
        from pairrank.graph.comparison_graph import ComparisonGraph

        graph = ComparisonGraph(4)
        graph.mark_answered(Pair(1, 0))
        graph.mark_skipped(Pair(3, 2))

        remaining = graph.remaining_pairs()
        assert len(remaining) == 4
        assert Pair(0, 1) not in remaining
        assert Pair(2, 3) not in remaining

    def test_trivial_sizes(self):
        """GRAPH-018: Zero or one entity is trivially connected."""
        from pairrank.graph.comparison_graph import ComparisonGraph

        assert ComparisonGraph(0).is_connected()
        assert ComparisonGraph(1).is_connected()
        assert ComparisonGraph(1).remaining_pairs() == []
