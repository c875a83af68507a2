"""
Graph module for PairRank.

Comparison-graph bookkeeping and connectivity queries.
"""

from pairrank.graph.union_find import UnionFind
from pairrank.graph.comparison_graph import ComparisonGraph

__all__ = [
    "UnionFind",
    "ComparisonGraph",
]
