"""
Skip replacement for the spanning phase.

When a spanning pair is skipped, the answered and upcoming pairs that
remain split the entities into the two components the skipped pair would
have joined. Any pair across those two components that is not already
known restores the spanning property; one is picked uniformly at random.
"""

import logging
import random
from typing import List, Optional

from pairrank.core.types import Pair
from pairrank.graph.comparison_graph import ComparisonGraph

logger = logging.getLogger(__name__)


def split_components(graph: ComparisonGraph, pair: Pair):
    """
    Components containing each endpoint of `pair`, ignoring `pair` itself.

    Returns:
        Tuple of (left, right) entity index lists; they are the same list
        when the endpoints are still linked without `pair`
    """
    uf = graph.union_find()
    return uf.members(pair.first), uf.members(pair.second)


def replacement_candidates(graph: ComparisonGraph, pair: Pair) -> List[Pair]:
    """
    Every pair bridging the two components separated by skipping `pair`.

    Pairs already answered, skipped or queued (in either orientation) are
    excluded.

    Raises:
        ValueError: If the endpoints of `pair` are still linked, in which
            case no replacement is needed
    """
    left, right = split_components(graph, pair)
    if pair.second in left:
        raise ValueError(f"{pair!r} endpoints are still linked; nothing to replace")

    return [
        Pair(l, r)
        for l in left
        for r in right
        if not graph.is_known(Pair(l, r))
    ]


def find_replacement_pair(
    graph: ComparisonGraph,
    pair: Pair,
    rng: Optional[random.Random] = None
) -> Optional[Pair]:
    """
    Pick a pair that reconnects the graph after `pair` was skipped.

    Args:
        graph: Graph with `pair` already marked skipped
        pair: The skipped pair
        rng: Random source (module-level random if None)

    Returns:
        A replacement pair, or None when every bridging pair has been skipped
    """
    rng = rng or random
    candidates = replacement_candidates(graph, pair)
    logger.debug(f"{len(candidates)} replacement candidates for skipped {pair!r}")
    if not candidates:
        return None
    return rng.choice(candidates)
