"""
Storage module for PairRank.

Roster files in, rating tables out.
"""

from pairrank.storage.roster import (
    RosterStore,
    build_entities,
    result_rows,
    result_header,
)

__all__ = [
    "RosterStore",
    "build_entities",
    "result_rows",
    "result_header",
]
