"""
Scheduling module for PairRank.

Spanning-tree seeding, skip replacement and least-linked-first adaptive
questioning.
"""

from pairrank.scheduling.scheduler import (
    QuestionScheduler,
    ScheduleResult,
)
from pairrank.scheduling.replacement import (
    find_replacement_pair,
    replacement_candidates,
    split_components,
)
from pairrank.scheduling.self_comparison import collect_self_comparisons

__all__ = [
    "QuestionScheduler",
    "ScheduleResult",
    "find_replacement_pair",
    "replacement_candidates",
    "split_components",
    "collect_self_comparisons",
]
