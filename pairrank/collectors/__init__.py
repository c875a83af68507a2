"""
Response collectors for PairRank.

The scheduler consumes a single capability, "obtain a response for a given
pair"; these are the ready-made implementations of it.
"""

from pairrank.collectors.base import ResponseCollector
from pairrank.collectors.scripted import ScriptedResponseCollector, GroundTruthCollector
from pairrank.collectors.console import ConsoleResponseCollector

__all__ = [
    "ResponseCollector",
    "ScriptedResponseCollector",
    "GroundTruthCollector",
    "ConsoleResponseCollector",
]
