"""
Non-interactive collectors: scripted answers and ground-truth simulation.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from pairrank.collectors.base import ResponseCollector
from pairrank.core.constants import ATTACK, DEFENSE
from pairrank.core.types import Entity, Response

logger = logging.getLogger(__name__)


class _QuestionLog:
    """Shared bookkeeping: every question asked and the quit budget."""

    def __init__(self, quit_after: Optional[int] = None):
        self.quit_after = quit_after
        self.asked: List[Tuple[str, ...]] = []

    def _log(self, *question: str) -> bool:
        """Record a question; True if the quit budget is used up."""
        self.asked.append(question)
        return self.quit_after is not None and len(self.asked) > self.quit_after


def _pair_keys(pairs: Iterable[Iterable[str]]) -> set:
    return {frozenset(p) for p in pairs}


class ScriptedResponseCollector(_QuestionLog, ResponseCollector):
    """
    Answers from a fixed table of ratios, keyed by entity names.

    Keys may be `(a, b)` or `(a, b, attribute)`; attribute-specific keys
    win. A pair found only in the reverse orientation answers `1 / ratio`.
    Pairs with no entry, and pairs listed in `skips`, are skipped.

    Example:
        >>> collector = ScriptedResponseCollector({("A", "B"): 2.0})
        >>> collector.get_response(Entity(0, "B"), Entity(1, "A")).ratio
        0.5
    """

    def __init__(
        self,
        ratios: Mapping[Tuple[str, ...], float],
        self_ratios: Optional[Mapping[str, float]] = None,
        skips: Iterable[Iterable[str]] = (),
        quits: Iterable[Iterable[str]] = (),
        quit_after: Optional[int] = None
    ):
        super().__init__(quit_after)
        self.ratios = dict(ratios)
        self.self_ratios = dict(self_ratios or {})
        self.skips = _pair_keys(skips)
        self.quits = _pair_keys(quits)

    def lookup(self, a: str, b: str, attribute: Optional[str] = None) -> Optional[float]:
        """Ratio for a vs b, trying the attribute-specific key first."""
        for key_a, key_b, invert in ((a, b, False), (b, a, True)):
            for key in ((key_a, key_b, attribute), (key_a, key_b)):
                if key in self.ratios:
                    ratio = self.ratios[key]
                    return 1.0 / ratio if invert else ratio
        return None

    def get_response(
        self,
        entity_a: Entity,
        entity_b: Entity,
        attribute: Optional[str] = None
    ) -> Response:
        exhausted = self._log(entity_a.name, entity_b.name, attribute or "")
        key = frozenset((entity_a.name, entity_b.name))
        if exhausted or key in self.quits:
            return Response.quit()
        if key in self.skips:
            return Response.skip()

        ratio = self.lookup(entity_a.name, entity_b.name, attribute)
        if ratio is None:
            logger.debug(f"No scripted ratio for {entity_a.name} vs {entity_b.name}")
            return Response.skip()
        return Response.value(ratio)

    def get_self_response(
        self,
        entity: Entity,
        primary: str = ATTACK,
        secondary: str = DEFENSE
    ) -> Response:
        if self._log(entity.name):
            return Response.quit()
        ratio = self.self_ratios.get(entity.name)
        return Response.skip() if ratio is None else Response.value(ratio)


class GroundTruthCollector(_QuestionLog, ResponseCollector):
    """
    Answers `r[a] / r[b]` from known true ratings.

    `ratings` maps a name either to a single value or to a mapping of
    attribute -> value.
    """

    def __init__(
        self,
        ratings: Mapping[str, Union[float, Mapping[str, float]]],
        skip_pairs: Iterable[Iterable[str]] = (),
        skip_self: Iterable[str] = (),
        quit_after: Optional[int] = None
    ):
        super().__init__(quit_after)
        self.ratings = dict(ratings)
        self.skip_pairs = _pair_keys(skip_pairs)
        self.skip_self = set(skip_self)

    def rating(self, name: str, attribute: Optional[str] = None) -> float:
        value = self.ratings[name]
        if isinstance(value, Mapping):
            return float(value[attribute])
        return float(value)

    def get_response(
        self,
        entity_a: Entity,
        entity_b: Entity,
        attribute: Optional[str] = None
    ) -> Response:
        if self._log(entity_a.name, entity_b.name, attribute or ""):
            return Response.quit()
        if frozenset((entity_a.name, entity_b.name)) in self.skip_pairs:
            return Response.skip()
        return Response.value(
            self.rating(entity_a.name, attribute) / self.rating(entity_b.name, attribute)
        )

    def get_self_response(
        self,
        entity: Entity,
        primary: str = ATTACK,
        secondary: str = DEFENSE
    ) -> Response:
        if self._log(entity.name):
            return Response.quit()
        if entity.name in self.skip_self:
            return Response.skip()
        return Response.value(
            self.rating(entity.name, primary) / self.rating(entity.name, secondary)
        )
