"""
Response collector interface.

The scheduler only needs a way to obtain one answer for one question; how
that answer is produced (a person at a terminal, a replayed script, a
simulation) is up to the collector.
"""

from abc import ABC, abstractmethod
from typing import Optional

from pairrank.core.constants import ATTACK, DEFENSE
from pairrank.core.types import Entity, Response


class ResponseCollector(ABC):
    """Source of comparison answers."""

    @abstractmethod
    def get_response(
        self,
        entity_a: Entity,
        entity_b: Entity,
        attribute: Optional[str] = None
    ) -> Response:
        """
        Ask how many times better `entity_a` is than `entity_b`.

        Returns:
            Response.value(ratio), Response.skip() or Response.quit()
        """

    def get_self_response(
        self,
        entity: Entity,
        primary: str = ATTACK,
        secondary: str = DEFENSE
    ) -> Response:
        """
        Ask how many times better the entity's `primary` is than its `secondary`.

        Optional capability: only attack/defense sessions ask it, so
        collectors used for single-attribute rankings need not override it.

        Raises:
            NotImplementedError: If the collector cannot answer self-comparisons
        """
        raise NotImplementedError(f"{type(self).__name__} does not support self-comparisons")
