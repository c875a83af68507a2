"""
Adaptive question scheduling over one rated attribute.

Two phases:

1. Spanning phase. Entities are shuffled and chained into N-1 pairs
   forming a spanning tree; the pair list is shuffled again so asking
   order is decoupled from entity order. Every pair must be answered or,
   when skipped, replaced by a pair bridging the two components the skip
   separated. A quit here is fatal.

2. Adaptive fill phase. Repeatedly ask the remaining pair whose
   endpoints have the fewest answered comparisons (link count =
   (connections(a) + connections(b)) // 2), ties broken by a shuffled
   order fixed at the start of the phase. Skips are simply recorded; a
   quit ends the phase with the observations gathered so far.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from pairrank.core.constants import (
    ADAPTIVE_PHASE,
    DEFAULT_ATTRIBUTE,
    SPANNING_PHASE,
    confidence_label,
)
from pairrank.core.exceptions import AbortedBySpanningQuit, ScheduleExhaustedError
from pairrank.core.types import Entity, Observation, Pair, Response
from pairrank.config.params.models import SchedulerParams
from pairrank.graph.comparison_graph import ComparisonGraph
from pairrank.scheduling.replacement import find_replacement_pair

logger = logging.getLogger(__name__)


@dataclass
class ScheduleResult:
    """Outcome of scheduling one attribute."""
    attribute: str
    observations: List[Observation]
    answered: int
    skipped: int
    questions_asked: int
    min_link_count: int
    confidence_levels: List[int] = field(default_factory=list)
    terminated_early: bool = False
    fully_linked: bool = False


class QuestionScheduler:
    """
    Chooses which pairs to ask, reacting to skips and quits.

    The scheduler owns a fresh ComparisonGraph for its session. Responses
    come from a collector exposing `get_response(entity_a, entity_b,
    attribute)`.
    """

    def __init__(
        self,
        entities: Sequence[Entity],
        collector,
        attribute: str = DEFAULT_ATTRIBUTE,
        dimension: int = 0,
        rng: Optional[random.Random] = None,
        params: Optional[SchedulerParams] = None,
        on_confidence: Optional[Callable[[int, str], None]] = None
    ):
        """
        Initialize the scheduler.

        Args:
            entities: Entities to compare; position in this sequence is the
                index used by pairs and observations
            collector: Response collector
            attribute: Name of the attribute being compared
            dimension: Dimension index recorded on observations
            rng: Random source; pass a seeded instance for reproducible runs
            params: Scheduling parameters (defaults if None)
            on_confidence: Called with (link_count, label) whenever the
                minimum link count changes in the adaptive phase
        """
        self.entities = list(entities)
        self.collector = collector
        self.attribute = attribute
        self.dimension = dimension
        self.rng = rng or random.Random()
        self.params = params or SchedulerParams()
        self.on_confidence = on_confidence

        self.graph = ComparisonGraph(len(self.entities))
        self.observations: List[Observation] = []
        self.questions_asked = 0
        self.confidence_levels: List[int] = []
        self.terminated_early = False
        self.fully_linked = False
        self._spanning_done = False

    # =========================================================================
    # Spanning phase
    # =========================================================================

    def build_spanning_pairs(self) -> List[Pair]:
        """Chain a shuffled entity order into N-1 pairs, then shuffle the pairs."""
        order = list(range(len(self.entities)))
        self.rng.shuffle(order)
        pairs = [Pair(a, b) for a, b in zip(order, order[1:])]
        self.rng.shuffle(pairs)
        return pairs

    def run_spanning_phase(self) -> None:
        """
        Ask pairs until the answered pairs connect every entity.

        Raises:
            ScheduleExhaustedError: A skip left no bridging pair to ask
            AbortedBySpanningQuit: The collector quit
        """
        for pair in self.build_spanning_pairs():
            self.graph.enqueue(pair)

        logger.info(
            f"Spanning phase for {self.attribute}: "
            f"{len(self.graph.upcoming)} pairs over {len(self.entities)} entities"
        )

        while self.graph.has_upcoming():
            pair = self.graph.pop_upcoming()
            response = self._ask(pair)

            if response.is_value:
                self._record(pair, response.ratio)
            elif response.is_skip:
                self.graph.mark_skipped(pair)
                self._replace(pair)
            else:
                logger.error(
                    f"Quit during the {SPANNING_PHASE} phase for {self.attribute} "
                    f"after {len(self.observations)} answers"
                )
                raise AbortedBySpanningQuit(SPANNING_PHASE, len(self.observations))

        self._spanning_done = True
        logger.info(
            f"Spanning phase for {self.attribute} complete: "
            f"{len(self.graph.answered)} answered, {len(self.graph.skipped)} skipped"
        )

    def _replace(self, pair: Pair) -> None:
        if self.graph.union_find().connected(pair.first, pair.second):
            logger.debug(f"Skipped {pair!r} needs no replacement")
            return

        replacement = find_replacement_pair(self.graph, pair, self.rng)
        if replacement is None:
            logger.error(
                f"Skipped {self._describe(pair)} and every bridging pair is skipped"
            )
            raise ScheduleExhaustedError(pair, SPANNING_PHASE)

        logger.info(
            f"Skipped {self._describe(pair)}; asking {self._describe(replacement)} instead"
        )
        self.graph.enqueue(replacement)

    # =========================================================================
    # Adaptive fill phase
    # =========================================================================

    def run_adaptive_phase(self) -> bool:
        """
        Ask remaining pairs, least-linked first.

        Returns:
            False if the collector quit, True otherwise
        """
        if not self._spanning_done:
            raise RuntimeError("Spanning phase must complete before the adaptive phase")

        target = self.params.target_link_count
        budget = self.params.max_adaptive_questions

        order = self.graph.remaining_pairs()
        self.rng.shuffle(order)
        previous_level = None
        asked = 0

        logger.info(f"Adaptive phase for {self.attribute}: {len(order)} candidate pairs")

        while True:
            order = [p for p in order if not self.graph.is_known(p)]
            if not order:
                self.fully_linked = True
                logger.info(f"Everyone is fully linked on {self.attribute}")
                break

            pair = min(order, key=self.graph.link_count)
            level = self.graph.link_count(pair)

            if level != previous_level:
                self._signal_confidence(level)
                previous_level = level

            if target is not None and level >= target:
                logger.info(f"Reached target link count {target} on {self.attribute}")
                break
            if budget is not None and asked >= budget:
                logger.info(f"Adaptive question budget of {budget} used on {self.attribute}")
                break

            response = self._ask(pair)
            asked += 1

            if response.is_value:
                self._record(pair, response.ratio)
            elif response.is_skip:
                self.graph.mark_skipped(pair)
            else:
                self.terminated_early = True
                logger.info(
                    f"Quit during the {ADAPTIVE_PHASE} phase for {self.attribute}; "
                    f"solving with {len(self.observations)} observations"
                )
                return False

        return True

    def _signal_confidence(self, level: int) -> None:
        self.confidence_levels.append(level)
        label = confidence_label(level)
        logger.info(f"Everyone is now {label} linked on {self.attribute}")
        if self.on_confidence is not None:
            self.on_confidence(level, label)

    # =========================================================================
    # Session
    # =========================================================================

    def run(self) -> ScheduleResult:
        """Run the spanning phase, then the adaptive phase if enabled."""
        self.run_spanning_phase()
        if self.params.adaptive_phase:
            self.run_adaptive_phase()
        return self.result()

    def result(self) -> ScheduleResult:
        return ScheduleResult(
            attribute=self.attribute,
            observations=list(self.observations),
            answered=len(self.graph.answered),
            skipped=len(self.graph.skipped),
            questions_asked=self.questions_asked,
            min_link_count=self.graph.min_connection_count(),
            confidence_levels=list(self.confidence_levels),
            terminated_early=self.terminated_early,
            fully_linked=self.fully_linked,
        )

    # =========================================================================
    # Internals
    # =========================================================================

    def _ask(self, pair: Pair) -> Response:
        entity_a = self.entities[pair.first]
        entity_b = self.entities[pair.second]
        logger.debug(f"Asking {entity_a.name} vs {entity_b.name} ({self.attribute})")
        self.questions_asked += 1
        return self.collector.get_response(entity_a, entity_b, self.attribute)

    def _record(self, pair: Pair, ratio: float) -> None:
        self.graph.mark_answered(pair)
        self.observations.append(Observation.from_pair(pair, ratio, self.dimension))

    def _describe(self, pair: Pair) -> str:
        return f"{self.entities[pair.first].name} vs {self.entities[pair.second].name}"
