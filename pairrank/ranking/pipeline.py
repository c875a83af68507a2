"""
Ranking pipeline: scheduler -> collector -> linear system -> solver.

The only entry point callers need. Each call runs one self-contained
session: a fresh comparison graph, a fresh observation list, and a
normalized rating vector at the end. Fatal scheduling or solving errors
propagate and no partial ratings are returned.
"""

import logging
import random
from typing import Callable, List, Optional, Sequence, Tuple

from pairrank.config.params import SchedulerParams, SolverParams, get_parameter_manager
from pairrank.config.settings import get_settings
from pairrank.core.constants import ATTACK, DEFAULT_ATTRIBUTE, DEFENSE, GOALKEEPING
from pairrank.core.types import Entity, Observation, RatingVector
from pairrank.ranking.least_squares import LeastSquaresSolver
from pairrank.ranking.linear_system import LinearSystemBuilder
from pairrank.scheduling.scheduler import QuestionScheduler, ScheduleResult
from pairrank.scheduling.self_comparison import collect_self_comparisons
from pairrank.utils.validation import validate_entities

logger = logging.getLogger(__name__)


class RankingPipeline:
    """
    Computes ratings by asking a collector for pairwise ratios.

    Example:
        >>> collector = GroundTruthCollector({"A": 4.0, "B": 2.0, "C": 1.0})
        >>> entities = build_entities([("A", False), ("B", False), ("C", False)])
        >>> pipeline = RankingPipeline(collector, rng=random.Random(7))
        >>> ratings = pipeline.compute_ratings(entities, anchor=entities[2])
        >>> round(ratings["A"], 6), round(ratings["B"], 6), ratings["C"]
        (4.0, 2.0, 1.0)
    """

    def __init__(
        self,
        collector,
        rng: Optional[random.Random] = None,
        scheduler_params: Optional[SchedulerParams] = None,
        solver_params: Optional[SolverParams] = None,
        on_confidence: Optional[Callable[[int, str], None]] = None
    ):
        """
        Initialize the pipeline.

        Args:
            collector: Response collector (see pairrank.collectors)
            rng: Random source; seeded from PAIRRANK_SEED when None
            scheduler_params: Scheduling parameters (ParameterManager if None,
                with PAIRRANK_TARGET_LINK_COUNT filling an unset target)
            solver_params: Solver parameters (ParameterManager if None)
            on_confidence: Forwarded to every scheduler

        Raises:
            pydantic.ValidationError: If PAIRRANK_TARGET_LINK_COUNT is below 1
        """
        settings = get_settings()
        manager = get_parameter_manager()

        if scheduler_params is None:
            scheduler_params = manager.get_scheduler_params()
            if settings.target_link_count is not None and scheduler_params.target_link_count is None:
                # Rebuild rather than model_copy() so the field limits are enforced
                scheduler_params = SchedulerParams(**{
                    **scheduler_params.model_dump(),
                    "target_link_count": settings.target_link_count,
                })

        self.collector = collector
        self.rng = rng or random.Random(settings.seed)
        self.scheduler_params = scheduler_params
        self.solver = LeastSquaresSolver(solver_params or manager.get_solver_params())
        self.on_confidence = on_confidence
        self.last_schedules: List[ScheduleResult] = []

    # =========================================================================
    # Public API
    # =========================================================================

    def compute_ratings(
        self,
        entities: Sequence[Entity],
        anchor: Entity,
        attribute: str = DEFAULT_ATTRIBUTE
    ) -> RatingVector:
        """
        Rate entities on a single attribute.

        Args:
            entities: Entities to rate (order is preserved in the result)
            anchor: Reference entity, rated exactly 1

        Returns:
            RatingVector normalized to the anchor

        Raises:
            ValueError: Invalid entity list or anchor
            ScheduleExhaustedError: Skips disconnected the comparison graph
            AbortedBySpanningQuit: Quit before the graph was connected
            SingularSystemError: The collected system has no unique solution
        """
        entities = self._check(entities, anchor)
        logger.info(f"Rating {len(entities)} entities on {attribute}, anchored to {anchor.name}")

        scheduler = self._scheduler(entities, attribute, dimension=0)
        result = scheduler.run()
        self.last_schedules = [result]

        values = self.solve_observations(
            len(entities), result.observations, entities.index(anchor)
        )
        return RatingVector(entities, values.tolist(), anchor, attribute)

    def compute_outfield_ratings(
        self,
        entities: Sequence[Entity],
        anchor: Entity
    ) -> Tuple[RatingVector, RatingVector]:
        """
        Rate attack and defense together.

        Both attributes get their own spanning phase; per-entity
        attack/defense self-comparisons link the two. Both vectors are
        normalized to the anchor's attack rating.

        Returns:
            Tuple of (attack, defense) rating vectors
        """
        entities = self._check(entities, anchor)
        logger.info(f"Rating {len(entities)} outfield entities, anchored to {anchor.name}'s {ATTACK}")

        attack = self._scheduler(entities, ATTACK, dimension=0)
        defense = self._scheduler(entities, DEFENSE, dimension=1)

        attack.run_spanning_phase()
        defense.run_spanning_phase()
        self_observations, _ = collect_self_comparisons(entities, self.collector, self.rng)

        if self.scheduler_params.adaptive_phase:
            if attack.run_adaptive_phase():
                defense.run_adaptive_phase()

        self.last_schedules = [attack.result(), defense.result()]
        observations = attack.observations + defense.observations + self_observations

        n = len(entities)
        values = self.solve_observations(
            n, observations, entities.index(anchor), dimension_count=2
        )
        return (
            RatingVector(entities, values[:n].tolist(), anchor, ATTACK),
            RatingVector(entities, values[n:].tolist(), anchor, DEFENSE),
        )

    def compute_goalie_ratings(
        self,
        goalies: Sequence[Entity],
        anchor: Entity
    ) -> RatingVector:
        """Rate the goalie subset on goalkeeping."""
        return self.compute_ratings(goalies, anchor, attribute=GOALKEEPING)

    def solve_observations(
        self,
        entity_count: int,
        observations: Sequence[Observation],
        anchor: int,
        dimension_count: int = 1
    ):
        """
        Build and solve the system for a finished observation list.

        Args:
            entity_count: Number of entities (N)
            observations: Observations indexed by position 0..N-1
            anchor: Position of the anchor; its dimension-0 column is fixed

        Returns:
            numpy array of length N * dimension_count
        """
        builder = LinearSystemBuilder(entity_count, dimension_count)
        builder.add_observations(observations)
        builder.set_anchor(anchor, 0)
        system = builder.build()

        result = self.solver.solve_with_details(system)
        logger.info(
            f"Solved {system.shape[0]} equations for {system.unknowns} unknowns "
            f"(residual {result.residual_norm:.4g}, {result.method})"
        )
        return result.solution

    # =========================================================================
    # Internals
    # =========================================================================

    def _check(self, entities: Sequence[Entity], anchor: Entity) -> List[Entity]:
        entities = list(entities)
        is_valid, error = validate_entities(entities, anchor)
        if not is_valid:
            raise ValueError(error)
        return entities

    def _scheduler(self, entities: List[Entity], attribute: str, dimension: int) -> QuestionScheduler:
        return QuestionScheduler(
            entities,
            self.collector,
            attribute=attribute,
            dimension=dimension,
            rng=self.rng,
            params=self.scheduler_params,
            on_confidence=self.on_confidence,
        )


def compute_ratings(
    entities: Sequence[Entity],
    anchor: Entity,
    collector,
    rng: Optional[random.Random] = None
) -> RatingVector:
    """
    Convenience function for a single-attribute session.

    Args:
        entities: Entities to rate
        anchor: Reference entity
        collector: Response collector
        rng: Optional random source

    Returns:
        RatingVector
    """
    return RankingPipeline(collector, rng=rng).compute_ratings(entities, anchor)
