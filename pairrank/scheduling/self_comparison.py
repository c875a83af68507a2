"""
Self-comparison phase for multi-attribute rankings.

Each entity is asked how its primary attribute compares to its secondary
one (e.g. attack vs. defense). At least one answer is needed to tie the
two attribute graphs together.
"""

import logging
import random
from typing import List, Optional, Sequence, Tuple

from pairrank.core.constants import SELF_PHASE
from pairrank.core.exceptions import AbortedBySpanningQuit, ScheduleExhaustedError
from pairrank.core.types import Entity, Observation

logger = logging.getLogger(__name__)


def collect_self_comparisons(
    entities: Sequence[Entity],
    collector,
    rng: Optional[random.Random] = None,
    primary_dimension: int = 0,
    secondary_dimension: int = 1
) -> Tuple[List[Observation], int]:
    """
    Ask every entity for its primary/secondary ratio, in shuffled order.

    A quit ends the phase once at least one ratio is known.

    Args:
        entities: Entities to ask about
        collector: Collector exposing `get_self_response(entity)`
        rng: Random source for the asking order
        primary_dimension: Dimension of the ratio's numerator
        secondary_dimension: Dimension of the ratio's denominator

    Returns:
        Tuple of (observations, questions_asked)

    Raises:
        AbortedBySpanningQuit: Quit before any self ratio was answered
        ScheduleExhaustedError: Every entity was skipped
    """
    rng = rng or random.Random()
    order = list(range(len(entities)))
    rng.shuffle(order)

    observations: List[Observation] = []
    asked = 0

    for index in order:
        entity = entities[index]
        logger.debug(f"Asking {entity.name} self-comparison")
        response = collector.get_self_response(entity)
        asked += 1

        if response.is_value:
            observations.append(
                Observation(index, index, response.ratio, primary_dimension, secondary_dimension)
            )
        elif response.is_quit:
            if not observations:
                logger.error("Quit before any self-comparison was answered")
                raise AbortedBySpanningQuit(SELF_PHASE, 0)
            logger.info(f"Quit during the {SELF_PHASE} phase with {len(observations)} answers")
            break

    if entities and not observations:
        logger.error("Every self-comparison was skipped")
        raise ScheduleExhaustedError(
            phase=SELF_PHASE,
            detail="no entity links its attributes together",
        )

    logger.info(f"Self-comparison phase complete: {len(observations)} of {len(entities)} answered")
    return observations, asked
