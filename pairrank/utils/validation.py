"""
Input validation utilities for PairRank.

Checks applied at the pipeline boundary before a session starts.
"""

import math
from typing import List, Optional, Sequence, Tuple

from pairrank.core.types import Entity


def validate_ratio(ratio: float) -> Tuple[bool, str]:
    """
    Validate a comparison ratio.

    Args:
        ratio: "a is ratio times better than b"

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        value = float(ratio)
    except (TypeError, ValueError):
        return False, f"Ratio is not a number: {ratio!r}"

    if not math.isfinite(value):
        return False, f"Ratio must be finite, got {value}"

    if value <= 0:
        return False, f"Ratio must be positive, got {value}"

    return True, ""


def validate_entities(
    entities: Sequence[Entity],
    anchor: Optional[Entity] = None,
    min_items: int = 1
) -> Tuple[bool, str]:
    """
    Validate an entity list for a ranking session.

    Args:
        entities: Entities to rank
        anchor: Reference entity that must be among them
        min_items: Minimum number of entities

    Returns:
        Tuple of (is_valid, error_message)
    """
    if len(entities) < min_items:
        if not entities:
            return False, "Entity list is empty"
        return False, f"Need at least {min_items} entities, got {len(entities)}"

    indices = [e.index for e in entities]
    if len(indices) != len(set(indices)):
        return False, "Duplicate entity indices found"

    names = [e.name for e in entities]
    if len(names) != len(set(names)):
        duplicates = sorted({n for n in names if names.count(n) > 1})
        return False, f"Duplicate entity names: {duplicates}"

    if anchor is not None and anchor not in entities:
        return False, f"Anchor {anchor.name!r} is not among the entities"

    return True, ""


def parse_ratio(text: str) -> Optional[float]:
    """
    Parse user-entered ratio text.

    Accepts plain numbers ("2.5") and fractions ("3/2").

    Returns:
        The ratio, or None if the text is not a valid positive ratio
    """
    text = text.strip()
    if not text:
        return None

    parts: List[str] = text.split("/")
    try:
        if len(parts) == 1:
            value = float(parts[0])
        elif len(parts) == 2:
            value = float(parts[0]) / float(parts[1])
        else:
            return None
    except (ValueError, ZeroDivisionError):
        return None

    is_valid, _ = validate_ratio(value)
    return value if is_valid else None
