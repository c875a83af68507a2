"""
System constants for PairRank.

Adaptive pairwise-ratio scheduling with least-squares rating estimation.
"""

# =============================================================================
# Attributes
# =============================================================================

# Attribute name used by single-dimension rankings
DEFAULT_ATTRIBUTE: str = "rating"

# Outfield players are rated on two attributes; attack is the primary one
ATTACK: str = "attack"
DEFENSE: str = "defense"
OUTFIELD_ATTRIBUTES = (ATTACK, DEFENSE)

# Attribute name used for goalie rankings
GOALKEEPING: str = "goalkeeping"

# =============================================================================
# Solver
# =============================================================================

# Value the anchor entity is fixed to
ANCHOR_VALUE: float = 1.0

# Supported normal-equation solve methods
SOLVER_METHODS = ("cholesky", "general")

# =============================================================================
# Scheduling
# =============================================================================

# Names for confidence transitions in the adaptive phase, keyed by the
# minimum link count reached
CONFIDENCE_LABELS = {
    1: "singly",
    2: "doubly",
    3: "triply",
    4: "quadruply",
    5: "quintuply",
}

# Phase identifiers reported in errors and schedule results
SPANNING_PHASE: str = "spanning"
SELF_PHASE: str = "self-comparison"
ADAPTIVE_PHASE: str = "adaptive"


def confidence_label(link_count: int) -> str:
    """Human label for a minimum link count (e.g. 2 -> "doubly")."""
    return CONFIDENCE_LABELS.get(link_count, f"{link_count}-fold")
