"""
Shared fixtures and configuration for PairRank tests.
"""

import random

import pytest


# =============================================================================
# Global State
# =============================================================================

@pytest.fixture(autouse=True)
def clean_globals(monkeypatch):
    """Isolate tests from the environment and from each other's global config."""
    for var in (
        "PAIRRANK_SEED",
        "PAIRRANK_TARGET_LINK_COUNT",
        "PAIRRANK_ROSTER_PATH",
        "PAIRRANK_RESULTS_PATH",
        "PAIRRANK_LOG_FILE",
        "PAIRRANK_LOG_COMPONENTS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)

    from pairrank.config.settings import reset_settings
    from pairrank.config.params import reset_parameter_manager

    reset_settings()
    reset_parameter_manager()
    yield
    reset_settings()
    reset_parameter_manager()


# =============================================================================
# Randomness
# =============================================================================

@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(42)


# =============================================================================
# Entity Fixtures
# =============================================================================

def make_entities(names, goalies=()):
    """Create entities with indices in list order."""
    from pairrank.core.types import Entity
    return [Entity(index=i, name=name, is_goalie=name in goalies) for i, name in enumerate(names)]


@pytest.fixture
def abcd_entities():
    """Four entities A, B, C, D."""
    return make_entities(["A", "B", "C", "D"])


@pytest.fixture
def player_entities():
    """Six outfield players."""
    return make_entities(["Ann", "Ben", "Cat", "Dan", "Eve", "Fay"])


@pytest.fixture
def abcd_ratios():
    """Ratios for every pair of A, B, C, D (nearly consistent with 5.9 : 3.9 : 1.9 : 1)."""
    return {
        ("A", "D"): 5.9,
        ("A", "C"): 3.1,
        ("A", "B"): 1.55,
        ("B", "C"): 2.1,
        ("B", "D"): 3.9,
        ("C", "D"): 1.9,
    }


@pytest.fixture
def true_ratings():
    """Ground truth for the six players, anchored on Fay."""
    return {
        "Ann": 4.5,
        "Ben": 0.8,
        "Cat": 2.25,
        "Dan": 3.0,
        "Eve": 1.6,
        "Fay": 1.0,
    }


@pytest.fixture
def true_outfield_ratings():
    """Attack/defense ground truth, anchored on Fay's attack."""
    return {
        "Ann": {"attack": 4.0, "defense": 1.5},
        "Ben": {"attack": 0.5, "defense": 3.0},
        "Cat": {"attack": 2.0, "defense": 2.0},
        "Dan": {"attack": 1.25, "defense": 0.75},
        "Eve": {"attack": 3.5, "defense": 2.5},
        "Fay": {"attack": 1.0, "defense": 1.8},
    }


# =============================================================================
# Collector Fixtures
# =============================================================================

@pytest.fixture
def truth_collector(true_ratings):
    """Noise-free collector for the six players."""
    from pairrank.collectors import GroundTruthCollector
    return GroundTruthCollector(true_ratings)


# =============================================================================
# Helper Functions
# =============================================================================

def is_spanning(size, pairs):
    """Whether the pairs connect all `size` entities."""
    from pairrank.graph.union_find import UnionFind
    return size <= 1 or UnionFind.from_edges(size, pairs).component_count == 1
