"""
Unit tests for pairrank/collectors/ modules.

Tests:
- base.py: Required and optional collector capabilities
- scripted.py: Table-driven and ground-truth answers
- console.py: Prompted answers over text streams
"""

import io

import pytest

from conftest import make_entities


# =============================================================================
# ResponseCollector Tests (COLL-030 to COLL-031)
# =============================================================================

def _pair_only_collector(ratio=1.0):
    """A collector that answers pair questions only."""
    from pairrank.collectors import ResponseCollector
    from pairrank.core.types import Response

    class PairOnly(ResponseCollector):
        def get_response(self, entity_a, entity_b, attribute=None):
            return Response.value(ratio)

    return PairOnly()


class TestResponseCollector:
    """Test the collector interface."""

    def test_pair_questions_are_required(self):
        """COLL-030: A collector without get_response cannot be created."""
        from pairrank.collectors import ResponseCollector

        with pytest.raises(TypeError):
            ResponseCollector()

    def test_self_questions_are_optional(self, rng):
        """COLL-031: Pair-only collectors rate one attribute but not attack/defense."""
        from pairrank.ranking.pipeline import RankingPipeline

        entities = make_entities(["A", "B", "C"])
        collector = _pair_only_collector()

        with pytest.raises(NotImplementedError):
            collector.get_self_response(entities[0])

        pipeline = RankingPipeline(collector, rng=rng)
        assert len(pipeline.compute_ratings(entities, entities[0])) == 3
        with pytest.raises(NotImplementedError):
            pipeline.compute_outfield_ratings(entities, entities[0])


# =============================================================================
# ScriptedResponseCollector Tests (COLL-001 to COLL-006)
# =============================================================================

class TestScriptedResponseCollector:
    """Test ScriptedResponseCollector."""

    def test_forward_and_reverse(self):
        """COLL-001: Reverse lookups answer the reciprocal."""
        from pairrank.collectors import ScriptedResponseCollector

        a, b = make_entities(["A", "B"])
        collector = ScriptedResponseCollector({("A", "B"): 4.0})

        assert collector.get_response(a, b).ratio == 4.0
        assert collector.get_response(b, a).ratio == 0.25

    def test_attribute_keys_win(self):
        """COLL-002: Attribute-specific entries take precedence."""
        from pairrank.collectors import ScriptedResponseCollector

        a, b = make_entities(["A", "B"])
        collector = ScriptedResponseCollector({
            ("A", "B"): 2.0,
            ("A", "B", "defense"): 0.5,
        })

        assert collector.get_response(a, b, "attack").ratio == 2.0
        assert collector.get_response(a, b, "defense").ratio == 0.5

    def test_missing_and_listed_skips(self):
        """COLL-003: Unknown pairs and listed pairs are skipped."""
        from pairrank.collectors import ScriptedResponseCollector

        a, b, c = make_entities(["A", "B", "C"])
        collector = ScriptedResponseCollector({("A", "B"): 2.0}, skips=[("B", "A")])

        assert collector.get_response(a, b).is_skip
        assert collector.get_response(a, c).is_skip

    def test_quits(self):
        """COLL-004: Listed pairs and the quit budget produce quits."""
        from pairrank.collectors import ScriptedResponseCollector

        a, b, c = make_entities(["A", "B", "C"])
        collector = ScriptedResponseCollector(
            {("A", "B"): 2.0, ("A", "C"): 3.0}, quits=[("C", "B")], quit_after=2
        )

        assert collector.get_response(a, b).is_value
        assert collector.get_response(c, b).is_quit
        assert collector.get_response(a, c).is_quit
        assert len(collector.asked) == 3

    def test_self_ratios(self):
        """COLL-005: Self ratios come from their own table."""
        from pairrank.collectors import ScriptedResponseCollector

        a, b = make_entities(["A", "B"])
        collector = ScriptedResponseCollector({}, self_ratios={"A": 1.5})

        assert collector.get_self_response(a).ratio == 1.5
        assert collector.get_self_response(b).is_skip
        assert collector.asked == [("A",), ("B",)]

    def test_asked_log(self):
        """COLL-006: Every question is logged with its attribute."""
        from pairrank.collectors import ScriptedResponseCollector

        a, b = make_entities(["A", "B"])
        collector = ScriptedResponseCollector({})
        collector.get_response(a, b, "attack")
        collector.get_response(b, a)

        assert collector.asked == [("A", "B", "attack"), ("B", "A", "")]


# =============================================================================
# GroundTruthCollector Tests (COLL-010 to COLL-013)
# =============================================================================

class TestGroundTruthCollector:
    """Test GroundTruthCollector."""

    def test_single_attribute(self):
        """COLL-010: Answers are exact rating ratios."""
        from pairrank.collectors import GroundTruthCollector

        a, b = make_entities(["A", "B"])
        collector = GroundTruthCollector({"A": 3.0, "B": 1.5})

        assert collector.get_response(a, b).ratio == pytest.approx(2.0)
        assert collector.get_response(b, a, "anything").ratio == pytest.approx(0.5)

    def test_per_attribute(self):
        """COLL-011: Mappings give per-attribute ratings and self ratios."""
        from pairrank.collectors import GroundTruthCollector

        a, b = make_entities(["A", "B"])
        collector = GroundTruthCollector({
            "A": {"attack": 2.0, "defense": 4.0},
            "B": {"attack": 1.0, "defense": 1.0},
        })

        assert collector.get_response(a, b, "defense").ratio == pytest.approx(4.0)
        assert collector.get_self_response(a).ratio == pytest.approx(0.5)

    def test_skips(self):
        """COLL-012: Configured pairs and self questions are skipped."""
        from pairrank.collectors import GroundTruthCollector

        a, b = make_entities(["A", "B"])
        collector = GroundTruthCollector(
            {"A": {"attack": 1.0, "defense": 2.0}, "B": 1.0},
            skip_pairs=[("A", "B")],
            skip_self=["A"],
        )

        assert collector.get_response(b, a).is_skip
        assert collector.get_self_response(a).is_skip

    def test_quit_after(self):
        """COLL-013: Questions beyond the budget are quits."""
        from pairrank.collectors import GroundTruthCollector

        a, b = make_entities(["A", "B"])
        collector = GroundTruthCollector({"A": 1.0, "B": 1.0}, quit_after=1)

        assert collector.get_response(a, b).is_value
        assert collector.get_response(a, b).is_quit


# =============================================================================
# ConsoleResponseCollector Tests (COLL-020 to COLL-024)
# =============================================================================

class TestConsoleResponseCollector:
    """Test ConsoleResponseCollector."""

    def _collector(self, text):
        from pairrank.collectors import ConsoleResponseCollector

        output = io.StringIO()
        return ConsoleResponseCollector(io.StringIO(text), output), output

    def test_number_and_fraction(self):
        """COLL-020: Plain numbers and fractions are accepted."""
        a, b = make_entities(["Ann", "Ben"])
        collector, output = self._collector("2.5\n3/2\n")

        assert collector.get_response(a, b, "attack").ratio == 2.5
        assert collector.get_response(a, b).ratio == 1.5
        assert "Ann's attack" in output.getvalue()

    def test_skip_and_quit(self):
        """COLL-021: 's' skips and 'q' quits."""
        a, b = make_entities(["Ann", "Ben"])
        collector, _ = self._collector("s\nQuit\n")

        assert collector.get_response(a, b).is_skip
        assert collector.get_response(a, b).is_quit

    def test_invalid_input_reprompts(self):
        """COLL-022: Invalid answers are asked again."""
        a, b = make_entities(["Ann", "Ben"])
        collector, output = self._collector("abc\n-1\n0/0\n4\n")

        assert collector.get_response(a, b).ratio == 4.0
        assert output.getvalue().count("Please enter a positive number") == 3

    def test_end_of_input_quits(self):
        """COLL-023: Running out of input counts as quit."""
        a, b = make_entities(["Ann", "Ben"])
        collector, _ = self._collector("")

        assert collector.get_response(a, b).is_quit

    def test_self_question(self):
        """COLL-024: Self-comparisons name both attributes."""
        a = make_entities(["Ann"])[0]
        collector, output = self._collector("0.5\n")

        assert collector.get_self_response(a).ratio == 0.5
        assert "Ann's attack than their defense" in output.getvalue()
