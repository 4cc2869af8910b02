"""Tests for the roll service."""

import random

from roller.parser import MAX_COUNT
from roller.service import RollOutcome, RollService
from shared.config import DEFAULT_MAX_DICE


class TestRollService:
    """Tests for RollService."""

    def test_evaluate_success(self, rng):
        """A valid expression yields a spec and a roll."""
        outcome = RollService(rng=rng).evaluate("3d6+1")

        assert outcome.ok
        assert outcome.expression == "3d6+1"
        assert outcome.spec.num == 3
        assert outcome.roll.sum == sum(outcome.roll.rolls) + 1
        assert outcome.error is None

    def test_evaluate_parse_error(self, rng):
        """A grammar error is captured, not raised."""
        outcome = RollService(rng=rng).evaluate("3d8*2")

        assert not outcome.ok
        assert outcome.spec is None
        assert outcome.roll is None
        assert "3d8*2" in outcome.error

    def test_evaluate_range_error_keeps_spec(self, rng):
        """Range errors still report the parsed spec."""
        outcome = RollService(rng=rng).evaluate("2d6k3")

        assert not outcome.ok
        assert outcome.spec is not None
        assert outcome.roll is None
        assert "keep highest 3 of 2" in outcome.error

    def test_max_dice(self, rng):
        """Expressions over the dice cap are refused."""
        service = RollService(rng=rng, max_dice=10)

        assert service.evaluate("10d6").ok
        outcome = service.evaluate("11d6")
        assert not outcome.ok
        assert "limit is 10" in outcome.error

    def test_no_max_dice(self, rng):
        """A cap of None lifts the limit."""
        service = RollService(rng=rng, max_dice=None)

        assert service.max_dice is None
        assert service.evaluate("500d6").ok

    def test_default_max_dice(self, rng):
        """The default service refuses huge dice counts instead of rolling them."""
        service = RollService(rng=rng)

        assert service.max_dice == DEFAULT_MAX_DICE
        assert service.evaluate("500d6").ok

        outcome = service.evaluate(f"{MAX_COUNT}d6")
        assert not outcome.ok
        assert outcome.spec.num == MAX_COUNT
        assert f"limit is {DEFAULT_MAX_DICE}" in outcome.error

    def test_huge_count_does_not_stop_batch(self, rng):
        """A refused dice count is reported and the batch carries on."""
        outcomes = RollService(rng=rng).evaluate_all([f"{MAX_COUNT}d6", "d6"])

        assert [o.ok for o in outcomes] == [False, True]

    def test_evaluate_all_continues_after_errors(self, rng):
        """One bad expression does not stop the others."""
        outcomes = RollService(rng=rng).evaluate_all(["4d6d1", "bad", "d0", "2d20K1+7"])

        assert [o.ok for o in outcomes] == [True, False, False, True]
        assert [o.expression for o in outcomes] == ["4d6d1", "bad", "d0", "2d20K1+7"]

    def test_seeded_service_is_reproducible(self):
        """Services with equal seeds roll the same."""
        first = RollService(rng=random.Random(5)).evaluate_all(["3d6", "d20"])
        second = RollService(rng=random.Random(5)).evaluate_all(["3d6", "d20"])

        assert [o.roll for o in first] == [o.roll for o in second]

    def test_default_rng_uses_random_module(self):
        """Without an rng the random module is used."""
        random.seed(11)
        first = RollService().evaluate("4d6").roll
        random.seed(11)
        second = RollService().evaluate("4d6").roll

        assert first == second


class TestRollOutcome:
    """Tests for the RollOutcome model."""

    def test_ok_without_error(self):
        """An outcome without an error is ok."""
        assert RollOutcome(expression="d6").ok

    def test_not_ok_with_error(self):
        """An outcome with an error is not ok."""
        assert not RollOutcome(expression="x", error="boom").ok
