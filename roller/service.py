"""Service layer that evaluates dice expressions for callers."""

import random
from collections.abc import Iterable

from aws_lambda_powertools import Logger
from pydantic import BaseModel

from shared.config import DEFAULT_MAX_DICE, SERVICE_NAME
from shared.exceptions import DiceError

from .models import Roll, RollSpec
from .parser import parse

logger = Logger(service=SERVICE_NAME, child=True)


class RollOutcome(BaseModel):
    """Result of evaluating one expression: either a roll or an error."""

    expression: str
    """The expression as the user typed it."""

    spec: RollSpec | None = None
    """Parsed specification (None if parsing failed)."""

    roll: Roll | None = None
    """Roll result (None if parsing or evaluation failed)."""

    error: str | None = None
    """Error message if the expression could not be evaluated."""

    @property
    def ok(self) -> bool:
        """Whether the expression produced a roll."""
        return self.error is None


def roll(notation: str, rng: random.Random | None = None) -> Roll:
    """Parse and roll a dice expression in one step.

    Args:
        notation: Dice expression (e.g., "4d6d1")
        rng: Random source (defaults to the ``random`` module)

    Returns:
        The Roll

    Raises:
        DiceError: If the expression is invalid or out of range
    """
    return parse(notation).roll(rng)


class RollService:
    """Evaluates expressions independently so one failure never stops the rest."""

    def __init__(
        self,
        rng: random.Random | None = None,
        max_dice: int | None = DEFAULT_MAX_DICE,
    ) -> None:
        """Initialize service.

        Args:
            rng: Random source shared by every evaluation
            max_dice: Cap on the number of dice in one expression (None for
                no limit)
        """
        self.rng = rng
        self.max_dice = max_dice

    def evaluate(self, expression: str) -> RollOutcome:
        """Parse and roll a single expression.

        Args:
            expression: Dice expression token

        Returns:
            RollOutcome holding the spec and roll, or the error message
        """
        spec = None
        try:
            spec = parse(expression)
            result = spec.roll(self.rng, self.max_dice)
        except DiceError as e:
            logger.info(
                "Dice expression failed",
                extra={"expression": expression, "error_type": type(e).__name__},
            )
            return RollOutcome(expression=expression, spec=spec, error=str(e))

        return RollOutcome(expression=expression, spec=spec, roll=result)

    def evaluate_all(self, expressions: Iterable[str]) -> list[RollOutcome]:
        """Evaluate several expressions in order.

        Args:
            expressions: Dice expression tokens

        Returns:
            One RollOutcome per expression, in input order
        """
        return [self.evaluate(expression) for expression in expressions]
