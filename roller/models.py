"""Pydantic models for roll specifications and their results."""

import random
from collections import Counter

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict, Field

from shared.config import DEFAULT_MAX_DICE, SERVICE_NAME
from shared.exceptions import RollRangeError

from .dice import roll_dice

logger = Logger(service=SERVICE_NAME, child=True)

# (field, compact notation letter, long description), in evaluation precedence
KEEP_DROP_RULES = [
    ("keep_high", "k", "keep highest"),
    ("drop_low", "d", "drop lowest"),
    ("drop_high", "D", "drop highest"),
    ("keep_low", "K", "keep lowest"),
]


class Roll(BaseModel):
    """Outcome of evaluating a RollSpec once."""

    model_config = ConfigDict(frozen=True)

    rolls: list[int]
    """Every die rolled, sorted ascending, including dropped dice."""

    sum: int
    """Total of the retained dice plus the modifier."""

    kept: list[int] = Field(default_factory=list)
    """The retained dice, sorted ascending."""

    @property
    def dropped(self) -> list[int]:
        """Dice that did not count towards the sum."""
        return sorted((Counter(self.rolls) - Counter(self.kept)).elements())

    def __str__(self) -> str:
        return f"{self.rolls}\t{self.sum}"


class RollSpec(BaseModel):
    """Validated, structured form of a dice expression.

    At most one keep/drop count is expected to be non-zero. If several are
    set, evaluation and rendering both honour the first in this order:
    keep_high, drop_low, drop_high, keep_low.
    """

    model_config = ConfigDict(frozen=True)

    num: int = Field(default=1, ge=0)
    """Number of dice to roll."""

    size: int = Field(ge=1)
    """Number of sides per die."""

    keep_high: int = Field(default=0, ge=0)
    """Keep this many of the highest dice."""

    keep_low: int = Field(default=0, ge=0)
    """Keep this many of the lowest dice."""

    drop_low: int = Field(default=0, ge=0)
    """Drop this many of the lowest dice."""

    drop_high: int = Field(default=0, ge=0)
    """Drop this many of the highest dice."""

    modifier: int = 0
    """Constant added after summing the retained dice."""

    def active_rule(self) -> tuple[str, str, str] | None:
        """Get the keep/drop rule that applies to this spec.

        Returns:
            (field, letter, description) of the first non-zero count in
            precedence order, or None when every die is kept
        """
        for rule in KEEP_DROP_RULES:
            if getattr(self, rule[0]) != 0:
                return rule
        return None

    def check(self, max_dice: int | None = DEFAULT_MAX_DICE) -> None:
        """Verify the spec can be rolled.

        Args:
            max_dice: Largest number of dice allowed in one roll (None for
                no limit)

        Raises:
            RollRangeError: If num exceeds max_dice or any keep/drop count
                exceeds num
        """
        if max_dice is not None and self.num > max_dice:
            raise RollRangeError(
                f"Cannot roll {self.num} dice, the limit is {max_dice}",
                field="num",
            )

        for field, _, description in KEEP_DROP_RULES:
            count = getattr(self, field)
            if count > self.num:
                raise RollRangeError(
                    f"Cannot {description} {count} of {self.num} dice",
                    field=field,
                )

    def retained_range(self) -> range:
        """Index range of the sorted rolls that count towards the sum.

        Returns:
            Range into the ascending roll list
        """
        rule = self.active_rule()
        if rule is None:
            return range(0, self.num)

        field = rule[0]
        count = getattr(self, field)
        if field == "keep_high":
            return range(self.num - count, self.num)
        elif field == "drop_low":
            return range(count, self.num)
        elif field == "drop_high":
            return range(0, self.num - count)
        else:
            return range(0, count)

    def roll(self, rng: random.Random | None = None, max_dice: int | None = DEFAULT_MAX_DICE) -> Roll:
        """Roll the dice and total the retained subset.

        Args:
            rng: Random source (defaults to the ``random`` module)
            max_dice: Largest number of dice allowed (None for no limit)

        Returns:
            Fresh Roll with all dice and the computed sum

        Raises:
            RollRangeError: If there are too many dice or a keep/drop count
                exceeds the number of dice
        """
        self.check(max_dice)

        rolls = roll_dice(self.num, self.size, rng)
        retained = self.retained_range()
        kept = rolls[retained.start : retained.stop]
        total = sum(kept) + self.modifier

        logger.debug(
            "Rolled dice",
            extra={"spec": self.notation(), "rolls": rolls, "sum": total},
        )

        return Roll(rolls=rolls, sum=total, kept=kept)

    def notation(self) -> str:
        """Render the spec in compact dice notation (e.g., "4d6d1+2").

        The result parses back into an equal RollSpec.
        """
        text = f"{self.num}d{self.size}"
        rule = self.active_rule()
        if rule:
            text += f"{rule[1]}{getattr(self, rule[0])}"
        if self.modifier > 0:
            text += f"+{self.modifier}"
        elif self.modifier < 0:
            text += f"{self.modifier}"
        return text

    def __str__(self) -> str:
        suffix = ""
        rule = self.active_rule()
        if rule:
            suffix = f" {rule[2]} {getattr(self, rule[0])}"

        modifier = ""
        if self.modifier > 0:
            modifier = f" +{self.modifier}"
        elif self.modifier < 0:
            modifier = f" {self.modifier}"

        return f"{self.num}d{self.size}{suffix}{modifier}"
