"""Dice expression parser and evaluator."""

from .dice import roll_dice, roll_die
from .grammar import Production, parse_tree
from .models import Roll, RollSpec
from .parser import parse
from .service import RollOutcome, RollService, roll

__all__ = [
    "Production",
    "Roll",
    "RollOutcome",
    "RollService",
    "RollSpec",
    "parse",
    "parse_tree",
    "roll",
    "roll_dice",
    "roll_die",
]
