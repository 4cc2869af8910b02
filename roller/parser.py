"""Builder that turns parsed dice expressions into RollSpecs."""

from typing import Any

from aws_lambda_powertools import Logger
from lark import Tree

from shared.config import SERVICE_NAME
from shared.exceptions import GrammarFaultError, NumericConversionError, RollRangeError

from .grammar import Production, parse_tree
from .models import RollSpec

logger = Logger(service=SERVICE_NAME, child=True)

# Counts are unsigned 64-bit, sizes and modifiers signed 64-bit
MAX_COUNT = 2**64 - 1
MAX_SIGNED = 2**63 - 1

# Production -> (RollSpec field, description for errors, upper bound, sign)
FIELD_MAP: dict[Production, tuple[str, str, int, int]] = {
    Production.N_DICE: ("num", "number of dice", MAX_COUNT, 1),
    Production.DIE_SIZE: ("size", "die size", MAX_SIGNED, 1),
    Production.N_LOW_TO_DROP: ("drop_low", "number of low dice to drop", MAX_COUNT, 1),
    Production.N_HIGH_TO_DROP: ("drop_high", "number of high dice to drop", MAX_COUNT, 1),
    Production.N_HIGH_TO_KEEP: ("keep_high", "number of high dice to keep", MAX_COUNT, 1),
    Production.N_LOW_TO_KEEP: ("keep_low", "number of low dice to keep", MAX_COUNT, 1),
    Production.ADD_VALUE: ("modifier", "add value", MAX_SIGNED, 1),
    Production.SUBTRACT_VALUE: ("modifier", "subtract value", MAX_SIGNED, -1),
}


def parse(token: str) -> RollSpec:
    """Parse a dice expression into a RollSpec.

    Supports "3d6", "d20", "20" (one d20), "4d6d1", "2d20K1+7" and "3d6-2".

    Args:
        token: A single whitespace-free dice expression

    Returns:
        The populated RollSpec

    Raises:
        ParseError: If the expression does not match the grammar
        NumericConversionError: If a number does not fit its field
        GrammarFaultError: If the grammar yields an unknown production
        RollRangeError: If the die size is zero
    """
    tree = parse_tree(token)

    fields: dict[str, Any] = {
        "num": 1,
        "size": 0,
        "keep_high": 0,
        "keep_low": 0,
        "drop_low": 0,
        "drop_high": 0,
        "modifier": 0,
    }

    for part in tree.children:
        field, value = _build_field(token, part)
        fields[field] = value

    if fields["size"] == 0:
        raise RollRangeError(
            f"Invalid die size in '{token}': a die must have at least 1 side",
            field="size",
        )

    spec = RollSpec(**fields)
    logger.debug("Parsed dice expression", extra={"expression": token, "spec": spec.notation()})
    return spec


def _build_field(token: str, part: Tree) -> tuple[str, int]:
    """Convert one production into a RollSpec field assignment.

    Args:
        token: The original expression (for error messages)
        part: A production subtree holding a single digit run

    Returns:
        Tuple of (field name, integer value)

    Raises:
        GrammarFaultError: If the production is not a known Production
        NumericConversionError: If the digits exceed the field's bound
    """
    try:
        production = Production(part.data)
    except ValueError:
        raise GrammarFaultError(token, str(part.data)) from None

    field, label, bound, sign = FIELD_MAP[production]
    digits = str(part.children[0])

    try:
        value = int(digits)
    except ValueError:
        # int() refuses digit runs past the interpreter's conversion limit
        raise NumericConversionError(token, label, digits, "number too large to fit in target type") from None

    if value > bound:
        raise NumericConversionError(token, label, digits, "number too large to fit in target type")

    return field, sign * value
