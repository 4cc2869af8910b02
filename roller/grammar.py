"""Grammar for dice expressions.

A single whitespace-free token such as "3d6", "4d6d1" or "2d20K1+7" is
parsed into a lark tree whose children are named productions. Keep/drop
letters are case-sensitive: lowercase favours high results ("d" drops the
lowest dice, "k" keeps the highest) and uppercase favours low results
("D" drops the highest dice, "K" keeps the lowest).
"""

from enum import Enum

from aws_lambda_powertools import Logger
from lark import Lark, Tree
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken

from shared.config import SERVICE_NAME
from shared.exceptions import ParseError

logger = Logger(service=SERVICE_NAME, child=True)

DICE_GRAMMAR = r"""
expression: n_dice? _LOWER_D die_size drop_keep? modifier?
          | die_size modifier?

n_dice: DIGITS
die_size: DIGITS

drop_keep: _LOWER_D DIGITS  -> n_low_to_drop
         | _UPPER_D DIGITS  -> n_high_to_drop
         | _LOWER_K DIGITS  -> n_high_to_keep
         | _UPPER_K DIGITS  -> n_low_to_keep

modifier: _PLUS DIGITS      -> add_value
        | _MINUS DIGITS     -> subtract_value

_LOWER_D: "d"
_UPPER_D: "D"
_LOWER_K: "k"
_UPPER_K: "K"
_PLUS: "+"
_MINUS: "-"
DIGITS: /[0-9]+/
"""

# Terminal names as shown to users in "expected" hints
_TERMINAL_LABELS = {
    "_LOWER_D": "'d'",
    "_UPPER_D": "'D'",
    "_LOWER_K": "'k'",
    "_UPPER_K": "'K'",
    "_PLUS": "'+'",
    "_MINUS": "'-'",
    "DIGITS": "digits",
    "$END": "end of expression",
}


class Production(str, Enum):
    """Named productions that can appear under an expression."""

    N_DICE = "n_dice"
    DIE_SIZE = "die_size"
    N_LOW_TO_DROP = "n_low_to_drop"
    N_HIGH_TO_DROP = "n_high_to_drop"
    N_HIGH_TO_KEEP = "n_high_to_keep"
    N_LOW_TO_KEEP = "n_low_to_keep"
    ADD_VALUE = "add_value"
    SUBTRACT_VALUE = "subtract_value"


_parser = Lark(DICE_GRAMMAR, start="expression", parser="lalr")


def parse_tree(token: str) -> Tree:
    """Parse a dice token into a tree of productions.

    Args:
        token: A single dice expression without whitespace (e.g., "4d6d1")

    Returns:
        lark Tree rooted at "expression"

    Raises:
        ParseError: If the token is empty or does not match the grammar.
            The whole token is rejected, it is never partially parsed.
    """
    if not token:
        raise ParseError(token, "empty expression")

    try:
        tree = _parser.parse(token)
    except UnexpectedInput as e:
        reason = _describe(e)
        logger.debug("Rejected dice expression", extra={"expression": token, "reason": reason})
        raise ParseError(token, reason) from None

    return tree


def _describe(error: UnexpectedInput) -> str:
    """Build a one-line description of a lark parse failure.

    Args:
        error: The exception raised by lark

    Returns:
        Human-readable cause including the column and what was expected
    """
    if isinstance(error, UnexpectedCharacters):
        reason = f"unexpected character '{error.char}' at column {error.column}"
        expected = error.allowed
    elif isinstance(error, UnexpectedToken):
        if error.token.type == "$END":
            reason = "unexpected end of expression"
        else:
            reason = f"unexpected '{error.token}' at column {error.column}"
        expected = error.expected
    else:
        return str(error).strip().splitlines()[0]

    if expected:
        labels = sorted(_TERMINAL_LABELS.get(name, name) for name in expected)
        reason += f", expected {' or '.join(labels)}"
    return reason
