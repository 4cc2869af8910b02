"""Printing of roll outcomes."""

import sys

from roller.service import RollOutcome


def format_outcome(outcome: RollOutcome, quiet: bool = False) -> str:
    """Format a successful outcome for display.

    Args:
        outcome: Outcome holding a spec and a roll
        quiet: Only show the sum

    Returns:
        "3d6\\t[2, 5, 6]\\t13", or "13" when quiet
    """
    if quiet:
        return str(outcome.roll.sum)
    return f"{outcome.spec}\t{outcome.roll}"


def emit(outcome: RollOutcome, quiet: bool = False) -> None:
    """Print an outcome: results to stdout, errors to stderr."""
    if outcome.ok:
        print(format_outcome(outcome, quiet))
    else:
        print(outcome.error, file=sys.stderr)
