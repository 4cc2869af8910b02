"""Entry point for the dice command."""

import argparse
import logging
import random
import sys

from aws_lambda_powertools import Logger

from roller.service import RollService
from shared.config import SERVICE_NAME, get_config
from shared.exceptions import ConfigurationError

from . import __version__
from .help import DESCRIPTION, EXPRESSION_HELP
from .output import emit
from .repl import run_repl

# Diagnostics go to stderr so stdout only carries roll results. The level from
# the environment is validated and applied in main().
logger = Logger(
    service=SERVICE_NAME,
    level="WARNING",
    logger_handler=logging.StreamHandler(sys.stderr),
)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="dice",
        description=DESCRIPTION,
        epilog=EXPRESSION_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="quiet output (just the result)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed the random source for reproducible rolls",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "expression",
        nargs="*",
        help="roll expressions, ie `4d6k3 4d6d1`",
    )
    return parser


def run_batch(service: RollService, expressions: list[str], quiet: bool = False) -> int:
    """Roll every expression given on the command line.

    Args:
        service: Service used to evaluate expressions
        expressions: Expressions to roll, in order
        quiet: Only print sums

    Returns:
        0 if every expression rolled, 1 if any failed
    """
    failures = 0
    for outcome in service.evaluate_all(expressions):
        emit(outcome, quiet)
        if not outcome.ok:
            failures += 1

    if failures:
        logger.debug("Batch finished with errors", extra={"failures": failures})
    return 1 if failures else 0


def main(argv: list[str] | None = None) -> int:
    """Run the dice command.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = get_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logger.setLevel(config.log_level)

    seed = args.seed if args.seed is not None else config.seed
    rng = random.Random(seed) if seed is not None else None
    service = RollService(rng=rng, max_dice=config.max_dice)
    quiet = args.quiet or config.quiet

    if args.expression:
        return run_batch(service, args.expression, quiet)

    return run_repl(
        service,
        help_text=parser.format_help(),
        quiet=quiet,
        prompt=config.prompt,
        history_file=config.history_file,
    )


if __name__ == "__main__":
    sys.exit(main())
