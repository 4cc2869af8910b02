"""Interactive read-evaluate loop for the dice command."""

import readline
from collections.abc import Callable

from aws_lambda_powertools import Logger

from roller.service import RollService
from shared.config import SERVICE_NAME

from . import __version__
from .output import emit

logger = Logger(service=SERVICE_NAME, child=True)

EXIT_COMMANDS = {"exit"}
HELP_COMMANDS = {"help", "?"}


def run_repl(
    service: RollService,
    help_text: str,
    quiet: bool = False,
    prompt: str = ">> ",
    history_file: str | None = None,
    read_line: Callable[[str], str] = input,
) -> int:
    """Read expressions line by line until "exit" or end of input.

    Each whitespace-separated token on a line is rolled on its own; a bad
    token prints its error and the remaining tokens are still rolled.

    Args:
        service: Service used to evaluate expressions
        help_text: Text printed for "help" or "?"
        quiet: Only print sums
        prompt: Input prompt
        history_file: Optional file to load and save line history
        read_line: Function reading one line (for testing)

    Returns:
        Process exit code
    """
    print(f"dice {__version__}")
    print("enter 'help' for help, 'exit' to exit")

    readline.set_auto_history(False)
    _load_history(history_file)

    try:
        while True:
            try:
                line = read_line(prompt)
            except KeyboardInterrupt:
                # Ctrl-C abandons the current line only
                print()
                continue
            except EOFError:
                print()
                return 0

            line = line.strip()
            if not line:
                continue
            if line in EXIT_COMMANDS:
                return 0
            if line in HELP_COMMANDS:
                print(help_text)
                continue

            readline.add_history(line)
            for outcome in service.evaluate_all(line.split()):
                emit(outcome, quiet)
    finally:
        _save_history(history_file)


def _load_history(history_file: str | None) -> None:
    """Load line history if a history file is configured."""
    if not history_file:
        return
    try:
        readline.read_history_file(history_file)
    except FileNotFoundError:
        logger.debug("No history file yet", extra={"history_file": history_file})
    except OSError as e:
        logger.warning(f"Failed to read history file: {e}")


def _save_history(history_file: str | None) -> None:
    """Save line history if a history file is configured."""
    if not history_file:
        return
    try:
        readline.write_history_file(history_file)
    except OSError as e:
        logger.warning(f"Failed to write history file: {e}")
