"""Environment configuration for the dice roller."""
import logging
import os
from dataclasses import dataclass

from .exceptions import ConfigurationError

SERVICE_NAME = "dice"

DEFAULT_PROMPT = ">> "
DEFAULT_MAX_DICE = 1_000_000

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Config:
    """Application configuration loaded from environment variables."""

    log_level: str
    quiet: bool
    seed: int | None
    prompt: str
    history_file: str | None
    max_dice: int

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config instance with values from environment

        Raises:
            ConfigurationError: If a variable holds a value of the wrong type
        """
        return cls(
            log_level=_log_level_from_env(),
            quiet=os.environ.get("DICE_QUIET", "").strip().lower() in _TRUTHY,
            seed=_int_from_env("DICE_SEED"),
            prompt=os.environ.get("DICE_PROMPT", DEFAULT_PROMPT),
            history_file=os.environ.get("DICE_HISTORY_FILE") or None,
            max_dice=_int_from_env("DICE_MAX_DICE", DEFAULT_MAX_DICE, minimum=1),
        )


def _log_level_from_env() -> str:
    """Read and validate the log level.

    Returns:
        Upper-cased level name (e.g., "WARNING")

    Raises:
        ConfigurationError: If the name is not a known logging level
    """
    level = os.environ.get("POWERTOOLS_LOG_LEVEL", "WARNING").strip().upper()
    if level not in logging.getLevelNamesMapping():
        raise ConfigurationError(
            f"POWERTOOLS_LOG_LEVEL must be a logging level name, got '{level}'",
            config_key="POWERTOOLS_LOG_LEVEL",
        )
    return level


def _int_from_env(key: str, default: int | None = None, minimum: int | None = None) -> int | None:
    """Read an integer environment variable.

    Args:
        key: Environment variable name
        default: Value when the variable is unset or empty
        minimum: Optional lower bound

    Returns:
        Parsed integer or the default

    Raises:
        ConfigurationError: If the value is not an integer or is below minimum
    """
    raw = os.environ.get(key, "").strip()
    if not raw:
        return default

    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(
            f"{key} must be an integer, got '{raw}'",
            config_key=key,
        ) from None

    if minimum is not None and value < minimum:
        raise ConfigurationError(
            f"{key} must be at least {minimum}, got {value}",
            config_key=key,
        )
    return value


def get_config() -> Config:
    """Get cached configuration instance.

    Returns:
        Config instance (cached after first call)
    """
    if not hasattr(get_config, "_config"):
        get_config._config = Config.from_env()
    return get_config._config


def reset_config() -> None:
    """Drop the cached configuration (for testing)."""
    if hasattr(get_config, "_config"):
        del get_config._config
