"""Shared utilities for the dice roller."""

from .config import SERVICE_NAME, Config, get_config, reset_config
from .exceptions import (
    ConfigurationError,
    DiceError,
    GrammarFaultError,
    NumericConversionError,
    ParseError,
    RollRangeError,
)

__all__ = [
    # Config
    "SERVICE_NAME",
    "Config",
    "get_config",
    "reset_config",
    # Exceptions
    "ConfigurationError",
    "DiceError",
    "GrammarFaultError",
    "NumericConversionError",
    "ParseError",
    "RollRangeError",
]
