"""Command-line interface for the dice roller."""

__version__ = "1.0.0"
