"""Custom exceptions for the dice roller."""


class DiceError(Exception):
    """Base exception for all dice errors."""

    def __init__(self, message: str = "An error occurred") -> None:
        """Initialize exception with message.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(self.message)


class ParseError(DiceError):
    """Expression does not match the dice grammar."""

    def __init__(self, expression: str, reason: str) -> None:
        """Initialize parse error.

        Args:
            expression: The original expression text
            reason: Human-readable cause, usually the parser's description
        """
        self.expression = expression
        self.reason = reason
        super().__init__(f"Failed to parse expression '{expression}': {reason}")


class NumericConversionError(ParseError):
    """A digit run matched the grammar but does not fit its field."""

    def __init__(self, expression: str, label: str, value: str, reason: str) -> None:
        """Initialize numeric conversion error.

        Args:
            expression: The original expression text
            label: Description of the field (e.g., "number of dice")
            value: The offending digit run
            reason: Why the value could not be converted
        """
        self.label = label
        self.value = value
        super().__init__(expression, f"invalid {label} '{value}': {reason}")


class GrammarFaultError(ParseError):
    """Parser produced a production the builder does not know.

    Only raised if the grammar and the builder drift apart.
    """

    def __init__(self, expression: str, production: str) -> None:
        """Initialize grammar fault.

        Args:
            expression: The original expression text
            production: Name of the unrecognized production
        """
        self.production = production
        super().__init__(expression, f"unexpected production '{production}'")


class RollRangeError(DiceError):
    """Roll specification is inconsistent and cannot be evaluated."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize range error.

        Args:
            message: Error message
            field: Optional RollSpec field that is out of range
        """
        self.field = field
        super().__init__(message)


class ConfigurationError(DiceError):
    """Configuration or environment error."""

    def __init__(self, message: str, config_key: str | None = None) -> None:
        """Initialize configuration error.

        Args:
            message: Error message
            config_key: Optional configuration key that caused the error
        """
        self.config_key = config_key
        super().__init__(message)
