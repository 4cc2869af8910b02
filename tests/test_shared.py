"""Tests for shared module."""
import pytest

from shared.config import DEFAULT_MAX_DICE, DEFAULT_PROMPT, Config, get_config, reset_config
from shared.exceptions import (
    ConfigurationError,
    DiceError,
    GrammarFaultError,
    NumericConversionError,
    ParseError,
    RollRangeError,
)


class TestExceptions:
    """Tests for custom exceptions."""

    def test_dice_error(self):
        """Test base exception."""
        error = DiceError("test message")
        assert str(error) == "test message"
        assert error.message == "test message"

    def test_parse_error(self):
        """ParseError names the expression and the cause."""
        error = ParseError("3d8*2", "unexpected character '*'")
        assert str(error) == "Failed to parse expression '3d8*2': unexpected character '*'"
        assert error.expression == "3d8*2"
        assert error.reason == "unexpected character '*'"

    def test_numeric_conversion_error(self):
        """NumericConversionError names the field and the digits."""
        error = NumericConversionError("99d6", "number of dice", "99", "too large")
        assert isinstance(error, ParseError)
        assert "invalid number of dice '99': too large" in str(error)
        assert error.label == "number of dice"
        assert error.value == "99"

    def test_grammar_fault_error(self):
        """GrammarFaultError names the production."""
        error = GrammarFaultError("4d6", "mystery")
        assert isinstance(error, ParseError)
        assert error.production == "mystery"
        assert "mystery" in str(error)

    def test_roll_range_error(self):
        """RollRangeError carries the field."""
        error = RollRangeError("Cannot keep highest 3 of 2 dice", field="keep_high")
        assert isinstance(error, DiceError)
        assert error.field == "keep_high"

    def test_configuration_error(self):
        """Test ConfigurationError."""
        error = ConfigurationError("Missing config", config_key="DICE_SEED")
        assert "Missing config" in str(error)
        assert error.config_key == "DICE_SEED"


class TestConfig:
    """Tests for configuration module."""

    def test_config_defaults(self, monkeypatch):
        """Unset variables fall back to defaults."""
        monkeypatch.delenv("POWERTOOLS_LOG_LEVEL", raising=False)
        config = Config.from_env()

        assert config.log_level == "WARNING"
        assert config.quiet is False
        assert config.seed is None
        assert config.prompt == DEFAULT_PROMPT
        assert config.history_file is None
        assert config.max_dice == DEFAULT_MAX_DICE

    def test_config_from_env(self, monkeypatch):
        """Test loading config from environment."""
        monkeypatch.setenv("POWERTOOLS_LOG_LEVEL", "debug")
        monkeypatch.setenv("DICE_QUIET", "yes")
        monkeypatch.setenv("DICE_SEED", "42")
        monkeypatch.setenv("DICE_PROMPT", "roll> ")
        monkeypatch.setenv("DICE_HISTORY_FILE", "/tmp/dice_history")
        monkeypatch.setenv("DICE_MAX_DICE", "100")

        config = Config.from_env()

        assert config.log_level == "DEBUG"
        assert config.quiet is True
        assert config.seed == 42
        assert config.prompt == "roll> "
        assert config.history_file == "/tmp/dice_history"
        assert config.max_dice == 100

    def test_config_invalid_seed(self, monkeypatch):
        """A non-integer seed is a configuration error."""
        monkeypatch.setenv("DICE_SEED", "abc")

        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_env()

        assert exc_info.value.config_key == "DICE_SEED"

    @pytest.mark.parametrize("level", ["verbose", "12", "warn ing"])
    def test_config_invalid_log_level(self, monkeypatch, level):
        """Unknown log level names are configuration errors."""
        monkeypatch.setenv("POWERTOOLS_LOG_LEVEL", level)

        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_env()

        assert exc_info.value.config_key == "POWERTOOLS_LOG_LEVEL"

    def test_config_max_dice_minimum(self, monkeypatch):
        """The dice cap must be at least one."""
        monkeypatch.setenv("DICE_MAX_DICE", "0")

        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_env()

        assert exc_info.value.config_key == "DICE_MAX_DICE"

    def test_get_config_cached(self):
        """Test config caching."""
        config1 = get_config()
        config2 = get_config()
        assert config1 is config2

    def test_reset_config(self, monkeypatch):
        """Resetting picks up new environment values."""
        monkeypatch.setenv("DICE_SEED", "1")
        assert get_config().seed == 1

        monkeypatch.setenv("DICE_SEED", "2")
        reset_config()
        assert get_config().seed == 2
