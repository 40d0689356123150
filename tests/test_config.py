"""Tests for extractor configuration loading."""

from dataclasses import FrozenInstanceError

import pytest

from boilerstrip.config import DEFAULT_PARSER, ExtractorConfig, load_extractor_config
from boilerstrip.exceptions import BoilerstripError, ConfigurationError


class TestExtractorConfig:
    """Tests for ExtractorConfig dataclass."""

    def test_defaults(self) -> None:
        """Test default configuration values."""
        config = ExtractorConfig()

        assert config.parser == DEFAULT_PARSER == "html.parser"
        assert config.legacy_word_count is False

    def test_config_is_frozen(self) -> None:
        """Test that ExtractorConfig is immutable."""
        config = ExtractorConfig()

        with pytest.raises(FrozenInstanceError):
            config.parser = "lxml"  # type: ignore[misc]

    def test_rejects_unknown_parser(self) -> None:
        """Test that an unsupported parser raises with context."""
        with pytest.raises(ConfigurationError) as exc_info:
            ExtractorConfig(parser="regex")  # type: ignore[arg-type]

        assert exc_info.value.context["setting"] == "parser"
        assert exc_info.value.context["value"] == "regex"


class TestLoadExtractorConfig:
    """Tests for load_extractor_config function."""

    def test_defaults_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that unset variables give the default config."""
        monkeypatch.delenv("BOILERSTRIP_PARSER", raising=False)
        monkeypatch.delenv("BOILERSTRIP_LEGACY_WORD_COUNT", raising=False)

        assert load_extractor_config() == ExtractorConfig()

    def test_reads_parser(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that BOILERSTRIP_PARSER selects the backend, case-insensitively."""
        monkeypatch.setenv("BOILERSTRIP_PARSER", "LXML")

        assert load_extractor_config().parser == "lxml"

    def test_invalid_parser(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an unknown backend raises ConfigurationError."""
        monkeypatch.setenv("BOILERSTRIP_PARSER", "bogus")

        with pytest.raises(ConfigurationError) as exc_info:
            load_extractor_config()

        error = exc_info.value
        assert "BOILERSTRIP_PARSER" in error.message
        assert error.context["value"] == "bogus"

    @pytest.mark.parametrize("raw", ["1", "true", "YES", "on"])
    def test_legacy_word_count_enabled(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        """Test the accepted truthy spellings."""
        monkeypatch.setenv("BOILERSTRIP_LEGACY_WORD_COUNT", raw)

        assert load_extractor_config().legacy_word_count is True

    @pytest.mark.parametrize("raw", ["0", "false", "No", ""])
    def test_legacy_word_count_disabled(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        """Test the accepted falsy spellings."""
        monkeypatch.setenv("BOILERSTRIP_LEGACY_WORD_COUNT", raw)

        assert load_extractor_config().legacy_word_count is False

    def test_legacy_word_count_invalid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an unrecognised boolean raises."""
        monkeypatch.setenv("BOILERSTRIP_LEGACY_WORD_COUNT", "maybe")

        with pytest.raises(ConfigurationError) as exc_info:
            load_extractor_config()

        assert exc_info.value.context["setting"] == "BOILERSTRIP_LEGACY_WORD_COUNT"


class TestBoilerstripError:
    """Tests for the exception base class."""

    def test_message_includes_correlation_id(self) -> None:
        """Test that the string form carries the correlation ID."""
        error = BoilerstripError("boom", correlation_id="abcd1234")

        assert error.message == "boom"
        assert str(error) == "boom [correlation_id=abcd1234]"
        assert error.context == {}

    def test_generates_correlation_id(self) -> None:
        """Test that a correlation ID is generated when none is given."""
        assert len(BoilerstripError("boom").correlation_id) == 8
