"""Extractor configuration management."""

import os
from dataclasses import dataclass
from typing import Literal, TypeAlias

from boilerstrip.exceptions import ConfigurationError, generate_correlation_id

ParserBackend: TypeAlias = Literal["html.parser", "lxml", "html5lib"]

SUPPORTED_PARSERS: tuple[ParserBackend, ...] = ("html.parser", "lxml", "html5lib")

DEFAULT_PARSER: ParserBackend = "html.parser"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True)
class ExtractorConfig:
    """Immutable extractor configuration."""

    parser: ParserBackend = DEFAULT_PARSER
    # Count empty text as one word, matching the historical split behaviour
    legacy_word_count: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialisation."""
        if self.parser not in SUPPORTED_PARSERS:
            raise ConfigurationError(
                f"Unsupported parser backend: {self.parser}. Must be one of: {', '.join(SUPPORTED_PARSERS)}",
                setting="parser",
                correlation_id=generate_correlation_id(),
                context={"value": self.parser},
            )


def _parse_bool(name: str, raw: str, correlation_id: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Invalid boolean for {name}: {raw!r}",
        setting=name,
        correlation_id=correlation_id,
        context={"value": raw},
    )


def load_extractor_config() -> ExtractorConfig:
    """
    Load extractor configuration from environment variables.

    Reads BOILERSTRIP_PARSER and BOILERSTRIP_LEGACY_WORD_COUNT; unset
    variables fall back to defaults.

    Returns:
        ExtractorConfig with validated settings.

    Raises:
        ConfigurationError: If a variable holds an invalid value.
    """
    correlation_id = generate_correlation_id()

    parser_str = (os.getenv("BOILERSTRIP_PARSER") or DEFAULT_PARSER).strip().lower()
    if parser_str not in SUPPORTED_PARSERS:
        raise ConfigurationError(
            f"Invalid BOILERSTRIP_PARSER: {parser_str}. Must be one of: {', '.join(SUPPORTED_PARSERS)}",
            setting="BOILERSTRIP_PARSER",
            correlation_id=correlation_id,
            context={"value": parser_str},
        )
    parser: ParserBackend = parser_str  # type: ignore[assignment]

    legacy_word_count = _parse_bool(
        "BOILERSTRIP_LEGACY_WORD_COUNT",
        os.getenv("BOILERSTRIP_LEGACY_WORD_COUNT", ""),
        correlation_id,
    )

    return ExtractorConfig(parser=parser, legacy_word_count=legacy_word_count)
