"""Utility functions for boilerstrip."""

import logging
import re
from typing import Any

from bs4 import Tag

from boilerstrip.exceptions import generate_correlation_id

LOGGER = logging.getLogger(__name__)

WHITESPACE_RUN_PATTERN = re.compile(r"\s+")


def log_with_correlation(
    logger: logging.Logger,
    level: int,
    message: str,
    correlation_id: str | None = None,
    **kwargs: Any,
) -> None:
    """
    Log a message with correlation ID and additional context.

    Args:
        logger: Logger instance to use.
        level: Logging level (e.g., logging.INFO, logging.ERROR).
        message: Log message format string.
        correlation_id: Optional correlation ID. If None, generates a new one.
        **kwargs: Additional context to include in log extra fields.
    """
    corr_id = correlation_id or generate_correlation_id()
    extra = {"correlation_id": corr_id, **kwargs}
    logger.log(level, message, extra=extra)


def normalise_whitespace(text: str) -> str:
    """
    Collapse whitespace runs to a single space and trim both ends.

    Args:
        text: Text to normalise.

    Returns:
        Normalised text.
    """
    return WHITESPACE_RUN_PATTERN.sub(" ", text).strip()


def word_count(text: str, legacy_empty: bool = False) -> int:
    """
    Count space-delimited words after whitespace normalisation.

    Args:
        text: Visible text of a node.
        legacy_empty: Count empty text as one word (splitting "" yields one
            empty token) instead of zero.

    Returns:
        Number of words.
    """
    normalised = normalise_whitespace(text)
    if not normalised and not legacy_empty:
        return 0
    return len(normalised.split(" "))


def attribute_text(tag: Tag, name: str) -> str:
    """
    Return an attribute value as lowercase text, empty when absent.

    Multi-valued attributes such as class are joined with single spaces.

    Args:
        tag: Element to read from.
        name: Attribute name.

    Returns:
        Lowercased attribute value or "".
    """
    value = tag.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        value = " ".join(value)
    return str(value).lower()
