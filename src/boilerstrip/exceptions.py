"""Custom exceptions for boilerstrip with context support."""

import uuid
from typing import Any


def generate_correlation_id() -> str:
    """
    Generate an 8-character UUID-based correlation ID.

    Returns:
        8-character correlation ID string.
    """
    return str(uuid.uuid4())[:8]


class BoilerstripError(Exception):
    """Base exception for boilerstrip with context and correlation ID support."""

    def __init__(
        self,
        message: str,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialise exception with message, correlation ID, and context.

        Args:
            message: Error message.
            correlation_id: Optional correlation ID. If None, generates a new one.
            context: Optional context dictionary for debugging.
        """
        self.message = message
        self.correlation_id = correlation_id or generate_correlation_id()
        self.context = context or {}
        super().__init__(f"{message} [correlation_id={self.correlation_id}]")


class ParseInputError(BoilerstripError):
    """Raised when the input cannot be turned into a document to extract from."""

    def __init__(
        self,
        message: str,
        input_type: str | None = None,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialise parse input error with the offending input type.

        Args:
            message: Error message.
            input_type: Optional name of the type that was passed in.
            correlation_id: Optional correlation ID. If None, generates a new one.
            context: Optional context dictionary for debugging.
        """
        if context is None:
            context = {}
        if input_type is not None:
            context["input_type"] = input_type
        super().__init__(message, correlation_id=correlation_id, context=context)


class ConfigurationError(BoilerstripError):
    """Raised when configuration loading or validation fails."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialise configuration error with setting context.

        Args:
            message: Error message.
            setting: Optional name of the setting that failed validation.
            correlation_id: Optional correlation ID. If None, generates a new one.
            context: Optional context dictionary for debugging.
        """
        if context is None:
            context = {}
        if setting is not None:
            context["setting"] = setting
        super().__init__(message, correlation_id=correlation_id, context=context)
