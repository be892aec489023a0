"""Exceptions raised by the OPPR engine."""

from __future__ import annotations

from collections.abc import Iterable


class OPPRError(Exception):
    """Base exception for all engine errors."""


class ConfigurationError(OPPRError):
    """Base exception for configuration errors with optional suggestions."""

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        self.message = message
        self.suggestion = suggestion
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"[Configuration Error] {self.message}"
        if self.suggestion:
            msg += f"\n[Suggestion] {self.suggestion}"
        return msg


class RatingSystemNotFoundError(ConfigurationError):
    """Error when a rating system id is not registered."""

    def __init__(self, system_id: str, available: Iterable[str]) -> None:
        self.system_id = system_id
        self.available = sorted(available)
        listing = ", ".join(self.available) if self.available else "none"
        super().__init__(
            f"Rating system '{system_id}' not found. Available systems: {listing}",
            "Register the rating system during application startup.",
        )


class DuplicateRatingSystemError(ConfigurationError):
    """Error when a rating system id is registered twice."""

    def __init__(self, system_id: str) -> None:
        self.system_id = system_id
        super().__init__(f"Rating system '{system_id}' is already registered")


class RegistryFrozenError(ConfigurationError):
    """Error when the registry is modified after initialization."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"Cannot {operation} rating systems after the registry was frozen",
            "Register rating systems before calling freeze().",
        )


class ValidationError(OPPRError):
    """Malformed input data.

    Attributes:
        line: 1-based source line when the input came from a file.
        field: Name of the offending field, if known.
    """

    def __init__(self, message: str, *, line: int | None = None, field: str | None = None) -> None:
        self.line = line
        self.field = field
        if line is not None:
            message = f"Line {line}: {message}"
        super().__init__(message)
