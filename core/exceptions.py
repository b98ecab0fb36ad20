"""Common exception classes for core package.

All exceptions ultimately inherit from :class:`PromptManagerError`, allowing
callers to catch a single base class for any failure while still
distinguishing individual error categories when needed.

Sharing failures carry a :class:`ShareErrorType` discriminant and a
machine-readable ``details`` mapping so interfaces can render field-specific
feedback without parsing messages.

Updates:
  v0.2.0 - 2026-10-15 - Add structured details and to_dict() for sharing errors.
  v0.1.0 - 2026-10-12 - Created module with the sharing error taxonomy.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from collections.abc import Mapping


class PromptManagerError(Exception):
    """Base exception for Prompt Manager failures."""


class ShareErrorType(str, Enum):
    """Discriminant surfaced with every prompt sharing failure."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    DATA_CORRUPTION = "DATA_CORRUPTION"


class PromptShareError(PromptManagerError):
    """Base class for prompt sharing codec failures."""

    error_type: ClassVar[ShareErrorType]

    def __init__(self, message: str, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = dict(details or {})

    @property
    def type(self) -> ShareErrorType:
        """Return the error category discriminant."""
        return self.error_type

    def to_dict(self) -> dict[str, Any]:
        """Return a serialisable representation for interface layers."""
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": dict(self.details),
        }


class ShareValidationError(PromptShareError):
    """Raised when prompt fields or sharing codes break a required or size limit."""

    error_type = ShareErrorType.VALIDATION_ERROR


class DataCorruptionError(PromptShareError):
    """Raised when a sharing code is malformed, unsupported, or fails its integrity check."""

    error_type = ShareErrorType.DATA_CORRUPTION


__all__ = [
    "DataCorruptionError",
    "PromptManagerError",
    "PromptShareError",
    "ShareErrorType",
    "ShareValidationError",
]
