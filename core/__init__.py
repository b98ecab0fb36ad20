"""Core service layer for prompt sharing.

Updates:
  v0.2.0 - 2026-10-15 - Export the sharing error taxonomy alongside the codec.
  v0.1.0 - 2026-10-12 - Surface the prompt sharing encode/decode API.
"""

from .exceptions import (
    DataCorruptionError,
    PromptManagerError,
    PromptShareError,
    ShareErrorType,
    ShareValidationError,
)
from .sharing import PromptShareCodec, decode, encode, sanitize_text, validate_prompt_data

__all__ = [
    "DataCorruptionError",
    "PromptManagerError",
    "PromptShareCodec",
    "PromptShareError",
    "ShareErrorType",
    "ShareValidationError",
    "decode",
    "encode",
    "sanitize_text",
    "validate_prompt_data",
]
