"""Encode and decode pipelines turning prompts into sharing codes and back.

Encoding sanitizes, validates, stamps, serialises, and compresses a prompt.
Decoding treats the code as untrusted input: it bounds the code and the
inflated payload before parsing, checks the wire version and integrity stamp,
then sanitizes and validates again before returning anything.

The integrity stamp only detects corruption and naive tampering. It is not a
signature; a decoded prompt says nothing about who shared it.

Every failure surfaces as :class:`ShareValidationError` or
:class:`DataCorruptionError`. Logs carry field names, lengths, and error
categories only, never prompt text.

Updates:
  v0.2.1 - 2026-10-18 - Bound the raw code length before trimming whitespace.
  v0.2.0 - 2026-10-16 - Reject payloads whose inflated size would break decoding.
  v0.1.1 - 2026-10-15 - Wrap unexpected failures into the sharing error taxonomy.
  v0.1.0 - 2026-10-12 - Add encode/decode pipelines and stateless codec value.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from config.settings import DEFAULT_SHARING_LIMITS
from core.exceptions import DataCorruptionError, PromptShareError, ShareValidationError
from models.prompt_model import Prompt
from models.shared_prompt import SharedPromptData

from .integrity import canonical_string, compute_checksum, verify_checksum
from .sanitizer import sanitize_text
from .validation import validate_prompt_data
from .wire import INVALID_FORMAT_MESSAGE, EncodedPayload, deflate_to_token, inflate_token

if TYPE_CHECKING:
    from config.settings import SharingLimits

logger = logging.getLogger("prompt_manager.sharing")

TOO_LARGE_TO_SHARE_MESSAGE: Final[str] = "Prompt is too large to share"
CODE_TOO_LARGE_MESSAGE: Final[str] = "Sharing code too large"


def _project(prompt: Prompt | SharedPromptData | Mapping[str, Any]) -> SharedPromptData:
    if isinstance(prompt, SharedPromptData):
        return prompt
    if isinstance(prompt, Prompt):
        return SharedPromptData.from_prompt(prompt)
    if isinstance(prompt, Mapping):
        return SharedPromptData.from_mapping(prompt)
    return SharedPromptData(
        title=str(getattr(prompt, "title", "") or ""),
        content=str(getattr(prompt, "content", "") or ""),
        category=str(getattr(prompt, "category", "") or ""),
    )


def _sanitized(data: SharedPromptData) -> SharedPromptData:
    return SharedPromptData(
        title=sanitize_text(data.title),
        content=sanitize_text(data.content),
        category=sanitize_text(data.category),
    )


def _encode(data: SharedPromptData, limits: SharingLimits) -> str:
    clean = _sanitized(data)
    validate_prompt_data(clean, limits)
    payload = EncodedPayload(
        t=clean.title,
        c=clean.content,
        cat=clean.category,
        cs=compute_checksum(canonical_string(clean.title, clean.content, clean.category)),
    )
    raw = payload.to_json_bytes()
    # Decoders refuse inflated payloads over this bound, so never emit one.
    if len(raw) > limits.decompressed_max:
        raise ShareValidationError(
            TOO_LARGE_TO_SHARE_MESSAGE,
            {
                "reason": "payload_too_large",
                "decompressed_length": len(raw),
                "max": limits.decompressed_max,
            },
        )
    token = deflate_to_token(raw)
    if len(token) > limits.encoded_max:
        raise ShareValidationError(
            TOO_LARGE_TO_SHARE_MESSAGE,
            {"reason": "encoded_too_large", "length": len(token), "max": limits.encoded_max},
        )
    logger.debug(
        "Encoded shared prompt: title=%d content=%d category=%d chars -> %d token chars",
        len(clean.title),
        len(clean.content),
        len(clean.category),
        len(token),
    )
    return token


def _decode(token: object, limits: SharingLimits) -> SharedPromptData:
    if not isinstance(token, str):
        raise DataCorruptionError(INVALID_FORMAT_MESSAGE, {"reason": "not_text"})
    if len(token) > limits.encoded_max:
        raise ShareValidationError(
            CODE_TOO_LARGE_MESSAGE,
            {"reason": "encoded_too_large", "length": len(token), "max": limits.encoded_max},
        )
    candidate = token.strip()
    if not candidate:
        raise DataCorruptionError(INVALID_FORMAT_MESSAGE, {"reason": "empty"})
    inflated = inflate_token(candidate, limits.decompressed_max)
    if len(inflated) > limits.decompressed_max:
        raise ShareValidationError(
            CODE_TOO_LARGE_MESSAGE,
            {
                "reason": "decompressed_too_large",
                "decompressed_length": len(inflated),
                "max": limits.decompressed_max,
            },
        )
    payload = EncodedPayload.from_json_bytes(inflated)
    verify_checksum(canonical_string(payload.t, payload.c, payload.cat), payload.cs)
    data = SharedPromptData(
        title=sanitize_text(payload.t),
        content=sanitize_text(payload.c),
        category=sanitize_text(payload.cat),
    )
    validate_prompt_data(data, limits)
    logger.debug(
        "Decoded sharing code: %d token chars -> title=%d content=%d category=%d chars",
        len(candidate),
        len(data.title),
        len(data.content),
        len(data.category),
    )
    return data


def encode(
    prompt: Prompt | SharedPromptData | Mapping[str, Any],
    *,
    limits: SharingLimits | None = None,
) -> str:
    """Return a URL-safe sharing code for *prompt*.

    Args:
      prompt: A stored :class:`Prompt`, a :class:`SharedPromptData`, or a mapping
        with ``title``, ``content`` and ``category`` keys.
      limits: Size bounds; defaults to :data:`DEFAULT_SHARING_LIMITS`.

    Raises:
      ShareValidationError: A field is empty or too long after sanitization, or
        the resulting code would exceed the size bounds.
    """
    active = limits or DEFAULT_SHARING_LIMITS
    try:
        return _encode(_project(prompt), active)
    except PromptShareError as exc:
        logger.info(
            "Prompt share rejected: type=%s reason=%s field=%s",
            exc.type.value,
            exc.details.get("reason"),
            exc.details.get("field"),
        )
        raise
    except Exception as exc:  # noqa: BLE001 - normalise into the sharing taxonomy
        logger.error("Unexpected failure while encoding a shared prompt", exc_info=exc)
        raise ShareValidationError(
            "Prompt could not be prepared for sharing",
            {"reason": "unexpected_error", "error": type(exc).__name__},
        ) from exc


def decode(token: str, *, limits: SharingLimits | None = None) -> SharedPromptData:
    """Return sanitized prompt data carried by sharing code *token*.

    Raises:
      ShareValidationError: The code or its inflated payload exceeds the size
        bounds, or a decoded field is empty or too long.
      DataCorruptionError: The code cannot be decompressed or parsed, uses an
        unsupported format version, or fails its integrity check.
    """
    active = limits or DEFAULT_SHARING_LIMITS
    try:
        return _decode(token, active)
    except PromptShareError as exc:
        logger.info(
            "Sharing code rejected: type=%s reason=%s field=%s",
            exc.type.value,
            exc.details.get("reason"),
            exc.details.get("field"),
        )
        raise
    except Exception as exc:  # noqa: BLE001 - normalise into the sharing taxonomy
        logger.error("Unexpected failure while decoding a sharing code", exc_info=exc)
        raise DataCorruptionError(
            INVALID_FORMAT_MESSAGE,
            {"reason": "unexpected_error", "error": type(exc).__name__},
        ) from exc


@dataclass(frozen=True, slots=True)
class PromptShareCodec:
    """Stateless codec bound to one set of sharing limits."""

    limits: SharingLimits = DEFAULT_SHARING_LIMITS

    def encode(self, prompt: Prompt | SharedPromptData | Mapping[str, Any]) -> str:
        """Return a sharing code for *prompt* using this codec's limits."""
        return encode(prompt, limits=self.limits)

    def decode(self, token: str) -> SharedPromptData:
        """Return the prompt data carried by *token* using this codec's limits."""
        return decode(token, limits=self.limits)


__all__ = [
    "CODE_TOO_LARGE_MESSAGE",
    "TOO_LARGE_TO_SHARE_MESSAGE",
    "PromptShareCodec",
    "decode",
    "encode",
]
