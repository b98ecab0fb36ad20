"""Versioned wire payload and its compact URL-safe token form.

Tokens are raw DEFLATE streams of the compact JSON payload, encoded with the
URL-safe base64 alphabet and no padding, so they only ever contain
``A-Z a-z 0-9 - _``.

Updates:
  v0.1.2 - 2026-10-18 - Sanitize and shorten the version named in rejection messages.
  v0.1.1 - 2026-10-16 - Cap inflation output so oversized payloads never fully expand.
  v0.1.0 - 2026-10-12 - Add payload dataclass plus deflate/base64 token helpers.
"""

from __future__ import annotations

import base64
import binascii
import json
import re
import zlib
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final, cast

from core.exceptions import DataCorruptionError

from .sanitizer import sanitize_text

WIRE_VERSION: Final[str] = "1.0"
INVALID_FORMAT_MESSAGE: Final[str] = "Invalid sharing code format"

_TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_-]+")
_PAYLOAD_TEXT_KEYS: Final[tuple[str, ...]] = ("t", "c", "cat", "cs")
_VERSION_DISPLAY_MAX: Final[int] = 16


def _invalid_format(reason: str) -> DataCorruptionError:
    return DataCorruptionError(INVALID_FORMAT_MESSAGE, {"reason": reason})


def _display_version(version: object) -> str:
    if version is None:
        return "unknown"
    shown = sanitize_text(version)[:_VERSION_DISPLAY_MAX]
    return shown or "unknown"


@dataclass(frozen=True, slots=True)
class EncodedPayload:
    """JSON document carried inside a sharing code."""

    t: str
    c: str
    cat: str
    cs: str
    v: str = WIRE_VERSION

    def to_json_bytes(self) -> bytes:
        """Return the compact UTF-8 JSON serialisation."""
        document = {"v": self.v, "t": self.t, "c": self.c, "cat": self.cat, "cs": self.cs}
        return json.dumps(document, ensure_ascii=False, separators=(",", ":")).encode("utf-8")

    @classmethod
    def from_json_bytes(cls, raw: bytes) -> EncodedPayload:
        """Parse *raw* JSON into a payload, checking the wire version first."""
        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise _invalid_format("malformed_json") from exc
        if not isinstance(data, Mapping):
            raise _invalid_format("not_an_object")
        document = cast("Mapping[str, Any]", data)
        version = document.get("v")
        if version != WIRE_VERSION:
            shown = _display_version(version)
            raise DataCorruptionError(
                f"Sharing code format v{shown} is not supported. "
                "Please ask the sender to reshare.",
                {"reason": "unsupported_version", "version": shown},
            )
        values: dict[str, str] = {}
        for key in _PAYLOAD_TEXT_KEYS:
            value = document.get(key)
            if not isinstance(value, str):
                raise _invalid_format("missing_field")
            values[key] = value
        return cls(v=WIRE_VERSION, **values)


def deflate_to_token(raw: bytes) -> str:
    """Compress *raw* into a URL-safe token."""
    compressor = zlib.compressobj(level=9, wbits=-zlib.MAX_WBITS)
    compressed = compressor.compress(raw) + compressor.flush()
    return base64.urlsafe_b64encode(compressed).decode("ascii").rstrip("=")


def inflate_token(token: str, max_bytes: int) -> bytes:
    """Return the inflated bytes of *token*, stopping after ``max_bytes + 1`` bytes.

    A result longer than *max_bytes* means the payload exceeded the bound;
    the remainder of the stream is never expanded.
    """
    if not _TOKEN_PATTERN.fullmatch(token):
        raise _invalid_format("invalid_alphabet")
    padded = token + "=" * (-len(token) % 4)
    try:
        compressed = base64.b64decode(padded, altchars=b"-_", validate=True)
    except (binascii.Error, ValueError) as exc:
        raise _invalid_format("invalid_base64") from exc
    decompressor = zlib.decompressobj(wbits=-zlib.MAX_WBITS)
    try:
        inflated = decompressor.decompress(compressed, max_bytes + 1)
    except zlib.error as exc:
        raise _invalid_format("decompression_failed") from exc
    if len(inflated) > max_bytes:
        return inflated
    if not decompressor.eof or decompressor.unused_data:
        raise _invalid_format("truncated_stream")
    return inflated


__all__ = [
    "INVALID_FORMAT_MESSAGE",
    "WIRE_VERSION",
    "EncodedPayload",
    "deflate_to_token",
    "inflate_token",
]
