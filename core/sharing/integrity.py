"""Integrity stamp computed over the canonical shared fields.

The stamp is a CRC-32 checksum. It catches accidental corruption and naive
edits of a sharing code; anyone can recompute it, so it never proves who
produced a code.

Updates: v0.1.0 - 2026-10-12 - Add CRC-32 stamp over pipe-joined shared fields.
"""

from __future__ import annotations

import hmac
import zlib
from typing import Final

from core.exceptions import DataCorruptionError

CANONICAL_SEPARATOR: Final[str] = "|"
CORRUPTED_MESSAGE: Final[str] = "Sharing code appears corrupted. Please ask the sender to reshare."


def canonical_string(title: str, content: str, category: str) -> str:
    """Return the order-dependent string the stamp is computed over."""
    return CANONICAL_SEPARATOR.join((title, content, category))


def compute_checksum(canonical: str) -> str:
    """Return the 8-digit lowercase hex CRC-32 of *canonical*."""
    return f"{zlib.crc32(canonical.encode('utf-8')) & 0xFFFFFFFF:08x}"


def verify_checksum(canonical: str, expected: str) -> None:
    """Raise :class:`DataCorruptionError` when *expected* does not match *canonical*."""
    actual = compute_checksum(canonical)
    if not hmac.compare_digest(actual.encode("ascii"), str(expected).encode("utf-8")):
        raise DataCorruptionError(CORRUPTED_MESSAGE, {"reason": "checksum_mismatch"})


__all__ = [
    "CANONICAL_SEPARATOR",
    "CORRUPTED_MESSAGE",
    "canonical_string",
    "compute_checksum",
    "verify_checksum",
]
