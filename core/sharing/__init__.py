"""Prompt sharing codec: sanitization, validation, integrity stamp, and wire format.

Updates:
  v0.1.1 - 2026-10-15 - Re-export the stateless PromptShareCodec value.
  v0.1.0 - 2026-10-12 - Introduce encode/decode pipelines and component exports.
"""

from .codec import PromptShareCodec, decode, encode
from .integrity import canonical_string, compute_checksum, verify_checksum
from .sanitizer import sanitize_text
from .validation import validate_prompt_data
from .wire import WIRE_VERSION, EncodedPayload, deflate_to_token, inflate_token

__all__ = [
    "WIRE_VERSION",
    "EncodedPayload",
    "PromptShareCodec",
    "canonical_string",
    "compute_checksum",
    "decode",
    "deflate_to_token",
    "encode",
    "inflate_token",
    "sanitize_text",
    "validate_prompt_data",
    "verify_checksum",
]
