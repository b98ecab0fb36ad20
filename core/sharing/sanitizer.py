"""Markup stripping for shared prompt text.

Updates:
  v0.1.2 - 2026-10-18 - Replace lone surrogates so cleaning never fails on odd text.
  v0.1.1 - 2026-10-16 - Trim after cleaning so sanitization is idempotent.
  v0.1.0 - 2026-10-12 - Strip all HTML via nh3 with empty tag and attribute allow-lists.
"""

from __future__ import annotations

from typing import Final

import nh3

_ALLOWED_TAGS: Final[set[str]] = set()
_ALLOWED_ATTRIBUTES: Final[dict[str, set[str]]] = {}
_DROPPED_CONTENT_TAGS: Final[set[str]] = {"script", "style"}


def sanitize_text(text: object) -> str:
    """Return *text* trimmed and stripped of every tag and attribute.

    Inner text is kept, except for ``script`` and ``style`` elements whose
    content is dropped together with the tag. Characters with markup meaning
    (``<``, ``>``, ``&``) come back HTML-escaped, which makes the output a
    fixed point: ``sanitize_text(sanitize_text(x)) == sanitize_text(x)``.
    """
    if text is None:
        return ""
    # nh3 only accepts valid UTF-8, so lone surrogates become "?".
    candidate = str(text).encode("utf-8", "replace").decode("utf-8").strip()
    if not candidate:
        return ""
    cleaned = nh3.clean(
        candidate,
        tags=_ALLOWED_TAGS,
        clean_content_tags=_DROPPED_CONTENT_TAGS,
        attributes=_ALLOWED_ATTRIBUTES,
        strip_comments=True,
        link_rel=None,
    )
    return cleaned.strip()


__all__ = ["sanitize_text"]
