"""Required-field and length checks for shared prompt data.

Updates: v0.1.0 - 2026-10-12 - Validate sanitized fields against configured limits.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.settings import DEFAULT_SHARING_LIMITS
from core.exceptions import ShareValidationError
from models.shared_prompt import SHARED_FIELDS

if TYPE_CHECKING:
    from config.settings import SharingLimits
    from models.shared_prompt import SharedPromptData

logger = logging.getLogger("prompt_manager.sharing")


def validate_prompt_data(
    data: SharedPromptData,
    limits: SharingLimits = DEFAULT_SHARING_LIMITS,
) -> None:
    """Raise :class:`ShareValidationError` on the first violated field rule.

    Required checks run for every field before any length check, in the
    order title, content, category.
    """
    for name in SHARED_FIELDS:
        if not getattr(data, name).strip():
            logger.info("Shared prompt rejected: %s is empty", name)
            raise ShareValidationError(
                f"{name.capitalize()} is required",
                {"field": name, "reason": "required"},
            )
    for name in SHARED_FIELDS:
        length = len(getattr(data, name))
        maximum = limits.field_max(name)
        if length > maximum:
            logger.info(
                "Shared prompt rejected: %s length %d exceeds %d", name, length, maximum
            )
            raise ShareValidationError(
                f"{name.capitalize()} too long (max {maximum} characters)",
                {"field": name, "reason": "too_long", "length": length, "max": maximum},
            )


__all__ = ["validate_prompt_data"]
