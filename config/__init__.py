"""Configuration helpers for prompt sharing.

Updates: v0.2.0 - 2026-10-14 - Expose JSON-backed settings loader.
Updates: v0.1.0 - 2026-10-12 - Expose sharing limits and configuration error types.
"""

from .settings import (
    DEFAULT_CATEGORY_MAX,
    DEFAULT_CONTENT_MAX,
    DEFAULT_ENCODED_MAX,
    DEFAULT_SHARING_LIMITS,
    DEFAULT_TITLE_MAX,
    SettingsError,
    SharingLimits,
    SharingSettings,
    load_settings,
)

__all__ = [
    "DEFAULT_CATEGORY_MAX",
    "DEFAULT_CONTENT_MAX",
    "DEFAULT_ENCODED_MAX",
    "DEFAULT_SHARING_LIMITS",
    "DEFAULT_TITLE_MAX",
    "SettingsError",
    "SharingLimits",
    "SharingSettings",
    "load_settings",
]
