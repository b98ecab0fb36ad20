"""Settings management utilities for prompt sharing configuration.

Updates:
  v0.2.2 - 2026-10-18 - Validate limits built directly as well as those loaded from settings.
  v0.2.1 - 2026-10-16 - Require encoded bound large enough for the largest valid prompt.
  v0.2.0 - 2026-10-14 - Load sharing limits from an optional JSON configuration file.
  v0.1.0 - 2026-10-12 - Introduce sharing size limits sourced from environment variables.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final, cast

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

DEFAULT_TITLE_MAX: Final[int] = 100
DEFAULT_CONTENT_MAX: Final[int] = 20_000
DEFAULT_CATEGORY_MAX: Final[int] = 50
DEFAULT_ENCODED_MAX: Final[int] = 40_000
DECOMPRESSION_RATIO: Final[int] = 2

_LIMIT_FIELDS: tuple[str, ...] = ("title_max", "content_max", "category_max", "encoded_max")

logger = logging.getLogger("prompt_manager.settings")


class SettingsError(Exception):
    """Raised when sharing configuration cannot be loaded or validated."""


def _limits_problem(
    title_max: int, content_max: int, category_max: int, encoded_max: int
) -> str | None:
    """Return why the limits are unusable, or None when they are consistent."""
    if min(title_max, content_max, category_max, encoded_max) <= 0:
        return "sharing limits must be greater than zero"
    smallest_useful = title_max + content_max + category_max
    if encoded_max < smallest_useful:
        return (
            "encoded_max must be at least the combined field maxima "
            f"({smallest_useful}) so maximum-size prompts remain shareable"
        )
    return None


@dataclass(frozen=True, slots=True)
class SharingLimits:
    """Size bounds applied identically by the encode and decode pipelines."""

    title_max: int = DEFAULT_TITLE_MAX
    content_max: int = DEFAULT_CONTENT_MAX
    category_max: int = DEFAULT_CATEGORY_MAX
    encoded_max: int = DEFAULT_ENCODED_MAX

    def __post_init__(self) -> None:
        problem = _limits_problem(
            self.title_max, self.content_max, self.category_max, self.encoded_max
        )
        if problem:
            raise SettingsError(problem)

    @property
    def decompressed_max(self) -> int:
        """Return the bound on inflated payload size in bytes."""
        return self.encoded_max * DECOMPRESSION_RATIO

    def field_max(self, field_name: str) -> int:
        """Return the configured maximum length for *field_name*."""
        return cast("int", getattr(self, f"{field_name}_max"))


DEFAULT_SHARING_LIMITS: Final[SharingLimits] = SharingLimits()


class SharingSettings(BaseSettings):
    """Sharing limits sourced from keyword overrides, a JSON file, or the environment."""

    title_max: int = Field(
        default=DEFAULT_TITLE_MAX,
        description="Maximum title length in characters after sanitization.",
    )
    content_max: int = Field(
        default=DEFAULT_CONTENT_MAX,
        description="Maximum prompt body length in characters after sanitization.",
    )
    category_max: int = Field(
        default=DEFAULT_CATEGORY_MAX,
        description="Maximum category length in characters after sanitization.",
    )
    encoded_max: int = Field(
        default=DEFAULT_ENCODED_MAX,
        description=(
            "Maximum sharing code length. The inflated payload is bounded at "
            f"{DECOMPRESSION_RATIO}x this value."
        ),
    )

    model_config = cast(
        "SettingsConfigDict",
        {
            "env_prefix": "PROMPT_SHARING_",
            "case_sensitive": False,
            "frozen": True,
        },
    )

    @field_validator(*_LIMIT_FIELDS)
    def _validate_positive(cls, value: int) -> int:
        """Ensure every limit is a positive integer."""
        if value <= 0:
            raise ValueError("sharing limits must be greater than zero")
        return value

    @model_validator(mode="after")
    def _validate_encoded_bound(self) -> SharingSettings:
        problem = _limits_problem(
            self.title_max, self.content_max, self.category_max, self.encoded_max
        )
        if problem:
            raise ValueError(problem)
        return self

    def to_limits(self) -> SharingLimits:
        """Return the immutable limits value consumed by the sharing codec."""
        return SharingLimits(
            title_max=self.title_max,
            content_max=self.content_max,
            category_max=self.category_max,
            encoded_max=self.encoded_max,
        )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
    ]:
        """Define configuration source precedence.

        Order (highest → lowest):
            1. Explicit keyword arguments (e.g. load_settings(content_max=10_000)).
            2. JSON configuration file named by ``PROMPT_SHARING_CONFIG_JSON``.
            3. Environment variables (``PROMPT_SHARING_CONTENT_MAX`` and friends).
        """
        return (
            init_settings,
            cls._json_config_settings_source(settings_cls),
            env_settings,
        )

    @classmethod
    def _json_config_settings_source(
        cls,
        _: type[BaseSettings],
    ) -> PydanticBaseSettingsSource:
        """Return settings extracted from an optional JSON config file."""

        def _loader(_: BaseSettings | None = None) -> dict[str, Any]:
            explicit_path = os.getenv("PROMPT_SHARING_CONFIG_JSON")
            if not explicit_path or not explicit_path.strip():
                return {}
            path = Path(explicit_path.strip()).expanduser()
            if not path.exists():
                raise SettingsError(f"Configuration file not found: {path}")
            try:
                raw_contents = path.read_text(encoding="utf-8")
            except OSError as exc:  # pragma: no cover - filesystem failure is env-specific
                raise SettingsError(f"Unable to read configuration file: {path}") from exc
            try:
                data = json.loads(raw_contents)
            except json.JSONDecodeError as exc:
                raise SettingsError(f"Invalid JSON in configuration file: {path}") from exc
            if not isinstance(data, dict):
                raise SettingsError(f"Configuration file {path} must contain a JSON object")
            mapping_data = cast("Mapping[object, Any]", data)
            data_dict: dict[str, Any] = {str(key): value for key, value in mapping_data.items()}
            unknown = sorted(key for key in data_dict if key not in _LIMIT_FIELDS)
            if unknown:
                logger.warning(
                    "Ignoring unknown key(s) %s in configuration file %s",
                    ", ".join(unknown),
                    path,
                )
            return {key: data_dict[key] for key in _LIMIT_FIELDS if key in data_dict}

        return cast("PydanticBaseSettingsSource", _loader)


def load_settings(**overrides: Any) -> SharingSettings:
    """Return validated settings, raising SettingsError on failure."""
    try:
        return SharingSettings(**overrides)
    except SettingsError:
        raise
    except ValidationError as exc:
        raise SettingsError("Invalid prompt sharing configuration") from exc
