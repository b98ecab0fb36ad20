"""Tests for required-field and length validation of shared prompts.

Updates:
  v0.1.1 - 2026-10-18 - Cover ordering among the length checks.
  v0.1.0 - 2026-10-12 - Cover check ordering and structured error details.
"""

from __future__ import annotations

import pytest

from config.settings import DEFAULT_SHARING_LIMITS, SharingLimits
from core.exceptions import ShareErrorType, ShareValidationError
from core.sharing import validate_prompt_data
from models import SharedPromptData


def _data(
    title: str = "Title", content: str = "Content", category: str = "Category"
) -> SharedPromptData:
    return SharedPromptData(title=title, content=content, category=category)


def test_validate_prompt_data_accepts_valid_data() -> None:
    """Well-formed data passes without raising."""
    validate_prompt_data(_data())


@pytest.mark.parametrize(
    ("data", "field", "message"),
    [
        (_data(title=""), "title", "Title is required"),
        (_data(title="   "), "title", "Title is required"),
        (_data(content=""), "content", "Content is required"),
        (_data(category=""), "category", "Category is required"),
    ],
)
def test_validate_prompt_data_reports_missing_fields(
    data: SharedPromptData, field: str, message: str
) -> None:
    """Empty or blank fields are named in the error details."""
    with pytest.raises(ShareValidationError) as excinfo:
        validate_prompt_data(data)

    assert str(excinfo.value) == message
    assert excinfo.value.type is ShareErrorType.VALIDATION_ERROR
    assert excinfo.value.details == {"field": field, "reason": "required"}


@pytest.mark.parametrize(
    ("field", "maximum"),
    [
        ("title", DEFAULT_SHARING_LIMITS.title_max),
        ("content", DEFAULT_SHARING_LIMITS.content_max),
        ("category", DEFAULT_SHARING_LIMITS.category_max),
    ],
)
def test_validate_prompt_data_reports_length_details(field: str, maximum: int) -> None:
    """Over-long fields report the observed length and the configured maximum."""
    data = _data(**{field: "x" * (maximum + 1)})

    with pytest.raises(ShareValidationError) as excinfo:
        validate_prompt_data(data)

    assert "too long" in str(excinfo.value)
    assert f"max {maximum} characters" in str(excinfo.value)
    assert excinfo.value.details == {
        "field": field,
        "reason": "too_long",
        "length": maximum + 1,
        "max": maximum,
    }


def test_validate_prompt_data_accepts_fields_at_the_limit() -> None:
    """A field exactly at its maximum is still valid."""
    limits = DEFAULT_SHARING_LIMITS
    validate_prompt_data(
        _data(
            title="t" * limits.title_max,
            content="c" * limits.content_max,
            category="k" * limits.category_max,
        )
    )


def test_validate_prompt_data_checks_required_before_length() -> None:
    """An empty category wins over an over-long title."""
    data = _data(title="x" * 500, category="")

    with pytest.raises(ShareValidationError) as excinfo:
        validate_prompt_data(data)

    assert excinfo.value.details["field"] == "category"
    assert excinfo.value.details["reason"] == "required"


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"title": "t" * 101, "content": "c" * 20_001, "category": "k" * 51}, "title"),
        ({"title": "t" * 101, "content": "c" * 20_001}, "title"),
        ({"content": "c" * 20_001, "category": "k" * 51}, "content"),
        ({"title": "t" * 101, "category": "k" * 51}, "title"),
    ],
)
def test_validate_prompt_data_checks_lengths_in_field_order(
    overrides: dict[str, str], field: str
) -> None:
    """Length checks run title, then content, then category."""
    with pytest.raises(ShareValidationError) as excinfo:
        validate_prompt_data(_data(**overrides))

    assert excinfo.value.details["field"] == field
    assert excinfo.value.details["reason"] == "too_long"


def test_validate_prompt_data_uses_injected_limits(tight_limits: SharingLimits) -> None:
    """Custom limits replace the defaults."""
    data = _data(content="x" * 11_000)

    validate_prompt_data(data)
    with pytest.raises(ShareValidationError) as excinfo:
        validate_prompt_data(data, tight_limits)

    assert excinfo.value.details["max"] == 10_000
