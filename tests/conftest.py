"""Pytest configuration for shared sharing-codec fixtures.

Updates:
  v0.1.0 - 2026-10-12 - Provide tight limits and env isolation fixtures.
"""

from __future__ import annotations

import os

import pytest
from pytest import MonkeyPatch

from config.settings import SharingLimits


@pytest.fixture
def tight_limits() -> SharingLimits:
    """Limits with a 10 000 character content cap used by size scenarios."""
    return SharingLimits(title_max=100, content_max=10_000, category_max=50, encoded_max=40_000)


@pytest.fixture
def clean_sharing_env(monkeypatch: MonkeyPatch) -> MonkeyPatch:
    """Remove every PROMPT_SHARING_* variable so settings start from defaults."""
    for key in list(os.environ):
        if key.upper().startswith("PROMPT_SHARING_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch
