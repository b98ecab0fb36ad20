"""Transport-level prompt data exchanged through sharing codes.

Updates: v0.1.0 - 2026-10-12 - Introduce SharedPromptData projection and import helper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .prompt_model import Prompt

if TYPE_CHECKING:
    from collections.abc import Mapping

SHARED_FIELDS: tuple[str, ...] = ("title", "content", "category")


@dataclass(frozen=True, slots=True)
class SharedPromptData:
    """The three prompt fields that cross the sharing boundary.

    Instances returned by the sharing codec are sanitized and validated.
    Identifiers and timestamps never travel with a shared prompt.
    """

    title: str
    content: str
    category: str

    @classmethod
    def from_prompt(cls, prompt: Prompt) -> SharedPromptData:
        """Project the shared fields of a stored *prompt*."""
        return cls(title=prompt.title, content=prompt.content, category=prompt.category)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> SharedPromptData:
        """Build shared data from a mapping; missing or null keys become empty text."""
        values = {name: data.get(name) for name in SHARED_FIELDS}
        return cls(
            **{name: "" if value is None else str(value) for name, value in values.items()}
        )

    def to_prompt(self) -> Prompt:
        """Return a new local prompt for an imported share."""
        return Prompt.create(self.title, self.content, self.category)

    def as_dict(self) -> dict[str, str]:
        """Return a plain mapping suitable for preview rendering."""
        return {"title": self.title, "content": self.content, "category": self.category}


__all__ = ["SHARED_FIELDS", "SharedPromptData"]
