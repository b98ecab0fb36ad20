"""Data models for prompt sharing.

Updates: v0.2.0 - 2026-10-12 - Export SharedPromptData transport dataclass.
Updates: v0.1.0 - 2026-10-12 - Export Prompt dataclass.
"""

from .prompt_model import DEFAULT_CATEGORY, Prompt
from .shared_prompt import SHARED_FIELDS, SharedPromptData

__all__ = [
    "DEFAULT_CATEGORY",
    "Prompt",
    "SHARED_FIELDS",
    "SharedPromptData",
]
