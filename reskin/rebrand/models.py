"""Data models for rebranding output."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class ChangeSummary:
    """How many substitutions of each kind a rebrand made."""

    name_replacements: int = 0
    color_replacements: int = 0
    font_replacements: int = 0
    logo_replaced: bool = False


@dataclass
class RebrandedContent:
    """The transformed document plus its change audit."""

    html: str
    css: str
    original_url: str
    changes: ChangeSummary = field(default_factory=ChangeSummary)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
