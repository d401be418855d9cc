"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, List


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int
    # Name of the retrieval path that served the page ("direct" or a proxy).
    path: str = "direct"


@dataclass
class PageStructure:
    """Coarse presence/count heuristics for a page's layout."""

    header: bool = False
    footer: bool = False
    navigation: bool = False
    sections: int = 0


@dataclass
class ScrapedContent:
    """A retrieved page plus the signals parsed out of its markup."""

    url: str
    html: str
    css: List[str] = field(default_factory=list)
    images: List[str] = field(default_factory=list)
    title: str = ""
    description: str = ""
    structure: PageStructure = field(default_factory=PageStructure)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScrapedContent":
        structure = data.get("structure") or {}
        return cls(
            url=data["url"],
            html=data.get("html") or "",
            css=list(data.get("css") or []),
            images=list(data.get("images") or []),
            title=data.get("title") or "",
            description=data.get("description") or "",
            structure=PageStructure(**structure),
        )
