"""Utilities for rendering pipeline results in the CLI."""

from __future__ import annotations

from typing import List

from reskin.brand.models import BrandElements
from reskin.rebrand.models import ChangeSummary
from reskin.scraper.models import ScrapedContent


def render_content(content: ScrapedContent) -> str:
    """Summarise a parsed page as an indented block of lines."""
    s = content.structure
    flags = [name for name, present in
             (("header", s.header), ("footer", s.footer), ("navigation", s.navigation))
             if present]
    lines = [
        f"Title       : {content.title or '(none)'}",
        f"Description : {content.description or '(none)'}",
        f"Stylesheets : {len(content.css)} (links + inline blocks)",
        f"Images      : {len(content.images)}",
        f"Structure   : {', '.join(flags) or 'no landmarks'}; {s.sections} section(s)",
    ]
    return "\n".join(lines)


def render_brand(brand: BrandElements) -> str:
    """Render a brand as aligned ``key : value`` lines; unset fields are skipped."""
    c = brand.colors
    t = brand.typography
    rows: List[tuple[str, str | None]] = [
        ("Name", brand.name),
        ("Logo", brand.logo),
        ("Primary", c.primary),
        ("Secondary", c.secondary),
        ("Accent", c.accent),
        ("Background", c.background),
        ("Text", c.text),
        ("Font", t.primary),
        ("Font (alt)", t.secondary),
        ("Radius", brand.style.border_radius),
        ("Buttons", brand.style.button_style),
    ]
    width = max(len(k) for k, _ in rows)
    return "\n".join(f"{k.ljust(width)} : {v}" for k, v in rows if v)


def render_changes(changes: ChangeSummary) -> str:
    return (
        f"names={changes.name_replacements}  "
        f"colors={changes.color_replacements}  "
        f"fonts={changes.font_replacements}  "
        f"logo={'replaced' if changes.logo_replaced else 'unchanged'}"
    )
