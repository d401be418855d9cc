"""Brand inference: turns a :class:`ScrapedContent` into :class:`BrandElements`.

Five independent heuristic passes (name, logo, colors, typography, style)
run over the page.  Each pass is guarded on its own: if it fails, the
failure is logged and that pass contributes its documented default, so
:func:`extract_brand` never raises.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from typing import Callable, Optional, TypeVar

from bs4 import BeautifulSoup

from reskin.brand.colors import is_light, is_white_or_transparent, rank_colors
from reskin.brand.models import (
    DEFAULT_BRAND_NAME,
    BrandColors,
    BrandElements,
    BrandStyle,
    Typography,
)
from reskin.brand.selectors import BRAND_SELECTORS, BUTTON_SELECTOR, find_logo_image
from reskin.scraper.models import ScrapedContent
from reskin.scraper.parser import absolutize, extract_inline_styles, load_soup

_log = logging.getLogger(__name__)

T = TypeVar("T")

# Longer candidates are assumed to be taglines or headlines, not brand marks.
_MAX_NAME_LENGTH = 30

_FONT_FAMILY = re.compile(r"font-family\s*:\s*([^;}]+)", re.IGNORECASE)
_BORDER_RADIUS = re.compile(r"border-radius\s*:\s*([^;}]+)", re.IGNORECASE)
_LEADING_NUMBER = re.compile(r"^\s*(\d*\.?\d+)")


# ---------------------------------------------------------------------------
# Individual passes
# ---------------------------------------------------------------------------

def _name_from_title(title: str) -> str:
    return title.split(" | ")[0].split(" - ")[0].strip()


def _extract_name(soup: BeautifulSoup, title: str) -> str:
    for selector in BRAND_SELECTORS:
        element = soup.select_one(selector)
        if element is None:
            continue

        text = element.get_text().strip()
        if text and len(text) < _MAX_NAME_LENGTH:
            return text

        img = element.find("img")
        if img is not None:
            alt = (img.get("alt") or "").strip()
            if alt and len(alt) < _MAX_NAME_LENGTH:
                return alt

    return _name_from_title(title) or DEFAULT_BRAND_NAME


def _extract_logo(soup: BeautifulSoup, base_url: str) -> Optional[str]:
    img = find_logo_image(soup)
    if img is None:
        return None
    return absolutize(img["src"], base_url)


def _extract_colors(css: str) -> BrandColors:
    colors = BrandColors()
    ranked = rank_colors(css)
    if not ranked:
        return colors

    candidates = [c for c in ranked if not is_white_or_transparent(c)]
    if candidates:
        colors.primary = candidates[0]
    if len(candidates) > 1:
        colors.secondary = candidates[1]
    if len(candidates) > 2:
        colors.accent = candidates[2]

    light = [c for c in candidates if is_light(c)]
    if light:
        colors.background = light[0]

    dark = [c for c in candidates if not is_light(c)]
    if dark:
        colors.text = dark[0]

    return colors


def _ranked_values(pattern: re.Pattern[str], css: str) -> list[str]:
    values = [m.strip() for m in pattern.findall(css)]
    return [v for v, _ in Counter(v for v in values if v).most_common()]


def _extract_typography(css: str) -> Typography:
    typography = Typography()
    fonts = _ranked_values(_FONT_FAMILY, css)
    if fonts:
        typography.primary = fonts[0]
    if len(fonts) > 1:
        typography.secondary = fonts[1]
    return typography


def _is_rounded(style_attr: str) -> bool:
    match = _BORDER_RADIUS.search(style_attr or "")
    if not match:
        return False
    number = _LEADING_NUMBER.match(match.group(1))
    return bool(number) and float(number.group(1)) > 0


def _extract_style(soup: BeautifulSoup, css: str) -> BrandStyle:
    style = BrandStyle()

    radii = _ranked_values(_BORDER_RADIUS, css)
    if radii:
        style.border_radius = radii[0]

    buttons = soup.select(BUTTON_SELECTOR)
    if buttons:
        rounded = sum(1 for b in buttons if _is_rounded(b.get("style", "")))
        square = len(buttons) - rounded
        style.button_style = "rounded" if rounded > square else "square"

    return style


def _guarded(log: logging.Logger, label: str, default: Callable[[], T], func: Callable[[], T]) -> T:
    try:
        return func()
    except Exception:
        log.warning("[extract] %s pass failed; using defaults", label, exc_info=True)
        return default()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_brand(content: ScrapedContent, *, logger: logging.Logger | None = None) -> BrandElements:
    """Infer the brand identity of *content*.

    Never raises: every required field of the result is populated, with the
    default palette and typography standing in for missing signals.
    """
    log = logger or _log

    def _prepare() -> tuple[BeautifulSoup, str]:
        soup = load_soup(content.html)
        return soup, " ".join(extract_inline_styles(soup))

    soup, css = _guarded(log, "parse", lambda: (load_soup(""), ""), _prepare)
    title = getattr(content, "title", "") or ""
    base_url = getattr(content, "url", "") or ""

    brand = BrandElements(
        name=_guarded(log, "name", lambda: DEFAULT_BRAND_NAME, lambda: _extract_name(soup, title)),
        logo=_guarded(log, "logo", lambda: None, lambda: _extract_logo(soup, base_url)),
        colors=_guarded(log, "colors", BrandColors, lambda: _extract_colors(css)),
        typography=_guarded(log, "typography", Typography, lambda: _extract_typography(css)),
        style=_guarded(log, "style", BrandStyle, lambda: _extract_style(soup, css)),
    )
    log.info(
        "[extract] %r: primary=%s font=%r logo=%s",
        brand.name, brand.colors.primary, brand.typography.primary, bool(brand.logo),
    )
    return brand
