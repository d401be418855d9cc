"""CSS selectors for the elements that usually carry a brand mark.

Shared by the extractor (to find the brand) and the rebrander (to replace
it), so both always agree on which element is "the logo".
"""

from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup, Tag

# Probed in priority order; the first match of each selector is examined.
BRAND_SELECTORS = (
    "a.brand",
    "a.navbar-brand",
    ".brand",
    ".logo",
    "header .logo",
    "header h1",
    "header a",
    'a[class*="logo"]',
    'a[class*="brand"]',
)

LOGO_SELECTORS = (
    "a.brand img",
    "a.navbar-brand img",
    ".brand img",
    ".logo img",
    "header .logo img",
    'a[class*="logo"] img',
    'a[class*="brand"] img',
    'img[class*="logo"]',
    'img[alt*="logo"]',
    'img[alt*="Logo"]',
)

BUTTON_SELECTOR = 'button, .btn, [class*="button"]'


def find_logo_image(soup: BeautifulSoup) -> Optional[Tag]:
    """Return the first logo-like ``<img>`` that has a ``src``, if any."""
    for selector in LOGO_SELECTORS:
        element = soup.select_one(selector)
        if element is not None and element.get("src"):
            return element
    return None
