"""Deterministic rebranding of a scraped page.

``rebrand`` swaps one brand's signals for another's in a fixed order:

    validate → name → logo → colors → fonts → serialise

Every counter in the resulting :class:`ChangeSummary` is the number of
occurrences of the *original* value found before it was replaced.  A slot
whose original and target values are equal is left alone, so rebranding a
page to its own brand reports zero substitutions.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional
from urllib.parse import quote

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from reskin.brand.models import BrandElements
from reskin.brand.selectors import find_logo_image
from reskin.config import settings
from reskin.errors import RebrandValidationError
from reskin.rebrand.models import ChangeSummary, RebrandedContent
from reskin.scraper.models import ScrapedContent
from reskin.scraper.parser import extract_inline_styles, load_soup

_log = logging.getLogger(__name__)

PLACEHOLDER_LOGO_URL = "https://via.placeholder.com/150x50/3182CE/FFFFFF/?text={text}"
FONT_STYLESHEET_URL = "https://fonts.googleapis.com/css2?family={family}&display=swap"

# Text inside these elements is code, not copy.
_NON_TEXT_PARENTS = {"script", "style"}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _validate_target(target: BrandElements) -> None:
    missing = []
    if not (target.name or "").strip():
        missing.append("name")
    if target.colors is None or not (target.colors.primary or "").strip():
        missing.append("colors.primary")
    if target.typography is None or not (target.typography.primary or "").strip():
        missing.append("typography.primary")
    if missing:
        raise RebrandValidationError(missing)


def _literal(value: str) -> re.Pattern[str]:
    return re.compile(re.escape(value), re.IGNORECASE)


def _differs(old: Optional[str], new: Optional[str]) -> bool:
    """True when *old* should be replaced by *new*."""
    if not old or not new:
        return False
    return old.strip().lower() != new.strip().lower()


def _sub(pattern: re.Pattern[str], replacement: str, text: str) -> tuple[str, int]:
    # A function replacement keeps backslashes in *replacement* literal.
    return pattern.subn(lambda _m: replacement, text)


def _replace_name(soup: BeautifulSoup, old: str, new: str) -> int:
    pattern = _literal(old)
    count = 0

    for node in list(soup.find_all(string=True)):
        if isinstance(node, PreformattedString):
            continue
        if node.parent is not None and node.parent.name in _NON_TEXT_PARENTS:
            continue
        replaced, n = _sub(pattern, new, str(node))
        if n:
            node.replace_with(NavigableString(replaced))
            count += n

    for tag in soup.find_all(True):
        for attr, value in list(tag.attrs.items()):
            if isinstance(value, list):
                tokens = []
                hits = 0
                for token in value:
                    replaced, n = _sub(pattern, new, token)
                    tokens.append(replaced)
                    hits += n
                if hits:
                    tag[attr] = tokens
                    count += hits
            elif isinstance(value, str):
                replaced, n = _sub(pattern, new, value)
                if n:
                    tag[attr] = replaced
                    count += n

    return count


def _replace_logo(soup: BeautifulSoup, target: BrandElements) -> bool:
    img = find_logo_image(soup)
    if img is None:
        return False
    img["src"] = target.logo or PLACEHOLDER_LOGO_URL.format(text=quote(target.name))
    img["alt"] = f"{target.name} logo"
    return True


def _replace_in_blocks(
    blocks: list[str], pairs: Iterable[tuple[Optional[str], Optional[str]]]
) -> int:
    """Replace every ``(old, new)`` pair across *blocks* in place, in one pass.

    All originals are matched against the text as it was before the pass, so
    a value inserted for one slot is never rewritten or counted by another.
    When two slots share an original value the first slot wins.
    """
    lookup: dict[str, str] = {}
    for old, new in pairs:
        if _differs(old, new):
            lookup.setdefault(old.lower(), new)  # type: ignore[union-attr, arg-type]
    if not lookup:
        return 0

    # Longest first so that a value is never shadowed by its own prefix.
    pattern = re.compile(
        "|".join(re.escape(old) for old in sorted(lookup, key=len, reverse=True)),
        re.IGNORECASE,
    )
    count = 0
    for i, block in enumerate(blocks):
        blocks[i], n = pattern.subn(lambda m: lookup.get(m.group(0).lower(), m.group(0)), block)
        count += n
    return count


def _ensure_head(soup: BeautifulSoup) -> Tag:
    if soup.head is not None:
        return soup.head
    head = soup.new_tag("head")
    if soup.html is not None:
        soup.html.insert(0, head)
    else:
        soup.insert(0, head)
    return head


def _font_family(stack: str) -> str:
    return stack.split(",")[0].strip().strip("'\"")


def _append_font_link(soup: BeautifulSoup, stack: str) -> None:
    family = _font_family(stack)
    if not family or family.lower() == "system-ui":
        return
    href = FONT_STYLESHEET_URL.format(family=family.replace(" ", "+"))
    if soup.find("link", attrs={"href": href}) is not None:
        return
    _ensure_head(soup).append(soup.new_tag("link", attrs={"href": href, "rel": "stylesheet"}))


def _append_generator_marker(soup: BeautifulSoup, generator: str) -> None:
    if soup.find("meta", attrs={"name": "generator", "content": generator}) is not None:
        return
    _ensure_head(soup).append(
        soup.new_tag("meta", attrs={"name": "generator", "content": generator})
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def rebrand(
    content: ScrapedContent,
    original: BrandElements,
    target: BrandElements,
    *,
    generator: str | None = None,
    logger: logging.Logger | None = None,
) -> RebrandedContent:
    """Rewrite *content* so that it carries *target*'s brand instead of *original*'s.

    Args:
        content: The parsed source page.
        original: The brand currently on the page (usually extracted).
        target: The brand to apply.
        generator: Value of the ``<meta name="generator">`` marker.
            Defaults to ``settings.generator_marker``.
        logger: Receives a one-line summary of the changes.

    Returns:
        The rebranded markup, the transformed inline style text and a change
        summary.  Identical inputs always give identical output.

    Raises:
        RebrandValidationError: If *target* lacks a name, primary color or
            primary font.  Raised before anything is transformed.
    """
    _validate_target(target)
    log = logger or _log

    soup = load_soup(content.html)
    changes = ChangeSummary()

    # 1. Brand name in text and attribute values
    if _differs(original.name, target.name):
        changes.name_replacements = _replace_name(soup, original.name, target.name)

    # 2. Logo
    if original.logo:
        changes.logo_replaced = _replace_logo(soup, target)

    # 3 & 4. Colors, then fonts, in the inline style blocks
    style_tags = soup.find_all("style")
    blocks = extract_inline_styles(soup)
    before = list(blocks)

    changes.color_replacements = _replace_in_blocks(
        blocks,
        [
            (original.colors.primary, target.colors.primary),
            (original.colors.secondary, target.colors.secondary),
            (original.colors.accent, target.colors.accent),
        ],
    )
    changes.font_replacements = _replace_in_blocks(
        blocks,
        [
            (original.typography.primary, target.typography.primary),
            (original.typography.secondary, target.typography.secondary),
        ],
    )

    # 5. Serialise
    for tag, old_text, new_text in zip(style_tags, before, blocks):
        if new_text != old_text:
            tag.string = new_text

    _append_font_link(soup, target.typography.primary)
    _append_generator_marker(soup, generator or settings.generator_marker)

    log.info(
        "[rebrand] %r → %r: names=%d colors=%d fonts=%d logo=%s",
        original.name,
        target.name,
        changes.name_replacements,
        changes.color_replacements,
        changes.font_replacements,
        changes.logo_replaced,
    )

    return RebrandedContent(
        html=str(soup),
        css="\n".join(blocks),
        original_url=content.url,
        changes=changes,
    )
