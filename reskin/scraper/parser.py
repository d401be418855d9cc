"""Structural parsing: turns raw markup into a :class:`ScrapedContent`."""

from __future__ import annotations

from typing import List
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

from reskin.scraper.models import PageStructure, ScrapedContent


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def load_soup(html: str) -> BeautifulSoup:
    """Parse *html* permissively; anything that is not a string parses as empty."""
    return BeautifulSoup(html if isinstance(html, str) else "", "html.parser")


def _origin(url: str) -> str:
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}/"


def absolutize(ref: str, base_url: str) -> str:
    """Resolve *ref* against the origin of *base_url*.

    References already starting with ``http`` are kept as-is.  ``<base>``
    elements are not consulted.
    """
    if ref.startswith("http"):
        return ref
    return urljoin(_origin(base_url), ref)


def _has_class_fragment(soup: BeautifulSoup, fragment: str) -> List:
    return soup.select(f'[class*="{fragment}"]')


def _extract_stylesheets(soup: BeautifulSoup, base_url: str) -> List[str]:
    links: List[str] = []
    for link in soup.find_all("link"):
        rel = link.get("rel") or []
        if isinstance(rel, str):
            rel = rel.split()
        href = link.get("href")
        if href and "stylesheet" in (r.lower() for r in rel):
            links.append(absolutize(href, base_url))
    return links


def _extract_images(soup: BeautifulSoup, base_url: str) -> List[str]:
    return [absolutize(img["src"], base_url) for img in soup.find_all("img") if img.get("src")]


def extract_inline_styles(soup: BeautifulSoup) -> List[str]:
    """Return the text of every ``<style>`` block, in document order."""
    return [style.get_text() for style in soup.find_all("style")]


def _extract_description(soup: BeautifulSoup) -> str:
    tag = soup.find("meta", attrs={"name": "description"})
    if tag is None:
        return ""
    return (tag.get("content") or "").strip()


def _analyze_structure(soup: BeautifulSoup) -> PageStructure:
    return PageStructure(
        header=bool(soup.find("header") or _has_class_fragment(soup, "header")),
        footer=bool(soup.find("footer") or _has_class_fragment(soup, "footer")),
        navigation=bool(soup.find("nav") or _has_class_fragment(soup, "nav")),
        sections=len(soup.find_all("section")) + len(_has_class_fragment(soup, "section")),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_page(html: str, base_url: str) -> ScrapedContent:
    """Parse *html* fetched from *base_url* into a :class:`ScrapedContent`.

    Malformed markup never raises; missing elements simply yield empty or
    zero values.  ``css`` lists the stylesheet URLs first, then the inline
    style blocks.
    """
    soup = load_soup(html)

    title = soup.title.get_text().strip() if soup.title else ""

    return ScrapedContent(
        url=base_url,
        html=html if isinstance(html, str) else "",
        css=_extract_stylesheets(soup, base_url) + extract_inline_styles(soup),
        images=_extract_images(soup, base_url),
        title=title,
        description=_extract_description(soup),
        structure=_analyze_structure(soup),
    )
