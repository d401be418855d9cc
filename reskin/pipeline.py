"""End-to-end pipeline: URL → ScrapedContent → BrandElements.

    retrieve → parse → extract

Each call is self-contained; nothing is cached or shared between calls.
"""

from __future__ import annotations

import logging

from reskin.brand.extractor import extract_brand
from reskin.brand.models import BrandElements
from reskin.scraper.fetcher import fetch_url
from reskin.scraper.models import ScrapedContent
from reskin.scraper.parser import parse_page


def scrape_website(
    url: str,
    use_proxy: bool = False,
    *,
    logger: logging.Logger | None = None,
    deadline: float | None = None,
) -> ScrapedContent:
    """Retrieve *url* and parse it.

    Raises:
        ValueError: If *url* is not an absolute http(s) URL.
        RetrievalError: If no retrieval path could fetch the page.
    """
    raw = fetch_url(url, use_proxy, logger=logger, deadline=deadline)
    return parse_page(raw.html, url)


def analyze_website(
    url: str,
    use_proxy: bool = False,
    *,
    logger: logging.Logger | None = None,
    deadline: float | None = None,
) -> tuple[ScrapedContent, BrandElements]:
    """Retrieve and parse *url*, then infer its brand."""
    content = scrape_website(url, use_proxy, logger=logger, deadline=deadline)
    return content, extract_brand(content, logger=logger)
