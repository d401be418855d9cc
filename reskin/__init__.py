"""Reskin — infer a web page's brand identity and rewrite it with another."""

from reskin.brand import BrandElements, extract_brand
from reskin.errors import RebrandValidationError, RetrievalError
from reskin.pipeline import analyze_website, scrape_website
from reskin.rebrand import RebrandedContent, rebrand
from reskin.scraper import ScrapedContent, parse_page

__all__ = [
    "scrape_website",
    "analyze_website",
    "parse_page",
    "extract_brand",
    "rebrand",
    "ScrapedContent",
    "BrandElements",
    "RebrandedContent",
    "RetrievalError",
    "RebrandValidationError",
]
