"""Scraper package — page retrieval & structural parsing."""

from reskin.scraper.fetcher import Retriever, build_default_retriever, fetch_url
from reskin.scraper.models import PageStructure, RawPage, ScrapedContent
from reskin.scraper.parser import parse_page

__all__ = [
    "fetch_url",
    "parse_page",
    "Retriever",
    "build_default_retriever",
    "RawPage",
    "ScrapedContent",
    "PageStructure",
]
