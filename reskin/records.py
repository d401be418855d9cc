"""Record shape handed to the persistence collaborator.

The pipeline never stores anything itself; it only builds the document that
a website store would save.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from reskin.brand.models import BrandElements
from reskin.rebrand.models import RebrandedContent
from reskin.scraper.models import ScrapedContent


def build_website_record(
    content: ScrapedContent,
    brand: BrandElements,
    *,
    creator: str,
    name: Optional[str] = None,
    description: Optional[str] = None,
    rebranded: Optional[RebrandedContent] = None,
    is_public: bool = False,
    collaborators: Iterable[str] = (),
) -> dict[str, Any]:
    """Return the website record for *content*.

    *name* defaults to the brand name and *description* to the page's meta
    description.  ``rebranded_content`` is only present when *rebranded* is
    given; its ``css`` is a list so the AI supplement can be stored as a
    separate entry.
    """
    record: dict[str, Any] = {
        "name": name or brand.name,
        "url": content.url,
        "description": description or content.description,
        "original_content": content.to_dict(),
        "brand_elements": brand.to_dict(),
        "creator": creator,
        "is_public": is_public,
        "collaborators": list(collaborators),
    }
    if rebranded is not None:
        record["rebranded_content"] = {
            "html": rebranded.html,
            "css": [rebranded.css] if rebranded.css else [],
            "images": list(content.images),
        }
    return record
