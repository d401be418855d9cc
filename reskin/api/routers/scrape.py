"""Scrape endpoint.

Routes
------
POST /scrape    Body: {"url": "https://...", "use_proxy": false}  → content + brand
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, Header, HTTPException
from pydantic import BaseModel, HttpUrl

from reskin.errors import RetrievalError
from reskin.pipeline import analyze_website
from reskin.records import build_website_record

router = APIRouter()

_log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class ScrapeRequest(BaseModel):
    url: HttpUrl
    use_proxy: bool = False
    name: Optional[str] = None
    description: Optional[str] = None


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("")
def scrape_endpoint(
    body: ScrapeRequest,
    x_user_id: Optional[str] = Header(default=None),
) -> dict[str, Any]:
    """Fetch a page, parse it and infer its brand.

    Returns the parsed ``content``, the inferred ``brand`` and the ``record``
    a website store would persist.  A fetch failure answers 502 with the
    cause and every failed attempt so the caller can retry with
    ``use_proxy`` enabled.
    """
    url = str(body.url)
    try:
        content, brand = analyze_website(url, body.use_proxy, logger=_log)
    except RetrievalError as exc:
        raise HTTPException(
            status_code=502,
            detail={
                "error": str(exc),
                "cause": exc.cause.value,
                "url": exc.url,
                "attempts": [a.to_dict() for a in exc.attempts],
                "hint": None if body.use_proxy else "Retry with use_proxy enabled.",
            },
        ) from exc
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    creator = x_user_id or "anonymous"
    _log.info("[activity] user=%s action=scrape url=%s", creator, url)

    return {
        "content": content.to_dict(),
        "brand": brand.to_dict(),
        "record": build_website_record(
            content,
            brand,
            creator=creator,
            name=body.name,
            description=body.description,
        ),
    }
