"""Rebrand endpoint.

Routes
------
POST /rebrand    Body: {"content": {...}, "original": {...}, "target": {...}}
"""

from __future__ import annotations

import logging
from typing import Any, List, Literal, Optional

from fastapi import APIRouter, Header, HTTPException
from pydantic import BaseModel, Field

from reskin.brand.models import BrandElements
from reskin.errors import RebrandValidationError
from reskin.rebrand.ai import apply_ai_css
from reskin.rebrand.rebrander import rebrand
from reskin.scraper.models import ScrapedContent

router = APIRouter()

_log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class ColorsBody(BaseModel):
    primary: Optional[str] = None
    secondary: Optional[str] = None
    background: Optional[str] = None
    text: Optional[str] = None
    accent: Optional[str] = None


class TypographyBody(BaseModel):
    primary: Optional[str] = None
    secondary: Optional[str] = None


class StyleBody(BaseModel):
    border_radius: Optional[str] = None
    spacing: Optional[str] = None
    button_style: Optional[Literal["rounded", "square"]] = None


class BrandBody(BaseModel):
    name: str = ""
    logo: Optional[str] = None
    colors: ColorsBody = Field(default_factory=ColorsBody)
    typography: TypographyBody = Field(default_factory=TypographyBody)
    style: StyleBody = Field(default_factory=StyleBody)


class StructureBody(BaseModel):
    header: bool = False
    footer: bool = False
    navigation: bool = False
    sections: int = 0


class ContentBody(BaseModel):
    url: str
    html: str
    css: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)
    title: str = ""
    description: str = ""
    structure: StructureBody = Field(default_factory=StructureBody)


class RebrandRequest(BaseModel):
    content: ContentBody
    original: BrandBody
    target: BrandBody
    use_ai: bool = False


class ChangesResponse(BaseModel):
    name_replacements: int
    color_replacements: int
    font_replacements: int
    logo_replaced: bool


class RebrandResponse(BaseModel):
    html: str
    css: str
    original_url: str
    changes: ChangesResponse


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("", response_model=RebrandResponse)
def rebrand_endpoint(
    body: RebrandRequest,
    x_user_id: Optional[str] = Header(default=None),
) -> dict[str, Any]:
    """Apply ``target`` to a page previously scraped with brand ``original``.

    Optional target fields left out inherit the original brand's values.
    A target without name, primary color or primary font answers 400.
    """
    content = ScrapedContent.from_dict(body.content.model_dump())
    original = BrandElements.from_dict(body.original.model_dump())
    target = BrandElements.from_dict(body.target.model_dump(), base=original)

    try:
        result = rebrand(content, original, target, logger=_log)
    except RebrandValidationError as exc:
        raise HTTPException(
            status_code=400,
            detail={"error": str(exc), "missing": exc.missing},
        ) from exc

    if body.use_ai:
        result = apply_ai_css(result, original, target, logger=_log)

    _log.info(
        "[activity] user=%s action=rebrand url=%s old=%r new=%r",
        x_user_id or "anonymous",
        content.url,
        original.name,
        target.name,
    )
    return result.to_dict()
