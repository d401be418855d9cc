"""Data models describing a brand identity."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Literal, Optional

DEFAULT_BRAND_NAME = "Unknown Brand"
DEFAULT_FONT_STACK = "system-ui, sans-serif"

ButtonStyle = Literal["rounded", "square"]


@dataclass
class BrandColors:
    primary: str = "#3182CE"
    secondary: str = "#4299E1"
    background: str = "#FFFFFF"
    text: str = "#1A202C"
    accent: Optional[str] = None


@dataclass
class Typography:
    primary: str = DEFAULT_FONT_STACK
    secondary: Optional[str] = None


@dataclass
class BrandStyle:
    border_radius: Optional[str] = None
    spacing: Optional[str] = None
    button_style: Optional[ButtonStyle] = None


@dataclass
class BrandElements:
    """A brand's name/logo/color/typography/style signature.

    The defaults of every nested model form the fallback palette used when a
    page yields no usable signal.
    """

    name: str = DEFAULT_BRAND_NAME
    logo: Optional[str] = None
    colors: BrandColors = field(default_factory=BrandColors)
    typography: Typography = field(default_factory=Typography)
    style: BrandStyle = field(default_factory=BrandStyle)

    @classmethod
    def default(cls, name: str = DEFAULT_BRAND_NAME) -> "BrandElements":
        return cls(name=name)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any], base: Optional["BrandElements"] = None) -> "BrandElements":
        """Build a brand from its ``to_dict`` shape.

        Optional nested fields missing from *data* are taken from *base* when
        given.  Required fields (name, primary color, primary font) are never
        inherited or defaulted: when absent they are left empty so that
        validation can reject them.
        """
        base_dict = base.to_dict() if base is not None else {}

        def _section(key: str, inherit: tuple[str, ...]) -> dict[str, Any]:
            inherited = base_dict.get(key) or {}
            merged = {k: inherited[k] for k in inherit if inherited.get(k) is not None}
            merged.update({k: v for k, v in (data.get(key) or {}).items() if v is not None})
            return merged

        colors = _section("colors", ("secondary", "background", "text", "accent"))
        typography = _section("typography", ("secondary",))
        style = _section("style", ("border_radius", "spacing", "button_style"))

        return cls(
            name=data.get("name") or "",
            logo=data.get("logo") or None,
            colors=BrandColors(
                primary=colors.get("primary") or "",
                secondary=colors.get("secondary") or "",
                background=colors.get("background") or "",
                text=colors.get("text") or "",
                accent=colors.get("accent") or None,
            ),
            typography=Typography(
                primary=typography.get("primary") or "",
                secondary=typography.get("secondary") or None,
            ),
            style=BrandStyle(
                border_radius=style.get("border_radius"),
                spacing=style.get("spacing"),
                button_style=style.get("button_style"),
            ),
        )
