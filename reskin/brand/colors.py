"""Color literal extraction and light/dark classification.

Colors are found with a regular expression over raw style text, not a CSS
tokenizer, so color-looking substrings inside comments or string literals
are counted too.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import List

COLOR_PATTERN = re.compile(
    r"#(?:[0-9a-f]{8}|[0-9a-f]{6}|[0-9a-f]{3,4})\b|rgba?\([^)]*\)|hsla?\([^)]*\)",
    re.IGNORECASE,
)

_WHITE = {"#fff", "#ffff", "#ffffff", "#ffffffff", "white"}
# Four components, comma-separated or with a "/" before the alpha value.
_ZERO_ALPHA = re.compile(
    r"^(?:rgba|hsla)\((?:[^,/)]*,){3}\s*(?:0+(?:\.0*)?|\.0+)%?\s*\)$"
    r"|^(?:rgba|hsla)\([^,/)]+/\s*(?:0+(?:\.0*)?|\.0+)%?\s*\)$",
    re.IGNORECASE,
)

# Perceived brightness above which a color counts as light.
LIGHT_THRESHOLD = 128


def find_colors(css: str) -> List[str]:
    """Return every color literal in *css*, in order of appearance."""
    return COLOR_PATTERN.findall(css)


def rank_colors(css: str) -> List[str]:
    """Return the distinct color literals in *css*, most frequent first.

    Ties keep the order in which the literals first appear.
    """
    return [color for color, _ in Counter(find_colors(css)).most_common()]


def is_white_or_transparent(color: str) -> bool:
    value = color.strip().lower()
    if value in _WHITE or value == "transparent":
        return True
    if value.startswith("#") and len(value) == 9 and value.endswith("00"):
        return True
    return bool(_ZERO_ALPHA.match(value))


def _hex_rgb(color: str) -> tuple[int, int, int] | None:
    digits = color.strip().lstrip("#")
    if len(digits) in (3, 4):
        digits = "".join(c * 2 for c in digits[:3])
    elif len(digits) in (6, 8):
        digits = digits[:6]
    else:
        return None
    try:
        return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
    except ValueError:
        return None


def luminance(color: str) -> float | None:
    """Perceived brightness ``0.299R + 0.587G + 0.114B`` of a hex color.

    Returns ``None`` for anything that is not a hex literal.
    """
    if not color.strip().startswith("#"):
        return None
    rgb = _hex_rgb(color)
    if rgb is None:
        return None
    r, g, b = rgb
    return 0.299 * r + 0.587 * g + 0.114 * b


def is_light(color: str) -> bool:
    """Classify *color* as light.  Non-hex formats are treated as dark."""
    value = luminance(color)
    return value is not None and value > LIGHT_THRESHOLD
