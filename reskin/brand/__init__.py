"""Brand package — brand identity model and inference."""

from reskin.brand.extractor import extract_brand
from reskin.brand.models import BrandColors, BrandElements, BrandStyle, Typography

__all__ = ["extract_brand", "BrandElements", "BrandColors", "Typography", "BrandStyle"]
