import re
from typing import Optional

from app.domain.models.product import Product
from app.domain.services.constants import OPPOSITE_GENDER


def _normalize(value: Optional[str]) -> Optional[str]:
    """Lowercase/strip a free-form classification string. Empty -> None."""
    if value is None:
        return None
    s = str(value).strip().lower()
    return s or None


def is_gender_excluded(reference: Product, candidate: Product) -> bool:
    """
    Gender rule for recommendations:
    - reference "men"   => exclude only candidates tagged "women"
    - reference "women" => exclude only candidates tagged "men"
    - unisex / missing / anything else on either side => keep
    """
    ref_gender = _normalize(reference.gender)
    opposite = OPPOSITE_GENDER.get(ref_gender) if ref_gender else None
    return opposite is not None and _normalize(candidate.gender) == opposite


def catalog_filters(
    q: Optional[str] = None,
    gender: Optional[str] = None,
    category: Optional[str] = None,
    min_price: Optional[float] = None,
) -> dict:
    """
    Build the Mongo filter for catalog listing.
    - q: case-insensitive substring over name, description and tags
    - gender: matches that gender or "unisex"; "all" disables the filter
    - category: exact match
    - min_price: only applied when > 0
    """
    filters: dict = {}

    g = _normalize(gender)
    if g and g != "all":
        filters["gender"] = {"$in": [g, "unisex"]}

    c = _normalize(category)
    if c:
        filters["category"] = c

    text = (q or "").strip().lower()
    if text:
        pattern = {"$regex": re.escape(text), "$options": "i"}
        filters["$or"] = [
            {"name": pattern},
            {"description": pattern},
            {"tags": pattern},
        ]

    if min_price is not None and min_price > 0:
        filters["price"] = {"$gte": min_price}

    return filters
