import logging
from typing import List, Optional, Sequence

from app.domain.models.product import Product, RecommendedProduct
from app.domain.services.constants import (
    COLOR_MATCHES,
    COMPATIBLE_COLOR_BONUS,
    COMPLEMENTARY_BONUS,
    COMPLEMENTARY_CATEGORIES,
    DEFAULT_CATEGORY,
    DEFAULT_RECOMMEND_LIMIT,
    SAME_COLOR_BONUS,
    SAME_STYLE_BONUS,
    SCORE_DECIMALS,
)
from app.domain.services.filters import is_gender_excluded

logger = logging.getLogger(__name__)


def similarity(a: Product, b: Product) -> float:
    """
    Tag Jaccard plus colour/style bonuses. Not capped, can exceed 1.0.
    Colour compatibility is looked up under `a.color` only.
    """
    tags_a, tags_b = set(a.tags), set(b.tags)
    union = len(tags_a | tags_b) or 1
    score = len(tags_a & tags_b) / union

    if a.color and b.color:
        if a.color == b.color:
            score += SAME_COLOR_BONUS
        elif b.color in COLOR_MATCHES.get(a.color, ()):
            score += COMPATIBLE_COLOR_BONUS

    if a.style and b.style and a.style == b.style:
        score += SAME_STYLE_BONUS
    return score


def is_complementary(category_a: Optional[str], category_b: Optional[str]) -> bool:
    row = COMPLEMENTARY_CATEGORIES.get(category_a or "", COMPLEMENTARY_CATEGORIES[DEFAULT_CATEGORY])
    return category_b in row


def recommend(
    catalog: Sequence[Product],
    reference_id: str,
    limit: int = DEFAULT_RECOMMEND_LIMIT,
) -> List[RecommendedProduct]:
    """
    Rank the catalog against one reference product.

    Steps:
      1) Find the reference by id (missing -> empty list).
      2) Drop the reference itself and strict men/women opposites.
      3) score = similarity + complementary-category bonus.
      4) Stable sort on the raw score, truncate to `limit`.
    Scores are rounded only in the returned items.
    """
    reference = next((p for p in catalog if p.id == reference_id), None)
    if reference is None:
        logger.info("recommend: reference not found id=%s", reference_id)
        return []

    scored = []
    for candidate in catalog:
        if candidate.id == reference.id or is_gender_excluded(reference, candidate):
            continue
        score = similarity(reference, candidate)
        if is_complementary(reference.category, candidate.category):
            score += COMPLEMENTARY_BONUS
        scored.append((score, candidate))

    # sorted() is stable: equal scores keep catalog order
    ranked = sorted(scored, key=lambda pair: pair[0], reverse=True)[:limit]
    logger.debug(
        "recommend id=%s candidates=%s returned=%s", reference_id, len(scored), len(ranked)
    )
    return [
        RecommendedProduct(**p.model_dump(), score=round(score, SCORE_DECIMALS))
        for score, p in ranked
    ]
