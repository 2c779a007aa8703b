"""
Seasonal pricing engine.

Pure functions over a product (or a total) and a season key. The season is
derived from a caller-supplied date. Only when the caller leaves both
`season_key` and `now` out is the clock read, via `store_now()` on the
store's calendar (`STORE_TIMEZONE`).

Rounding: sale prices and discount percentages are rounded half-up on the
unscaled value with `decimal.ROUND_HALF_UP`.
"""
import logging
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Iterable, List, Optional, Tuple, Union
from zoneinfo import ZoneInfo

from app.core.config import get_settings
from app.domain.models.product import DecoratedProduct, Product
from app.domain.models.season import Gift, GiftRule, SeasonInfo
from app.domain.services.constants import (
    BASE_DISCOUNT,
    DEFAULT_SALE_LIMIT,
    DEFAULT_SEASON_MIN_PRICE,
    ELIGIBLE_CATEGORIES,
    ELIGIBLE_TAG,
    HIGH_PRICE_SURCHARGE,
    HIGH_PRICE_THRESHOLD,
    MAX_DISCOUNT,
    OFFER_TEXT,
    SEASON_CHRISTMAS,
    SEASON_COPY,
    SEASON_DEFAULT,
    SEASON_NEWYEAR,
    SEASON_SUMMER,
    SEASON_WINTER,
)

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]

_ONE = Decimal("1")
_HUNDRED = Decimal("100")


# ---- Season resolution ------------------------------------------------------

def _is_christmas(month: int, day: int) -> bool:
    return month == 12 and 20 <= day <= 26

def _is_newyear(month: int, day: int) -> bool:
    return month in (11, 12, 1, 2)

def _is_winter(month: int, day: int) -> bool:
    return (month == 12 and day >= 27) or (month == 1 and day <= 5)

def _is_summer(month: int, day: int) -> bool:
    return month in (4, 5, 6)


# First match wins. `newyear` covers every date `winter` would match, so
# `winter` never fires while this order holds.
SEASON_RULES: Tuple[Tuple[str, Callable[[int, int], bool]], ...] = (
    (SEASON_CHRISTMAS, _is_christmas),
    (SEASON_NEWYEAR, _is_newyear),
    (SEASON_WINTER, _is_winter),
    (SEASON_SUMMER, _is_summer),
)


def store_now() -> datetime:
    """Aware current time in the store's timezone; seasons follow the store's calendar."""
    return datetime.now(ZoneInfo(get_settings().STORE_TIMEZONE))


def season_info(key: str) -> SeasonInfo:
    title, subtitle = SEASON_COPY[key]
    return SeasonInfo(key=key, title=title, subtitle=subtitle)


def resolve_season(now: DateLike) -> SeasonInfo:
    """Map a calendar date to the active promotional season."""
    for key, matches in SEASON_RULES:
        if matches(now.month, now.day):
            return season_info(key)
    return season_info(SEASON_DEFAULT)


def _season_key(season_key: Optional[str], now: Optional[DateLike]) -> str:
    if season_key:
        return season_key
    return resolve_season(now or store_now()).key


# ---- Eligibility & decoration -----------------------------------------------

def _list_price(product: Product) -> Decimal:
    return Decimal(str(product.price or 0))


def is_eligible(product: Product, season_key: str) -> bool:
    """Category allow-list or season tag; the default season goes by list price."""
    categories = ELIGIBLE_CATEGORIES.get(season_key)
    if categories is None:
        return (product.price or 0) >= DEFAULT_SEASON_MIN_PRICE

    category = (product.category or "").lower()
    tags = {t.lower() for t in product.tags}
    return category in categories or ELIGIBLE_TAG[season_key] in tags


def discount_for(price: Decimal, season_key: str) -> Decimal:
    discount = BASE_DISCOUNT.get(season_key, BASE_DISCOUNT[SEASON_DEFAULT])
    if price >= HIGH_PRICE_THRESHOLD:
        discount += HIGH_PRICE_SURCHARGE
    return min(discount, MAX_DISCOUNT)


def decorate(product: Product, season_key: str) -> Optional[DecoratedProduct]:
    """
    Attach the seasonal sale price, discount percentage and offer copy.
    Returns None for free or unpriced products. Does not check eligibility.
    """
    price = _list_price(product)
    if not price:
        return None

    discount = discount_for(price, season_key)
    sale_price = (price * (_ONE - discount)).quantize(_ONE, rounding=ROUND_HALF_UP)
    discount_percent = (discount * _HUNDRED).quantize(_ONE, rounding=ROUND_HALF_UP)

    return DecoratedProduct(
        **product.model_dump(),
        sale_price=int(sale_price),
        discount_percent=int(discount_percent),
        offer=OFFER_TEXT.get(season_key, OFFER_TEXT[SEASON_DEFAULT]),
    )


def effective_price(
    product: Product,
    season_key: Optional[str] = None,
    *,
    now: Optional[DateLike] = None,
) -> float:
    """Price actually shown and charged: the sale price when one applies, else list price."""
    key = _season_key(season_key, now)
    if is_eligible(product, key):
        decorated = decorate(product, key)
        if decorated and decorated.sale_price:
            return float(decorated.sale_price)
    return float(product.price or 0)


def seasonal_sale(
    catalog: Iterable[Product],
    season_key: str,
    limit: int = DEFAULT_SALE_LIMIT,
) -> List[DecoratedProduct]:
    """Deepest discounts first, then most expensive."""
    decorated = [
        d for d in (decorate(p, season_key) for p in catalog if is_eligible(p, season_key))
        if d is not None
    ]
    decorated.sort(key=lambda d: (-d.discount_percent, -(d.price or 0)))
    logger.debug("seasonal_sale season=%s eligible=%s limit=%s", season_key, len(decorated), limit)
    return decorated[:limit]


# ---- Free gifts --------------------------------------------------------------

GIFT_RULES: Tuple[GiftRule, ...] = (
    GiftRule(season=SEASON_WINTER, min_total=1500,
             gift=Gift(name="Woolen cap", image="/images/image copy 47.png")),
    GiftRule(season=SEASON_SUMMER, min_total=1500,
             gift=Gift(name="Basic cotton T-shirt", image="/images/image copy 49.png")),
    GiftRule(season=SEASON_CHRISTMAS, min_total=2500,
             gift=Gift(name="Mini Bluetooth speaker", image="/images/speaker.png")),
    GiftRule(season=SEASON_NEWYEAR, min_total=3001,
             gift=Gift(name="Wireless earbuds", image="/images/earbuds.png")),
)


def gifts_for_total(
    order_total: float,
    season_key: Optional[str] = None,
    *,
    now: Optional[DateLike] = None,
) -> List[Gift]:
    key = _season_key(season_key, now)
    return [rule.gift for rule in GIFT_RULES if rule.applies(key, order_total)]
