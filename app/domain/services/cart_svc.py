import logging
from typing import List

from app.domain.errors import InvalidProductError
from app.domain.models.cart import CartLine, CartView, PricedCartLine
from app.domain.models.season import SeasonInfo
from app.domain.repositories.cart_repo import CartRepo
from app.domain.repositories.product_repo import ProductRepo
from app.domain.services.season_svc import effective_price

logger = logging.getLogger(__name__)


def price_cart(lines: List[CartLine], season: SeasonInfo) -> CartView:
    """
    Price every line at its effective (seasonal) price.
    `original_total` is what the cart would cost at list price.
    """
    priced: List[PricedCartLine] = []
    total = 0.0
    original_total = 0.0
    for line in lines:
        unit = effective_price(line.product, season.key)
        list_price = float(line.product.price or 0)
        total += unit * line.quantity
        original_total += list_price * line.quantity
        priced.append(PricedCartLine(
            **line.model_dump(),
            unit_price=unit,
            list_price=list_price,
            on_sale=unit < list_price,
        ))

    total = round(total, 2)
    original_total = round(original_total, 2)
    return CartView(
        lines=priced,
        item_count=sum(line.quantity for line in lines),
        total=total,
        original_total=original_total,
        savings=round(original_total - total, 2),
        season=season,
    )


async def add_to_cart(
    product_repo: ProductRepo,
    cart_repo: CartRepo,
    *,
    user_id: str,
    product_id: str,
    quantity: int = 1,
) -> List[CartLine]:
    """Snapshot the product into the user's cart. Unknown ids raise InvalidProductError."""
    product = await product_repo.get_by_id(product_id)
    if product is None:
        logger.warning("add_to_cart: invalid product user_id=%s product_id=%s", user_id, product_id)
        raise InvalidProductError(product_id)
    lines = await cart_repo.add(user_id, product, quantity)
    logger.info("add_to_cart user_id=%s product_id=%s qty=%s lines=%s", user_id, product_id, quantity, len(lines))
    return lines
