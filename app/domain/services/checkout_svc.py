import logging
import time
from datetime import datetime

from app.domain.errors import EmptyCartError
from app.domain.models.order import CheckoutResult, Order, OrderItem, Shipping
from app.domain.repositories.cart_repo import CartRepo
from app.domain.repositories.order_repo import OrderRepo
from app.domain.services.cart_svc import price_cart
from app.domain.services.season_svc import gifts_for_total, resolve_season

logger = logging.getLogger(__name__)


async def place_order(
    cart_repo: CartRepo,
    order_repo: OrderRepo,
    *,
    user_id: str,
    shipping: Shipping,
    payment_method: str,
    now: datetime,
) -> CheckoutResult:
    """
    Checkout flow, holding the user's cart lock throughout:
      1) Load the cart (empty -> EmptyCartError).
      2) Price it at effective prices for the season active at `now`.
      3) Attach the season's free gifts for that total.
      4) Persist the order, then clear the cart.
    Adds that arrive meanwhile wait for the lock and land in the next cart.
    """
    t0 = time.perf_counter()
    async with cart_repo.locked(user_id):
        lines = await cart_repo.get(user_id)
        if not lines:
            raise EmptyCartError()

        season = resolve_season(now)
        view = price_cart(lines, season)
        gifts = gifts_for_total(view.total, season.key)

        order = Order(
            user_id=user_id,
            shipping=shipping,
            payment_method=payment_method or "cod",
            items=[
                OrderItem(
                    product_id=line.product.id,
                    name=line.product.name,
                    quantity=line.quantity,
                    price=line.unit_price,
                    list_price=line.list_price,
                )
                for line in view.lines
            ],
            total=view.total,
            free_gifts=gifts,
            season=season.key,
            created_at=now,
        )
        await order_repo.create(order)
        await cart_repo.clear(user_id)

    logger.info(
        "place_order user_id=%s order_id=%s total=%s season=%s gifts=%s time=%.3fs",
        user_id, order.id, order.total, season.key, [g.name for g in gifts], time.perf_counter() - t0,
    )
    return CheckoutResult(order_id=order.id, order_total=order.total, free_gifts=gifts)
