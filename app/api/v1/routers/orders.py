# app/api/v1/routers/orders.py
from datetime import datetime
from fastapi import APIRouter, Depends
import time
import logging

from app.api.deps import cart_repo_dep, clock, current_user, order_repo_dep
from app.api.v1.schemas.storefront import ErrorOut, OrdersOut
from app.domain.models.order import CheckoutIn, CheckoutResult
from app.domain.services.checkout_svc import place_order

logger = logging.getLogger(__name__)

router = APIRouter(tags=["orders"])


@router.post("/checkout", response_model=CheckoutResult, responses={400: {"model": ErrorOut}})
async def checkout(
    body: CheckoutIn,
    user_id: str = Depends(current_user),
    now: datetime = Depends(clock),
    carts = Depends(cart_repo_dep),
    orders = Depends(order_repo_dep),
):
    """
    Place an order from the caller's cart.
    Lines are charged at effective (seasonal) prices and the season's free gifts are attached.
    """
    logger.info("Request: checkout user_id=%s payment_method=%s", user_id, body.payment_method)
    start_time = time.perf_counter()

    result = await place_order(
        carts,
        orders,
        user_id=user_id,
        shipping=body.shipping,
        payment_method=body.payment_method,
        now=now,
    )

    logger.info(
        "Response: checkout user_id=%s order_id=%s total=%s elapsed_time=%.4fs",
        user_id, result.order_id, result.order_total, time.perf_counter() - start_time,
    )
    return result


@router.get("/my-orders", response_model=OrdersOut)
async def my_orders(user_id: str = Depends(current_user), orders = Depends(order_repo_dep)):
    items = await orders.list_for_user(user_id)
    logger.info("Response: my_orders user_id=%s count=%s", user_id, len(items))
    return OrdersOut(orders=items, count=len(items))
