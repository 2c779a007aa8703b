# app/api/v1/routers/cart.py
from datetime import datetime
from fastapi import APIRouter, Depends
import logging

from app.api.deps import cart_repo_dep, clock, current_user, product_repo_dep
from app.domain.models.cart import AddToCartIn, CartView, RemoveFromCartIn
from app.domain.services.cart_svc import add_to_cart, price_cart
from app.domain.services.season_svc import resolve_season

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("", response_model=CartView)
async def get_cart(
    user_id: str = Depends(current_user),
    now: datetime = Depends(clock),
    carts = Depends(cart_repo_dep),
):
    """Cart lines priced at today's effective prices, with list-price savings."""
    lines = await carts.get(user_id)
    return price_cart(lines, resolve_season(now))


@router.post("/add", response_model=CartView)
async def add(
    body: AddToCartIn,
    user_id: str = Depends(current_user),
    now: datetime = Depends(clock),
    carts = Depends(cart_repo_dep),
    products = Depends(product_repo_dep),
):
    logger.info("Request: cart_add user_id=%s product_id=%s qty=%s", user_id, body.product_id, body.quantity)
    lines = await add_to_cart(
        products, carts, user_id=user_id, product_id=body.product_id, quantity=body.quantity,
    )
    return price_cart(lines, resolve_season(now))


@router.post("/remove", response_model=CartView)
async def remove(
    body: RemoveFromCartIn,
    user_id: str = Depends(current_user),
    now: datetime = Depends(clock),
    carts = Depends(cart_repo_dep),
):
    logger.info("Request: cart_remove user_id=%s line_id=%s", user_id, body.id)
    lines = await carts.remove(user_id, body.id)
    return price_cart(lines, resolve_season(now))


@router.post("/clear", response_model=CartView)
async def clear(
    user_id: str = Depends(current_user),
    now: datetime = Depends(clock),
    carts = Depends(cart_repo_dep),
):
    logger.info("Request: cart_clear user_id=%s", user_id)
    await carts.clear(user_id)
    return price_cart([], resolve_season(now))
