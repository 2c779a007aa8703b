# app/api/deps.py
from datetime import datetime
from typing import Optional

from fastapi import Depends, Header, HTTPException
from app.core.config import Settings, get_settings
from app.db.mongo import get_db
from app.db.redis import get_redis
from app.domain.repositories.cart_repo import CartRepo
from app.domain.repositories.order_repo import OrderRepo
from app.domain.repositories.product_repo import ProductRepo
from app.domain.services.season_svc import store_now


async def mongo_db(db = Depends(get_db)):
    return db

def redis_dep():
    return get_redis()

# Repositories are dependencies so tests can swap them for in-memory fakes
def product_repo_dep(db = Depends(mongo_db)) -> ProductRepo:
    return ProductRepo(db)

def order_repo_dep(db = Depends(mongo_db)) -> OrderRepo:
    return OrderRepo(db)

def cart_repo_dep(redis = Depends(redis_dep), settings: Settings = Depends(get_settings)) -> CartRepo:
    return CartRepo(redis, ttl=settings.cart_ttl)

def clock() -> datetime:
    """Current time on the store's calendar. Override in tests to pin a date."""
    return store_now()

def current_user(x_user_id: Optional[str] = Header(default=None)) -> str:
    """
    Authenticated user id, set by the auth gateway in front of this service.
    Login/sessions are not handled here.
    """
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Not logged in")
    return x_user_id
