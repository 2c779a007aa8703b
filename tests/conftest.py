"""Pytest fixtures and configuration."""

import asyncio
import os
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("MONGO_DB", "shopai_test")
os.environ.setdefault("APP_ENV", "development")

from app.domain.models.product import Product  # noqa: E402

IST = ZoneInfo("Asia/Kolkata")


def make_product(pid: str, **fields) -> Product:
    fields.setdefault("name", f"Product {pid}")
    return Product(id=pid, **fields)


class FakeRedis:
    """The slice of redis.asyncio.Redis the cart repository uses."""

    def __init__(self):
        self.store: dict = {}
        self.ttls: dict = {}

    async def get(self, key):
        return self.store.get(key)

    async def set(self, key, value, ex=None, nx=False):
        if nx and key in self.store:
            return None
        self.store[key] = value
        self.ttls[key] = ex
        return True

    async def delete(self, key):
        self.ttls.pop(key, None)
        return 1 if self.store.pop(key, None) is not None else 0


class InterleavingRedis(FakeRedis):
    """FakeRedis that hands control back to the event loop after every read."""

    async def get(self, key):
        value = await super().get(key)
        await asyncio.sleep(0)
        return value


class FakeProductRepo:
    def __init__(self, products):
        self.products = list(products)
        self.last_filters = None

    async def get_by_id(self, product_id):
        return next((p for p in self.products if p.id == product_id), None)

    async def find(self, filters=None):
        self.last_filters = filters
        return list(self.products)

    async def list_all(self):
        return list(self.products)


class FakeOrderRepo:
    def __init__(self):
        self.orders = []

    async def create(self, order):
        self.orders.append(order)
        return order

    async def list_for_user(self, user_id):
        mine = [o for o in self.orders if o.user_id == user_id]
        return sorted(mine, key=lambda o: o.created_at, reverse=True)


@pytest.fixture
def catalog():
    """Small mixed catalog; order matters for tie-break tests."""
    return [
        make_product("shirt-1", price=1299, category="shirt", gender="men",
                     tags=["cotton", "formal"], color="white", style="classic"),
        make_product("pants-1", price=1499, category="pants", gender="men",
                     tags=["cotton", "office"], color="black", style="classic"),
        make_product("dress-1", price=2000, category="dress", gender="women",
                     tags=["party", "evening"], color="gold", style="glam"),
        make_product("jacket-1", price=3499, category="jacket", gender="unisex",
                     tags=["winter"], color="navy", style="casual"),
        make_product("shoes-1", price=500, category="shoes", gender="men",
                     tags=["leather"], color="brown"),
        make_product("tote-1", price=249, category="bag", tags=["accessory"]),
    ]


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def christmas_now():
    return datetime(2025, 12, 22, 10, 30, tzinfo=IST)


@pytest.fixture
def fake_products(catalog):
    return FakeProductRepo(catalog)


@pytest.fixture
def fake_orders():
    return FakeOrderRepo()


@pytest.fixture
def client(fake_products, fake_orders, fake_redis, christmas_now):
    """TestClient with Mongo/Redis swapped for in-memory fakes and the clock pinned to Dec 22."""
    from fastapi.testclient import TestClient

    from app.api.deps import cart_repo_dep, clock, order_repo_dep, product_repo_dep
    from app.domain.repositories.cart_repo import CartRepo
    from app.main import app

    carts = CartRepo(fake_redis, ttl=60, lock_timeout=0.2)

    app.dependency_overrides[product_repo_dep] = lambda: fake_products
    app.dependency_overrides[order_repo_dep] = lambda: fake_orders
    app.dependency_overrides[cart_repo_dep] = lambda: carts
    app.dependency_overrides[clock] = lambda: christmas_now

    # no `with`: lifespan (Mongo/Redis connect) is skipped
    yield TestClient(app)
    app.dependency_overrides.clear()
