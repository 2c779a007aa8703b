"""Router tests against in-memory repositories (see conftest.client)."""

import pytest

from app.api.deps import cart_repo_dep
from app.domain.repositories.cart_repo import CartRepo
from tests.conftest import make_product

AUTH = {"X-User-Id": "user-1"}

SHIPPING = {
    "name": "Asha",
    "address": "12 MG Road",
    "city": "Pune",
    "pincode": "411001",
    "phone": "9999999999",
}


def test_season_banner_is_public(client):
    res = client.get("/api/season")
    assert res.status_code == 200
    assert res.json()["key"] == "christmas"
    assert res.json()["title"] == "Christmas Sale"


@pytest.mark.parametrize(
    "method, path",
    [
        ("get", "/api/products"),
        ("get", "/api/products/shirt-1/recommend"),
        ("get", "/api/sale"),
        ("get", "/api/cart"),
        ("get", "/api/my-orders"),
    ],
)
def test_requires_user(client, method, path):
    res = getattr(client, method)(path)
    assert res.status_code == 401
    assert res.json()["detail"] == "Not logged in"


def test_list_products_passes_filters(client, fake_products):
    res = client.get("/api/products", params={"q": "shirt", "gender": "men", "minPrice": 100}, headers=AUTH)
    assert res.status_code == 200
    assert len(res.json()) == 6
    assert fake_products.last_filters["gender"] == {"$in": ["men", "unisex"]}
    assert fake_products.last_filters["price"] == {"$gte": 100}


def test_get_product(client):
    assert client.get("/api/products/dress-1", headers=AUTH).json()["price"] == 2000
    assert client.get("/api/products/missing", headers=AUTH).status_code == 404


def test_product_display_image(client, fake_products):
    fake_products.products += [
        make_product("legacy-1", image="/images/legacy.png"),
        make_product("gallery-1", image="/images/legacy.png", images=["/images/front.png", "/images/back.png"]),
    ]
    assert client.get("/api/products/legacy-1", headers=AUTH).json()["displayImage"] == "/images/legacy.png"
    assert client.get("/api/products/gallery-1", headers=AUTH).json()["displayImage"] == "/images/front.png"
    assert client.get("/api/products/dress-1", headers=AUTH).json()["displayImage"] is None


def test_recommend(client):
    res = client.get("/api/products/shirt-1/recommend", headers=AUTH)
    assert res.status_code == 200
    body = res.json()
    assert [p["id"] for p in body] == ["pants-1", "jacket-1", "shoes-1", "tote-1"]
    assert body[0]["score"] == 0.743


def test_recommend_limit_and_unknown_reference(client):
    assert len(client.get("/api/products/shirt-1/recommend?limit=1", headers=AUTH).json()) == 1
    assert client.get("/api/products/nope/recommend", headers=AUTH).json() == []


def test_sale_shelf(client):
    res = client.get("/api/sale?limit=2", headers=AUTH)
    assert res.status_code == 200
    body = res.json()
    assert body["season"]["key"] == "christmas"
    assert body["count"] == 2
    assert [p["id"] for p in body["items"]] == ["jacket-1", "dress-1"]
    assert body["items"][0]["salePrice"] == 2099
    assert body["items"][0]["discountPercent"] == 40
    assert body["items"][0]["offer"].startswith("Offer: Orders above ₹2500")


def test_cart_flow(client):
    res = client.post("/api/cart/add", json={"productId": "dress-1", "quantity": 2}, headers=AUTH)
    assert res.status_code == 200
    body = res.json()
    assert body["total"] == 2400
    assert body["originalTotal"] == 4000
    assert body["savings"] == 1600
    assert body["itemCount"] == 2
    assert body["lines"][0]["unitPrice"] == 1200
    assert body["lines"][0]["onSale"] is True

    body = client.post("/api/cart/add", json={"productId": "dress-1"}, headers=AUTH).json()
    assert len(body["lines"]) == 1
    assert body["lines"][0]["quantity"] == 3

    line_id = body["lines"][0]["id"]
    body = client.post("/api/cart/remove", json={"id": line_id}, headers=AUTH).json()
    assert body["lines"] == []


def test_cart_clear(client):
    client.post("/api/cart/add", json={"productId": "tote-1"}, headers=AUTH)
    assert client.post("/api/cart/clear", headers=AUTH).json()["itemCount"] == 0
    assert client.get("/api/cart", headers=AUTH).json()["lines"] == []


def test_cart_add_unknown_product(client):
    res = client.post("/api/cart/add", json={"productId": "nope"}, headers=AUTH)
    assert res.status_code == 400
    assert "nope" in res.json()["detail"]


def test_cart_add_rejects_bad_quantity(client):
    res = client.post("/api/cart/add", json={"productId": "dress-1", "quantity": 0}, headers=AUTH)
    assert res.status_code == 422


def test_cart_without_redis(client):
    from app.main import app

    app.dependency_overrides[cart_repo_dep] = lambda: CartRepo(None, ttl=60)
    res = client.get("/api/cart", headers=AUTH)
    assert res.status_code == 503


def test_cart_locked_by_another_request(client, fake_redis):
    fake_redis.store["lock:cart:user-1"] = "other-request"
    res = client.post("/api/cart/add", json={"productId": "tote-1"}, headers=AUTH)
    assert res.status_code == 409
    assert res.json()["detail"] == "Cart is busy, try again"


def test_checkout_empty_cart(client):
    res = client.post("/api/checkout", json={"shipping": SHIPPING}, headers=AUTH)
    assert res.status_code == 400
    assert res.json()["detail"] == "Cart is empty"


def test_checkout_rejects_bad_pincode(client):
    client.post("/api/cart/add", json={"productId": "dress-1"}, headers=AUTH)
    res = client.post("/api/checkout", json={"shipping": {**SHIPPING, "pincode": "12"}}, headers=AUTH)
    assert res.status_code == 422


def test_checkout_and_order_history(client, fake_orders):
    client.post("/api/cart/add", json={"productId": "dress-1", "quantity": 3}, headers=AUTH)

    res = client.post("/api/checkout", json={"shipping": SHIPPING, "paymentMethod": "upi"}, headers=AUTH)
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["orderTotal"] == 3600
    assert [g["name"] for g in body["freeGifts"]] == ["Mini Bluetooth speaker"]
    assert body["orderId"] == fake_orders.orders[0].id

    assert client.get("/api/cart", headers=AUTH).json()["lines"] == []

    history = client.get("/api/my-orders", headers=AUTH).json()
    assert history["count"] == 1
    order = history["orders"][0]
    assert order["userId"] == "user-1"
    assert order["paymentMethod"] == "upi"
    assert order["items"][0]["price"] == 1200
    assert order["items"][0]["listPrice"] == 2000
    assert order["freeGifts"][0]["image"] == "/images/speaker.png"


def test_order_history_is_per_user(client):
    client.post("/api/cart/add", json={"productId": "tote-1"}, headers=AUTH)
    client.post("/api/checkout", json={"shipping": SHIPPING}, headers=AUTH)
    assert client.get("/api/my-orders", headers={"X-User-Id": "someone-else"}).json()["count"] == 0


def test_health_reports_dependencies(client):
    res = client.get("/health")
    assert res.status_code == 200
    checks = res.json()["checks"]
    # lifespan is skipped in tests: no Mongo, no Redis
    assert checks["mongodb"].startswith("error")
    assert checks["redis"] == "skipped"
    assert res.json()["status"] == "error"
