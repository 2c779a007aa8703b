"""Tests for catalog seeding."""

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import ValidationError

from app.domain.models.product import Product
from app.domain.services.catalog_svc import load_seed_file, seed_catalog

SEED_FILE = Path(__file__).resolve().parent.parent / "data" / "products.json"


def _fake_db():
    col = MagicMock()
    col.delete_many = AsyncMock()
    col.insert_many = AsyncMock()
    col.create_index = AsyncMock()
    return {"products": col}, col


def test_bundled_seed_file_is_valid():
    products = [Product.model_validate(d) for d in load_seed_file(str(SEED_FILE))]
    assert len({p.id for p in products}) == len(products)
    sequin = next(p for p in products if p.id == "p-106")
    assert sequin.display_image == "/images/sequin.png"


def test_missing_seed_file(tmp_path):
    assert load_seed_file(str(tmp_path / "nope.json")) == []


def test_seed_file_must_be_a_list(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"id": "x"}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_seed_file(str(path))


@pytest.mark.asyncio
async def test_seed_replaces_catalog(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(json.dumps([
        {"id": "a", "name": "A", "price": 100, "tags": None},
        {"id": "b", "name": "B", "price": 200, "images": ["/b.png"]},
    ]), encoding="utf-8")
    db, col = _fake_db()

    assert await seed_catalog(db, str(path)) == 2
    col.delete_many.assert_awaited_once_with({})
    inserted = col.insert_many.await_args.args[0]
    assert [d["id"] for d in inserted] == ["a", "b"]
    assert inserted[0]["tags"] == []
    assert "displayImage" not in inserted[1]


@pytest.mark.asyncio
async def test_invalid_seed_does_not_wipe_catalog(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(json.dumps([{"id": "a", "price": -5}]), encoding="utf-8")
    db, col = _fake_db()

    with pytest.raises(ValidationError):
        await seed_catalog(db, str(path))
    col.delete_many.assert_not_awaited()


@pytest.mark.asyncio
async def test_empty_seed_is_skipped(tmp_path):
    path = tmp_path / "products.json"
    path.write_text("", encoding="utf-8")
    db, col = _fake_db()

    assert await seed_catalog(db, str(path)) == 0
    col.delete_many.assert_not_awaited()
