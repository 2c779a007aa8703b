# app/domain/repositories/product_repo.py

from __future__ import annotations
import logging
from typing import Optional, List
from motor.motor_asyncio import AsyncIOMotorDatabase
from app.domain.models.product import Product

logger = logging.getLogger(__name__)


class ProductRepo:
    """
    Product catalog backed by the 'products' collection.
    Documents are keyed by the string `id` field, not Mongo's `_id`.
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "products"):
        self.col = db[collection_name]

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        doc = await self.col.find_one({"id": product_id}, {"_id": 0})
        return Product.model_validate(doc) if doc else None

    async def find(self, filters: Optional[dict] = None) -> List[Product]:
        cursor = self.col.find(filters or {}, {"_id": 0})
        return [Product.model_validate(doc) async for doc in cursor]

    async def list_all(self) -> List[Product]:
        """Full catalog snapshot, in insertion order."""
        return await self.find({})

    async def reseed(self, docs: List[dict]) -> int:
        """
        Wipe the collection and bulk insert `docs`.
        Each doc is validated first so a bad seed fails before the wipe.
        """
        products = [Product.model_validate(d) for d in docs]
        await self.col.delete_many({})
        if not products:
            return 0
        await self.col.insert_many([p.model_dump(by_alias=True, exclude={"display_image"}) for p in products])
        await self.col.create_index("id", unique=True)
        return len(products)
