from __future__ import annotations
from typing import List
from motor.motor_asyncio import AsyncIOMotorDatabase
from app.domain.models.order import Order


class OrderRepo:
    """Orders backed by the 'orders' collection, stored with their camelCase field names."""

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "orders"):
        self.col = db[collection_name]

    async def create(self, order: Order) -> Order:
        await self.col.insert_one(order.model_dump(by_alias=True))
        return order

    async def list_for_user(self, user_id: str) -> List[Order]:
        cursor = self.col.find({"userId": user_id}, {"_id": 0}).sort("createdAt", -1)
        return [Order.model_validate(doc) async for doc in cursor]
