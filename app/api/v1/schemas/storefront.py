# api/v1/schemas/storefront.py
from pydantic import BaseModel
from typing import List

from app.domain.models.order import Order
from app.domain.models.product import MODEL_CONFIG, DecoratedProduct
from app.domain.models.season import SeasonInfo


class SaleOut(BaseModel):
    season: SeasonInfo
    items: List[DecoratedProduct]
    count: int
    model_config = MODEL_CONFIG


class OrdersOut(BaseModel):
    success: bool = True
    orders: List[Order]
    count: int
    model_config = MODEL_CONFIG


class ErrorOut(BaseModel):
    detail: str
