from typing import List
from pydantic import BaseModel, Field

from app.domain.models.product import MODEL_CONFIG, Product
from app.domain.models.season import SeasonInfo


class CartLine(BaseModel):
    id: str
    product: Product  # snapshot taken when the line was added
    quantity: int = Field(ge=1)
    model_config = MODEL_CONFIG


class PricedCartLine(CartLine):
    unit_price: float
    list_price: float
    on_sale: bool


class CartView(BaseModel):
    lines: List[PricedCartLine]
    item_count: int
    total: float
    original_total: float
    savings: float
    season: SeasonInfo
    model_config = MODEL_CONFIG


class AddToCartIn(BaseModel):
    product_id: str
    quantity: int = Field(default=1, ge=1)
    model_config = MODEL_CONFIG


class RemoveFromCartIn(BaseModel):
    id: str
    model_config = MODEL_CONFIG
