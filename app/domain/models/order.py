from datetime import datetime
from typing import List, Optional
from uuid import uuid4
from pydantic import BaseModel, Field

from app.domain.models.product import MODEL_CONFIG
from app.domain.models.season import Gift, SeasonKey


class Shipping(BaseModel):
    name: str = Field(min_length=1)
    address: str = Field(min_length=1)
    city: str = Field(min_length=1)
    pincode: str = Field(pattern=r"^\d{4,6}$")
    phone: Optional[str] = None
    model_config = MODEL_CONFIG


class OrderItem(BaseModel):
    product_id: str
    name: Optional[str] = None
    quantity: int = Field(ge=1)
    price: float       # charged per unit
    list_price: float
    model_config = MODEL_CONFIG


class Order(BaseModel):
    id: str = Field(default_factory=lambda: uuid4().hex)
    user_id: str
    shipping: Shipping
    payment_method: str = "cod"
    items: List[OrderItem]
    total: float
    free_gifts: List[Gift] = []
    season: SeasonKey
    status: str = "placed"
    created_at: datetime
    model_config = MODEL_CONFIG


class CheckoutIn(BaseModel):
    shipping: Shipping
    payment_method: str = "cod"
    model_config = MODEL_CONFIG


class CheckoutResult(BaseModel):
    success: bool = True
    order_id: str
    order_total: float
    free_gifts: List[Gift]
    model_config = MODEL_CONFIG
