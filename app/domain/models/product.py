from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List

# camelCase on the wire and in Mongo, snake_case in Python
MODEL_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Product(BaseModel):
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    images: List[str] = []
    image: Optional[str] = None
    tags: List[str] = []
    color: Optional[str] = None
    style: Optional[str] = None
    category: Optional[str] = None
    gender: Optional[str] = None

    model_config = MODEL_CONFIG  # immuable = safe

    @field_validator("images", "tags", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return [] if v is None else v

    @computed_field
    @property
    def display_image(self) -> Optional[str]:
        """First of `images`, else the legacy `image`, else None."""
        if self.images:
            return self.images[0]
        return self.image or None


class RecommendedProduct(Product):
    score: float = Field(ge=0)


class DecoratedProduct(Product):
    """Product with its seasonal sale price attached. Never persisted."""
    sale_price: int
    discount_percent: int = Field(ge=0, le=45)
    offer: str
