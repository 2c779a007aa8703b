from typing import Literal
from pydantic import BaseModel

from app.domain.models.product import MODEL_CONFIG

SeasonKey = Literal["christmas", "newyear", "winter", "summer", "default"]


class SeasonInfo(BaseModel):
    key: SeasonKey
    title: str
    subtitle: str
    model_config = MODEL_CONFIG


class Gift(BaseModel):
    name: str
    image: str
    model_config = MODEL_CONFIG


class GiftRule(BaseModel):
    season: SeasonKey
    min_total: float
    gift: Gift
    model_config = MODEL_CONFIG

    def applies(self, season_key: str, order_total: float) -> bool:
        return season_key == self.season and order_total >= self.min_total
