# app/api/v1/routers/season.py
from datetime import datetime
from fastapi import APIRouter, Depends, Query
from typing import Optional
import time
import logging

from app.api.deps import clock, current_user, product_repo_dep
from app.api.v1.schemas.storefront import SaleOut
from app.core.config import get_settings
from app.domain.models.season import SeasonInfo
from app.domain.services.season_svc import resolve_season, seasonal_sale

logger = logging.getLogger(__name__)

router = APIRouter(tags=["season"])


@router.get("/season", response_model=SeasonInfo)
async def current_season(now: datetime = Depends(clock)):
    """Banner copy for the active promotional season."""
    return resolve_season(now)


@router.get("/sale", response_model=SaleOut, dependencies=[Depends(current_user)])
async def sale(
    limit: Optional[int] = Query(None, ge=1, le=50),
    now: datetime = Depends(clock),
    repo = Depends(product_repo_dep),
):
    """Seasonal sale shelf: eligible products with their sale price, deepest discount first."""
    limit = limit or get_settings().sale_limit
    season = resolve_season(now)
    logger.info("Request: sale season=%s limit=%s", season.key, limit)

    t0 = time.perf_counter()
    items = seasonal_sale(await repo.list_all(), season.key, limit=limit)
    logger.info("Response: sale season=%s count=%s in %.4fs", season.key, len(items), time.perf_counter() - t0)
    return SaleOut(season=season, items=items, count=len(items))
