# app/api/v1/routers/products.py
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional
import time
import logging

from app.api.deps import current_user, product_repo_dep
from app.api.v1.schemas.storefront import ErrorOut
from app.core.config import get_settings
from app.domain.models.product import Product, RecommendedProduct
from app.domain.services.filters import catalog_filters
from app.domain.services.similarity_svc import recommend

logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"], dependencies=[Depends(current_user)])


@router.get("/products", response_model=List[Product])
async def list_products(
    q: Optional[str] = Query(None, description="Case-insensitive search over name, description and tags"),
    gender: Optional[str] = Query(None, description="men | women | unisex | all"),
    category: Optional[str] = Query(None),
    min_price: Optional[float] = Query(None, alias="minPrice"),
    repo = Depends(product_repo_dep),
):
    filters = catalog_filters(q=q, gender=gender, category=category, min_price=min_price)
    logger.info("Request: list_products filters=%s", filters)
    products = await repo.find(filters)
    logger.info("Response: list_products count=%s", len(products))
    return products


@router.get("/products/{product_id}", response_model=Product, responses={404: {"model": ErrorOut}})
async def get_product(product_id: str, repo = Depends(product_repo_dep)):
    product = await repo.get_by_id(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Not found")
    return product


@router.get("/products/{product_id}/recommend", response_model=List[RecommendedProduct])
async def recommend_products(
    product_id: str,
    limit: Optional[int] = Query(None, ge=1, le=50),
    repo = Depends(product_repo_dep),
):
    """
    Related products: tag/colour/style similarity plus complementary-category boost.
    Unknown product ids give an empty list, not a 404.
    """
    limit = limit or get_settings().recommend_limit
    logger.info("Request: recommend_products product_id=%s limit=%s", product_id, limit)

    start_time = time.perf_counter()
    catalog = await repo.list_all()
    items = recommend(catalog, product_id, limit=limit)

    elapsed_time = time.perf_counter() - start_time
    logger.info(
        "Response: recommend_products product_id=%s, count=%s, catalog=%s, elapsed_time=%.4fs",
        product_id, len(items), len(catalog), elapsed_time,
    )
    return items
