from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from app.core.config import get_settings
from app.core.lifespan import lifespan
from app.core.logging import configure_logging
from app.api.v1.routers.health import router as health_router
from app.api.v1.routers.products import router as products_router
from app.api.v1.routers.season import router as season_router
from app.api.v1.routers.cart import router as cart_router
from app.api.v1.routers.orders import router as orders_router
from app.domain.errors import StorefrontError

logger = logging.getLogger(__name__)

settings = get_settings()
configure_logging(debug=settings.DEBUG, app_name=settings.APP_NAME)

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# ------- CORS -------
# ALLOWED_ORIGINS is a CSV, e.g. "http://localhost:3001,https://shop.example.com"
allowed_origins = [o.strip() for o in settings.ALLOWED_ORIGINS.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["content-type", "x-user-id"],
    max_age=86400,
)


# ------- Domain errors -> HTTP -------
@app.exception_handler(StorefrontError)
async def storefront_error_handler(request: Request, exc: StorefrontError):
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


# ------- Routes -------
app.include_router(health_router)
app.include_router(season_router, prefix=settings.api_prefix)      # season banner + sale shelf
app.include_router(products_router, prefix=settings.api_prefix)    # catalog + recommendations
app.include_router(cart_router, prefix=settings.api_prefix)        # per-user cart
app.include_router(orders_router, prefix=settings.api_prefix)      # checkout + order history
