# app/core/lifespan.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from app.db import mongo, redis as r
from app.core.config import get_settings
from app.domain.services.catalog_svc import seed_catalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # --- Startup ---
    # Mongo: a failed ping leaves a lazy client, see mongo.connect()
    await mongo.connect()

    if settings.CATALOG_SEED_FILE:
        try:
            await seed_catalog(mongo.get_db(), settings.CATALOG_SEED_FILE)
        except Exception as e:
            logger.error("Catalog seeding failed: %s", e)
            raise

    # Redis is optional: without it only the cart routes are down
    await r.connect()

    yield

    # --- Shutdown ---
    await r.disconnect()
    await mongo.disconnect()
    logger.info("Connections closed")
