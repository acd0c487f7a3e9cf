# app/core/lifespan.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from app.db import mongo, redis as r
from app.db.seed import seed_products
from app.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # --- Startup ---
    try:
        await mongo.connect()
    except Exception as e:
        logger.error("Mongo client init failed: %s", e)
        raise

    try:
        await r.connect()
    except Exception as e:
        logger.error("Redis client init failed: %s", e)
        raise

    if settings.SEED_ON_STARTUP:
        await seed_products(mongo.get_db(), r.get_redis())

    # Application runs
    yield

    # --- Shutdown ---
    await r.disconnect()
    await mongo.disconnect()
    logger.info("Connections closed")
