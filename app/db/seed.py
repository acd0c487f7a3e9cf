# app/db/seed.py
"""
Load the sample catalog into an empty 'products' collection.

    python -m app.db.seed
"""
import asyncio
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from redis.asyncio import Redis

from app.core.config import get_settings
from app.core.logging import configure_logging
from app.db import mongo, redis as r
from app.domain.models.product import ProductIn
from app.domain.repositories.product_list_cache_repo import ProductListCacheRepo
from app.domain.repositories.product_repo import ProductRepo

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    ProductIn(
        name="Laptop",
        price=45000,
        description="High-performance laptop for professionals",
        category="Electronics",
        stock=10,
    ),
    ProductIn(
        name="Smartphone",
        price=25000,
        description="Latest Android smartphone with great camera",
        category="Electronics",
        stock=25,
    ),
    ProductIn(
        name="Coffee Mug",
        price=299,
        description="Premium ceramic coffee mug",
        category="Home",
        stock=50,
    ),
]


async def seed_products(db: AsyncIOMotorDatabase, redis: Redis | None = None) -> int:
    """
    Insert the sample products if the collection is empty.
    Returns the number of inserted documents (0 when data already exists).
    """
    repo = ProductRepo(db)
    existing = await repo.count()
    if existing:
        logger.info("seed skipped: products collection already has %s documents", existing)
        return 0

    inserted = await repo.insert_many(SAMPLE_PRODUCTS)
    logger.info("seed inserted %s sample products", inserted)

    if redis is not None:
        cache = ProductListCacheRepo(redis, key=get_settings().product_list_cache_key)
        try:
            await cache.invalidate()
        except Exception as e:
            # same best-effort policy as product creation
            logger.warning(
                "seed cache invalidation failed key=%s err=%s (stale up to %ss)",
                cache.key, e, get_settings().product_list_cache_ttl,
            )
    return inserted


async def _main() -> None:
    await mongo.connect()
    await r.connect()
    try:
        await seed_products(mongo.get_db(), r.get_redis())
    finally:
        await r.disconnect()
        await mongo.disconnect()


if __name__ == "__main__":
    configure_logging()
    asyncio.run(_main())
