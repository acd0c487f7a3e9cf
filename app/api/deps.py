# app/api/deps.py
from fastapi import Depends
from app.core.config import Settings, get_settings
from app.db.mongo import get_db
from app.db.redis import get_redis
from app.domain.repositories.product_list_cache_repo import ProductListCacheRepo
from app.domain.repositories.product_repo import ProductRepo
from app.domain.services.catalog_svc import CatalogService

# Dependency for injecting the MongoDB database into endpoints/services
async def mongo_db(db = Depends(get_db)):
    # Returns the MongoDB database instance (async)
    return db

# Dependency for injecting the Redis client into endpoints/services
def redis_dep(redis = Depends(get_redis)):
    return redis

# Catalog service wired with the process-wide clients
def catalog_service(
    db = Depends(mongo_db),
    redis = Depends(redis_dep),
    settings: Settings = Depends(get_settings),
) -> CatalogService:
    return CatalogService(
        repo=ProductRepo(db),
        cache=ProductListCacheRepo(redis, key=settings.product_list_cache_key),
        ttl=settings.product_list_cache_ttl,
    )
