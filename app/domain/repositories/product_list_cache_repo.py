# app/domain/repositories/product_list_cache_repo.py
from __future__ import annotations
from typing import Iterable, Optional
from redis.asyncio import Redis
from app.domain.models.product import Product
import json

"""
Note:
    - Adapter over the single aggregate key holding the whole product list.
    - No business logic here, just cache access (get/set/invalidate).
    - The entry is either absent or present-until-TTL; there are no per-item keys.
"""


def serialize_products(products: Iterable[Product]) -> str:
    """
    JSON array of products exactly as read from the store.
    Compact separators keep the payload reproducible byte for byte.
    """
    return json.dumps([p.to_json_dict() for p in products], separators=(",", ":"))


def deserialize_products(raw: str) -> list[Product]:
    return [Product.model_validate(x) for x in json.loads(raw)]


class ProductListCacheRepo:
    """
    Adapter for caching the full product list in Redis (or any client
    exposing async get / set(ex=) / delete).
    """
    def __init__(self, redis: Redis, key: str = "products"):
        self.redis = redis
        self.key = key

    async def get_raw(self) -> Optional[str]:
        """Serialized list, or None when absent or expired."""
        return await self.redis.get(self.key)

    async def get(self) -> Optional[list[Product]]:
        if raw := await self.get_raw():
            return deserialize_products(raw)
        return None

    async def set(self, products: Iterable[Product], ttl: int) -> str:
        """
        Store the serialized list under the key with a TTL (expiration).
        Returns the payload that was written.
        """
        payload = serialize_products(products)
        await self.redis.set(self.key, payload, ex=ttl)
        return payload

    async def invalidate(self) -> int:
        """
        Remove the cached list.
        Returns the number of keys deleted (0 or 1).
        """
        return await self.redis.delete(self.key)
