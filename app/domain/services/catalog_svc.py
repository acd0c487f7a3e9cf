"""
Cache-aside protocol for the product list.

Reads go through the single "products" cache entry and fall back to the store
on a miss, repopulating the entry with a fixed TTL. Writes go to the store and
then delete the entry so the next read repopulates it.

Nothing is synchronized across concurrent calls. A list whose store read starts
before a concurrent insert commits, and whose cache write lands after that
insert's invalidation, re-caches the pre-insert list until the TTL expires.
Invalidation is best-effort: if the delete fails after a successful insert the
insert is still reported as created and the stale entry lives until expiry.
"""
import logging
import time
from typing import List

from app.domain.errors import CatalogReadError, CatalogWriteError
from app.domain.models.product import Product, ProductIn
from app.domain.repositories.product_list_cache_repo import ProductListCacheRepo
from app.domain.repositories.product_repo import ProductRepo

logger = logging.getLogger(__name__)

DEFAULT_PRODUCT_LIST_TTL = 300  # seconds


class CatalogService:
    def __init__(
        self,
        repo: ProductRepo,
        cache: ProductListCacheRepo,
        ttl: int = DEFAULT_PRODUCT_LIST_TTL,
    ):
        self.repo = repo
        self.cache = cache
        self.ttl = ttl

    async def list_products(self) -> List[Product]:
        t0 = time.perf_counter()

        try:
            cached = await self.cache.get()
        except Exception as e:
            logger.error("list_products cache.get failed key=%s err=%s", self.cache.key, e)
            raise CatalogReadError(str(e)) from e

        if cached is not None:
            logger.info(
                "list_products cache_hit key=%s items=%s time=%.3fs",
                self.cache.key, len(cached), time.perf_counter() - t0,
            )
            return cached

        logger.info("list_products cache_miss key=%s", self.cache.key)
        try:
            db_t0 = time.perf_counter()
            products = await self.repo.list_all()
            logger.info("list_products db_ok items=%s db_time=%.3fs", len(products), time.perf_counter() - db_t0)
            await self.cache.set(products, ttl=self.ttl)
        except Exception as e:
            logger.error("list_products failed err=%s", e)
            raise CatalogReadError(str(e)) from e

        logger.info("list_products done items=%s total_time=%.3fs", len(products), time.perf_counter() - t0)
        return products

    async def add_product(self, record: ProductIn) -> Product:
        try:
            product = await self.repo.insert(record)
        except Exception as e:
            logger.warning("add_product insert failed err=%s", e)
            raise CatalogWriteError(str(e)) from e
        logger.info("add_product inserted id=%s", product.id)

        try:
            await self.cache.invalidate()
        except Exception as e:
            # stale entry remains until its TTL expires
            logger.warning(
                "add_product cache invalidation failed key=%s err=%s (stale up to %ss)",
                self.cache.key, e, self.ttl,
            )
        return product
