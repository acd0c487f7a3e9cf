# app/domain/repositories/product_repo.py

from __future__ import annotations
from typing import Any, Iterable, List
from motor.motor_asyncio import AsyncIOMotorDatabase
from app.domain.models.product import Product, ProductIn


def _to_product(doc: dict[str, Any]) -> Product:
    return Product.model_validate({**doc, "_id": str(doc["_id"])})


class ProductRepo:
    """
    Product repository backed by the 'products' collection.
    Identity is the Mongo-assigned `_id`; documents are never updated or deleted.
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "products"):
        self.col = db[collection_name]

    async def list_all(self) -> List[Product]:
        """All products, in the collection's natural order."""
        cursor = self.col.find({})
        return [_to_product(doc) async for doc in cursor]

    async def insert(self, record: ProductIn) -> Product:
        # only the fields the client actually sent are persisted
        doc = record.model_dump(exclude_unset=True)
        result = await self.col.insert_one(doc)
        return _to_product({**doc, "_id": result.inserted_id})

    async def count(self) -> int:
        return await self.col.count_documents({})

    async def insert_many(self, records: Iterable[ProductIn]) -> int:
        docs = [r.model_dump(exclude_unset=True) for r in records]
        if not docs:
            return 0
        result = await self.col.insert_many(docs)
        return len(result.inserted_ids)
