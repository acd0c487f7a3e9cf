import json

import pytest
from bson import ObjectId

from app.domain.models.product import Product, ProductIn
from app.domain.repositories.product_list_cache_repo import deserialize_products, serialize_products


@pytest.mark.asyncio
async def test_insert_persists_only_sent_fields(repo, products_col):
    created = await repo.insert(ProductIn(name="Mug", price=299))

    stored = products_col.docs[0]
    assert set(stored) == {"_id", "name", "price"}
    assert isinstance(stored["_id"], ObjectId)
    assert created.id == str(stored["_id"])


@pytest.mark.asyncio
async def test_list_all_keeps_store_order_and_stringifies_ids(repo, products_col):
    ids = [ObjectId(), ObjectId()]
    products_col.docs.extend([
        {"_id": ids[1], "name": "B", "__v": 0},
        {"_id": ids[0], "name": "A"},
    ])

    products = await repo.list_all()

    assert [p.name for p in products] == ["B", "A"]
    assert [p.id for p in products] == [str(ids[1]), str(ids[0])]


@pytest.mark.asyncio
async def test_insert_many_and_count(repo):
    assert await repo.insert_many([]) == 0
    assert await repo.insert_many([ProductIn(name="A"), ProductIn(name="B")]) == 2
    assert await repo.count() == 2


def test_serialized_list_uses_wire_shape():
    product = Product(_id="66aa00000000000000000001", name="Mug2", price=199, category="Home", stock=5)

    payload = serialize_products([product])

    assert json.loads(payload) == [
        {"_id": "66aa00000000000000000001", "name": "Mug2", "price": 199, "category": "Home", "stock": 5}
    ]
    assert deserialize_products(payload) == [product]


def test_text_fields_accept_numbers():
    assert ProductIn(name=123, category=4).name == "123"


@pytest.mark.asyncio
async def test_cache_repo_get_set_invalidate(cache, fake_redis):
    assert await cache.get() is None

    payload = await cache.set([], ttl=300)
    assert payload == "[]"
    assert await cache.get() == []
    assert await fake_redis.ttl("products") == 300

    assert await cache.invalidate() == 1
    assert await cache.invalidate() == 0
    assert await cache.get() is None
