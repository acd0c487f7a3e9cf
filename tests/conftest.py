"""
In-memory stand-ins for the Motor database and the Redis client.
Both count their calls so tests can assert which path a request took.
"""
import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.db.mongo import get_db
from app.db.redis import get_redis
from app.domain.repositories.product_list_cache_repo import ProductListCacheRepo
from app.domain.repositories.product_repo import ProductRepo
from app.domain.services.catalog_svc import CatalogService


class FakeClock:
    def __init__(self, start: float = 1_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeRedis:
    """Subset of redis.asyncio.Redis used by the app: get / set(ex=) / delete / ping."""

    def __init__(self, clock: FakeClock):
        self.clock = clock
        self.data: dict[str, tuple[str, float | None]] = {}
        self.calls = {"get": 0, "set": 0, "delete": 0}

    async def get(self, key):
        self.calls["get"] += 1
        entry = self.data.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at is not None and self.clock() >= expires_at:
            del self.data[key]
            return None
        return value

    async def set(self, key, value, ex=None):
        self.calls["set"] += 1
        self.data[key] = (value, self.clock() + ex if ex else None)
        return True

    async def delete(self, *keys):
        self.calls["delete"] += 1
        return sum(1 for k in keys if self.data.pop(k, None) is not None)

    async def ttl(self, key):
        entry = self.data.get(key)
        if entry is None:
            return -2
        _, expires_at = entry
        return -1 if expires_at is None else int(expires_at - self.clock())

    async def ping(self):
        return True


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    def __aiter__(self):
        return self._iter()

    async def _iter(self):
        for doc in self._docs:
            yield doc


class FakeCollection:
    def __init__(self):
        self.docs: list[dict] = []
        self.calls = {"find": 0, "insert_one": 0, "insert_many": 0}

    def find(self, filter=None, projection=None):
        self.calls["find"] += 1
        return FakeCursor([copy.deepcopy(d) for d in self.docs])

    async def insert_one(self, doc):
        self.calls["insert_one"] += 1
        doc.setdefault("_id", ObjectId())
        self.docs.append(copy.deepcopy(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    async def insert_many(self, docs):
        self.calls["insert_many"] += 1
        ids = []
        for doc in docs:
            doc.setdefault("_id", ObjectId())
            self.docs.append(copy.deepcopy(doc))
            ids.append(doc["_id"])
        return SimpleNamespace(inserted_ids=ids)

    async def count_documents(self, filter):
        return len(self.docs)


class FakeDatabase:
    def __init__(self):
        self.collections: dict[str, FakeCollection] = {}

    def __getitem__(self, name) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    async def command(self, name):
        return {"ok": 1.0}


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_redis(clock):
    return FakeRedis(clock)


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def products_col(fake_db):
    return fake_db["products"]


@pytest.fixture
def repo(fake_db):
    return ProductRepo(fake_db)


@pytest.fixture
def cache(fake_redis):
    return ProductListCacheRepo(fake_redis, key="products")


@pytest.fixture
def service(repo, cache):
    return CatalogService(repo=repo, cache=cache, ttl=300)


@pytest.fixture
def client(fake_db, fake_redis):
    from app.main import app

    app.dependency_overrides[get_db] = lambda: fake_db
    app.dependency_overrides[get_redis] = lambda: fake_redis
    yield TestClient(app)
    app.dependency_overrides.clear()
