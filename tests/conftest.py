"""Pytest configuration and fixtures."""

from types import SimpleNamespace

import bson
import pytest
from bson import ObjectId
from bson.codec_options import CodecOptions
from fastapi.testclient import TestClient
from pymongo.errors import ExecutionTimeout, ServerSelectionTimeoutError

from portfolio_service.database import MongoDatabase
from portfolio_service.main import create_app


TZ_AWARE = CodecOptions(tz_aware=True)


def _roundtrip(document: dict) -> dict:
    """Encode and decode through BSON the way the driver stores documents."""
    return bson.decode(bson.encode(document), codec_options=TZ_AWARE)


def _matches(document: dict, query: dict) -> bool:
    return all(document.get(key) == value for key, value in query.items())


def _sorted(documents: list[dict], sort: list[tuple[str, int]] | None) -> list[dict]:
    result = list(documents)
    for key, direction in reversed(sort or []):
        result.sort(key=lambda d: d[key], reverse=direction < 0)
    return result


class FakeCursor:
    """Mimics the async cursor returned by ``find``."""

    def __init__(self, documents: list[dict], error: Exception | None = None):
        self._documents = documents
        self._error = error

    def sort(self, spec):
        self._documents = _sorted(self._documents, spec)
        return self

    async def to_list(self, length=None):
        if self._error:
            raise self._error
        docs = [_roundtrip(d) for d in self._documents]
        return docs if length is None else docs[:length]


class FakeCollection:
    """In-memory stand-in for an async Mongo collection."""

    def __init__(self):
        self.documents: list[dict] = []

    def find(self, query=None):
        return FakeCursor([d for d in self.documents if _matches(d, query or {})])

    async def find_one(self, query=None, sort=None):
        found = _sorted([d for d in self.documents if _matches(d, query or {})], sort)
        return _roundtrip(found[0]) if found else None

    async def insert_one(self, document):
        document.setdefault("_id", ObjectId())
        self.documents.append(_roundtrip(document))
        return SimpleNamespace(inserted_id=document["_id"])

    async def find_one_and_update(
        self, query, update, sort=None, upsert=False, return_document=False
    ):
        found = _sorted([d for d in self.documents if _matches(d, query)], sort)
        if found:
            target = found[0]
            before = _roundtrip(target)
            target.update(_roundtrip(update.get("$set", {})))
            return _roundtrip(target if return_document else before)

        if not upsert:
            return None

        document = {**query, **update.get("$setOnInsert", {}), **update.get("$set", {})}
        document["_id"] = ObjectId()
        self.documents.append(_roundtrip(document))
        return _roundtrip(document) if return_document else None

    async def delete_one(self, query):
        for i, document in enumerate(self.documents):
            if _matches(document, query):
                del self.documents[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    async def delete_many(self, query):
        before = len(self.documents)
        self.documents = [d for d in self.documents if not _matches(d, query)]
        return SimpleNamespace(deleted_count=before - len(self.documents))


class FailingCollection:
    """Collection whose every operation fails like an unreachable server."""

    def __init__(self, error: Exception | None = None):
        self.error = error or ServerSelectionTimeoutError("No servers available")

    def find(self, query=None):
        return FakeCursor([], error=self.error)

    async def _fail(self, *args, **kwargs):
        raise self.error

    find_one = insert_one = find_one_and_update = delete_one = delete_many = _fail


class FakeDatabase:
    """Dictionary of collections, created on first access."""

    def __init__(self, collection_factory=FakeCollection):
        self._factory = collection_factory
        self.collections: dict[str, object] = {}

    def __getitem__(self, name):
        if name not in self.collections:
            self.collections[name] = self._factory()
        return self.collections[name]


@pytest.fixture
def fake_db():
    """Bind an empty in-memory database as the shared store."""
    database = FakeDatabase()
    MongoDatabase.bind(database)
    yield database
    MongoDatabase.bind(None)


@pytest.fixture
def failing_db():
    """Bind a database whose collections raise driver errors."""
    database = FakeDatabase(FailingCollection)
    MongoDatabase.bind(database)
    yield database
    MongoDatabase.bind(None)


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app, fake_db):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_project():
    return {
        "title": "Portfolio Website",
        "subtitle": "Personal site",
        "description": "A portfolio with an admin dashboard.",
        "image": "data:image/png;base64,iVBORw0KGgo=",
    }


@pytest.fixture
def sample_skill():
    return {
        "name": "Go",
        "level": 80,
        "category": "Languages",
        "image": "data:image/svg+xml;base64,PHN2Zz4=",
    }


@pytest.fixture
def failing_client(app, failing_db):
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def timeout_db():
    """Bind a database whose collections exceed the server time limit."""
    database = FakeDatabase(lambda: FailingCollection(ExecutionTimeout("operation exceeded time limit")))
    MongoDatabase.bind(database)
    yield database
    MongoDatabase.bind(None)
