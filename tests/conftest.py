"""Shared fixtures for the car service API tests."""

import os

os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-secret")
os.environ.setdefault("MONGO_URL", "mongodb://localhost:27017")

from types import SimpleNamespace

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from app.utils.auth_utils import create_access_token


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    async def to_list(self, length=None):
        docs = [dict(d) for d in self._docs]
        return docs if length is None else docs[:length]


class FakeCollection:
    """In-memory stand-in for the motor collection calls the app makes."""

    def __init__(self, docs=()):
        self.docs = [dict(d) for d in docs]

    @staticmethod
    def _matches(doc, query):
        return all(doc.get(k) == v for k, v in query.items())

    def find(self, query=None):
        return FakeCursor([d for d in self.docs if self._matches(d, query or {})])

    async def find_one(self, query):
        for doc in self.docs:
            if self._matches(doc, query):
                return dict(doc)
        return None

    async def insert_one(self, doc):
        doc.setdefault("_id", ObjectId())
        self.docs.append(dict(doc))
        return InsertOneResult(doc["_id"], True)

    async def delete_one(self, query):
        for i, doc in enumerate(self.docs):
            if self._matches(doc, query):
                del self.docs[i]
                return DeleteResult({"n": 1}, True)
        return DeleteResult({"n": 0}, True)

    async def update_one(self, query, update):
        for doc in self.docs:
            if self._matches(doc, query):
                changes = update["$set"]
                modified = any(doc.get(k) != v for k, v in changes.items())
                doc.update(changes)
                return UpdateResult({"n": 1, "nModified": int(modified)}, True)
        return UpdateResult({"n": 0, "nModified": 0}, True)


SERVICE_ID = ObjectId("64f1c0a0b5e4c3a2d1e0f001")


@pytest.fixture
def fake_db():
    return SimpleNamespace(
        services=FakeCollection([
            {"_id": SERVICE_ID, "title": "Oil Change", "price": "40.00", "img": "oil.jpg",
             "facility": [{"name": "Filter", "details": "New filter"}]},
            {"_id": ObjectId(), "title": "Battery Charge", "price": "20.00", "img": "battery.jpg",
             "facility": []},
        ]),
        checkouts=FakeCollection(),
    )


@pytest.fixture
def api(fake_db):
    from app.main import app

    app.state.db = fake_db
    return app


@pytest_asyncio.fixture
async def client(api):
    transport = ASGITransport(app=api)
    async with AsyncClient(transport=transport, base_url="https://test") as client:
        yield client


@pytest.fixture
def token_for():
    def _token_for(email, **claims):
        return create_access_token({"email": email, **claims})

    return _token_for


@pytest.fixture
def strict_mode(api, monkeypatch):
    """Run the app with ENFORCE_OWNERSHIP on for one test."""
    strict = api.state.settings.model_copy(update={"ENFORCE_OWNERSHIP": True})
    monkeypatch.setattr(api.state, "settings", strict)
    return strict


@pytest.fixture
def service_id():
    return SERVICE_ID
