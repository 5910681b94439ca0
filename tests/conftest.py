"""
Pytest configuration for the document gateway.

Provides in-memory stand-ins for the motor client, database, collection and
cursor so gateway behavior can be tested without a running MongoDB.
"""

from __future__ import annotations

import copy
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from pymongo.errors import AutoReconnect, InvalidName

from docgateway.db import DocumentGateway, GatewayFactory, StoreSession
from docgateway.db import session as session_module


class FakeCursor:
    """Async iterator over a snapshot of documents, optionally failing mid-scan."""

    def __init__(self, documents: List[Dict[str, Any]], fail_after: Optional[int] = None) -> None:
        self._documents = documents
        self._fail_after = fail_after
        self._position = 0

    def __aiter__(self) -> "FakeCursor":
        return self

    async def __anext__(self) -> Dict[str, Any]:
        if self._fail_after is not None and self._position >= self._fail_after:
            raise AutoReconnect("connection lost during scan")
        if self._position >= len(self._documents):
            raise StopAsyncIteration
        document = self._documents[self._position]
        self._position += 1
        return copy.deepcopy(document)


class FakeCollection:
    def __init__(self, name: str) -> None:
        self.name = name
        self.documents: List[Dict[str, Any]] = []
        self.calls: List[str] = []
        self.fail_with: Optional[Exception] = None
        self.fail_scan_after: Optional[int] = None
        self.inserted_id_override: Any = None

    def _check_failure(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def _find_by_id(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        for document in self.documents:
            if document.get("_id") == query.get("_id"):
                return document
        return None

    def find(self, query: Dict[str, Any]) -> FakeCursor:
        assert query == {}
        self.calls.append("find")
        self._check_failure()
        return FakeCursor(list(self.documents), self.fail_scan_after)

    async def insert_one(self, document: Dict[str, Any]) -> SimpleNamespace:
        self.calls.append("insert_one")
        self._check_failure()
        stored = copy.deepcopy(document)
        stored.setdefault("_id", ObjectId())
        self.documents.append(stored)
        inserted_id = self.inserted_id_override if self.inserted_id_override is not None else stored["_id"]
        return SimpleNamespace(inserted_id=inserted_id, acknowledged=True)

    async def update_one(self, query: Dict[str, Any], update: Dict[str, Any]) -> SimpleNamespace:
        self.calls.append("update_one")
        self._check_failure()
        document = self._find_by_id(query)
        if document is None:
            return SimpleNamespace(matched_count=0, modified_count=0)

        changes = update["$set"]
        modified = any(document.get(key, object()) != value for key, value in changes.items())
        document.update(copy.deepcopy(changes))
        return SimpleNamespace(matched_count=1, modified_count=1 if modified else 0)

    async def delete_one(self, query: Dict[str, Any]) -> SimpleNamespace:
        self.calls.append("delete_one")
        self._check_failure()
        document = self._find_by_id(query)
        if document is None:
            return SimpleNamespace(deleted_count=0)
        self.documents.remove(document)
        return SimpleNamespace(deleted_count=1)


class FakeDatabase:
    def __init__(self, name: str) -> None:
        self.name = name
        self.collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if not name:
            raise InvalidName("collection names cannot be empty")
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]


class FakeAdmin:
    def __init__(self, ping_error: Optional[Exception] = None) -> None:
        self.ping_error = ping_error
        self.commands: List[str] = []

    async def command(self, name: str) -> Dict[str, Any]:
        self.commands.append(name)
        if self.ping_error is not None:
            raise self.ping_error
        return {"ok": 1.0}


class FakeClient:
    """Stand-in for AsyncIOMotorClient."""

    def __init__(self, uri_database: Optional[str] = None, ping_error: Optional[Exception] = None) -> None:
        self.uri_database = uri_database
        self.admin = FakeAdmin(ping_error)
        self.databases: Dict[str, FakeDatabase] = {}
        self.closed = False

    def get_default_database(self, default: Optional[str] = None) -> FakeDatabase:
        name = self.uri_database or default
        if name not in self.databases:
            self.databases[name] = FakeDatabase(name)
        return self.databases[name]

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def session(fake_client: FakeClient) -> StoreSession:
    return StoreSession(fake_client)  # type: ignore[arg-type]


@pytest.fixture
def gateway(session: StoreSession) -> DocumentGateway:
    return DocumentGateway(session)


@pytest.fixture
def items(session: StoreSession) -> FakeCollection:
    """The 'items' collection behind the gateway fixtures."""
    return session.collection("items")  # type: ignore[return-value]


@pytest.fixture
def installed_gateway(gateway: DocumentGateway):
    GatewayFactory.set_instance(gateway)
    yield gateway
    GatewayFactory.set_instance(None)


@pytest.fixture
def patched_client(monkeypatch: pytest.MonkeyPatch):
    """Make StoreSession.connect build FakeClients and record the URIs it was given."""
    patch = SimpleNamespace(created=[], ping_error=None)

    def factory(connection_str):
        client = FakeClient(ping_error=patch.ping_error)
        patch.created.append((connection_str, client))
        return client

    monkeypatch.setattr(session_module, "AsyncIOMotorClient", factory)
    yield patch
    GatewayFactory.set_instance(None)
