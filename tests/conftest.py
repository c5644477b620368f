"""Shared fixtures: an in-memory MongoDB and an HTTP client for the app."""

import os

# Settings are read at import time
os.environ["ENV"] = "testing"
os.environ.setdefault("DATABASE_URL", "mongodb://localhost:27017")
os.environ.setdefault("DATABASE_NAME", "fitpulse_test")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from database import Database
from main import app
from app.models.mongodb import UserDocument
from app.services.auth import create_access_token, hash_password
from app.services.token_blacklist import token_blacklist

PASSWORD = "squats4days"


@pytest.fixture(autouse=True)
def blacklist_offline(monkeypatch):
    """Redis is not available in tests; the blacklist fails open."""
    monkeypatch.setattr(token_blacklist, "enabled", False)


@pytest_asyncio.fixture
async def db():
    mongo = AsyncMongoMockClient()
    database = mongo["fitpulse_test"]
    await Database.init_models(database)
    Database.client = mongo
    yield database
    Database.client = None
    Database._initialized = False


@pytest_asyncio.fixture
async def client(db):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest_asyncio.fixture
async def make_user(db):
    """Insert a user directly, optionally with progress already recorded."""
    counter = {"n": 0}

    async def _make_user(**fields) -> UserDocument:
        counter["n"] += 1
        n = counter["n"]
        user = UserDocument(
            username=fields.pop("username", f"athlete{n}"),
            email=fields.pop("email", f"athlete{n}@example.com"),
            password_hash=hash_password(PASSWORD),
            created_at=datetime.now(timezone.utc),
            **fields
        )
        await user.insert()
        return user

    return _make_user


@pytest.fixture
def auth_headers():
    """Bearer header for a user, as issued at login."""

    def _auth_headers(user: UserDocument) -> dict:
        token = create_access_token({"sub": str(user.id)})
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers
