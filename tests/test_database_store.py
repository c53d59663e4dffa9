from __future__ import annotations

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from healthcheck.db.models import Base
from healthcheck.stores.base import ConfigStoreError, MissingKeyError
from healthcheck.stores.database import DatabaseConfigStore


@pytest.fixture
async def store():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield DatabaseConfigStore(async_sessionmaker(engine, expire_on_commit=False))
    await engine.dispose()


async def test_put_then_get(store):
    await store.put("endpoints", ["http://a.example", "http://b.example"])

    assert await store.get("endpoints") == ["http://a.example", "http://b.example"]


async def test_put_replaces_existing_list(store):
    await store.put("endpoints", ["http://a.example"])
    await store.put("endpoints", ["http://c.example"])

    assert await store.get("endpoints") == ["http://c.example"]


async def test_missing_key(store):
    with pytest.raises(MissingKeyError):
        await store.get("endpoints")


async def test_unreachable_database_is_a_store_error():
    engine = create_async_engine("sqlite+aiosqlite:////nonexistent/dir/settings.db")
    store = DatabaseConfigStore(async_sessionmaker(engine))

    with pytest.raises(ConfigStoreError):
        await store.get("endpoints")

    await engine.dispose()
