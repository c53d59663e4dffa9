from __future__ import annotations

from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from healthcheck.db.models import Setting
from healthcheck.stores.base import ConfigStore, ConfigStoreError, MissingKeyError


class DatabaseConfigStore(ConfigStore):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get(self, key: str) -> list[str]:
        try:
            async with self._session_factory() as session:
                row = await session.get(Setting, key)
        except SQLAlchemyError as exc:
            raise ConfigStoreError(f"failed to read {key!r}: {exc}") from exc

        if row is None:
            raise MissingKeyError(key)
        if not isinstance(row.value, list):
            raise ConfigStoreError(f"value for {key!r} is not a list")
        return [str(item) for item in row.value]

    async def put(self, key: str, values: Sequence[str]) -> None:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    row = await session.get(Setting, key)
                    if row is None:
                        session.add(Setting(key=key, value=list(values)))
                    else:
                        row.value = list(values)
        except SQLAlchemyError as exc:
            raise ConfigStoreError(f"failed to write {key!r}: {exc}") from exc
