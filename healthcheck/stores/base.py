from __future__ import annotations

from typing import Protocol, Sequence


class ConfigStoreError(RuntimeError):
    """The configuration store could not be read or written."""


class MissingKeyError(ConfigStoreError):
    def __init__(self, key: str) -> None:
        super().__init__(f"configuration key {key!r} not found")
        self.key = key


class ConfigStore(Protocol):
    async def get(self, key: str) -> list[str]:  # pragma: no cover - interface
        ...

    async def put(self, key: str, values: Sequence[str]) -> None:  # pragma: no cover - interface
        ...
