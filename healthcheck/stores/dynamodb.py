from __future__ import annotations

import asyncio
from typing import Any, Sequence

from botocore.exceptions import BotoCoreError, ClientError

from healthcheck.stores.base import ConfigStore, ConfigStoreError, MissingKeyError

KEY_ATTRIBUTE = "key"
VALUE_ATTRIBUTE = "value"


class DynamoDBConfigStore(ConfigStore):
    """Reads ``{"key": <name>, "value": <string set>}`` items from a DynamoDB table."""

    def __init__(self, table_name: str, client: Any) -> None:
        self._table_name = table_name
        self._client = client

    async def get(self, key: str) -> list[str]:
        try:
            response = await asyncio.to_thread(
                self._client.get_item,
                TableName=self._table_name,
                Key={KEY_ATTRIBUTE: {"S": key}},
                ConsistentRead=True,
            )
        except (BotoCoreError, ClientError) as exc:
            raise ConfigStoreError(f"failed to read {key!r} from {self._table_name}: {exc}") from exc

        item = response.get("Item")
        if not item or VALUE_ATTRIBUTE not in item:
            raise MissingKeyError(key)
        return _decode_strings(key, item[VALUE_ATTRIBUTE])

    async def put(self, key: str, values: Sequence[str]) -> None:
        item: dict[str, Any] = {KEY_ATTRIBUTE: {"S": key}}
        # empty string sets are not allowed
        if values:
            item[VALUE_ATTRIBUTE] = {"SS": sorted(set(values))}
        else:
            item[VALUE_ATTRIBUTE] = {"L": []}
        try:
            await asyncio.to_thread(self._client.put_item, TableName=self._table_name, Item=item)
        except (BotoCoreError, ClientError) as exc:
            raise ConfigStoreError(f"failed to write {key!r} to {self._table_name}: {exc}") from exc


def _decode_strings(key: str, attribute: dict[str, Any]) -> list[str]:
    if "SS" in attribute:
        return list(attribute["SS"])
    if "L" in attribute:
        values = []
        for element in attribute["L"]:
            if "S" not in element:
                raise ConfigStoreError(f"value for {key!r} contains a non-string element")
            values.append(element["S"])
        return values
    raise ConfigStoreError(f"value for {key!r} is not a string set or list")
