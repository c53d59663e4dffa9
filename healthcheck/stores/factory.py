from __future__ import annotations

import boto3

from healthcheck.core.config import Settings
from healthcheck.db.session import get_sessionmaker
from healthcheck.stores.base import ConfigStore
from healthcheck.stores.database import DatabaseConfigStore
from healthcheck.stores.dynamodb import DynamoDBConfigStore


def build_config_store(settings: Settings) -> ConfigStore:
    if settings.config_store_backend == "dynamodb":
        client = boto3.client("dynamodb", region_name=settings.aws_region)
        return DynamoDBConfigStore(settings.settings_table, client)
    if settings.config_store_backend == "database":
        return DatabaseConfigStore(get_sessionmaker(settings.database_url))
    raise RuntimeError(f"Unknown config store backend: {settings.config_store_backend}")
