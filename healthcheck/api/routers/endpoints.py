from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from healthcheck.api.dependencies import get_config_store, get_endpoints_key
from healthcheck.api.schemas.endpoints import EndpointList
from healthcheck.stores.base import ConfigStore, ConfigStoreError, MissingKeyError

router = APIRouter(prefix="/endpoints", tags=["endpoints"])


@router.get("", response_model=EndpointList)
async def get_endpoints(
    store: ConfigStore = Depends(get_config_store),
    key: str = Depends(get_endpoints_key),
) -> EndpointList:
    try:
        endpoints = await store.get(key)
    except MissingKeyError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Endpoint list not configured") from exc
    except ConfigStoreError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return EndpointList(endpoints=endpoints)


@router.put("", response_model=EndpointList)
async def replace_endpoints(
    payload: EndpointList,
    store: ConfigStore = Depends(get_config_store),
    key: str = Depends(get_endpoints_key),
) -> EndpointList:
    try:
        await store.put(key, payload.endpoints)
    except ConfigStoreError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return payload
