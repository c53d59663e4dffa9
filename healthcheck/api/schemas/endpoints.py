from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

Endpoint = Annotated[str, Field(min_length=1, max_length=2048)]


class EndpointList(BaseModel):
    endpoints: list[Endpoint] = Field(default_factory=list)
