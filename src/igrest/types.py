# igrest/types.py
"""Core type definitions for igrest.

`RequestData` is the mutable request builder that flows through a signed
operation: the URL is composed first, the signer adds its headers, the verb
attaches the serialized body, and only then is an `httpx.Request` built.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, Field

ResponseT = TypeVar("ResponseT")
"""Caller-chosen type a response body is decoded into."""


class RequestData(BaseModel):
    """Encapsulates data for a single outgoing HTTP request."""

    method: str
    url: str
    params: Mapping[str, Any] | None = None
    json_data: Any | None = None
    headers: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")

    def build_request(self, client: httpx.AsyncClient) -> httpx.Request:
        """Builds an httpx.Request, merging the transport's default headers.

        Cookies held by the transport are not sent: every request carries only
        the headers set here and the transport's defaults.

        Args:
            client: The transport the request will be sent with.
        """
        request = client.build_request(
            method=self.method,
            url=self.url,
            params=self.params,
            json=self.json_data,
            headers=self.headers,
        )
        request.headers.pop("Cookie", None)
        return request
