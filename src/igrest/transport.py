# igrest/transport.py
"""Wire-level helpers shared by session acquisition and verb dispatch.

Every failure raised here is a `TransportError` chained to the httpx or
pydantic exception that caused it.
"""

from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from .constants import SCHEME
from .exceptions import TransportError
from .log_config import logger
from .types import RequestData

# Control characters other than horizontal tab, and DEL
_FORBIDDEN_HEADER_CHARS = frozenset(
    {chr(c) for c in range(0x20) if c != 0x09} | {"\x7f"}
)


def compose_url(host: str, path: str) -> str:
    """Joins the configured host and an endpoint path into an https URL.

    The path is expected to start with '/' and is used verbatim.
    """
    return f"{SCHEME}://{host}{path}"


def encode_header_value(name: str, value: str) -> str:
    """Checks that `value` can be sent as the value of header `name`.

    Raises:
        TransportError: If the value is not ASCII or contains a control character
            other than tab. The message names the header but never the value.
    """
    try:
        value.encode("ascii")
    except UnicodeEncodeError as e:
        raise TransportError(
            f"Value for header '{name}' contains non-ASCII characters"
        ) from e
    if _FORBIDDEN_HEADER_CHARS.intersection(value):
        raise TransportError(f"Value for header '{name}' contains control characters")
    return value


def serialize_body(body: Any) -> Any:
    """Converts a request body into JSON-compatible data.

    `None` values are kept and sent as JSON `null` whatever the body type.
    """
    try:
        return to_jsonable_python(body, by_alias=True)
    except PydanticSerializationError as e:
        raise TransportError(
            f"Could not serialize request body of type {type(body).__name__}: {e}"
        ) from e


def serialize_query(body: Any) -> Mapping[str, Any]:
    """Converts a request body into query parameters; `None` values are omitted."""
    params = serialize_body(body)
    if not isinstance(params, Mapping):
        raise TransportError(
            f"Query body of type {type(body).__name__} does not serialize to a mapping"
        )
    nested = [key for key, value in params.items() if isinstance(value, Mapping)]
    if nested:
        raise TransportError(
            f"Query parameters cannot be nested: {', '.join(nested)}"
        )
    return {key: value for key, value in params.items() if value is not None}


def build(client: httpx.AsyncClient, request_data: RequestData) -> httpx.Request:
    """Builds the request, reporting an unusable URL as a TransportError."""
    try:
        return request_data.build_request(client)
    except httpx.InvalidURL as e:
        logger.error(f"Cannot build request for {request_data.url}: {e}")
        raise TransportError(
            f"Cannot build request for {request_data.url}: {e}"
        ) from e


async def send(client: httpx.AsyncClient, request: httpx.Request) -> httpx.Response:
    """Sends a request, translating every httpx failure into a TransportError.

    HTTP status codes are not inspected.
    """
    logger.debug(f"Sending request: {request.method} {request.url}")
    logger.trace(f"Request header names: {list(request.headers.keys())}")
    try:
        response = await client.send(request)
    except httpx.TimeoutException as e:
        logger.error(f"Request timed out: {request.url}")
        raise TransportError("Request timed out", request=request) from e
    except httpx.NetworkError as e:
        logger.error(f"Network error occurred for {request.url}: {e}")
        raise TransportError(
            f"Network error for {request.url}: {e}", request=request
        ) from e
    except httpx.HTTPError as e:
        logger.error(f"HTTP request error for {request.url}: {e}")
        raise TransportError(
            f"HTTP request error for {request.url}: {e}", request=request
        ) from e
    logger.debug(f"Received response: {response.status_code} for {request.url}")
    return response


def decode(
    response: httpx.Response, adapter: TypeAdapter[Any], request: httpx.Request
) -> Any:
    """Decodes a JSON response body through `adapter`.

    Validation details are left on the chained cause; they may echo parts of
    the body.
    """
    try:
        payload = response.json()
    except ValueError as e:  # JSONDecodeError or undecodable bytes
        logger.error(
            f"Response from {request.url} (status {response.status_code}) is not JSON"
        )
        raise TransportError(
            "Response body is not valid JSON", response=response, request=request
        ) from e
    try:
        return adapter.validate_python(payload)
    except PydanticValidationError as e:
        logger.error(
            f"Response from {request.url} (status {response.status_code}) "
            f"failed validation with {e.error_count()} error(s)"
        )
        raise TransportError(
            "Response body does not match the expected shape",
            response=response,
            request=request,
        ) from e
