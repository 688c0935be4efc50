"""Signed client for the IG REST API.

This module provides `SignedClient`, which turns plain verb calls into
authenticated calls: for every call it composes the URL, logs in for a fresh
session token, sets the signing headers, attaches the optional body, sends the
request and decodes the response into a caller-chosen type.
"""

import ssl
from typing import Any, Self

import certifi
import httpx
from pydantic import TypeAdapter

from .auth import Credentials, SessionAuth
from .config import IgApiSettings, get_settings
from .constants import HEADER_METHOD_OVERRIDE, METHOD_OVERRIDE_DELETE
from .exceptions import ConfigurationError
from .log_config import logger
from .models import SessionToken
from .transport import (
    build,
    compose_url,
    decode,
    send,
    serialize_body,
    serialize_query,
)
from .types import RequestData, ResponseT


class SignedClient:
    """Asynchronous client whose every call is signed with a fresh session token.

    The four verb methods are generic over the request body (anything pydantic
    can serialize) and the response type (anything a pydantic `TypeAdapter`
    can validate into, `Any` returning the decoded JSON as is).

    Nothing is cached between calls: each call performs exactly one login, and
    concurrent calls on one client are independent of each other. HTTP status
    codes are not interpreted; the body of any response is decoded. Every
    failure is raised as `TransportError`.

    Attributes:
        _credentials: Immutable account credentials.
        _config: Private copy of the settings; only `base_url` is used for URLs.
        _http_client: The underlying httpx.AsyncClient.
        _should_close_client: Flag indicating if this instance owns _http_client.
        _auth: Session acquisition and signing for this client.
    """

    def __init__(
        self,
        credentials: Credentials,
        config: IgApiSettings,
        *,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the SignedClient.

        Args:
            credentials: Account credentials used for login and signing.
            config: Settings providing the API host; copied, not referenced.
            http_client: Optional pre-configured httpx.AsyncClient instance. A
                client passed in is not closed by `aclose`.

        Raises:
            ConfigurationError: If the configured host is empty.
        """
        if not config.base_url:
            raise ConfigurationError("SignedClient requires a non-empty 'base_url'.")
        self._credentials = credentials
        self._config = config.model_copy(deep=True)

        self._should_close_client = http_client is None  # Close only if we created it
        self._http_client = http_client or self._create_default_http_client()
        self._auth = SessionAuth(credentials, self._config.base_url, self._http_client)

        logger.debug(f"SignedClient initialized for host {self._config.base_url}")

    @classmethod
    def from_settings(
        cls,
        settings: IgApiSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> "SignedClient":
        """Build a client whose credentials come from settings.

        Args:
            settings: Settings to use; defaults to `get_settings()`.
            http_client: Optional pre-configured httpx.AsyncClient instance.

        Raises:
            ConfigurationError: If any of the four credential fields is unset.
        """
        settings = settings or get_settings()
        missing = [
            name
            for name in ("account_id", "api_key", "username", "password")
            if not getattr(settings, name)
        ]
        if missing:
            raise ConfigurationError(
                f"Missing credential settings: {', '.join(missing)}"
            )
        assert settings.account_id is not None and settings.username is not None
        assert settings.api_key is not None and settings.password is not None
        credentials = Credentials(
            account_id=settings.account_id,
            api_key=settings.api_key.get_secret_value(),
            username=settings.username,
            password=settings.password.get_secret_value(),
        )
        return cls(credentials, settings, http_client=http_client)

    def _create_default_http_client(self) -> httpx.AsyncClient:
        """Create a default httpx.AsyncClient with configured settings.

        Returns:
            httpx.AsyncClient: HTTP client with SSL verification, the configured
                timeout and the user agent header.
        """
        try:
            ssl_context = ssl.create_default_context(cafile=certifi.where())
            verify_ssl: ssl.SSLContext | bool = ssl_context
            logger.debug("Using certifi SSL context.")
        except (OSError, ssl.SSLError):
            verify_ssl = True
            logger.warning(
                "certifi bundle failed to load. Using default SSL verification."
            )

        return httpx.AsyncClient(
            timeout=self._config.request_timeout,
            verify=verify_ssl,
            headers={"User-Agent": self._config.user_agent},
        )

    @property
    def config(self) -> IgApiSettings:
        return self._config

    def url_for(self, path: str) -> str:
        """Return the absolute URL of an endpoint path on the configured host."""
        return compose_url(self._config.base_url, path)

    def clone(self) -> "SignedClient":
        """Return an independent client sharing only this client's transport.

        The clone never closes the shared transport; the original owner does.
        """
        return SignedClient(
            self._credentials, self._config, http_client=self._http_client
        )

    def __copy__(self) -> "SignedClient":
        return self.clone()

    async def acquire_token(self) -> SessionToken:
        """Log in and return a new session token; see `SessionAuth.acquire_token`."""
        return await self._auth.acquire_token()

    async def sign(self, request_data: RequestData, version: int) -> RequestData:
        """Set the signing headers on a request; see `SessionAuth.sign`."""
        return await self._auth.sign(request_data, version)

    async def _dispatch(
        self,
        method: str,
        path: str,
        version: int,
        *,
        body: Any | None,
        as_query: bool,
        response_model: Any,
        extra_headers: dict[str, str] | None = None,
    ) -> Any:
        """Run one signed call: compose, sign, attach body, send and decode.

        Args:
            method: HTTP method put on the wire.
            path: Endpoint path, starting with '/'.
            version: Endpoint version for the `VERSION` header.
            body: Optional request body; omitted from the request when None.
            as_query: Attach `body` as query parameters instead of JSON.
            response_model: Type the response body is validated into.
            extra_headers: Headers added after signing.

        Raises:
            TransportError: On any failure; nothing is retried.
        """
        request_data = RequestData(method=method, url=self.url_for(path))
        await self.sign(request_data, version)
        if extra_headers:
            request_data.headers.update(extra_headers)

        if body is not None:
            if as_query:
                request_data.params = serialize_query(body)
            else:
                request_data.json_data = serialize_body(body)

        request = build(self._http_client, request_data)
        response = await send(self._http_client, request)
        return decode(response, TypeAdapter(response_model), request)

    async def get(
        self,
        path: str,
        version: int,
        query: Any | None = None,
        *,
        response_model: type[ResponseT] = Any,  # type: ignore[assignment]
    ) -> ResponseT:
        """Signed GET; `query` is sent as query-string parameters.

        Args:
            path: Endpoint path, starting with '/'.
            version: Endpoint version for the `VERSION` header.
            query: Optional object serializing to a flat mapping.
            response_model: Type to decode the response body into.

        Returns:
            The decoded response body.
        """
        return await self._dispatch(
            "GET",
            path,
            version,
            body=query,
            as_query=True,
            response_model=response_model,
        )

    async def post(
        self,
        path: str,
        version: int,
        data: Any | None = None,
        *,
        response_model: type[ResponseT] = Any,  # type: ignore[assignment]
    ) -> ResponseT:
        """Signed POST; `data` is sent as a JSON body."""
        return await self._dispatch(
            "POST",
            path,
            version,
            body=data,
            as_query=False,
            response_model=response_model,
        )

    async def put(
        self,
        path: str,
        version: int,
        data: Any | None = None,
        *,
        response_model: type[ResponseT] = Any,  # type: ignore[assignment]
    ) -> ResponseT:
        """Signed PUT; `data` is sent as a JSON body."""
        return await self._dispatch(
            "PUT",
            path,
            version,
            body=data,
            as_query=False,
            response_model=response_model,
        )

    async def delete(
        self,
        path: str,
        version: int,
        data: Any | None = None,
        *,
        response_model: type[ResponseT] = Any,  # type: ignore[assignment]
    ) -> ResponseT:
        """Signed delete, sent on the wire as POST with `_method: DELETE`.

        The API does not accept bodies on DELETE requests, so deletes are
        tunneled through POST and marked with the override header.
        """
        return await self._dispatch(
            "POST",
            path,
            version,
            body=data,
            as_query=False,
            response_model=response_model,
            extra_headers={HEADER_METHOD_OVERRIDE: METHOD_OVERRIDE_DELETE},
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._should_close_client and not self._http_client.is_closed:
            await self._http_client.aclose()
            logger.debug(
                f"SignedClient internal HTTP client closed. Client ID: {id(self)}."
            )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        await self.aclose()
