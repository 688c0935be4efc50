"""Session acquisition and request signing for the IG REST API.

Every signed request carries a bearer token obtained from a fresh login
(`POST /session`, version 3) made immediately before it. Tokens are never kept
between calls, so concurrent signed calls share nothing but the immutable
credentials, the host and the transport.
"""

import httpx
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .constants import (
    HEADER_ACCOUNT_ID,
    HEADER_API_KEY,
    HEADER_AUTHORIZATION,
    HEADER_VERSION,
    SESSION_PATH,
    SESSION_VERSION,
)
from .log_config import logger
from .models import LoginRequest, SessionToken
from .transport import build, compose_url, decode, encode_header_value, send
from .types import RequestData

_SESSION_TOKEN_ADAPTER = TypeAdapter(SessionToken)


class Credentials(BaseModel):
    """Login credentials of one IG account.

    Immutable, and kept out of `repr` so they cannot leak into log output.
    """

    model_config = ConfigDict(frozen=True)

    account_id: str = Field(repr=False)
    api_key: str = Field(repr=False)
    username: str = Field(repr=False)
    password: str = Field(repr=False)


class SessionAuth:
    """Acquires session tokens and signs outgoing requests with them.

    Attributes:
        _credentials: The account credentials.
        _host: API host the login request is sent to.
        _http_client: Transport shared with the owning client.
    """

    def __init__(
        self, credentials: Credentials, host: str, http_client: httpx.AsyncClient
    ):
        self._credentials = credentials
        self._host = host
        self._http_client = http_client

    def _login_headers(self) -> dict[str, str]:
        return {
            HEADER_API_KEY: encode_header_value(
                HEADER_API_KEY, self._credentials.api_key
            ),
            HEADER_ACCOUNT_ID: encode_header_value(
                HEADER_ACCOUNT_ID, self._credentials.account_id
            ),
            HEADER_VERSION: str(SESSION_VERSION),
        }

    async def acquire_token(self) -> SessionToken:
        """Logs in and returns the resulting session token.

        Returns:
            The decoded login response.

        Raises:
            TransportError: If the login request cannot be built or sent, or its
                response is not a JSON body containing `oauthToken.accessToken`.
        """
        login = LoginRequest(
            identifier=self._credentials.username,
            password=self._credentials.password,
        )
        request_data = RequestData(
            method="POST",
            url=compose_url(self._host, SESSION_PATH),
            json_data=login.model_dump(by_alias=True),
            headers=self._login_headers(),
        )
        request = build(self._http_client, request_data)

        logger.debug(f"Acquiring session token from {request.url}")
        response = await send(self._http_client, request)
        token = decode(response, _SESSION_TOKEN_ADAPTER, request)
        logger.debug("Session token acquired.")
        return token

    async def sign(self, request_data: RequestData, version: int) -> RequestData:
        """Acquires a fresh token and sets the four signing headers.

        Args:
            request_data: The outgoing request; its headers are updated in place.
            version: Endpoint version sent as the `VERSION` header.

        Returns:
            The same `request_data`, for chaining.

        Raises:
            TransportError: If token acquisition fails or a credential or token
                cannot be encoded as a header value.
        """
        token = await self.acquire_token()
        authorization = f"Bearer {token.oauth_token.access_token}"

        request_data.headers.update(
            {
                HEADER_ACCOUNT_ID: encode_header_value(
                    HEADER_ACCOUNT_ID, self._credentials.account_id
                ),
                HEADER_API_KEY: encode_header_value(
                    HEADER_API_KEY, self._credentials.api_key
                ),
                HEADER_AUTHORIZATION: encode_header_value(
                    HEADER_AUTHORIZATION, authorization
                ),
                HEADER_VERSION: str(version),
            }
        )
        logger.trace(f"Signed {request_data.method} {request_data.url}")
        return request_data
