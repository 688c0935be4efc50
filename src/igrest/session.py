"""Main user-facing session class for the IG REST API."""

import httpx

from .auth import Credentials
from .client import SignedClient
from .config import IgApiSettings, get_settings
from .log_config import configure_logging, logger
from .resources import AccountsClient, ClientSentimentClient

configure_logging()


class IgSession:
    """High-level entry point bundling a `SignedClient` with endpoint clients.

    Example:
    ```python
    async with IgSession() as session:
        accounts = await session.accounts.list()
        sentiment = await session.client_sentiment.get("EURUSD")
        raw = await session.client.get("/markets", 3, {"searchTerm": "EUR"})
    ```

    Attributes:
        accounts (AccountsClient): Client for the `/accounts` endpoints.
        client_sentiment (ClientSentimentClient): Client for `/clientsentiment`.
        _api_client (SignedClient): The underlying signed client.
    """

    def __init__(
        self,
        credentials: Credentials | None = None,
        settings: IgApiSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initializes the session and its underlying `SignedClient`.

        Args:
            credentials: Account credentials. If `None`, they are read from
                the settings (`IG_ACCOUNT_ID`, `IG_API_KEY`, `IG_USERNAME`,
                `IG_PASSWORD`).
            settings: Optional settings; defaults to `get_settings()`.
            http_client: Optional pre-configured httpx.AsyncClient instance.

        Raises:
            ConfigurationError: If credentials are neither given nor configured.
        """
        current_settings = settings or get_settings()
        if credentials is None:
            self._api_client = SignedClient.from_settings(
                current_settings, http_client=http_client
            )
        else:
            self._api_client = SignedClient(
                credentials, current_settings, http_client=http_client
            )
        self._accounts = AccountsClient(self._api_client)
        self._client_sentiment = ClientSentimentClient(self._api_client)
        logger.info(f"IgSession initialized for API: {current_settings.base_url}")

    @property
    def client(self) -> SignedClient:
        """Access the SignedClient for endpoints without a dedicated wrapper."""
        return self._api_client

    @property
    def accounts(self) -> AccountsClient:
        """Access the AccountsClient."""
        return self._accounts

    @property
    def client_sentiment(self) -> ClientSentimentClient:
        """Access the ClientSentimentClient."""
        return self._client_sentiment

    async def close(self) -> None:
        """Closes the underlying HTTP client session."""
        await self._api_client.aclose()

    async def __aenter__(self) -> "IgSession":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
