# igrest/resources/client_sentiment_client.py
"""Client for the IG `/clientsentiment` endpoints.

Client sentiment is the share of IG clients holding long and short positions
on a market, published per market id (e.g. ``"EURUSD"``).
"""

from ..constants import CLIENT_SENTIMENT, CLIENT_SENTIMENT_RELATED
from ..log_config import logger
from ..models import ClientSentiment, ClientSentimentList, ClientSentimentQuery
from .base_client import BaseResourceClient


class ClientSentimentClient(BaseResourceClient):
    """Fetches client sentiment for one market, several markets, or related markets."""

    _version: int = 1

    async def get(self, market_id: str) -> ClientSentiment:
        """Return the client sentiment of a single market.

        Args:
            market_id: The IG market identifier.
        """
        logger.info(f"Fetching client sentiment for market {market_id}")
        return await self._api_client.get(
            f"{CLIENT_SENTIMENT}/{market_id}",
            self._version,
            response_model=ClientSentiment,
        )

    async def get_many(self, market_ids: list[str]) -> ClientSentimentList:
        """Return the client sentiment of several markets in one call.

        Args:
            market_ids: IG market identifiers; must not be empty.

        Raises:
            ValueError: If no market ids are given.
        """
        if not market_ids:
            raise ValueError("get_many requires at least one market id.")
        logger.info(f"Fetching client sentiment for {len(market_ids)} markets")
        return await self._api_client.get(
            CLIENT_SENTIMENT,
            self._version,
            ClientSentimentQuery.for_markets(market_ids),
            response_model=ClientSentimentList,
        )

    async def related(self, market_id: str) -> ClientSentimentList:
        """Return the client sentiment of markets related to `market_id`."""
        return await self._api_client.get(
            f"{CLIENT_SENTIMENT_RELATED}/{market_id}",
            self._version,
            response_model=ClientSentimentList,
        )
