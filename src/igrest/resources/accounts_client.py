# igrest/resources/accounts_client.py
"""Client for the IG `/accounts` endpoints."""

from ..constants import ACCOUNT_PREFERENCES, ACCOUNTS
from ..log_config import logger
from ..models import AccountPreferences, AccountsResponse, StatusResponse
from .base_client import BaseResourceClient


class AccountsClient(BaseResourceClient):
    """Lists accounts and reads or updates account preferences."""

    _version: int = 1

    async def list(self) -> AccountsResponse:
        """Return all accounts belonging to the logged-in client."""
        logger.info("Fetching account list")
        return await self._api_client.get(
            ACCOUNTS, self._version, response_model=AccountsResponse
        )

    async def get_preferences(self) -> AccountPreferences:
        return await self._api_client.get(
            ACCOUNT_PREFERENCES, self._version, response_model=AccountPreferences
        )

    async def update_preferences(self, trailing_stops_enabled: bool) -> StatusResponse:
        """Enable or disable trailing stops for the account.

        Args:
            trailing_stops_enabled: New value of the preference.

        Returns:
            StatusResponse: The acknowledgement returned by the API.
        """
        logger.info(
            f"Updating account preferences: trailingStopsEnabled={trailing_stops_enabled}"
        )
        return await self._api_client.put(
            ACCOUNT_PREFERENCES,
            self._version,
            AccountPreferences(trailing_stops_enabled=trailing_stops_enabled),
            response_model=StatusResponse,
        )
