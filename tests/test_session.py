"""Tests for the IgSession facade."""

import pytest

from conftest import HOST, SESSION_URL, session_body
from igrest.client import SignedClient
from igrest.config import IgApiSettings
from igrest.exceptions import ConfigurationError
from igrest.models import ClientSentimentList
from igrest.resources import AccountsClient, ClientSentimentClient
from igrest.session import IgSession


def test_session_wires_resources(credentials, settings):
    session = IgSession(credentials, settings)

    assert isinstance(session.client, SignedClient)
    assert isinstance(session.accounts, AccountsClient)
    assert isinstance(session.client_sentiment, ClientSentimentClient)
    assert session.accounts._api_client is session.client
    assert session.client_sentiment._api_client is session.client


def test_session_reads_credentials_from_settings():
    settings = IgApiSettings(
        _env_file=None,
        base_url=HOST,
        account_id="A1",
        api_key="K1",
        username="user",
        password="pass",
    )
    session = IgSession(settings=settings)

    assert session.client._credentials.username == "user"


def test_session_without_credentials_fails():
    settings = IgApiSettings(_env_file=None, base_url=HOST)
    with pytest.raises(ConfigurationError, match="Missing credential settings"):
        IgSession(settings=settings)


@pytest.mark.asyncio
async def test_session_end_to_end(credentials, settings, httpx_mock):
    """Test a resource call going through login, signing and decoding."""
    httpx_mock.add_response(url=SESSION_URL, method="POST", json=session_body("T3"))
    httpx_mock.add_response(
        url=f"https://{HOST}/clientsentiment?marketIds=EURUSD,GBPUSD",
        method="GET",
        json={
            "clientSentiments": [
                {
                    "marketId": "EURUSD",
                    "longPositionPercentage": 55.0,
                    "shortPositionPercentage": 45.0,
                },
                {
                    "marketId": "GBPUSD",
                    "longPositionPercentage": 30.0,
                    "shortPositionPercentage": 70.0,
                },
            ]
        },
    )

    async with IgSession(credentials, settings) as session:
        result = await session.client_sentiment.get_many(["EURUSD", "GBPUSD"])

    assert isinstance(result, ClientSentimentList)
    assert [s.market_id for s in result.client_sentiments] == ["EURUSD", "GBPUSD"]
    business = httpx_mock.get_requests()[-1]
    assert business.headers["Authorization"] == "Bearer T3"
    assert business.headers["VERSION"] == "1"
    assert session.client._http_client.is_closed
