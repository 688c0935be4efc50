# tests/conftest.py
import pytest

from igrest.auth import Credentials
from igrest.client import SignedClient
from igrest.config import IgApiSettings

HOST = "demo.example.com"
SESSION_URL = f"https://{HOST}/session"

# Headers httpx adds on its own; everything else on a signed request comes from the signer.
TRANSPORT_HEADERS = frozenset(
    {
        "host",
        "accept",
        "accept-encoding",
        "connection",
        "user-agent",
        "content-length",
        "content-type",
    }
)
SIGNING_HEADERS = frozenset({"ig-account-id", "x-ig-api-key", "authorization", "version"})


def session_body(access_token: str = "T1") -> dict:
    """A version 3 login response as returned by the API."""
    return {
        "clientId": "C1",
        "accountId": "A1",
        "timezoneOffset": 1,
        "lightstreamerEndpoint": "https://push.example.com",
        "oauthToken": {
            "accessToken": access_token,
            "refreshToken": "R1",
            "scope": "profile",
            "tokenType": "Bearer",
            "expiresIn": "60",
        },
    }


@pytest.fixture
def settings() -> IgApiSettings:
    """Settings pointing at the fake host, isolated from any .env file."""
    return IgApiSettings(_env_file=None, base_url=HOST)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(account_id="A1", api_key="K1", username="user", password="pass")


@pytest.fixture
def signed_client(credentials, settings) -> SignedClient:
    return SignedClient(credentials, settings)


@pytest.fixture
def add_session(httpx_mock):
    """Register one successful login response per call."""

    def _add(access_token: str = "T1") -> None:
        httpx_mock.add_response(
            url=SESSION_URL, method="POST", json=session_body(access_token)
        )

    return _add
