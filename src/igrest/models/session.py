"""Shapes of the `/session` login exchange (version 3)."""

from pydantic import Field

from .base import IgModel


class LoginRequest(IgModel):
    """Login payload sent to `/session`."""

    identifier: str
    password: str = Field(repr=False)


class OAuthToken(IgModel):
    """The `oauthToken` block of a version 3 login response.

    Attributes:
        access_token: Bearer token sent as `Authorization` on signed calls.
        refresh_token: Token that the API accepts for a refresh; unused here.
        scope: Granted scope, e.g. ``"profile"``.
        token_type: Normally ``"Bearer"``.
        expires_in: Lifetime in seconds, sent by the API as a string.
    """

    access_token: str = Field(repr=False)
    refresh_token: str | None = Field(default=None, repr=False)
    scope: str | None = None
    token_type: str | None = None
    expires_in: str | None = None


class SessionToken(IgModel):
    """Decoded login response. Only `oauth_token.access_token` is required."""

    client_id: str | None = None
    account_id: str | None = None
    timezone_offset: int | None = None
    lightstreamer_endpoint: str | None = None
    oauth_token: OAuthToken
