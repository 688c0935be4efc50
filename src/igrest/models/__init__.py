"""Pydantic models for IG request and response shapes."""

from .account import Account, AccountBalance, AccountPreferences, AccountsResponse
from .base import IgModel, StatusResponse
from .client_sentiment import (
    ClientSentiment,
    ClientSentimentList,
    ClientSentimentQuery,
)
from .session import LoginRequest, OAuthToken, SessionToken

__all__ = [
    "Account",
    "AccountBalance",
    "AccountPreferences",
    "AccountsResponse",
    "ClientSentiment",
    "ClientSentimentList",
    "ClientSentimentQuery",
    "IgModel",
    "LoginRequest",
    "OAuthToken",
    "SessionToken",
    "StatusResponse",
]
