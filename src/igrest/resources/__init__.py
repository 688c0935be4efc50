"""Exposes the resource client classes."""

from .accounts_client import AccountsClient
from .base_client import BaseResourceClient
from .client_sentiment_client import ClientSentimentClient

__all__ = [
    "AccountsClient",
    "BaseResourceClient",
    "ClientSentimentClient",
]
