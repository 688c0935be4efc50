"""Shapes of the `/clientsentiment` endpoints (version 1)."""

from .base import IgModel


class ClientSentiment(IgModel):
    """Share of IG clients long and short on one market, in percent."""

    market_id: str
    long_position_percentage: float | None = None
    short_position_percentage: float | None = None


class ClientSentimentList(IgModel):
    client_sentiments: list[ClientSentiment] = []


class ClientSentimentQuery(IgModel):
    """Query for several markets at once; ids are sent comma-separated."""

    market_ids: str

    @classmethod
    def for_markets(cls, market_ids: list[str]) -> "ClientSentimentQuery":
        return cls(market_ids=",".join(market_ids))
