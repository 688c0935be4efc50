"""Shapes of the `/accounts` endpoints (version 1)."""

from .base import IgModel


class AccountBalance(IgModel):
    """Funds summary of one account."""

    balance: float | None = None
    deposit: float | None = None
    profit_loss: float | None = None
    available: float | None = None


class Account(IgModel):
    """One account belonging to the logged-in client.

    Attributes:
        account_id: Account identifier, the value used as `IG-ACCOUNT-ID`.
        account_name: Display name.
        account_alias: Optional user-defined alias.
        status: e.g. ``"ENABLED"``.
        account_type: ``"CFD"``, ``"PHYSICAL"`` or ``"SPREADBET"``.
        preferred: Whether this is the default account on login.
        balance: Current funds summary.
        currency: Account currency code.
        can_transfer_from: Whether funds may be moved out of the account.
        can_transfer_to: Whether funds may be moved into the account.
    """

    account_id: str
    account_name: str | None = None
    account_alias: str | None = None
    status: str | None = None
    account_type: str | None = None
    preferred: bool | None = None
    balance: AccountBalance | None = None
    currency: str | None = None
    can_transfer_from: bool | None = None
    can_transfer_to: bool | None = None


class AccountsResponse(IgModel):
    accounts: list[Account] = []


class AccountPreferences(IgModel):
    """Per-client preferences; also the body of a preferences update."""

    trailing_stops_enabled: bool
