# igrest/config.py
from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_BASE_URL, DEFAULT_USER_AGENT


class IgApiSettings(BaseSettings):
    """
    Manages user-configurable settings for the igrest client, loaded from
    environment variables (prefixed with 'IG_') or a .env file.

    Only `base_url` is read by the signing core. The credential fields exist so
    that `SignedClient.from_settings` can build a client without the caller
    handling secrets directly.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),  # Look in both .env and secrets.env
        env_file_encoding="utf-8",
        env_prefix="IG_",
        extra="ignore",  # Ignore extra fields found in environment
        case_sensitive=False,  # Allow IG_base_url etc.
    )

    # --- API host ---
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="API host (and optional path prefix), without scheme",
    )

    # --- Transport Settings ---
    request_timeout: float = Field(
        default=30.0, description="Default transport timeout in seconds"
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header for requests",
    )

    # --- Credentials (optional, see SignedClient.from_settings) ---
    account_id: str | None = Field(default=None, description="IG account identifier")
    api_key: SecretStr | None = Field(default=None, description="IG API key")
    username: str | None = Field(default=None, description="IG login identifier")
    password: SecretStr | None = Field(default=None, description="IG login password")


# Create a single, cached instance of settings
@lru_cache
def get_settings() -> IgApiSettings:
    """
    Provides access to the application settings.

    Settings are loaded from environment variables (prefixed with 'IG_')
    or .env/secrets.env files. The instance is cached for performance.

    Returns:
        IgApiSettings: The application settings instance.
    """
    return IgApiSettings()
