"""igrest: authenticated signed-request client for the IG REST API.

Every call made through `SignedClient` logs in for a fresh session token,
signs the request with the account headers and the bearer token, and decodes
the response into a caller-chosen type. Endpoint wrappers for accounts and
client sentiment are built on top of it, and `IgSession` bundles them.
"""

__version__ = "0.1.0"

# Import core modules for easy access
from . import (
    auth,
    client,
    config,
    constants,
    exceptions,
    log_config,
    models,
    resources,
    transport,
    types,
)
from .auth import Credentials
from .client import SignedClient
from .config import IgApiSettings, get_settings
from .exceptions import ConfigurationError, IgRestError, TransportError
from .session import IgSession

__all__ = [
    "__version__",
    "ConfigurationError",
    "Credentials",
    "IgApiSettings",
    "IgRestError",
    "IgSession",
    "SignedClient",
    "TransportError",
    "auth",
    "client",
    "config",
    "constants",
    "exceptions",
    "get_settings",
    "log_config",
    "models",
    "resources",
    "transport",
    "types",
]
