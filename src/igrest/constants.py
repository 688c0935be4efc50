# igrest/constants.py
"""Fixed values of the IG REST API wire protocol."""

DEFAULT_BASE_URL = "demo-api.ig.com/gateway/deal"
"""Host (and gateway prefix) of the IG demo environment, without scheme."""

DEFAULT_USER_AGENT = "igrest/0.1.0"

SCHEME = "https"

SESSION_PATH = "/session"
SESSION_VERSION = 3

HEADER_ACCOUNT_ID = "IG-ACCOUNT-ID"
HEADER_API_KEY = "X-IG-API-KEY"
HEADER_AUTHORIZATION = "Authorization"
HEADER_VERSION = "VERSION"

# Verb tunneling: the API reads deletes as POST plus this override header.
HEADER_METHOD_OVERRIDE = "_method"
METHOD_OVERRIDE_DELETE = "DELETE"

# Endpoint paths used by the bundled resource clients
ACCOUNTS = "/accounts"
ACCOUNT_PREFERENCES = "/accounts/preferences"
CLIENT_SENTIMENT = "/clientsentiment"
CLIENT_SENTIMENT_RELATED = "/clientsentiment/related"
