# igrest/resources/base_client.py
"""Base class shared by the endpoint resource clients."""

from typing import TYPE_CHECKING

from ..log_config import logger

if TYPE_CHECKING:
    from ..client import SignedClient


class BaseResourceClient:
    """Holds the `SignedClient` that endpoint wrappers issue their calls through.

    Resource clients only choose the path, version and shapes of a call;
    signing, transport and error translation all happen in the signed client.

    Attributes:
        _api_client: The `SignedClient` used for every request.
    """

    def __init__(self, api_client: "SignedClient"):
        """Initialize the base resource client.

        Args:
            api_client: An instance of SignedClient for making HTTP requests.
        """
        self._api_client = api_client
        logger.debug(f"{self.__class__.__name__} initialized")
