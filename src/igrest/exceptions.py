"""Custom exception classes for the igrest library."""

import httpx


class IgRestError(Exception):
    """Base exception class for all igrest errors."""

    def __init__(
        self,
        message: str,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        """Initializes the base exception.

        Args:
            message: The error message.
            response: Optional httpx.Response object associated with the error.
            request: Optional httpx.Request object associated with the error.
        """
        super().__init__(message)
        self.message = message
        self.response = response
        self.request = request

    def __str__(self) -> str:
        if self.response is not None:
            # Prefer response info if available
            url_info = self.request.url if self.request is not None else "N/A"
            return (
                f"{self.message} (Status: {self.response.status_code}, URL: {url_info})"
            )
        if isinstance(self.request, httpx.Request):
            return f"{self.message} (URL: {self.request.url})"
        return self.message


class TransportError(IgRestError):
    """Raised for any failure of a signed operation.

    Covers connection, TLS and timeout failures, bodies that are not JSON or do
    not match the expected shape, request bodies that cannot be serialized, and
    credential or token values that cannot be encoded as header values. The
    original cause is chained as ``__cause__``.
    """


class ConfigurationError(IgRestError):
    """Represents an error in the library's configuration."""

    def __init__(self, message: str):
        # Configuration errors typically don't have an HTTP response
        super().__init__(message, response=None)
