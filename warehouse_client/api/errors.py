"""
Exceptions raised by the Data Warehouse client.

Every failure is a DataWarehouseError. Each layer that lets an error pass
through prefixes it with what it was doing via add_context(), so the class
stays the same while the message reads like
"error creating article: unexpected status code: 500, body: ...".
"""

import json
from typing import Optional

from warehouse_client.models.responses import ErrorResponse


class DataWarehouseError(Exception):
    """Base class for all client errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def add_context(self, context: str) -> "DataWarehouseError":
        """
        Prefix the message with context and return the same instance.

        Args:
            context: Short description of the failing operation.
        """
        self.message = f"{context}: {self.message}"
        self.args = (self.message,)
        return self

    def __str__(self) -> str:
        return self.message


class InvalidConfigurationError(DataWarehouseError, ValueError):
    """The client was constructed without a base URL or API key."""


class TransportError(DataWarehouseError):
    """The request never produced an HTTP response (DNS, connect, timeout, I/O)."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class UnexpectedStatusError(DataWarehouseError):
    """
    The service answered with a status other than 200.

    Attributes:
        status_code: HTTP status code of the response.
        body: Raw response body text, unparsed.
    """

    def __init__(self, status_code: int, body: str):
        super().__init__(f"unexpected status code: {status_code}, body: {body}")
        self.status_code = status_code
        self.body = body

    @property
    def error_response(self) -> Optional[ErrorResponse]:
        """The body read as {"error": {...}}, or None if it has another shape."""
        try:
            return ErrorResponse.from_dict(json.loads(self.body))
        except ValueError:
            return None


class SerializationError(DataWarehouseError):
    """The request payload could not be encoded as JSON."""


class DeserializationError(DataWarehouseError):
    """A 200 response body did not match the expected JSON shape."""
