"""
API client module.

HTTP access to the Data Warehouse service: the Client, the shared resource
operations and the exceptions they raise.
"""

from warehouse_client.api.client import Client
from warehouse_client.api.errors import (
    DataWarehouseError,
    DeserializationError,
    InvalidConfigurationError,
    SerializationError,
    TransportError,
    UnexpectedStatusError,
)
from warehouse_client.api.resources import ARTICLES, PODCASTS, Resource, ResourceService

__all__ = [
    "Client",
    "DataWarehouseError",
    "DeserializationError",
    "InvalidConfigurationError",
    "SerializationError",
    "TransportError",
    "UnexpectedStatusError",
    "ARTICLES",
    "PODCASTS",
    "Resource",
    "ResourceService",
]
