"""
Data Warehouse client.

Thin synchronous wrapper around the Data Warehouse REST API: create, fetch and
search articles and podcasts, and check service health.
"""

import logging

from warehouse_client.api import (
    Client,
    DataWarehouseError,
    DeserializationError,
    InvalidConfigurationError,
    SerializationError,
    TransportError,
    UnexpectedStatusError,
)
from warehouse_client.models import (
    Article,
    CreateArticleRequest,
    CreatePodcastRequest,
    ErrorResponse,
    HealthResponse,
    PaginatedArticlesResponse,
    PaginatedPodcastsResponse,
    Podcast,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Client",
    "DataWarehouseError",
    "DeserializationError",
    "InvalidConfigurationError",
    "SerializationError",
    "TransportError",
    "UnexpectedStatusError",
    "Article",
    "CreateArticleRequest",
    "CreatePodcastRequest",
    "ErrorResponse",
    "HealthResponse",
    "PaginatedArticlesResponse",
    "PaginatedPodcastsResponse",
    "Podcast",
]
