"""
Data models module.

Defines the records, request payloads and response envelopes exchanged with the
Data Warehouse service.
"""

from warehouse_client.models.content import (
    Article,
    ContentItem,
    CreateArticleRequest,
    CreateContentRequest,
    CreatePodcastRequest,
    Podcast,
    format_timestamp,
    parse_timestamp,
)
from warehouse_client.models.responses import (
    ErrorResponse,
    HealthResponse,
    PaginatedArticlesResponse,
    PaginatedPodcastsResponse,
    PaginatedResponse,
)

__all__ = [
    "Article",
    "ContentItem",
    "CreateArticleRequest",
    "CreateContentRequest",
    "CreatePodcastRequest",
    "Podcast",
    "format_timestamp",
    "parse_timestamp",
    "ErrorResponse",
    "HealthResponse",
    "PaginatedArticlesResponse",
    "PaginatedPodcastsResponse",
    "PaginatedResponse",
]
