"""
Resource operations shared by articles and podcasts.

Both resource types expose the same four endpoints under /api/v1/{collection}:

| Operation        | Method | Path                                   |
|------------------|--------|----------------------------------------|
| create           | POST   | /api/v1/{collection}                   |
| get              | GET    | /api/v1/{collection}/{id}              |
| search           | GET    | /api/v1/{collection}/search/{tag}      |
| search_paginated | GET    | .../search/{tag}/paginated?page&limit  |

A Resource describes one type (its envelope keys and model classes) and a
ResourceService runs those operations for it on top of a client's get/post.
"""

import json
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, TypeVar

from warehouse_client.api.errors import DataWarehouseError, DeserializationError
from warehouse_client.config import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from warehouse_client.models.content import (
    Article,
    ContentItem,
    CreateContentRequest,
    Podcast,
)
from warehouse_client.models.responses import (
    PaginatedArticlesResponse,
    PaginatedPodcastsResponse,
    PaginatedResponse,
)


logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

T = TypeVar("T")


@dataclass(frozen=True)
class Resource:
    """
    Describes one resource type served by the Data Warehouse.

    Attributes:
        key: Singular envelope key, e.g. "article".
        collection: Plural key and path segment, e.g. "articles".
        item_type: Record class built from each JSON object.
        page_type: Envelope class returned by paginated search.
    """

    key: str
    collection: str
    item_type: type
    page_type: type

    @property
    def base_path(self) -> str:
        return f"{API_PREFIX}/{self.collection}"


ARTICLES = Resource(
    key="article",
    collection="articles",
    item_type=Article,
    page_type=PaginatedArticlesResponse,
)

PODCASTS = Resource(
    key="podcast",
    collection="podcasts",
    item_type=Podcast,
    page_type=PaginatedPodcastsResponse,
)


@contextmanager
def error_context(context: str) -> Iterator[None]:
    """Prefix any DataWarehouseError raised inside the block with context."""
    try:
        yield
    except DataWarehouseError as exc:
        exc.add_context(context)
        raise


def decode_response(raw: bytes, parse: Callable[[Any], T]) -> T:
    """
    Decode a 200 response body and hand the JSON value to parse.

    Raises:
        DeserializationError: If the body is not JSON or parse rejects its shape.
    """
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise DeserializationError(f"error unmarshalling response data: {exc}") from exc

    try:
        return parse(data)
    except (KeyError, TypeError, ValueError) as exc:
        raise DeserializationError(f"error unmarshalling response data: {exc}") from exc


class ResourceService:
    """
    Create, fetch and search one resource type.

    Args:
        client: Object providing get(path), post(path, payload) and
            path_segment(value), normally a warehouse_client Client.
        resource: The resource this service works on.
    """

    def __init__(self, client, resource: Resource):
        self._client = client
        self.resource = resource

    def create(self, request: CreateContentRequest) -> ContentItem:
        """
        Create a record, or update the one that already has request.url.

        Returns:
            The stored record as returned by the service.
        """
        with error_context(f"error creating {self.resource.key}"):
            raw = self._client.post(self.resource.base_path, request)
            item = decode_response(raw, self._parse_item)
        logger.info(f"Stored {self.resource.key} {item.id} ({item.url})")
        return item

    def get(self, item_id: str) -> ContentItem:
        """Fetch a record by id."""
        path = f"{self.resource.base_path}/{self._client.path_segment(item_id)}"
        with error_context(f"error retrieving {self.resource.key}"):
            raw = self._client.get(path)
            return decode_response(raw, self._parse_item)

    def search(self, tag: str) -> List[ContentItem]:
        """
        Fetch every record carrying tag, in the order the service returns them.

        An empty result is an empty list, not an error.
        """
        path = f"{self.resource.base_path}/search/{self._client.path_segment(tag)}"
        with error_context(f"error searching {self.resource.collection}"):
            raw = self._client.get(path)
            items = decode_response(raw, self._parse_items)
        logger.debug(f"Search {self.resource.collection} by {tag!r}: {len(items)} result(s)")
        return items

    def search_paginated(
        self,
        tag: str,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> PaginatedResponse:
        """
        Fetch one page of records carrying tag.

        Args:
            tag: Tag to search for.
            page: Page number, starting at 1.
            limit: Records per page; the service accepts 1-100.

        Returns:
            The page envelope with its records and total/page/limit.
        """
        path = (
            f"{self.resource.base_path}/search/{self._client.path_segment(tag)}"
            f"/paginated?page={page}&limit={limit}"
        )
        with error_context(f"error searching {self.resource.collection} with pagination"):
            raw = self._client.get(path)
            return decode_response(raw, self.resource.page_type.from_dict)

    def _parse_item(self, data: Any) -> ContentItem:
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        record = data.get(self.resource.key)
        if record is None:
            raise ValueError(f"response has no {self.resource.key!r} object")
        return self.resource.item_type.from_dict(record)

    def _parse_items(self, data: Any) -> List[ContentItem]:
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        records = data.get(self.resource.collection)
        if records is None:
            return []
        if not isinstance(records, list):
            raise ValueError(
                f"{self.resource.collection!r} must be a list, got {type(records).__name__}"
            )
        return [self.resource.item_type.from_dict(record) for record in records]

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} resource={self.resource.collection!r}>"
