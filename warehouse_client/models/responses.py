"""
Response shapes returned by the Data Warehouse service.

Single-item and multi-item envelopes ({"article": {...}}, {"articles": [...]})
are unwrapped by the resource layer; the types here are the ones handed back
to callers as-is.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from warehouse_client.models.content import (
    Article,
    Podcast,
    format_timestamp,
    parse_timestamp,
)


def _require_object(data: Any, name: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{name} must be a JSON object, got {type(data).__name__}")
    return data


def _require_int(data: Dict[str, Any], key: str) -> int:
    """Read an integer count; absent or null is 0, anything but a JSON integer is rejected."""
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    return value


class PaginatedResponse:
    """
    Shared behavior of the paginated search envelopes.

    Subclasses are dataclasses with a list field named after the resource
    ("articles" or "podcasts") followed by total, page and limit.
    """

    ITEMS_KEY = "items"
    ITEM_TYPE = None

    @property
    def items(self) -> list:
        """The records on this page, whatever the resource."""
        return getattr(self, self.ITEMS_KEY)

    @property
    def has_next_page(self) -> bool:
        if self.limit <= 0:
            return False
        return self.page * self.limit < self.total

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """
        Build a page from the envelope JSON.

        The list is read from the resource key, falling back to "items".

        Raises:
            ValueError: If the envelope is malformed, a count is not an
                integer, or total is smaller than the number of records
                returned.
        """
        data = _require_object(data, cls.__name__)

        raw_items = data.get(cls.ITEMS_KEY)
        if raw_items is None:
            raw_items = data.get("items")
        if raw_items is None:
            raw_items = []
        if not isinstance(raw_items, list):
            raise ValueError(f"{cls.ITEMS_KEY} must be a list, got {type(raw_items).__name__}")

        items = [cls.ITEM_TYPE.from_dict(raw) for raw in raw_items]
        total = _require_int(data, "total")
        if total < len(items):
            raise ValueError(
                f"total ({total}) is smaller than the number of {cls.ITEMS_KEY} returned ({len(items)})"
            )

        return cls(
            **{cls.ITEMS_KEY: items},
            total=total,
            page=_require_int(data, "page"),
            limit=_require_int(data, "limit"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            self.ITEMS_KEY: [item.to_dict() for item in self.items],
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
        }


@dataclass
class PaginatedArticlesResponse(PaginatedResponse):
    """One page of an article tag search."""

    ITEMS_KEY = "articles"
    ITEM_TYPE = Article

    articles: List[Article] = field(default_factory=list)
    total: int = 0
    page: int = 0
    limit: int = 0


@dataclass
class PaginatedPodcastsResponse(PaginatedResponse):
    """One page of a podcast tag search."""

    ITEMS_KEY = "podcasts"
    ITEM_TYPE = Podcast

    podcasts: List[Podcast] = field(default_factory=list)
    total: int = 0
    page: int = 0
    limit: int = 0


@dataclass
class HealthResponse:
    """
    Result of GET /health.

    Attributes:
        status: Overall service status, e.g. "ok".
        database: Database connectivity, e.g. "connected".
        timestamp: When the service produced the report.
    """

    status: str
    database: str
    timestamp: Optional[datetime] = None

    @property
    def is_healthy(self) -> bool:
        return self.status.lower() in ("ok", "healthy")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HealthResponse":
        data = _require_object(data, cls.__name__)
        return cls(
            status=str(data.get("status") or ""),
            database=str(data.get("database") or ""),
            timestamp=parse_timestamp(data.get("timestamp")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "database": self.database,
            "timestamp": format_timestamp(self.timestamp),
        }


@dataclass
class ErrorResponse:
    """Error body of the form {"error": {"message": ..., "code": ...}}."""

    message: str
    code: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ErrorResponse":
        data = _require_object(data, cls.__name__)
        error = _require_object(data.get("error"), "error")
        if "message" not in error:
            raise ValueError("error object has no message")
        return cls(message=str(error["message"]), code=str(error.get("code") or ""))

    def __str__(self) -> str:
        return f"{self.code}: {self.message}" if self.code else self.message
