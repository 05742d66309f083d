"""
Content records stored in the Data Warehouse.

Articles and podcasts share the same shape: an id and timestamps assigned by the
service, plus the title/description/url/tags supplied by the caller. The url is
the service's unique key, so re-submitting a known url updates the existing
record instead of creating a second one.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


# The service emits RFC 3339 with one to nine fractional digits;
# datetime.fromisoformat wants exactly six on older interpreters.
_FRACTION_RE = re.compile(r"\.(\d+)")


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp from the wire.

    Args:
        value: String such as "2024-01-01T00:00:00Z", or None.

    Returns:
        Timezone-aware datetime when the string carries an offset, None if value is empty.

    Raises:
        ValueError: If the value is not a valid timestamp.
    """
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValueError(f"timestamp must be a string, got {type(value).__name__}")
    text = _FRACTION_RE.sub(
        lambda match: "." + match.group(1)[:6].ljust(6, "0"), value.strip()
    )
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Inverse of parse_timestamp; UTC is written with a Z suffix."""
    if value is None:
        return None
    text = value.isoformat()
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def _parse_tags(value: Any) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"tags must be a list, got {type(value).__name__}")
    return [str(tag) for tag in value]


@dataclass
class ContentItem:
    """
    A record held by the Data Warehouse.

    Attributes:
        id: Identifier assigned by the service.
        title: Display title.
        url: Canonical link; unique across records of the same type.
        description: Optional summary, empty string when absent.
        tags: Ordered tag list used by the search endpoints.
        created_at: When the service first stored the record.
        updated_at: When the service last updated the record.
    """

    id: str
    title: str
    url: str
    description: str = ""
    tags: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    REQUIRED_FIELDS = ("id", "title", "url")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContentItem":
        """
        Build a record from its JSON object.

        Raises:
            ValueError: If data is not an object, a required field is missing,
                or a timestamp/tag list is malformed.
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"{cls.__name__} must be a JSON object, got {type(data).__name__}"
            )

        missing = [name for name in cls.REQUIRED_FIELDS if data.get(name) is None]
        if missing:
            raise ValueError(
                f"{cls.__name__} is missing required field(s): {', '.join(missing)}"
            )

        return cls(
            id=str(data["id"]),
            title=str(data["title"]),
            url=str(data["url"]),
            description=data.get("description") or "",
            tags=_parse_tags(data.get("tags")),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire representation."""
        data: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "url": self.url,
        }
        if self.description:
            data["description"] = self.description
        if self.tags:
            data["tags"] = list(self.tags)
        data["created_at"] = format_timestamp(self.created_at)
        data["updated_at"] = format_timestamp(self.updated_at)
        return data

    def __str__(self) -> str:
        return f"{self.title} <{self.url}>"


@dataclass
class Article(ContentItem):
    """An article record."""


@dataclass
class Podcast(ContentItem):
    """A podcast record."""


@dataclass
class CreateContentRequest:
    """
    Payload for creating or updating a record.

    There is no id or timestamp here; the service assigns those.
    Empty description and tags are left out of the JSON body.
    """

    title: str
    url: str
    description: str = ""
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"title": self.title}
        if self.description:
            data["description"] = self.description
        data["url"] = self.url
        if self.tags:
            data["tags"] = list(self.tags)
        return data


@dataclass
class CreateArticleRequest(CreateContentRequest):
    """Payload for POST /api/v1/articles."""


@dataclass
class CreatePodcastRequest(CreateContentRequest):
    """Payload for POST /api/v1/podcasts."""
