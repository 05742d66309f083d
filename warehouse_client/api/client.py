"""
HTTP client for the Data Warehouse service.

Uses the Data Warehouse REST API for all operations. Every request carries
two headers:

    Content-Type: application/json
    Authorization: Bearer <api key>

Only HTTP 200 counts as success. Any other status raises UnexpectedStatusError
with the code and the raw body text; nothing is retried.

=============================================================================
USAGE
=============================================================================

    with Client("https://warehouse.example.com", "secret") as client:
        article = client.create_article(CreateArticleRequest(
            title="Scaling Postgres",
            url="https://example.com/scaling-postgres",
            tags=["databases"],
        ))
        page = client.search_articles_paginated("databases", page=1, limit=20)

=============================================================================
"""

import json
import logging
from http.cookiejar import DefaultCookiePolicy
from typing import Any, List, Mapping, Optional, Union
from urllib.parse import quote

import requests
from requests.auth import AuthBase

import warehouse_client.config.config as settings
from warehouse_client.api.errors import (
    InvalidConfigurationError,
    SerializationError,
    TransportError,
    UnexpectedStatusError,
)
from warehouse_client.api.resources import (
    ARTICLES,
    PODCASTS,
    ResourceService,
    decode_response,
    error_context,
)
from warehouse_client.config import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from warehouse_client.models.content import (
    Article,
    CreateArticleRequest,
    CreateContentRequest,
    CreatePodcastRequest,
    Podcast,
)
from warehouse_client.models.responses import (
    HealthResponse,
    PaginatedArticlesResponse,
    PaginatedPodcastsResponse,
)


logger = logging.getLogger(__name__)

HEALTH_ENDPOINT = "/health"

Payload = Union[CreateContentRequest, Mapping[str, Any]]


class BearerAuth(AuthBase):
    """
    Attach the API key as a bearer token.

    Passed as the request's auth so requests never substitutes credentials
    from ~/.netrc for it.
    """

    def __init__(self, token: str):
        self.token = token

    def __call__(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        r.headers["Authorization"] = f"Bearer {self.token}"
        return r

    def __repr__(self) -> str:
        return f"{type(self).__name__}(token='***')"


class Client:
    """
    Client for the Data Warehouse microservice.

    Holds the base URL, the API key and the HTTP session used for every
    request. Construction never touches the network.

    Args:
        base_url: Root address of the service; endpoint paths are appended to it.
        api_key: Bearer token for the Authorization header.
        session: requests.Session to send requests with. When omitted, a new
            one that refuses cookies is created (and closed by close()).
        timeout: Seconds before a request is abandoned. None waits indefinitely.
        escape_path_segments: Percent-encode ids and tags placed in URL paths.

    Raises:
        InvalidConfigurationError: If base_url or api_key is empty.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        escape_path_segments: bool = True,
    ):
        if not base_url:
            raise InvalidConfigurationError("url is empty")
        if not api_key:
            raise InvalidConfigurationError("apiKey is empty")

        self._base_url = base_url.rstrip("/")
        self._auth = BearerAuth(api_key)
        self._owns_session = session is None
        if session is None:
            session = requests.Session()
            # Calls share no state: refuse every cookie the server sets.
            session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
        self._session = session
        self.timeout = timeout
        self.escape_path_segments = escape_path_segments

        self.articles = ResourceService(self, ARTICLES)
        self.podcasts = ResourceService(self, PODCASTS)

        logger.debug(f"Client initialized (base_url: {self._base_url})")

    @classmethod
    def from_env(cls, session: Optional[requests.Session] = None) -> "Client":
        """
        Build a client from DATA_WAREHOUSE_* environment configuration.

        Raises:
            InvalidConfigurationError: If DATA_WAREHOUSE_URL or
                DATA_WAREHOUSE_API_KEY is not set.
        """
        return cls(
            settings.DATA_WAREHOUSE_URL,
            settings.DATA_WAREHOUSE_API_KEY,
            session=session,
            timeout=settings.DATA_WAREHOUSE_TIMEOUT,
            escape_path_segments=settings.DATA_WAREHOUSE_ESCAPE_PATHS,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def _headers(self) -> dict:
        """Construct headers for API requests. Authorization is added by _auth."""
        return {"Content-Type": "application/json"}

    def path_segment(self, value: str) -> str:
        """Prepare an id or tag for use as a single URL path segment."""
        value = str(value)
        if not self.escape_path_segments:
            return value
        return quote(value, safe="")

    # =========================================================================
    # Transport primitives
    # =========================================================================

    def get(self, path: str) -> bytes:
        """
        Send a GET request and return the raw response body.

        Args:
            path: Endpoint path appended to the base URL, including any query string.

        Raises:
            TransportError: If no response was received.
            UnexpectedStatusError: If the status code is not 200.
        """
        return self._send("GET", path)

    def post(self, path: str, payload: Payload) -> bytes:
        """
        Send payload as JSON in a POST request and return the raw response body.

        Args:
            path: Endpoint path appended to the base URL.
            payload: A request record (anything with to_dict()) or a mapping.

        Raises:
            SerializationError: If payload cannot be encoded as JSON.
            TransportError: If no response was received.
            UnexpectedStatusError: If the status code is not 200.
        """
        try:
            data = payload.to_dict() if hasattr(payload, "to_dict") else payload
            body = json.dumps(data, allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"error marshalling data to JSON: {exc}") from exc

        return self._send("POST", path, body=body.encode("utf-8"))

    def _send(self, method: str, path: str, body: Optional[bytes] = None) -> bytes:
        url = f"{self._base_url}{path}"
        logger.debug(f"{method} {url}")

        try:
            response = self._session.request(
                method,
                url,
                headers=self._headers,
                auth=self._auth,
                data=body,
                timeout=self.timeout,
            )
            content = response.content
        except requests.RequestException as exc:
            logger.warning(f"{method} {url} failed: {exc}")
            raise TransportError(f"error sending request: {exc}", cause=exc) from exc

        if response.status_code != 200:
            text = content.decode(response.encoding or "utf-8", errors="replace")
            logger.warning(f"{method} {url} returned {response.status_code}")
            raise UnexpectedStatusError(response.status_code, text)

        return content

    # =========================================================================
    # Health
    # =========================================================================

    def get_health(self) -> HealthResponse:
        """Fetch the service's current health status."""
        with error_context("error retrieving health status"):
            raw = self.get(HEALTH_ENDPOINT)
            return decode_response(raw, HealthResponse.from_dict)

    # =========================================================================
    # Articles
    # =========================================================================

    def create_article(self, request: CreateArticleRequest) -> Article:
        """Create an article, or update the one with the same URL."""
        return self.articles.create(request)

    def get_article(self, article_id: str) -> Article:
        return self.articles.get(article_id)

    def search_articles(self, tag: str) -> List[Article]:
        return self.articles.search(tag)

    def search_articles_paginated(
        self,
        tag: str,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> PaginatedArticlesResponse:
        return self.articles.search_paginated(tag, page=page, limit=limit)

    # =========================================================================
    # Podcasts
    # =========================================================================

    def create_podcast(self, request: CreatePodcastRequest) -> Podcast:
        """Create a podcast, or update the one with the same URL."""
        return self.podcasts.create(request)

    def get_podcast(self, podcast_id: str) -> Podcast:
        return self.podcasts.get(podcast_id)

    def search_podcasts(self, tag: str) -> List[Podcast]:
        return self.podcasts.search(tag)

    def search_podcasts_paginated(
        self,
        tag: str,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> PaginatedPodcastsResponse:
        return self.podcasts.search_paginated(tag, page=page, limit=limit)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} base_url={self._base_url!r}>"
