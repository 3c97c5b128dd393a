"""Freckle API client with error mapping and Link-header pagination."""

import logging
from typing import Any, Iterator, Optional

import httpx

from .. import __version__
from ..config import Config
from ..exceptions import APIResponseError, AuthenticationError, NetworkError, RateLimitError

log = logging.getLogger(__name__)


def raise_for_response(response: httpx.Response) -> None:
    """Map an HTTP error status onto the FreckleError hierarchy."""
    if response.status_code == 401:
        raise AuthenticationError("API token was rejected (401 Unauthorized)")
    if response.status_code == 429:
        raise RateLimitError(retry_after=response.headers.get("Retry-After"))
    if response.is_error:
        raise APIResponseError(
            f"API request failed with status {response.status_code}: {response.text[:200]}"
        )


def send(client: httpx.Client, method: str, url: str, **kwargs: Any) -> httpx.Response:
    """Send a request, turning transport failures into NetworkError."""
    try:
        response = client.request(method, url, **kwargs)
    except httpx.TimeoutException as e:
        raise NetworkError(f"Request timed out: {url}") from e
    except httpx.TransportError as e:
        raise NetworkError(f"Connection failed: {e}") from e
    raise_for_response(response)
    return response


class FreckleClient:
    """HTTP client for the Freckle v2 API."""

    PER_PAGE = 100

    def __init__(self, config: Config):
        self.config = config
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=30.0)
        return self._client

    @property
    def headers(self) -> dict[str, str]:
        """Get authorization headers."""
        return {
            "X-FreckleToken": self.config.app_token,
            "User-Agent": f"freckle-tools/{__version__}",
            "Accept": "application/json",
        }

    def url(self, path: str) -> str:
        """Build API URL."""
        return f"{self.config.api_url.rstrip('/')}/{path.lstrip('/')}"

    def get(self, url: str, params: Optional[dict] = None) -> httpx.Response:
        """Make authenticated GET request."""
        log.debug("GET %s params=%s", url, params)
        return send(self.client, "GET", url, headers=self.headers, params=params)

    def iter_pages(self, path: str, params: Optional[dict] = None) -> Iterator[list[dict]]:
        """Yield each page of a listing, following the Link rel="next" header."""
        url: Optional[str] = self.url(path)
        params = {"per_page": self.PER_PAGE, **(params or {})}

        while url:
            response = self.get(url, params=params)
            try:
                page = response.json()
            except ValueError as e:
                raise APIResponseError(f"Invalid JSON returned by {url}") from e
            if not isinstance(page, list):
                raise APIResponseError(f"Expected a list from {url}, got {type(page).__name__}")

            log.debug("Fetched %d records from %s", len(page), url)
            yield page

            url = response.links.get("next", {}).get("url")
            # The next link already carries the query string.
            params = None

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "FreckleClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
