"""
HTTP Client for CLI.

Sends one request descriptor over httpx and returns the response.
GET requests carry no body; POST requests carry the body fields as a
single flat JSON object.
"""

from typing import Any

import httpx

from httpie_lite.cli.arguments import KeyValuePair
from httpie_lite.cli.request import GetRequest, PostRequest, RequestDescriptor
from httpie_lite.core.config import get_client_settings
from httpie_lite.core.exceptions import TransportError
from httpie_lite.core.logging import get_logger

logger = get_logger(__name__)


def serialize_body(body: tuple[KeyValuePair, ...]) -> dict[str, str]:
    """
    Collapse body fields into a JSON object.

    Fields are inserted in order, so a repeated key keeps its last value.
    """
    payload: dict[str, str] = {}
    for pair in body:
        payload[pair.key] = pair.value
    return payload


class HTTPClient:
    """
    HTTP client for a single exchange.

    Usage:
        client = HTTPClient()
        try:
            response = await client.send(GetRequest(url="https://example.com"))
        finally:
            await client.close()
    """

    def __init__(
        self,
        timeout: float | None = None,
        follow_redirects: bool | None = None,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            timeout: Request timeout in seconds. If None, reads client.timeout
                from configuration; a null there keeps the httpx default.
            follow_redirects: If None, reads client.follow_redirects from configuration.
            user_agent: If None, reads client.user_agent from configuration.
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests.
        """
        config_timeout, config_follow_redirects, config_user_agent = get_client_settings()

        self.timeout = timeout if timeout is not None else config_timeout
        self.follow_redirects = (
            follow_redirects if follow_redirects is not None else config_follow_redirects
        )
        self.user_agent = user_agent or config_user_agent
        self.transport = transport
        self._client: httpx.AsyncClient | None = None

    def _client_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {"follow_redirects": self.follow_redirects}
        if self.timeout is not None:
            options["timeout"] = self.timeout
        if self.user_agent:
            options["headers"] = {"User-Agent": self.user_agent}
        if self.transport is not None:
            options["transport"] = self.transport
        return options

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(**self._client_options())
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def send(self, request: RequestDescriptor) -> httpx.Response:
        """
        Perform the exchange described by a request descriptor.

        Args:
            request: GetRequest or PostRequest

        Returns:
            httpx.Response with its body already read

        Raises:
            TransportError: On connection, timeout, TLS or protocol failure
        """
        if isinstance(request, GetRequest):
            return await self._request("GET", request.url)
        if isinstance(request, PostRequest):
            return await self._request("POST", request.url, json=serialize_body(request.body))
        raise TypeError(f"Unsupported request descriptor: {type(request).__name__}")

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        client = await self._get_client()

        logger.debug("HTTP request", method=method, url=url)

        try:
            response = await client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.info("HTTP request failed", method=method, url=url, error=str(e))
            raise TransportError(method, url, e) from e

        logger.debug(
            "HTTP response",
            method=method,
            url=url,
            status_code=response.status_code,
            http_version=response.http_version,
        )
        return response
