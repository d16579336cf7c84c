"""
Shared Test Fixtures.

Network access is never real: tests hand httpx.MockTransport instances to
the client or, for CLI tests, through the click context object.
"""

from collections.abc import Callable, Iterator

import httpx
import pytest

from httpie_lite.core.config import CONFIG_ENV_VAR, reset_app_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Load the packaged configuration afresh for every test."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    reset_app_config()
    yield
    reset_app_config()


@pytest.fixture
def sent_requests() -> list[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def mock_transport(
    sent_requests: list[httpx.Request],
) -> Callable[..., httpx.MockTransport]:
    """
    Build a mock transport that records requests and returns a fixed response.

    Usage:
        transport = mock_transport(200, headers={"Content-Type": "text/plain"}, content=b"hello")
    """

    def factory(status_code: int = 200, **response_kwargs) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            return httpx.Response(status_code, **response_kwargs)

        return httpx.MockTransport(handler)

    return factory


@pytest.fixture
def failing_transport(sent_requests: list[httpx.Request]) -> httpx.MockTransport:
    """A transport whose every request fails to connect."""

    def handler(request: httpx.Request) -> httpx.Response:
        sent_requests.append(request)
        raise httpx.ConnectError("Name or service not known", request=request)

    return httpx.MockTransport(handler)
