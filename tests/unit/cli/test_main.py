"""
Unit Tests for the exchange runner used by the CLI commands.
"""

import pytest

from httpie_lite.cli.main import run_exchange
from httpie_lite.cli.request import GetRequest, PostRequest
from httpie_lite.core.exceptions import TransportError


class TestRunExchange:
    """Tests for run_exchange."""

    async def test_returns_response_view(self, mock_transport):
        """Should snapshot the response once the exchange completes."""
        transport = mock_transport(200, headers={"Content-Type": "text/plain"}, content=b"hello")

        view = await run_exchange(GetRequest(url="https://example.test/ok"), transport=transport)

        assert view.status_code == 200
        assert view.content_type == "text/plain"
        assert view.body == "hello"

    async def test_performs_exactly_one_exchange(self, mock_transport, sent_requests):
        """Should send one request per call."""
        await run_exchange(PostRequest(url="https://example.test/items"), transport=mock_transport(201))

        assert len(sent_requests) == 1

    async def test_propagates_transport_error(self, failing_transport):
        """Should let TransportError reach the caller."""
        with pytest.raises(TransportError):
            await run_exchange(GetRequest(url="https://unreachable.test/"), transport=failing_transport)
