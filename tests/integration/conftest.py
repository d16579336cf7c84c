"""
Integration Test Fixtures.

Runs the full command line in-process with CliRunner. The network is a
httpx.MockTransport passed in through the click context object.
"""

from collections.abc import Callable
from typing import Any

import httpx
import pytest
from click.testing import CliRunner, Result

from httpie_lite.cli.main import main


@pytest.fixture
def runner() -> CliRunner:
    """Create Click test runner."""
    return CliRunner()


@pytest.fixture
def invoke(runner: CliRunner) -> Callable[..., Result]:
    """
    Invoke the CLI against a transport.

    Usage:
        result = invoke(["get", "https://example.test/ok"], transport)
    """

    def _invoke(args: list[str], transport: httpx.AsyncBaseTransport | None = None) -> Result:
        obj: dict[str, Any] = {}
        if transport is not None:
            obj["transport"] = transport
        return runner.invoke(main, ["--no-color", *args], obj=obj)

    return _invoke


class OutputAssertions:
    """Helper class for rendered output assertions."""

    @staticmethod
    def blocks(output: str) -> list[str]:
        """Split rendered output into its status, header and body blocks."""
        status, _, rest = output.partition("\n\n")
        headers, _, body = rest.partition("\n\n")
        return [status, headers, body]

    @staticmethod
    def header_lines(output: str) -> list[str]:
        """Header lines, lower-cased for comparison."""
        headers = OutputAssertions.blocks(output)[1]
        return [line.lower() for line in headers.splitlines()]


@pytest.fixture
def rendered() -> OutputAssertions:
    """Provide rendered output helpers."""
    return OutputAssertions()
