"""
Request Descriptors.

The validated, typed description of the single request an invocation sends.
GetRequest and PostRequest are plain data; the executor in
httpie_lite.cli.client decides how to send each one.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from httpie_lite.cli.arguments import KeyValuePair


@dataclass(frozen=True)
class GetRequest:
    url: str


@dataclass(frozen=True)
class PostRequest:
    url: str
    body: tuple[KeyValuePair, ...] = ()


RequestDescriptor = GetRequest | PostRequest


def build_request(url: str, body: Iterable[KeyValuePair] | None = None) -> RequestDescriptor:
    """
    Build a request descriptor from already validated arguments.

    Args:
        url: Validated absolute URL
        body: Parsed body fields. None builds a GET; any iterable (even empty) builds a POST.

    Returns:
        GetRequest or PostRequest
    """
    if body is None:
        return GetRequest(url=url)
    return PostRequest(url=url, body=tuple(body))
