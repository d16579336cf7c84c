"""
Argument Parsing.

Turns raw command-line tokens into typed values before any network activity:
body fields ("key=value") and absolute URLs. The click parameter types at the
bottom adapt both parsers so that failures surface as usage errors.
"""

from dataclasses import dataclass
from typing import Any

import click
import httpx

from httpie_lite.core.exceptions import InvalidUrlError, MalformedPairError


@dataclass(frozen=True)
class KeyValuePair:
    """One POST body field."""

    key: str
    value: str

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


def parse_kv_pair(token: str) -> KeyValuePair:
    """
    Parse a "key=value" token.

    The key is the text before the first '='. The value is the text between
    the first and second '=', so anything after a second '=' is dropped:
    "a=b=c" parses as key "a", value "b".

    Args:
        token: Raw command-line token

    Returns:
        KeyValuePair

    Raises:
        MalformedPairError: If the token contains no '='
    """
    segments = token.split("=")
    if len(segments) < 2:
        raise MalformedPairError(token)
    return KeyValuePair(key=segments[0], value=segments[1])


def parse_url(raw: str) -> str:
    """
    Validate that a string is an absolute URL.

    Args:
        raw: URL as typed by the user

    Returns:
        The input string, unchanged

    Raises:
        InvalidUrlError: If the string cannot be parsed or lacks a scheme or host
    """
    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidUrlError(raw, str(e)) from e

    if not url.scheme:
        raise InvalidUrlError(raw, "missing scheme")
    if not url.host:
        raise InvalidUrlError(raw, "missing host")

    return raw


class KeyValueParamType(click.ParamType):
    """click parameter type for body fields."""

    name = "key=value"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> KeyValuePair:
        if isinstance(value, KeyValuePair):
            return value
        try:
            return parse_kv_pair(value)
        except MalformedPairError as e:
            self.fail(str(e), param, ctx)


class UrlParamType(click.ParamType):
    """click parameter type for absolute URLs."""

    name = "url"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> str:
        try:
            return parse_url(value)
        except InvalidUrlError as e:
            self.fail(str(e), param, ctx)


KEY_VALUE = KeyValueParamType()
URL = UrlParamType()
