"""
Response Rendering.

Formats a response as three blocks: status line, headers, body. JSON bodies
are pretty-printed; everything else is printed as received.

The format_* functions are pure and return plain text. render_response
writes that text to a rich console and adds colour, which rich drops
automatically when stdout is not a terminal.
"""

import json
from dataclasses import dataclass

import httpx
from rich.console import Console
from rich.text import Text

from httpie_lite.core.exceptions import BodyFormatError

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class ResponseView:
    """Read-only snapshot of a response, as needed for rendering."""

    http_version: str
    status_code: int
    headers: tuple[tuple[str, str], ...]
    content_type: str | None
    body: str

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ResponseView":
        return cls(
            http_version=response.http_version,
            status_code=response.status_code,
            headers=tuple(response.headers.multi_items()),
            content_type=response.headers.get("content-type"),
            body=response.text,
        )


def is_json(content_type: str | None) -> bool:
    """Only an exact application/json matches; "application/json; charset=utf-8" does not."""
    return content_type is not None and content_type.strip().lower() == JSON_CONTENT_TYPE


def format_status(view: ResponseView) -> str:
    return f"{view.http_version} {view.status_code}"


def format_body(content_type: str | None, body: str) -> str:
    """
    Format a response body according to its declared content type.

    Args:
        content_type: Content-Type header value, or None if absent
        body: Decoded body text

    Returns:
        Indented JSON when the content type is application/json, else the body unchanged

    Raises:
        BodyFormatError: If the content type is application/json but the body is not JSON
    """
    if not is_json(content_type):
        return body

    try:
        parsed = json.loads(body)
    except json.JSONDecodeError as e:
        raise BodyFormatError(JSON_CONTENT_TYPE, str(e)) from e

    return json.dumps(parsed, indent=2, ensure_ascii=False)


def render_response(view: ResponseView, console: Console) -> None:
    """
    Print a response to the console.

    Status and headers are printed before the body is formatted, so a
    BodyFormatError leaves them on screen.

    Raises:
        BodyFormatError: If a JSON body cannot be parsed
    """
    console.print(Text(format_status(view), style="blue"))
    console.print()

    for name, value in view.headers:
        line = Text()
        line.append(name, style="green")
        line.append(f": {value}")
        console.print(line)
    console.print()

    body = format_body(view.content_type, view.body)
    if is_json(view.content_type):
        console.print(Text(body, style="cyan"))
    else:
        # rich would expand tabs and strip control codes
        console.file.write(body + "\n")
        console.file.flush()
