"""
httpie-lite command line.

Usage:
    httpie-lite get https://httpbin.org/get
    httpie-lite post https://httpbin.org/post greeting=hola name=world
    httpie-lite --debug get https://httpbin.org/get
"""

import asyncio
import sys
from typing import Any

import click
import httpx
import structlog
import yaml
from rich.console import Console
from rich.text import Text

from httpie_lite import __version__
from httpie_lite.cli.arguments import KEY_VALUE, URL, KeyValuePair
from httpie_lite.cli.client import HTTPClient
from httpie_lite.cli.render import ResponseView, render_response
from httpie_lite.cli.request import RequestDescriptor, build_request
from httpie_lite.core.config import get_app_config
from httpie_lite.core.exceptions import HttpieLiteError
from httpie_lite.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


async def run_exchange(
    request: RequestDescriptor,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ResponseView:
    """
    Send the request and snapshot the response.

    The client is closed before returning; the response body has already
    been read by then.
    """
    client = HTTPClient(transport=transport)
    try:
        response = await client.send(request)
    finally:
        await client.close()
    return ResponseView.from_response(response)


def _execute(ctx: click.Context, request: RequestDescriptor) -> None:
    """
    Run the exchange and render the result, exiting 1 on any HttpieLiteError.

    ctx.obj["transport"], when present, replaces the network transport; tests
    pass an httpx.MockTransport through it via CliRunner.invoke(obj=...).
    """
    obj: dict[str, Any] = ctx.obj
    console: Console = obj["console"]

    logger.debug("Parsed arguments", request=repr(request))

    try:
        view = asyncio.run(run_exchange(request, transport=obj.get("transport")))
        render_response(view, console)
    except HttpieLiteError as e:
        Console(stderr=True, soft_wrap=True, no_color=console.no_color).print(Text(f"Error: {e}", style="red"))
        sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output (INFO level logging).")
@click.option("--debug", "-d", is_flag=True, help="Enable debug output (DEBUG level logging).")
@click.option("--no-color", is_flag=True, help="Disable coloured output.")
@click.version_option(__version__, prog_name="httpie-lite")
@click.pass_context
def main(ctx: click.Context, verbose: bool, debug: bool, no_color: bool) -> None:
    """A naive HTTPie: send one GET or POST and print the response."""
    try:
        get_app_config()
        if debug:
            setup_logging(level="DEBUG")
        elif verbose:
            setup_logging(level="INFO")
        else:
            setup_logging()
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e

    structlog.contextvars.bind_contextvars(command=ctx.invoked_subcommand)

    ctx.ensure_object(dict)
    ctx.obj.setdefault("console", Console(soft_wrap=True, highlight=False, no_color=no_color))


@main.command()
@click.argument("url", type=URL)
@click.pass_context
def get(ctx: click.Context, url: str) -> None:
    """Send a GET request to URL."""
    _execute(ctx, build_request(url))


@main.command()
@click.argument("url", type=URL)
@click.argument("body", nargs=-1, type=KEY_VALUE)
@click.pass_context
def post(ctx: click.Context, url: str, body: tuple[KeyValuePair, ...]) -> None:
    """
    Send a POST request to URL.

    BODY fields are key=value pairs sent as one JSON object.
    """
    _execute(ctx, build_request(url, body))


if __name__ == "__main__":
    main()
