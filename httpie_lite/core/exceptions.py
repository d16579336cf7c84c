"""
Exceptions.

Every failure the pipeline can report derives from HttpieLiteError so the
CLI can map them to an error message and exit status in one place.
"""


class HttpieLiteError(Exception):
    """Base class for all httpie-lite errors."""


class MalformedPairError(HttpieLiteError):
    """A body token has no '=' separator."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Failed to parse: {token}")


class InvalidUrlError(HttpieLiteError):
    """A URL argument is not an absolute URL with scheme and host."""

    def __init__(self, raw: str, reason: str | None = None):
        self.raw = raw
        self.reason = reason
        message = f"Invalid URL: {raw}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class TransportError(HttpieLiteError):
    """The HTTP exchange failed before a response was received."""

    def __init__(self, method: str, url: str, error: Exception):
        self.method = method
        self.url = url
        self.error = error
        super().__init__(f"{method} {url} failed: {error}")


class BodyFormatError(HttpieLiteError):
    """The response declared JSON but its body could not be parsed."""

    def __init__(self, content_type: str, detail: str):
        self.content_type = content_type
        self.detail = detail
        super().__init__(f"Response body is not valid {content_type}: {detail}")
