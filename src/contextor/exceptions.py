"""Error types raised while turning clipboard links into repository context."""
from typing import Optional


class ContextorError(Exception):
    """Base class for all contextor errors."""


class ParseError(ContextorError):
    """Text does not contain a usable GitHub repository URL."""

    def __init__(self, text: str, reason: str = "not a GitHub repository URL"):
        self.text = text
        self.reason = reason
        super().__init__(f"{reason}: {text[:80]!r}")


class FetchError(ContextorError):
    """Base class for failures while retrieving repository contents."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message)


class NetworkError(FetchError):
    """Transport failure: DNS, connection refused, timeout."""


class DecodeError(FetchError):
    """Response body is not valid UTF-8 text."""


class ServerError(FetchError):
    """Content API answered with a non-2xx status."""

    def __init__(self, status: int, url: Optional[str] = None):
        self.status = status
        super().__init__(f"HTTP {status} from {url}", url=url)


class ClipboardError(ContextorError):
    """Clipboard backend could not be read or written."""
