"""Structured tool outcomes and the text helpers used to render them."""

import asyncio
from dataclasses import dataclass, field
from urllib.parse import urlsplit

from selenium.common.exceptions import WebDriverException

from ..constants import TRUNCATION_MARKER
from ..errors import BrowserToolError, ValidationError


@dataclass(frozen=True)
class ToolResult:
    """
    Outcome of one tool call.

    `ok` tells success from failure without string inspection; `text` is what
    the calling model reads; `data` carries the structured fields (ids, paths,
    error type) behind the text.
    """

    ok: bool
    text: str
    data: dict = field(default_factory=dict)

    @classmethod
    def success(cls, text: str, **data) -> "ToolResult":
        return cls(ok=True, text=text, data=data)

    @classmethod
    def failure(cls, verb: str, err: BaseException, /, **data) -> "ToolResult":
        """`verb` completes "Failed to ..."; `data` may carry any keys, `action` included."""
        data.setdefault("error_type", type(err).__name__)
        return cls(ok=False, text=f"Failed to {verb}: {describe_error(err)}", data=data)


def describe_error(err: BaseException) -> str:
    """
    Render an exception for the failure text.

    Our own errors carry a complete message. Engine errors are prefixed with
    their type name; Selenium messages lose the driver stack trace.
    """
    if isinstance(err, BrowserToolError):
        return str(err)
    if isinstance(err, WebDriverException):
        message = (err.msg or "").strip() or "no message"
        return f"{type(err).__name__}: {message}"
    if isinstance(err, asyncio.TimeoutError):
        return f"{type(err).__name__}: operation timed out"
    message = str(err).strip()
    return f"{type(err).__name__}: {message}" if message else type(err).__name__


def truncate(text: str, limit: int) -> str:
    """Cut text at `limit` characters, appending the marker only if something was cut."""
    if len(text) <= limit:
        return text
    return text[:limit] + TRUNCATION_MARKER


def validate_url(url: str) -> str:
    """Require an absolute URL: a scheme, plus a host for network schemes."""
    if not isinstance(url, str) or not url.strip():
        raise ValidationError("Invalid URL: empty")
    url = url.strip()
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise ValidationError(f"Invalid URL: {url} ({e})")
    if not parts.scheme:
        raise ValidationError(f"Invalid URL: {url}")
    if parts.scheme in ("http", "https", "ws", "wss", "ftp") and not parts.hostname:
        raise ValidationError(f"Invalid URL: {url}")
    if not (parts.netloc or parts.path or parts.query):
        raise ValidationError(f"Invalid URL: {url}")
    return url


__all__ = [
    "ToolResult",
    "describe_error",
    "truncate",
    "validate_url",
]
