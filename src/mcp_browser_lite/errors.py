"""
Error taxonomy for the browser tools.

Validation and resolution errors are raised by this package. Anything the
browser engine raises is left as-is and reported with its own type name.
"""


class BrowserToolError(Exception):
    """Base class for errors raised by the browser tools themselves."""


class ValidationError(BrowserToolError, ValueError):
    """A request argument is malformed or missing."""


class NotFoundError(BrowserToolError, LookupError):
    """An instance or page identifier does not resolve."""

    kind = "Resource"

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"{self.kind} not found: {identifier}")


class InstanceNotFoundError(NotFoundError):
    kind = "Browser instance"


class PageNotFoundError(NotFoundError):
    kind = "Page"

    def __init__(self, identifier: str, instance_id: str):
        self.instance_id = instance_id
        super().__init__(identifier)


__all__ = [
    "BrowserToolError",
    "ValidationError",
    "NotFoundError",
    "InstanceNotFoundError",
    "PageNotFoundError",
]
