"""
In-memory session registry.

Maps opaque instance identifiers to live browser instances and, per instance,
page identifiers to live page handles. The registry owns every handle stored
in it until close-session releases the instance.

Thread Safety:
    The registry is NOT thread-safe. All mutation happens on the event loop,
    synchronously between suspension points. Operations against a page are
    serialised with the page's asyncio.Lock via page_access(); close uses
    instance_access() to wait for in-flight page operations. A cancelled
    operation keeps its page lock until the driver call running in its worker
    thread has returned.

Usage:
    registry = SessionRegistry()
    browser_id = registry.register(browser)
    page_id = registry.add_page(browser_id, page)

    async with registry.page_access(browser_id, page_id) as entry:
        await entry.handle.click("#submit")
"""

import uuid
import asyncio
import contextlib
from dataclasses import dataclass, field
from typing import AsyncIterator, Iterator

from .browser.base import BrowserHandle, PageHandle
from .errors import InstanceNotFoundError, PageNotFoundError


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass
class PageEntry:
    """
    One tab/document context. Logically owned by its parent instance and
    released together with it.
    """

    id: str
    instance_id: str
    handle: PageHandle
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)


@dataclass
class BrowserInstance:
    """One launched browser. Exclusively owns its handle."""

    id: str
    handle: BrowserHandle
    pages: dict = field(default_factory=dict)


class SessionRegistry:
    def __init__(self):
        self._instances: dict[str, BrowserInstance] = {}

    def register(self, handle: BrowserHandle) -> str:
        """Store a new instance under a fresh identifier and return the identifier."""
        instance_id = _new_id()
        while instance_id in self._instances:
            instance_id = _new_id()
        self._instances[instance_id] = BrowserInstance(id=instance_id, handle=handle)
        return instance_id

    def add_page(self, instance_id: str, handle: PageHandle) -> str:
        """Attach a page handle to a registered instance and return the page identifier."""
        instance = self.lookup_instance(instance_id)
        page_id = _new_id()
        instance.pages[page_id] = PageEntry(id=page_id, instance_id=instance_id, handle=handle)
        return page_id

    def lookup_instance(self, instance_id: str) -> BrowserInstance:
        instance = self._instances.get(instance_id)
        if instance is None:
            raise InstanceNotFoundError(instance_id)
        return instance

    def lookup_page(self, instance_id: str, page_id: str) -> PageEntry:
        """
        Resolve a page. Raises InstanceNotFoundError if the instance is
        missing, PageNotFoundError if the instance exists but the page does not.
        """
        instance = self.lookup_instance(instance_id)
        page = instance.pages.get(page_id)
        if page is None:
            raise PageNotFoundError(page_id, instance_id)
        return page

    def remove(self, instance_id: str) -> None:
        """Forget an instance whose handle has already been released. Missing ids are a no-op."""
        self._instances.pop(instance_id, None)

    def instances(self) -> list[BrowserInstance]:
        return list(self._instances.values())

    def __len__(self) -> int:
        return len(self._instances)

    def __contains__(self, instance_id: object) -> bool:
        return instance_id in self._instances

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._instances))

    @contextlib.asynccontextmanager
    async def page_access(self, instance_id: str, page_id: str) -> AsyncIterator[PageEntry]:
        """
        Hold a page's lock for the duration of one operation.

        The page is resolved again once the lock is held, so a call that was
        queued behind a close fails with a not-found error instead of touching
        a released handle.
        """
        page = self.lookup_page(instance_id, page_id)
        async with page.lock:
            if self.lookup_page(instance_id, page_id) is not page:
                raise PageNotFoundError(page_id, instance_id)
            yield page

    @contextlib.asynccontextmanager
    async def instance_access(self, instance_id: str) -> AsyncIterator[BrowserInstance]:
        """Hold every page lock of an instance, waiting for in-flight page operations."""
        instance = self.lookup_instance(instance_id)
        async with contextlib.AsyncExitStack() as stack:
            for page_id in sorted(instance.pages):
                await stack.enter_async_context(instance.pages[page_id].lock)
            if self._instances.get(instance_id) is not instance:
                raise InstanceNotFoundError(instance_id)
            yield instance


__all__ = [
    "PageEntry",
    "BrowserInstance",
    "SessionRegistry",
]
