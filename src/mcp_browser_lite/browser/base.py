"""
Capability interface the tools call into.

Tools call these protocols only; chrome.py is the Selenium binding. Every
method is a coroutine that applies its own timeouts and raises on failure.
"""

from dataclasses import dataclass
from typing import Any, Optional, Protocol


@dataclass(frozen=True)
class LaunchConfig:
    """Options for one browser launch."""

    headless: bool = False
    args: tuple = ()
    chrome_path: Optional[str] = None
    chromedriver_path: Optional[str] = None
    page_load_timeout: float = 30.0
    element_timeout: float = 30.0


class PageHandle(Protocol):
    async def navigate(self, url: str) -> None: ...

    async def evaluate(self, expression: str) -> Any: ...

    async def screenshot(self) -> bytes: ...

    async def click(self, selector: str) -> None: ...

    async def fill(self, selector: str, value: str) -> None: ...

    async def select_option(self, selector: str, value: str) -> None: ...

    async def content(self) -> str: ...

    async def title(self) -> str: ...

    async def current_url(self) -> str: ...


class BrowserHandle(Protocol):
    async def new_page(self) -> PageHandle: ...

    async def close(self) -> None:
        """Release the browser and, transitively, every page it owns."""
        ...

    async def kill(self) -> None:
        """Forcefully terminate the browser after close() failed."""
        ...


class BrowserLauncher(Protocol):
    async def launch(self, config: LaunchConfig) -> BrowserHandle: ...


__all__ = ["LaunchConfig", "PageHandle", "BrowserHandle", "BrowserLauncher"]
