# tests/conftest.py
"""Fake capability provider and shared fixtures. No real browser is started."""

import asyncio
import pytest

from mcp_browser_lite.artifacts import ArtifactStore
from mcp_browser_lite.context import create_context

## We DO NOT want to use pytest-asyncio.
## Instead, use event_loop.run_until_complete()!


@pytest.fixture(scope="function")
def event_loop():
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    yield loop
    loop.close()


PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"


class FakePage:
    """Records every call; `errors` maps a method name to the exception it raises."""

    def __init__(self, *, title="Example Domain", text="Example Domain\nMore information...",
                 html="<html><head></head><body><h1>Example Domain</h1></body></html>",
                 delay=0.0):
        self.title_value = title
        self.text = text
        self.html = html
        self.url = "about:blank"
        self.delay = delay
        self.errors = {}
        self.calls = []

    async def _record(self, name, *args):
        self.calls.append((name,) + args)
        if self.delay:
            await asyncio.sleep(self.delay)
        if name in self.errors:
            raise self.errors[name]

    async def navigate(self, url):
        await self._record("navigate", url)
        self.url = url

    async def evaluate(self, expression):
        await self._record("evaluate", expression)
        return self.text

    async def screenshot(self):
        await self._record("screenshot")
        return PNG_BYTES

    async def click(self, selector):
        await self._record("click", selector)

    async def fill(self, selector, value):
        await self._record("fill", selector, value)

    async def select_option(self, selector, value):
        await self._record("select_option", selector, value)

    async def content(self):
        await self._record("content")
        return self.html

    async def title(self):
        await self._record("title")
        return self.title_value

    async def current_url(self):
        await self._record("current_url")
        return self.url


class FakeBrowser:
    def __init__(self, page_factory):
        self.page_factory = page_factory
        self.pages = []
        self.closed = False
        self.killed = False
        self.close_error = None
        self.new_page_error = None

    async def new_page(self):
        if self.new_page_error:
            raise self.new_page_error
        page = self.page_factory()
        self.pages.append(page)
        return page

    async def close(self):
        if self.close_error:
            raise self.close_error
        self.closed = True

    async def kill(self):
        self.killed = True


class FakeLauncher:
    def __init__(self):
        self.configs = []
        self.browsers = []
        self.error = None
        self.page_kwargs = {}
        self.page_errors = {}

    def _make_page(self):
        page = FakePage(**self.page_kwargs)
        page.errors.update(self.page_errors)
        return page

    async def launch(self, config):
        self.configs.append(config)
        if self.error:
            raise self.error
        browser = FakeBrowser(self._make_page)
        self.browsers.append(browser)
        return browser

    @property
    def last_page(self):
        return self.browsers[-1].pages[-1]


@pytest.fixture
def fake_launcher():
    return FakeLauncher()


@pytest.fixture
def browser_ctx(tmp_path, fake_launcher, monkeypatch):
    # No settle delay in unit tests
    monkeypatch.setattr("mcp_browser_lite.tools.interaction.INTERACTION_SETTLE_MS", 0)
    return create_context(
        launcher=fake_launcher,
        artifacts=ArtifactStore(tmp_path / "artifacts"),
        config={"extra_args": [], "page_load_timeout": 30.0, "element_timeout": 30.0},
    )
