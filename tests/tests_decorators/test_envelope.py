# tests/tests_decorators/test_envelope.py
import asyncio
import pytest

from mcp_browser_lite.decorators import tool_envelope
from mcp_browser_lite.errors import InstanceNotFoundError
from mcp_browser_lite.tools.results import ToolResult


def test_tool_envelope_flattens_tool_result(event_loop):
    @tool_envelope(action="browse")
    async def f():
        return ToolResult.success("Successfully browsed to: https://example.com", browser_id="b1")

    assert event_loop.run_until_complete(f()) == "Successfully browsed to: https://example.com"


def test_tool_envelope_passes_failure_text_through(event_loop):
    @tool_envelope(action="close browser")
    async def f():
        return ToolResult.failure("close browser", InstanceNotFoundError("b1"))

    assert event_loop.run_until_complete(f()) == "Failed to close browser: Browser instance not found: b1"


def test_tool_envelope_async_exception(event_loop):
    @tool_envelope(action="extract content")
    async def f():
        raise RuntimeError("boom")

    assert event_loop.run_until_complete(f()) == "Failed to extract content: RuntimeError: boom"


def test_tool_envelope_propagates_cancellation(event_loop):
    @tool_envelope
    async def f():
        raise asyncio.CancelledError()

    with pytest.raises(asyncio.CancelledError):
        event_loop.run_until_complete(f())


def test_tool_envelope_normalizes_plain_values(event_loop):
    @tool_envelope
    async def none():
        return None

    @tool_envelope
    async def text():
        return "already text"

    assert event_loop.run_until_complete(none()) == ""
    assert event_loop.run_until_complete(text()) == "already text"


def test_tool_envelope_default_action(event_loop):
    @tool_envelope
    async def f():
        raise KeyError("x")

    assert event_loop.run_until_complete(f()).startswith("Failed to complete request: KeyError")


def test_tool_envelope_preserves_signature():
    @tool_envelope(action="browse")
    async def browse(url: str, headless: bool = False) -> str:
        """Docs."""
        return url

    assert browse.__name__ == "browse"
    assert browse.__doc__ == "Docs."
    assert browse.__wrapped__.__annotations__["url"] is str
