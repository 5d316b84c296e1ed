#region Overview
"""
## Sessions

`browse` launches a fresh browser, opens one page and returns a Browser ID and
a Page ID. Every later call names the page it acts on with those two IDs, so a
model can log in, click around and extract across separate tool calls. `close`
releases the browser; nothing else does, apart from server shutdown.

Sessions live in memory only. They do not survive a server restart.

## Results

Every tool returns plain text. Failures are not protocol errors: their text
starts with "Failed to ...", followed by the reason.

Screenshots are written to a process-wide artifact directory
(MCP_BROWSER_ARTIFACT_DIR, default <tmp>/mcp-browser-lite) and reported by path.

## Concurrency

Calls against the same page run one at a time. `close` waits for operations
already running on the browser's pages; calls queued behind it then report
"not found".
"""
#endregion

#region Imports
import os
import sys
import logging
import traceback
from contextlib import asynccontextmanager
from typing import AsyncIterator, Literal, Optional

from mcp.server.fastmcp import Context, FastMCP
#endregion

#region Import from your package
from mcp_browser_lite.config.paths import log_file_path
from mcp_browser_lite.constants import DEFAULT_WAIT_FOR_MS
from mcp_browser_lite.context import BrowserContext, create_context
from mcp_browser_lite.decorators import tool_envelope
from mcp_browser_lite.tools import browser_management, interaction, extraction
#endregion

#region Logger
logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Log to a file and to stderr. stdout belongs to the stdio transport."""
    level = os.getenv("MCP_BROWSER_LOG_LEVEL", "INFO").upper()
    log_file = log_file_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler(sys.stderr),
        ],
    )
#endregion

#region FastMCP Initialization
@asynccontextmanager
async def browser_lifespan(server: FastMCP) -> AsyncIterator[BrowserContext]:
    """Build the browser context at startup; release leftover browsers at shutdown."""
    ctx = create_context()
    logger.info(f"Browser tools ready, artifacts in {ctx.artifacts.root}")
    try:
        yield ctx
    finally:
        logger.info("Shutting down, closing remaining browsers...")
        await browser_management.close_all_browsers(ctx)


mcp = FastMCP("mcp_browser_lite", lifespan=browser_lifespan)


def _browser_context(ctx: Context) -> BrowserContext:
    return ctx.request_context.lifespan_context
#endregion

#region Tools
# Argument names are camelCase because they are the wire names clients send.

@mcp.tool()
@tool_envelope(action="browse")
async def browse(
    url: str,
    ctx: Context,
    headless: bool = False,
    waitFor: float = DEFAULT_WAIT_FOR_MS,
) -> str:
    """
    Browse to a URL and return the page title and visible text.

    Launches a new browser with one page. Keep the returned Browser ID and
    Page ID for interact, extract and close. Call close when you are done,
    also after a failure that reports a Browser ID.

    Args:
        url: Absolute URL to navigate to (e.g., "https://example.com").
        headless: Whether to run the browser in headless mode.
        waitFor: Time to wait after page load, in milliseconds.

    Returns:
        str: Title, a visible-text preview (up to 1500 characters), the
        Browser ID and Page ID, and the path of a screenshot.
    """
    return await browser_management.browse(
        _browser_context(ctx),
        url=url,
        headless=headless,
        wait_for=waitFor,
    )


@mcp.tool()
@tool_envelope(action="interact with page")
async def interact(
    browserId: str,
    pageId: str,
    action: Literal["click", "fill", "select"],
    selector: str,
    ctx: Context,
    value: Optional[str] = None,
) -> str:
    """
    Perform one simple interaction on a page.

    Args:
        browserId: Browser ID from a previous browse operation.
        pageId: Page ID from a previous browse operation.
        action: "click", "fill" or "select".
        selector: CSS selector for the element ("xpath=..." or "//..." for XPath).
        value: Text for fill, option value or label for select. Required for both.

    Returns:
        str: What was done, the current URL, and a screenshot path taken
        about one second after the action.
    """
    return await interaction.interact(
        _browser_context(ctx),
        browser_id=browserId,
        page_id=pageId,
        action=action,
        selector=selector,
        value=value,
    )


@mcp.tool()
@tool_envelope(action="extract content")
async def extract(
    browserId: str,
    pageId: str,
    type: Literal["text", "html", "screenshot"],
    ctx: Context,
) -> str:
    """
    Extract information from the current page as text, html, or screenshot.

    Args:
        browserId: Browser ID from a previous browse operation.
        pageId: Page ID from a previous browse operation.
        type: "text" for visible text (up to 2000 characters), "html" for the
            document size and its first 100 characters, "screenshot" for a
            saved screenshot path.
    """
    return await extraction.extract(
        _browser_context(ctx),
        browser_id=browserId,
        page_id=pageId,
        type=type,
    )


@mcp.tool()
@tool_envelope(action="close browser")
async def close(browserId: str, ctx: Context) -> str:
    """
    Close a browser to free resources. Its pages are closed with it.

    Args:
        browserId: Browser ID to close.
    """
    return await browser_management.close_browser(_browser_context(ctx), browser_id=browserId)
#endregion


def main() -> None:
    _configure_logging()
    try:
        logger.info("Starting mcp_browser_lite MCP server on stdio...")
        mcp.run(transport="stdio")
    except Exception as e:
        logger.error(f"MCP Server Error: {e}")
        logger.error(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
