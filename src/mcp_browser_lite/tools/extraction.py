"""Content extraction tool implementations."""

import asyncio

from ..browser.scripts import VISIBLE_TEXT_SCRIPT
from ..constants import EXTRACT_TEXT_CHARS, EXTRACT_TYPES, HTML_EXCERPT_CHARS
from ..context import BrowserContext
from ..errors import ValidationError
from .results import ToolResult, truncate

import logging
logger = logging.getLogger(__name__)


def summarize_html(html: str) -> str:
    """Character count plus a short excerpt; the full document is never returned."""
    return (
        f"Extracted HTML content ({len(html)} characters). "
        f"First {HTML_EXCERPT_CHARS} characters:\n{truncate(html, HTML_EXCERPT_CHARS)}"
    )


async def extract(ctx: BrowserContext, browser_id: str, page_id: str, type: str) -> ToolResult:
    """Extract visible text, an HTML summary, or a screenshot from a page."""
    try:
        if type not in EXTRACT_TYPES:
            raise ValidationError(f"Unsupported extract type: {type!r}. Expected one of {', '.join(EXTRACT_TYPES)}")

        data = {"type": type}
        async with ctx.registry.page_access(browser_id, page_id) as entry:
            page = entry.handle
            if type == "text":
                content = str(await page.evaluate(VISIBLE_TEXT_SCRIPT) or "")
            elif type == "html":
                content = await page.content() or ""
            else:
                png = await page.screenshot()
                screenshot_path = ctx.artifacts.write_screenshot(page_id, png)
                data["screenshot_path"] = str(screenshot_path)
                content = f"Screenshot saved to: {screenshot_path}"

        data["length"] = len(content)
        if type == "html":
            return ToolResult.success(summarize_html(content), **data)
        return ToolResult.success(truncate(content, EXTRACT_TEXT_CHARS), **data)

    except asyncio.CancelledError:
        raise
    except Exception as e:
        logger.warning(f"extract {type} on {browser_id}/{page_id} failed: {e!r}")
        return ToolResult.failure("extract content", e, type=type)


__all__ = ["extract", "summarize_html"]
