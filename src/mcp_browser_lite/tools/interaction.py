"""Element interaction tool implementations."""

import asyncio
from typing import Optional

from ..constants import INTERACT_ACTIONS, INTERACTION_SETTLE_MS
from ..context import BrowserContext
from ..errors import ValidationError
from .results import ToolResult

import logging
logger = logging.getLogger(__name__)


def _validate(action: str, value: Optional[str]) -> None:
    if action not in INTERACT_ACTIONS:
        raise ValidationError(f"Unsupported action: {action!r}. Expected one of {', '.join(INTERACT_ACTIONS)}")
    if action in ("fill", "select") and not value:
        raise ValidationError(f"Value is required for {action} action")


async def interact(
    ctx: BrowserContext,
    browser_id: str,
    page_id: str,
    action: str,
    selector: str,
    value: Optional[str] = None,
) -> ToolResult:
    """Perform one click/fill/select on a page, let it settle, then capture the result."""
    try:
        _validate(action, value)

        async with ctx.registry.page_access(browser_id, page_id) as entry:
            page = entry.handle
            if action == "click":
                await page.click(selector)
                description = f"Clicked on element: {selector}"
            elif action == "fill":
                await page.fill(selector, value)
                description = f"Filled element {selector} with value: {value}"
            else:
                await page.select_option(selector, value)
                description = f"Selected option {value} in element: {selector}"

            await asyncio.sleep(INTERACTION_SETTLE_MS / 1000.0)

            png = await page.screenshot()
            screenshot_path = ctx.artifacts.write_screenshot(page_id, png)
            current_url = await page.current_url()

        text = (
            f"Successfully performed action.\n\n"
            f"{description}\n\n"
            f"Current URL: {current_url}\n\n"
            f"Screenshot saved to: {screenshot_path}"
        )
        return ToolResult.success(
            text,
            action=action,
            current_url=current_url,
            screenshot_path=str(screenshot_path),
        )

    except asyncio.CancelledError:
        raise
    except Exception as e:
        logger.warning(f"interact {action} {selector!r} on {browser_id}/{page_id} failed: {e!r}")
        return ToolResult.failure("interact with page", e, action=action)


__all__ = ["interact"]
