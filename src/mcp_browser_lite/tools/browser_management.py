"""Browser lifecycle tool implementations."""

import asyncio
from typing import Optional

from ..browser.scripts import VISIBLE_TEXT_SCRIPT
from ..constants import BROWSE_PREVIEW_CHARS, DEFAULT_WAIT_FOR_MS, SHUTDOWN_CLOSE_TIMEOUT_SECS
from ..context import BrowserContext
from ..errors import ValidationError
from ..utils.diagnostics import collect_diagnostics
from .results import ToolResult, truncate, validate_url

import logging
logger = logging.getLogger(__name__)


async def browse(
    ctx: BrowserContext,
    url: str,
    headless: bool = False,
    wait_for: float = DEFAULT_WAIT_FOR_MS,
) -> ToolResult:
    """
    Launch a browser, open one page, visit `url` and report what is visible.

    The instance is registered as soon as it is launched. If a later step
    fails it stays registered and its id is included in the failure so the
    caller can close it.
    """
    browser_id: Optional[str] = None
    page_id: Optional[str] = None
    try:
        url = validate_url(url)
        if isinstance(wait_for, bool) or not isinstance(wait_for, (int, float)) or wait_for < 0:
            raise ValidationError(f"waitFor must be a non-negative number of milliseconds, got {wait_for!r}")

        try:
            browser = await ctx.launcher.launch(ctx.launch_config(headless))
        except Exception as e:
            logger.error(f"Browser launch failed:\n{collect_diagnostics(ctx.config, e)}")
            raise
        browser_id = ctx.registry.register(browser)
        logger.info(f"Browser launched: {browser_id} (headless={headless})")

        page = await browser.new_page()
        page_id = ctx.registry.add_page(browser_id, page)

        await page.navigate(url)
        await asyncio.sleep(wait_for / 1000.0)

        title = await page.title()
        visible_text = await page.evaluate(VISIBLE_TEXT_SCRIPT) or ""

        png = await page.screenshot()
        screenshot_path = ctx.artifacts.write_screenshot(page_id, png, timestamped=False)

        text = (
            f"Successfully browsed to: {url}\n\n"
            f"Page Title: {title}\n\n"
            f"Visible Text Preview:\n{truncate(str(visible_text), BROWSE_PREVIEW_CHARS)}\n\n"
            f"Browser ID: {browser_id}\n"
            f"Page ID: {page_id}\n"
            f"Screenshot saved to: {screenshot_path}"
        )
        return ToolResult.success(
            text,
            browser_id=browser_id,
            page_id=page_id,
            title=title,
            screenshot_path=str(screenshot_path),
        )

    except asyncio.CancelledError:
        raise
    except Exception as e:
        logger.warning(f"browse {url!r} failed: {e!r}")
        result = ToolResult.failure("browse", e, browser_id=browser_id, page_id=page_id)
        if browser_id is not None:
            return ToolResult(
                ok=False,
                text=f"{result.text}\n\nBrowser ID: {browser_id}",
                data=result.data,
            )
        return result


async def close_browser(ctx: BrowserContext, browser_id: str) -> ToolResult:
    """
    Release a browser and forget it.

    Waits for in-flight page operations. If the release fails the instance
    stays registered so the caller can retry.
    """
    try:
        async with ctx.registry.instance_access(browser_id) as instance:
            await instance.handle.close()
            ctx.registry.remove(browser_id)
        logger.info(f"Browser closed: {browser_id}")
        return ToolResult.success(f"Successfully closed browser: {browser_id}", browser_id=browser_id)

    except asyncio.CancelledError:
        raise
    except Exception as e:
        logger.warning(f"close {browser_id} failed: {e!r}")
        return ToolResult.failure("close browser", e, browser_id=browser_id)


async def close_all_browsers(ctx: BrowserContext) -> dict:
    """
    Best-effort release of every registered instance at shutdown.

    A browser that does not quit cleanly has its process tree killed and is
    removed anyway. Never raises.
    """
    closed, killed, errors = [], [], []
    for browser_id in list(ctx.registry):
        try:
            result = await asyncio.wait_for(close_browser(ctx, browser_id), timeout=SHUTDOWN_CLOSE_TIMEOUT_SECS)
        except asyncio.TimeoutError:
            logger.warning(f"close {browser_id} timed out during shutdown")
            result = None
        if result is not None and result.ok:
            closed.append(browser_id)
            continue

        try:
            instance = ctx.registry.lookup_instance(browser_id)
        except LookupError:
            continue
        try:
            await instance.handle.kill()
            killed.append(browser_id)
        except Exception as e:
            errors.append(f"{browser_id}: {e}")
        ctx.registry.remove(browser_id)

    if closed or killed or errors:
        logger.info(f"Shutdown cleanup: closed={len(closed)} killed={len(killed)} errors={errors}")
    return {"closed": closed, "killed": killed, "errors": errors}


__all__ = ["browse", "close_browser", "close_all_browsers"]
