"""Selenium/Chrome implementation of the capability interface."""

import asyncio
import uuid
from typing import Any, Optional

from selenium import webdriver
from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.common.by import By
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import Select, WebDriverWait

from ..config.paths import chromedriver_log_path
from .base import LaunchConfig
from .process import kill_process_tree
from .scripts import DOCUMENT_HTML_SCRIPT

import logging
logger = logging.getLogger(__name__)


def parse_selector(selector: str) -> tuple:
    """
    Map a selector string onto a Selenium locator.

    "xpath=..." and anything starting with "//" or "(//" is XPath; an optional
    "css=" prefix is stripped; everything else is a CSS selector.
    """
    s = selector.strip()
    if s.startswith("xpath="):
        return By.XPATH, s[len("xpath="):]
    if s.startswith("//") or s.startswith("(//"):
        return By.XPATH, s
    if s.startswith("css="):
        return By.CSS_SELECTOR, s[len("css="):]
    return By.CSS_SELECTOR, s


def build_chrome_options(config: LaunchConfig) -> Options:
    """Build Chrome options. No window size is set, so the browser keeps its natural viewport."""
    chrome_options = Options()
    for arg in config.args:
        chrome_options.add_argument(arg)

    chrome_options.add_experimental_option("excludeSwitches", ["enable-automation"])
    chrome_options.add_experimental_option("useAutomationExtension", False)

    if config.headless:
        chrome_options.add_argument("--headless=new")

    if config.chrome_path:
        chrome_options.binary_location = config.chrome_path

    return chrome_options


class ChromePage:
    """One window handle inside a ChromeBrowser."""

    def __init__(self, browser: "ChromeBrowser", window_handle: str):
        self._browser = browser
        self.window_handle = window_handle

    @property
    def driver(self) -> webdriver.Chrome:
        return self._browser.driver

    def _activate(self) -> None:
        if self.driver.current_window_handle != self.window_handle:
            self.driver.switch_to.window(self.window_handle)

    def _wait(self):
        return WebDriverWait(self.driver, self._browser.config.element_timeout)

    async def _run(self, fn, *args):
        def call():
            self._activate()
            return fn(*args)

        worker = asyncio.ensure_future(asyncio.to_thread(call))
        try:
            return await asyncio.shield(worker)
        except asyncio.CancelledError:
            # The thread cannot be interrupted; keep the caller (and its page
            # lock) until the driver is free again.
            await asyncio.wait([worker])
            if not worker.cancelled() and worker.exception() is not None:
                logger.debug(f"Driver call finished after cancellation: {worker.exception()!r}")
            raise

    async def navigate(self, url: str) -> None:
        await self._run(self.driver.get, url)

    async def evaluate(self, expression: str) -> Any:
        # Parenthesised so a leading newline cannot end the return statement.
        return await self._run(self.driver.execute_script, f"return ({expression});")

    async def screenshot(self) -> bytes:
        return await self._run(self.driver.get_screenshot_as_png)

    def _click(self, selector: str) -> None:
        el = self._wait().until(
            EC.element_to_be_clickable(parse_selector(selector)),
            message=f"element not found or not clickable: {selector}",
        )
        el.click()

    def _fill(self, selector: str, value: str) -> None:
        el = self._wait().until(
            EC.visibility_of_element_located(parse_selector(selector)),
            message=f"element not found or not visible: {selector}",
        )
        el.clear()
        el.send_keys(value)

    def _select_option(self, selector: str, value: str) -> None:
        el = self._wait().until(
            EC.presence_of_element_located(parse_selector(selector)),
            message=f"element not found: {selector}",
        )
        select = Select(el)
        try:
            select.select_by_value(value)
        except NoSuchElementException:
            # Match on the option label when no option carries that value
            select.select_by_visible_text(value)

    async def click(self, selector: str) -> None:
        await self._run(self._click, selector)

    async def fill(self, selector: str, value: str) -> None:
        await self._run(self._fill, selector, value)

    async def select_option(self, selector: str, value: str) -> None:
        await self._run(self._select_option, selector, value)

    def _content(self) -> str:
        # Prefer outerHTML; fall back to page_source
        html = self.driver.execute_script(f"return {DOCUMENT_HTML_SCRIPT};")
        if not html:
            html = self.driver.page_source or ""
        return html

    async def content(self) -> str:
        return await self._run(self._content)

    async def title(self) -> str:
        return await self._run(lambda: self.driver.title)

    async def current_url(self) -> str:
        return await self._run(lambda: self.driver.current_url)


class ChromeBrowser:
    """A launched Chrome process driven through one WebDriver session."""

    def __init__(self, driver: webdriver.Chrome, config: LaunchConfig):
        self.driver = driver
        self.config = config
        self._first_page_taken = False

    async def new_page(self) -> ChromePage:
        def open_window() -> str:
            # The launch window becomes the first page; later pages get new tabs.
            if not self._first_page_taken:
                self._first_page_taken = True
                return self.driver.current_window_handle
            self.driver.switch_to.new_window("tab")
            return self.driver.current_window_handle

        handle = await asyncio.to_thread(open_window)
        return ChromePage(self, handle)

    async def close(self) -> None:
        await asyncio.to_thread(self.driver.quit)

    def _service_pid(self) -> Optional[int]:
        service = getattr(self.driver, "service", None)
        process = getattr(service, "process", None)
        return getattr(process, "pid", None)

    async def kill(self) -> None:
        pid = self._service_pid()
        if pid is None:
            logger.warning("No chromedriver process to kill")
            return
        killed = await asyncio.to_thread(kill_process_tree, pid)
        logger.warning(f"Force killed chromedriver process tree: {killed}")


class ChromeLauncher:
    """Launches ChromeBrowser instances with Selenium."""

    async def launch(self, config: LaunchConfig) -> ChromeBrowser:
        return await asyncio.to_thread(self._launch_sync, config)

    def _launch_sync(self, config: LaunchConfig) -> ChromeBrowser:
        chrome_options = build_chrome_options(config)
        log_path = chromedriver_log_path(uuid.uuid4().hex[:8])
        service = ChromeService(executable_path=config.chromedriver_path, log_output=log_path)

        driver = webdriver.Chrome(service=service, options=chrome_options)
        try:
            driver.set_page_load_timeout(config.page_load_timeout)
        except Exception:
            driver.quit()
            raise

        logger.info(f"Chrome launched (headless={config.headless}), chromedriver log: {log_path}")
        return ChromeBrowser(driver, config)


__all__ = [
    "parse_selector",
    "build_chrome_options",
    "ChromePage",
    "ChromeBrowser",
    "ChromeLauncher",
]
