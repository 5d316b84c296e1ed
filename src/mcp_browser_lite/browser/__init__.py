"""Browser capability interface and its Selenium/Chrome binding."""

from .base import LaunchConfig, PageHandle, BrowserHandle, BrowserLauncher
from .chrome import ChromeLauncher, ChromeBrowser, ChromePage
from .scripts import VISIBLE_TEXT_SCRIPT

__all__ = [
    "LaunchConfig",
    "PageHandle",
    "BrowserHandle",
    "BrowserLauncher",
    "ChromeLauncher",
    "ChromeBrowser",
    "ChromePage",
    "VISIBLE_TEXT_SCRIPT",
]
