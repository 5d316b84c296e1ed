"""Environment configuration and validation."""

import os
import shlex

from dotenv import load_dotenv, find_dotenv

import logging
logger = logging.getLogger(__name__)

load_dotenv(find_dotenv(filename=".env", usecwd=True))


def _positive_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise EnvironmentError(f"{name} must be a number, got {raw!r}.")
    if value <= 0:
        raise EnvironmentError(f"{name} must be positive, got {raw!r}.")
    return value


def get_env_config() -> dict:
    """
    Read environment variables into a launch configuration.

    Optional:   CHROME_EXECUTABLE_PATH
                CHROMEDRIVER_PATH (Selenium Manager resolves a driver otherwise)
                MCP_BROWSER_PAGE_LOAD_TIMEOUT (seconds, default 30)
                MCP_BROWSER_ELEMENT_TIMEOUT (seconds, default 30)
                MCP_BROWSER_EXTRA_ARGS (extra Chrome flags, shell-style quoting)
    """
    chrome_path = (os.getenv("CHROME_EXECUTABLE_PATH") or "").strip() or None
    chromedriver_path = (os.getenv("CHROMEDRIVER_PATH") or "").strip() or None

    extra_args_env = (os.getenv("MCP_BROWSER_EXTRA_ARGS") or "").strip()
    extra_args = shlex.split(extra_args_env) if extra_args_env else []

    return {
        "chrome_path": chrome_path,
        "chromedriver_path": chromedriver_path,
        "page_load_timeout": _positive_float("MCP_BROWSER_PAGE_LOAD_TIMEOUT", 30.0),
        "element_timeout": _positive_float("MCP_BROWSER_ELEMENT_TIMEOUT", 30.0),
        "extra_args": extra_args,
    }
