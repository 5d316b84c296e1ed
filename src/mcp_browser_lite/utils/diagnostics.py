"""Diagnostics and debugging information utility functions."""

import sys
import platform
from typing import Optional

import selenium


def collect_diagnostics(
    config: Optional[dict] = None,
    exc: Optional[BaseException] = None,
) -> str:
    """
    Collect diagnostic information about the environment a launch ran in.

    Args:
        config: Configuration dictionary (see get_env_config)
        exc: Exception that occurred (can be None)

    Returns:
        str: Formatted diagnostic information
    """
    config = config or {}
    parts = [
        f"OS                : {platform.system()} {platform.release()}",
        f"Python            : {sys.version.split()[0]}",
        f"Selenium          : {getattr(selenium, '__version__', '?')}",
        f"Chrome binary     : {config.get('chrome_path') or '<auto>'}",
        f"Chromedriver      : {config.get('chromedriver_path') or '<selenium manager>'}",
        f"Page load timeout : {config.get('page_load_timeout', '<default>')}",
        f"Extra args        : {' '.join(config.get('extra_args') or []) or '<none>'}",
    ]

    if exc:
        parts += [
            "---- ERROR ----",
            f"Error type        : {type(exc).__name__}",
            f"Error message     : {exc}",
        ]

    return "\n".join(parts)


__all__ = ['collect_diagnostics']
