# mcp_browser_lite/tools/__init__.py
"""
Tool implementations.

Each tool is a stateless coroutine over an injected BrowserContext that
returns a ToolResult. Errors never escape: they come back as failure results
whose text starts with "Failed to".
"""

from .browser_management import (
    browse,
    close_browser,
    close_all_browsers,
)

from .interaction import (
    interact,
)

from .extraction import (
    extract,
)

from .results import (
    ToolResult,
)

__all__ = [
    # Browser management
    'browse',
    'close_browser',
    'close_all_browsers',
    # Interaction
    'interact',
    # Extraction
    'extract',
    # Results
    'ToolResult',
]
