# mcp_browser_lite/decorators/envelope.py

import os
import asyncio
import functools
from typing import Any, Callable

from ..tools.results import ToolResult

import logging
logger = logging.getLogger(__name__)


__all__ = [
    "tool_envelope",
]


def tool_envelope(_func: Callable = None, *, action: str = "complete request"):
    """
    Outermost decorator for async MCP tool functions:
      - On success: flattens a ToolResult to its text.
      - On error: returns "Failed to <action>: <error>" instead of raising, so the
        caller only ever reads text.
    Environment:
      - Set MBL_TOOL_ERRORS_TRACEBACK=0 to log failures without a traceback.
    """
    include_tb = os.getenv("MBL_TOOL_ERRORS_TRACEBACK", "1") not in ("0", "false", "False")

    def _normalize(value: Any) -> str:
        if isinstance(value, ToolResult):
            return value.text
        if value is None:
            return ""
        return str(value)

    def decorator(func: Callable):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                result = await func(*args, **kwargs)
            except asyncio.CancelledError:
                # Preserve cooperative cancellation semantics
                raise
            except Exception as e:
                logger.error(f"Tool {func.__name__} raised {e.__class__.__name__}: {e}", exc_info=include_tb)
                return ToolResult.failure(action, e).text
            return _normalize(result)
        return wrapper

    return decorator if _func is None else decorator(_func)
