"""
Global constants and configuration defaults.
No dependencies - safe to import from anywhere.
"""

import os

# ============================================================================
# Output Limits
# ============================================================================

BROWSE_PREVIEW_CHARS = 1500
"""Maximum characters of visible text returned by browse."""

EXTRACT_TEXT_CHARS = 2000
"""Maximum characters returned by extract for text and screenshot."""

HTML_EXCERPT_CHARS = 100
"""Literal HTML characters returned by extract(type='html')."""

TRUNCATION_MARKER = "..."
"""Appended to output that was cut at one of the limits above."""


# ============================================================================
# Timing
# ============================================================================

DEFAULT_WAIT_FOR_MS = 1000
"""Default settle time after navigation in browse (milliseconds)."""

INTERACTION_SETTLE_MS = int(os.getenv("MCP_BROWSER_INTERACTION_SETTLE_MS", "1000"))
"""Settle time after an interact action before the screenshot (milliseconds)."""

SHUTDOWN_CLOSE_TIMEOUT_SECS = float(os.getenv("MCP_BROWSER_SHUTDOWN_CLOSE_TIMEOUT", "10"))
"""How long the shutdown hook waits for one browser to quit before killing it."""


# ============================================================================
# Browser Launch
# ============================================================================

STEALTH_ARGS = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-accelerated-2d-canvas",
    "--no-first-run",
    "--no-zygote",
    "--disable-gpu",
    "--disable-blink-features=AutomationControlled",
)
"""Chrome flags applied to every launch."""


# ============================================================================
# Operations
# ============================================================================

INTERACT_ACTIONS = ("click", "fill", "select")
EXTRACT_TYPES = ("text", "html", "screenshot")


__all__ = [
    "BROWSE_PREVIEW_CHARS",
    "EXTRACT_TEXT_CHARS",
    "HTML_EXCERPT_CHARS",
    "TRUNCATION_MARKER",
    "DEFAULT_WAIT_FOR_MS",
    "INTERACTION_SETTLE_MS",
    "SHUTDOWN_CLOSE_TIMEOUT_SECS",
    "STEALTH_ARGS",
    "INTERACT_ACTIONS",
    "EXTRACT_TYPES",
]
