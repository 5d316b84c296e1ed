"""Path utilities for artifacts and logs."""

import os
import tempfile
from pathlib import Path


def get_artifact_dir() -> Path:
    """
    Get the screenshot artifact directory.

    Uses MCP_BROWSER_ARTIFACT_DIR if set, otherwise <tmp>/mcp-browser-lite.
    The directory is not created here; see ArtifactStore.ensure().
    """
    configured = (os.getenv("MCP_BROWSER_ARTIFACT_DIR") or "").strip()
    if configured:
        return Path(configured).expanduser()
    return Path(tempfile.gettempdir()) / "mcp-browser-lite"


def log_file_path() -> Path:
    """Get the server log file path (MCP_BROWSER_LOG_FILE or <tmp>/mcp_browser_lite.log)."""
    configured = (os.getenv("MCP_BROWSER_LOG_FILE") or "").strip()
    if configured:
        return Path(configured).expanduser()
    return Path(tempfile.gettempdir()) / "mcp_browser_lite.log"


def chromedriver_log_path(instance_tag: str) -> str:
    """Get the ChromeDriver log file path for one launch."""
    return os.path.join(tempfile.gettempdir(), f"chromedriver_{instance_tag}_{os.getpid()}.log")
