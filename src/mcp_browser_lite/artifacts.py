"""Screenshot artifact storage."""

import time
from pathlib import Path
from typing import Optional, Union

import logging
logger = logging.getLogger(__name__)


class ArtifactStore:
    """
    A process-wide directory of screenshot files.

    The open-session capture of a page is named screenshot-<pageId>.png; later
    captures add a millisecond timestamp so they never overwrite each other.
    Files are never cleaned up by the server.
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def ensure(self) -> Path:
        """Create the directory (and parents). Safe to call repeatedly."""
        self.root.mkdir(parents=True, exist_ok=True)
        logger.info(f"Artifact directory ready at: {self.root}")
        return self.root

    def screenshot_path(self, page_id: str, timestamp_ms: Optional[int] = None) -> Path:
        if timestamp_ms is None:
            return self.root / f"screenshot-{page_id}.png"
        return self.root / f"screenshot-{page_id}-{timestamp_ms}.png"

    def write_screenshot(self, page_id: str, png_bytes: bytes, timestamped: bool = True) -> Path:
        """Write one capture and return its path."""
        if timestamped:
            ts = int(time.time() * 1000)
            path = self.screenshot_path(page_id, ts)
            while path.exists():
                ts += 1
                path = self.screenshot_path(page_id, ts)
        else:
            path = self.screenshot_path(page_id)

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.write(png_bytes)
        logger.debug(f"Screenshot written: {path} ({len(png_bytes)} bytes)")
        return path


__all__ = ["ArtifactStore"]
