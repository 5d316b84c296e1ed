"""
Browser tool dependencies bundled in one object.

The server builds a single BrowserContext in its lifespan hook and hands it to
every tool call; tests build their own with a fake launcher.

Usage:
    from mcp_browser_lite.context import create_context

    ctx = create_context()
    result = await browse(ctx, "https://example.com")
"""

from typing import Optional
from dataclasses import dataclass, field

from .artifacts import ArtifactStore
from .browser.base import BrowserLauncher, LaunchConfig
from .constants import STEALTH_ARGS
from .registry import SessionRegistry


@dataclass
class BrowserContext:
    """
    Attributes:
        registry: Live instances and pages
        launcher: Capability provider used to start browsers
        artifacts: Where screenshots are written
        config: Environment configuration dictionary (see get_env_config)
    """

    registry: SessionRegistry
    launcher: BrowserLauncher
    artifacts: ArtifactStore
    config: dict = field(default_factory=dict)

    def launch_config(self, headless: bool) -> LaunchConfig:
        """Stealth launch options for one browse call."""
        args = tuple(STEALTH_ARGS) + tuple(self.config.get("extra_args") or ())
        return LaunchConfig(
            headless=headless,
            args=args,
            chrome_path=self.config.get("chrome_path"),
            chromedriver_path=self.config.get("chromedriver_path"),
            page_load_timeout=self.config.get("page_load_timeout", 30.0),
            element_timeout=self.config.get("element_timeout", 30.0),
        )


def create_context(
    launcher: Optional[BrowserLauncher] = None,
    artifacts: Optional[ArtifactStore] = None,
    config: Optional[dict] = None,
) -> BrowserContext:
    """
    Build the process context and create the artifact directory.

    Defaults: Selenium ChromeLauncher, environment configuration and the
    configured artifact directory.
    """
    if config is None:
        from .config.environment import get_env_config
        config = get_env_config()
    if launcher is None:
        from .browser.chrome import ChromeLauncher
        launcher = ChromeLauncher()
    if artifacts is None:
        from .config.paths import get_artifact_dir
        artifacts = ArtifactStore(get_artifact_dir())

    artifacts.ensure()
    return BrowserContext(
        registry=SessionRegistry(),
        launcher=launcher,
        artifacts=artifacts,
        config=config,
    )


__all__ = [
    "BrowserContext",
    "create_context",
]
