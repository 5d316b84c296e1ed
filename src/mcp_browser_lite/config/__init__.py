"""Configuration management for browser automation."""

from .environment import get_env_config

from .paths import (
    get_artifact_dir,
    log_file_path,
    chromedriver_log_path,
)

__all__ = [
    "get_env_config",
    "get_artifact_dir",
    "log_file_path",
    "chromedriver_log_path",
]
