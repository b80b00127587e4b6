"""
Configuration Manager - Handle backend settings persistence
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_DIFF_SETTINGS: dict[str, Any] = {
    "defaultFileName": "Untitled",
    "oldRevision": "previous",
    "newRevision": "current",
    "viewType": "split",
}


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self):
        # 1. environment variable, 2. ~/.artifact_diff
        config_dir = os.environ.get("ARTIFACT_DIFF_CONFIG_DIR") or os.path.expanduser("~/.artifact_diff")

        try:
            config_path = Path(config_dir)
            config_path.mkdir(parents=True, exist_ok=True)
            self._config_file = config_path / "config.json"
        except OSError as e:
            logger.warning("Cannot write to %s: %s", config_dir, e)
            self._config_file = None

        # 3. fall back to the temp directory
        if not self._config_file:
            tmp_dir = Path(tempfile.gettempdir()) / "artifact_diff"
            tmp_dir.mkdir(parents=True, exist_ok=True)
            self._config_file = tmp_dir / "config.json"
            logger.info("Using temporary config path: %s", self._config_file)

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the singleton so the next access re-reads the environment"""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file"""
        if not self._config_file.exists():
            return self._default_config()

        try:
            with open(self._config_file) as f:
                return json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error("Error loading config: %s", e)
            return self._default_config()

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "logLevel": "INFO",
            "diff": dict(DEFAULT_DIFF_SETTINGS),
            "server": {"host": "0.0.0.0", "port": 8000},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return self._config.copy()

    def get_diff_settings(self) -> dict[str, Any]:
        """Diff section merged over its defaults"""
        return {**DEFAULT_DIFF_SETTINGS, **self._config.get("diff", {})}

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        # Merge with existing config
        self._config.update(config)

        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set specific config value"""
        self._config[key] = value
        self.save_config(self._config)
