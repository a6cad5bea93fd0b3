"""
Configuration Manager for the Promtail logging demo app
Loads optional settings from a YAML file; every value has a built-in default
"""

import yaml
from typing import Dict, Any, Optional
from pathlib import Path


class ConfigManager:
    """Manages application configuration"""

    def __init__(self, config_path: str = "config/config.yaml"):
        self.config_path = Path(config_path)
        self._config: Optional[Dict[str, Any]] = None
        self.load_config()

    def load_config(self) -> None:
        """Load configuration from YAML file"""
        # No file means defaults everywhere
        if not self.config_path.exists():
            self._config = {}
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as file:
                loaded = yaml.safe_load(file)
        except (OSError, yaml.YAMLError) as e:
            raise RuntimeError(f"Failed to load configuration: {e}") from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise RuntimeError(
                f"Failed to load configuration: {self.config_path} must contain a mapping"
            )
        self._config = loaded

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key (supports dot notation)"""
        if self._config is None:
            return default

        keys = key.split('.')
        value = self._config

        try:
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get_server_config(self) -> Dict[str, Any]:
        """Get HTTP server configuration"""
        return self.get('server', {}) or {}

    def get_heartbeat_config(self) -> Dict[str, Any]:
        """Get heartbeat configuration"""
        return self.get('heartbeat', {}) or {}

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration"""
        return self.get('logging', {}) or {}

    def reload_config(self) -> None:
        """Reload configuration from file"""
        self.load_config()


# Global configuration instance
config = ConfigManager()
