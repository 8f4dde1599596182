# nodekit/core/config.py

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional
from nodekit.core.logging import get_logger, init_logger

logger = get_logger()


class Config:
    """
    Package configuration management.
    Handles loading/saving settings from a JSON file. A config without a path
    lives in memory only and never touches the disk.
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path) if config_path else None
        self.data: Dict[str, Any] = {}

        # Default configuration
        self.defaults = {
            'logging': {
                'level': 'INFO',
                'log_dir': None,
            },
            'tree': {
                'root_name': 'root',
            },
            'search': {
                # Re-test the start node instead of each child in get_immediate_child
                'compat_self_match': False,
            },
        }

        self.load()

    def load(self):
        """Load configuration from file."""
        if self.config_path is None:
            self.data = copy.deepcopy(self.defaults)
            return

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    loaded_data = json.load(f)

                # Merge with defaults (loaded values override defaults)
                self.data = self._deep_merge(copy.deepcopy(self.defaults), loaded_data)
                logger.info(f"Loaded configuration from {self.config_path}")
            except (OSError, ValueError) as e:
                logger.error(f"Failed to load configuration from {self.config_path}: {e}")
                self.data = copy.deepcopy(self.defaults)
        else:
            self.data = copy.deepcopy(self.defaults)
            logger.info(f"Configuration file not found, using defaults and creating {self.config_path}")
            self.save()

    def save(self):
        """Save configuration to file."""
        if self.config_path is None:
            return

        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self.config_path, 'w') as f:
                json.dump(self.data, f, indent=2)
            logger.info(f"Saved configuration to {self.config_path}")
        except OSError as e:
            logger.error(f"Failed to save configuration to {self.config_path}: {e}")

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get configuration value by path.
        Example: config.get('search.compat_self_match')
        """
        keys = path.split('.')
        value = self.data

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def set(self, path: str, value: Any):
        """
        Set configuration value by path.
        Example: config.set('tree.root_name', 'world')
        """
        keys = path.split('.')
        data = self.data

        for key in keys[:-1]:
            if key not in data:
                data[key] = {}
            data = data[key]

        data[keys[-1]] = value

    def _deep_merge(self, base: dict, override: dict) -> dict:
        """Recursively merge override dict into base dict."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get global configuration (in-memory defaults until init_config is called)."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def init_config(config_path: Optional[str] = None) -> Config:
    """
    Initialize global configuration, optionally from a file.
    The global logger is rebuilt with the configured level and log directory.
    """
    global _config
    _config = Config(config_path)
    init_logger(
        level=_config.get('logging.level', 'INFO'),
        log_dir=_config.get('logging.log_dir'),
    )
    return _config
