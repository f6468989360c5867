"""
Configuration Manager

Single point of access to the application settings.

Lookup order (highest to lowest):
1. Runtime overrides set through ConfigManager.set()
2. Defaults from config.py (which already applies .env / environment values)

Nothing is persisted between runs.
"""

import logging
from typing import Any, Dict, Optional

import config

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    {
        "name": "ConfigManager",
        "version": "1.1.0",
        "description": "Dot-path access to config.py sections with in-memory overrides.",
        "dependencies": ["config"],
        "interface": {
            "inputs": ["key: str", "value: Any"],
            "outputs": "Effective configuration value"
        }
    }

    Singleton so that every widget and view model reads the same overrides.
    """

    _instance: Optional['ConfigManager'] = None

    def __new__(cls) -> 'ConfigManager':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if hasattr(self, '_initialized'):
            return

        self._sections: Dict[str, Any] = {
            "app": {"name": config.APP_NAME, "version": config.APP_VERSION},
            "notification": config.NOTIFICATION,
            "snackbar": config.SNACKBAR,
            "main_window": config.MAIN_WINDOW,
            "logging": config.LOGGING,
        }
        self._overrides: Dict[str, Any] = {}

        self._initialized = True
        logger.debug(f"ConfigManager initialized for '{config.APP_NAME}'")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a dot-separated key such as 'notification.delay_ms'.

        Returns the runtime override if one is set, else the config.py value,
        else `default`.
        """
        if key in self._overrides:
            return self._overrides[key]

        current: Any = self._sections
        for part in key.split('.'):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def set(self, key: str, value: Any) -> None:
        """Override a key for the rest of this process."""
        self._overrides[key] = value
        logger.debug(f"Runtime config: {key} = {value!r}")
