"""Centralized configuration service with caching and singleton pattern.

Provides a single point of access to the check configuration, so the logger,
the checks and the entry script all see the same state.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Dict, Optional

from devcheck.config.config_loader import ConfigLoader


class ConfigService:
    """Thread-safe singleton configuration service with lazy loading and caching."""

    _instance: Optional[ConfigService] = None
    _lock = threading.Lock()

    def __new__(cls) -> ConfigService:
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        # Prevent re-initialization
        if self._initialized:
            return

        self._loader: Optional[ConfigLoader] = None
        self._check_config: Optional[Dict[str, Any]] = None
        self._initialized = True

    def load(self, config_path: Optional[Path] = None) -> None:
        """Load the check configuration.

        Args:
            config_path: Optional path to check_config.yaml. If None, uses default.
        """
        loader = ConfigLoader(config_path)
        # Raises on invalid YAML; the service stays unloaded so the next call retries
        loader.load_configs()
        with self._lock:
            self._loader = loader
            self._check_config = None

    def _ensure_loaded(self) -> None:
        if self._loader is None:
            self.load()

    def get_check_config(self) -> Dict[str, Any]:
        """Get check configuration (cached).

        Returns:
            Check configuration dictionary merged over the defaults.
        """
        self._ensure_loaded()
        if self._check_config is None:
            with self._lock:
                if self._check_config is None:
                    self._check_config = self._loader.get_check_config()
        return self._check_config.copy()

    def reload(self, config_path: Optional[Path] = None) -> None:
        """Force reload of the configuration."""
        self.load(config_path)

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        with cls._lock:
            cls._instance = None


def get_config_service() -> ConfigService:
    """Get the singleton ConfigService instance."""
    return ConfigService()


def get_check_config() -> Dict[str, Any]:
    """Get check configuration.

    Returns:
        Check configuration dictionary.
    """
    return get_config_service().get_check_config()
