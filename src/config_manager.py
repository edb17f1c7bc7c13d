"""
Centralized configuration management.

Provides singleton access to the decoder configuration with:
- Single load point (config.yaml loaded once)
- Validation of required keys
- Dot-notation access to nested sections
"""
import os
import yaml
import logging
from typing import Any, Dict, Optional


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""
    pass


class ConfigManager:
    """
    Singleton configuration manager.

    Ensures configuration is loaded once and provides consistent access
    across the pipeline.

    Usage:
        # Get instance
        config = ConfigManager.get_instance().config

        # Get specific key
        url = ConfigManager.get('document.url')

        # Access a whole section
        grid_config = ConfigManager.get('grid', default={})
    """

    _instance = None
    _config = None
    _config_path: Optional[str] = None

    @staticmethod
    def get_instance() -> 'ConfigManager':
        """
        Get or create singleton instance.
        Config is loaded only once on first access.

        Returns:
            ConfigManager: Singleton instance
        """
        if ConfigManager._instance is None:
            ConfigManager._instance = ConfigManager()
        return ConfigManager._instance

    def __init__(self):
        """Initialize and load configuration."""
        if ConfigManager._config is None:
            self._load_config()

    @staticmethod
    def default_config_path() -> str:
        """Return config/config.yaml relative to the project root."""
        base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        return os.path.join(base_dir, 'config', 'config.yaml')

    @staticmethod
    def use_config_path(config_path: Optional[str]) -> None:
        """
        Point the manager at a different YAML file and drop any loaded config.

        Passing None restores the default location.
        """
        ConfigManager._config_path = config_path
        ConfigManager._instance = None
        ConfigManager._config = None

    def _load_config(self) -> None:
        """
        Load configuration from YAML file.

        Raises:
            ConfigError: If config file not found or YAML parsing fails
        """
        config_path = ConfigManager._config_path or ConfigManager.default_config_path()

        if not os.path.exists(config_path):
            raise ConfigError(f"Config file not found: {config_path}")

        logging.info(f"Loading configuration from: {config_path}")

        try:
            with open(config_path, 'r') as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file: {e}")
        except OSError as e:
            raise ConfigError(f"Failed to load config: {e}")

        if not loaded or not isinstance(loaded, dict):
            raise ConfigError("Config file is empty or invalid YAML")

        ConfigManager._config = loaded
        logging.info("Configuration loaded successfully")

    @property
    def config(self) -> Dict[str, Any]:
        """
        Get the full configuration dictionary.

        Returns:
            dict: Configuration loaded from config.yaml
        """
        if ConfigManager._config is None:
            self._load_config()
        return ConfigManager._config

    @staticmethod
    def get(key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Supports nested keys with dot notation:
            ConfigManager.get('document.url') → returns config['document']['url']

        Args:
            key: Configuration key (supports dots for nesting)
            default: Default value if key not found

        Returns:
            Configuration value or default if not found
        """
        config = ConfigManager.get_instance().config

        if '.' in key:
            value = config
            for k in key.split('.'):
                if isinstance(value, dict):
                    value = value.get(k)
                else:
                    return default
            return value if value is not None else default

        return config.get(key, default)

    @staticmethod
    def reload() -> None:
        """
        Force reload of configuration.

        Useful for testing or if config changes at runtime.
        """
        ConfigManager._config = None
        ConfigManager.get_instance()
        logging.info("Configuration reloaded")

    @staticmethod
    def validate_required(required_keys: list) -> bool:
        """
        Validate that required configuration keys exist.

        Args:
            required_keys: List of keys that must exist

        Returns:
            bool: True if all keys exist

        Raises:
            ConfigError: If any required key is missing
        """
        config = ConfigManager.get_instance().config

        missing = [key for key in required_keys if key not in config]
        if missing:
            raise ConfigError(f"Missing required config keys: {missing}")

        return True
