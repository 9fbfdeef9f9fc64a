"""
Configuration Management

Loads helper settings from defaults, an optional JSON file and environment
variables (including a .env file found in the working directory or one of
its parents), in that order of precedence.
"""

import os
import json
import copy
from typing import Dict, Any, Optional
from pathlib import Path

from dotenv import load_dotenv

from .core.exceptions import ConfigurationError
from .utils.logging_config import get_logger, setup_logging, MusicHelperLogger


logger = get_logger('config')


class HelperConfig:
    """
    Configuration manager

    Features:
    - Defaults, JSON file and environment sources
    - .env discovery
    - Range validation of numeric settings
    """

    def __init__(self, config_path: Optional[str] = None, load_env_file: bool = True):
        """Initialize configuration manager"""
        self.config_path = config_path
        self._config_cache: Optional[Dict[str, Any]] = None
        self._defaults = self._get_default_config()

        if load_env_file:
            env_path = self._find_env_file()
            if env_path:
                load_dotenv(env_path)

    def _find_env_file(self) -> Optional[str]:
        """Find .env file in current directory or parent directories"""
        current_dir = Path.cwd()

        # Check current directory and up to 3 parent directories
        for _ in range(4):
            env_file = current_dir / '.env'
            if env_file.exists():
                return str(env_file)
            if current_dir == current_dir.parent:  # Reached root
                break
            current_dir = current_dir.parent

        return None

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values"""
        return {
            "inference": {
                "small_collection_size": 5,
                "min_dominant_occurrences": 2
            },

            "artwork": {
                "max_items": None
            },

            "logging": {
                "level": "INFO",
                "log_dir": None
            }
        }

    def load_config(self, force_reload: bool = False) -> Dict[str, Any]:
        """
        Load configuration from all sources

        Args:
            force_reload: Force reload from file (ignore cache)

        Returns:
            Merged configuration dictionary

        Raises:
            ConfigurationError: If the configuration file is not valid JSON
        """
        if self._config_cache is not None and not force_reload:
            return self._config_cache

        config = copy.deepcopy(self._defaults)

        file_config = self._load_from_file()
        if file_config:
            config = self._deep_merge(config, file_config)

        env_config = self._load_from_environment()
        if env_config:
            config = self._deep_merge(config, env_config)

        config = self._validate_config(config)

        self._config_cache = config
        return config

    def _load_from_file(self) -> Optional[Dict[str, Any]]:
        """Load configuration from JSON file"""
        if not self.config_path or not os.path.exists(self.config_path):
            return None

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError("Failed to load config file", details=str(e),
                                     reference=self.config_path) from e

        if not isinstance(data, dict):
            raise ConfigurationError("Config file must contain a JSON object",
                                     reference=self.config_path)
        return data

    def _load_from_environment(self) -> Dict[str, Any]:
        """Load configuration overrides from environment variables"""
        config = {}

        env_mappings = {
            'MUSICHELPER_SMALL_COLLECTION_SIZE': ('inference', 'small_collection_size', int),
            'MUSICHELPER_MIN_DOMINANT_OCCURRENCES': ('inference', 'min_dominant_occurrences', int),
            'MUSICHELPER_ARTWORK_MAX_ITEMS': ('artwork', 'max_items', self._optional_int),
            'MUSICHELPER_LOG_LEVEL': ('logging', 'level', str),
            'MUSICHELPER_LOG_DIR': ('logging', 'log_dir', str),
        }

        for env_var, (section, key, converter) in env_mappings.items():
            value = os.environ.get(env_var)
            if value is not None:
                try:
                    converted_value = converter(value)
                except ValueError as e:
                    logger.warning(f"Invalid environment variable {env_var}={value}: {e}")
                    continue
                config.setdefault(section, {})[key] = converted_value

        return config

    def _optional_int(self, value: str) -> Optional[int]:
        if value.strip().lower() in ('', 'none', 'null'):
            return None
        return int(value)

    def _deep_merge(self, base: Dict[str, Any], update: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries"""
        result = base.copy()

        for key, value in update.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _validate_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Validate and sanitize configuration values"""
        inference = config.setdefault('inference', {})
        inference['small_collection_size'] = max(0, min(int(inference.get('small_collection_size', 5)), 1000))
        inference['min_dominant_occurrences'] = max(1, min(int(inference.get('min_dominant_occurrences', 2)), 1000))

        artwork = config.setdefault('artwork', {})
        max_items = artwork.get('max_items')
        artwork['max_items'] = None if max_items is None else max(1, int(max_items))

        logging_section = config.setdefault('logging', {})
        level = str(logging_section.get('level') or 'INFO').upper()
        if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            logger.warning(f"Unknown log level {level}, using INFO")
            level = 'INFO'
        logging_section['level'] = level

        return config

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get a configuration section"""
        return dict(self.load_config().get(section, {}))

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a single configuration value"""
        return self.load_config().get(section, {}).get(key, default)

    def configure_logging(self, enable_console: bool = True) -> MusicHelperLogger:
        """Set up package logging from the logging section"""
        section = self.get_section('logging')
        return setup_logging(log_dir=section.get('log_dir'), console_level=section['level'],
                             enable_console=enable_console)

    def save_config(self, path: Optional[str] = None, config: Optional[Dict[str, Any]] = None) -> bool:
        """
        Save configuration to file

        Args:
            path: Destination (defaults to config_path)
            config: Configuration to save (uses current if None)

        Returns:
            True if saved successfully
        """
        path = path or self.config_path
        if not path:
            return False

        config = config if config is not None else self.load_config()
        try:
            Path(path).parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config, f, indent=2)
        except OSError as e:
            logger.error(f"Failed to save config file {path}: {e}")
            return False

        return True
