import logging
import os
from pathlib import Path
from typing import Dict, Any, Tuple

from .utils import load_settings

DEFAULTS: Dict[str, Any] = {
    'db_uri': 'mongodb://localhost:27017',
    'db_name': '',
    'log_level': 'info',
}


class Config:
    """Static configuration class - no instances, only class methods"""
    _config: Dict[str, Any] = dict(DEFAULTS)

    @classmethod
    def initialize(cls, config_file: str) -> Dict[str, Any]:
        """Initialize the config with values from config file"""
        cls._config = cls._load_system_config(config_file)

        # Connection strings usually come from the environment in deployments
        mongo_url = os.environ.get("MONGO_URL")
        if mongo_url:
            cls._config['db_uri'] = mongo_url
        return cls._config

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """Get a configuration value by key"""
        return cls._config.get(key, default)

    @classmethod
    def get_db_params(cls) -> Tuple[str, str]:
        """Get connection string and fallback database name from config data"""
        return (
            cls._config.get('db_uri', DEFAULTS['db_uri']),
            cls._config.get('db_name', '')
        )

    @classmethod
    def log_level(cls) -> int:
        """Logging level from the 'log_level' setting, INFO if unrecognised"""
        level = logging.getLevelName(str(cls._config.get('log_level', 'info')).upper())
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def _load_system_config(cls, config_file: str) -> Dict[str, Any]:
        """
        Load and return the configuration from the config file merged over defaults.
        If the file is not found, return default configuration values.
        """
        if len(config_file) > 0:
            config_path = Path(config_file)
            if config_path.exists():
                return {**DEFAULTS, **load_settings(config_path)}
        logging.warning(f'Configuration file "{config_file}" not found. Using defaults.')
        return dict(DEFAULTS)
