"""
Configuration Management System

Handles loading, validation, and management of point geometry settings.
"""

import yaml
from typing import Dict, Any, Optional
from pathlib import Path


SUPPORTED_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigManager:
    """Manages configuration parameters for the point geometry package."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to configuration file. If None, uses default config.
        """
        self.config_path = config_path or self._get_default_config_path()
        self.config = self._load_config()
        self._validate_config()

    def _get_default_config_path(self) -> str:
        """Get path to default configuration file."""
        package_dir = Path(__file__).parent.parent
        return str(package_dir / "config" / "default_config.yaml")

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        try:
            with open(self.config_path, 'r') as file:
                config = yaml.safe_load(file)
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing configuration file: {e}")

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ValueError(f"Configuration root must be a mapping, got {type(config).__name__}")
        return config

    def _validate_config(self) -> None:
        """Validate configuration parameters for consistency."""
        try:
            tolerance = float(self.get('equality.tolerance', 1e-9))
        except (TypeError, ValueError):
            raise ValueError("equality.tolerance must be a number") from None
        if not tolerance > 0:
            raise ValueError("equality.tolerance must be positive")

        precision = self.get('printing.precision', 6)
        if not isinstance(precision, int) or precision < 1:
            raise ValueError("printing.precision must be a positive integer")

        version = self.get('serialization.format_version', 1)
        if not isinstance(version, int) or version < 1:
            raise ValueError("serialization.format_version must be a positive integer")

        level = str(self.get('logging.level', 'INFO')).upper()
        if level not in SUPPORTED_LOG_LEVELS:
            raise ValueError(f"logging.level must be one of {', '.join(SUPPORTED_LOG_LEVELS)}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key: Configuration key (e.g., 'equality.tolerance')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set configuration value using dot notation.

        Args:
            key: Configuration key (e.g., 'printing.precision')
            value: Value to set
        """
        keys = key.split('.')
        config_ref = self.config

        for k in keys[:-1]:
            if k not in config_ref:
                config_ref[k] = {}
            config_ref = config_ref[k]

        config_ref[keys[-1]] = value
        self._validate_config()

    def save(self, output_path: Optional[str] = None) -> None:
        """
        Save current configuration to file.

        Args:
            output_path: Path to save configuration. If None, overwrites current file.
        """
        save_path = output_path or self.config_path

        with open(save_path, 'w') as file:
            yaml.dump(self.config, file, default_flow_style=False, indent=2)

    def get_tolerance(self) -> float:
        """Get the default equality tolerance."""
        return float(self.get('equality.tolerance', 1e-9))

    def get_precision(self) -> int:
        """Get the number of significant digits for printed output."""
        return self.get('printing.precision', 6)

    def get_format_version(self) -> int:
        """Get the archive format version to write."""
        return self.get('serialization.format_version', 1)

    def get_log_level(self) -> str:
        """Get the logging level name."""
        return str(self.get('logging.level', 'INFO')).upper()
