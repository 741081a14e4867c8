"""
Configuration service for loading and validating generator settings.
"""
import os
import configparser
from typing import Optional, Dict, Any
import logging

from ..models.config import GeneratorConfig, ConfigValidationError, ConfigValidationResult


class ConfigService:
    """Service for loading and validating generator configuration."""

    def __init__(self, config_path: Optional[str] = None):
        self.logger = logging.getLogger(__name__)
        self._config = None
        if config_path:
            self._config = self.load_config(config_path)

    def get_config(self) -> GeneratorConfig:
        """
        Get the loaded configuration.

        Returns:
            GeneratorConfig object

        Raises:
            ValueError: If no configuration has been loaded
        """
        if self._config is None:
            raise ValueError("No configuration loaded. Call load_config() first.")
        return self._config

    def load_config(self, config_path: str) -> GeneratorConfig:
        """
        Load configuration from a property file.

        Args:
            config_path: Path to the configuration file

        Returns:
            GeneratorConfig object with loaded settings

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is invalid or has validation errors
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        config_data = self._load_config_file(config_path)
        config = self._create_config_from_data(config_data)

        validation_result = self.validate_config(config)

        if validation_result.has_errors():
            error_summary = validation_result.get_error_summary()
            raise ValueError(f"Configuration validation failed:\n{error_summary}")

        if validation_result.has_warnings():
            warning_summary = validation_result.get_error_summary()
            self.logger.warning(f"Configuration warnings:\n{warning_summary}")

        self._config = config
        return config

    def _load_config_file(self, config_path: str) -> Dict[str, Any]:
        """Load configuration data from file."""
        config_parser = configparser.ConfigParser()

        try:
            config_parser.read(config_path)
        except configparser.Error as e:
            raise ValueError(f"Failed to parse configuration file: {e}")

        # Flatten to "section.key"
        config_data = {}
        for section in config_parser.sections():
            for key, value in config_parser.items(section):
                config_data[f"{section}.{key}"] = value

        for key, value in config_parser.defaults().items():
            if key not in config_data:
                config_data[key] = value

        return config_data

    def _create_config_from_data(self, config_data: Dict[str, Any]) -> GeneratorConfig:
        """Create GeneratorConfig object from configuration data."""
        config_mapping = {
            # Key settings
            "keys.size": ("key_size", int),
            "key_size": ("key_size", int),
            "keys.public_exponent": ("public_exponent", int),
            "public_exponent": ("public_exponent", int),

            # Signature settings
            "signature.hash": ("signature_hash", str),
            "signature_hash": ("signature_hash", str),

            # Validity settings
            "validity.valid_not_before_days": ("valid_not_before_days", int),
            "valid_not_before_days": ("valid_not_before_days", int),
            "validity.valid_not_after_days": ("valid_not_after_days", int),
            "valid_not_after_days": ("valid_not_after_days", int),
            "validity.expired_not_before_days": ("expired_not_before_days", int),
            "expired_not_before_days": ("expired_not_before_days", int),
            "validity.expired_not_after_days": ("expired_not_after_days", int),
            "expired_not_after_days": ("expired_not_after_days", int),

            # Application settings
            "app.log_level": ("log_level", str),
            "log_level": ("log_level", str),
            "app.log_file_path": ("log_file_path", str),
            "log_file_path": ("log_file_path", str),
        }

        config_kwargs = {}

        for config_key, raw_value in config_data.items():
            if config_key in config_mapping:
                field_name, field_type = config_mapping[config_key]
                try:
                    if field_type == int:
                        value = int(raw_value)
                    elif field_name == "signature_hash":
                        value = str(raw_value).strip().upper()
                    elif field_name == "log_level":
                        value = str(raw_value).strip().upper()
                    else:
                        value = str(raw_value).strip() or None

                    config_kwargs[field_name] = value
                except (ValueError, TypeError) as e:
                    raise ValueError(f"Invalid value for {config_key}: {raw_value} ({e})")

        return GeneratorConfig(**config_kwargs)

    def validate_config(self, config: GeneratorConfig) -> ConfigValidationResult:
        """
        Validate configuration settings.

        Args:
            config: Configuration object to validate

        Returns:
            ConfigValidationResult with validation results
        """
        errors = []
        warnings = []

        if config.key_size > 2048:
            warnings.append(ConfigValidationError(
                "key_size",
                "Key sizes above 2048 bits slow down fixture generation considerably",
                "warning"
            ))

        if config.valid_not_before_days == 0:
            warnings.append(ConfigValidationError(
                "valid_not_before_days",
                "Valid certificates will start at the moment of generation",
                "warning"
            ))

        if config.log_file_path:
            log_dir = os.path.dirname(config.log_file_path)
            if log_dir and not os.path.exists(log_dir):
                warnings.append(ConfigValidationError(
                    "log_file_path",
                    f"Log directory does not exist: {log_dir}",
                    "warning"
                ))

        all_issues = errors + warnings
        return ConfigValidationResult(
            is_valid=len(errors) == 0,
            errors=all_issues,
            warnings=[]
        )

    def create_default_config_file(self, config_path: str) -> None:
        """
        Create a default configuration file with example settings.

        Args:
            config_path: Path where to create the config file
        """
        config_content = """# Certificate Fixture Generator Configuration File

[keys]
size = 1024
public_exponent = 65537

[signature]
hash = SHA256

[validity]
valid_not_before_days = 30
valid_not_after_days = 99
expired_not_before_days = 40
expired_not_after_days = 10

[app]
log_level = INFO
log_file_path =
"""

        config_dir = os.path.dirname(config_path)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(config_path, 'w') as f:
            f.write(config_content)

        self.logger.info(f"Created default configuration file: {config_path}")
