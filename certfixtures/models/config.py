"""
Configuration data models for the certificate fixture generator.
"""
from dataclasses import dataclass
from typing import Optional


SUPPORTED_SIGNATURE_HASHES = ("SHA224", "SHA256", "SHA384", "SHA512")
SUPPORTED_PUBLIC_EXPONENTS = (3, 65537)
MINIMUM_KEY_SIZE = 1024


@dataclass
class GeneratorConfig:
    """Settings for key generation, signing and validity windows."""

    # Key settings
    key_size: int = MINIMUM_KEY_SIZE
    public_exponent: int = 65537

    # Signature settings
    signature_hash: str = "SHA256"

    # Validity settings, in days relative to the moment of generation
    valid_not_before_days: int = 30
    valid_not_after_days: int = 99
    expired_not_before_days: int = 40
    expired_not_after_days: int = 10

    # Application settings
    log_level: str = "INFO"
    log_file_path: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_types()

    def _validate_types(self):
        """Ensure all configuration values have correct types and ranges."""
        if not isinstance(self.key_size, int) or self.key_size < MINIMUM_KEY_SIZE:
            raise ValueError(f"key_size must be an integer of at least {MINIMUM_KEY_SIZE}")

        if self.public_exponent not in SUPPORTED_PUBLIC_EXPONENTS:
            raise ValueError("public_exponent must be 3 or 65537")

        if self.signature_hash not in SUPPORTED_SIGNATURE_HASHES:
            raise ValueError(
                f"signature_hash must be one of: {', '.join(SUPPORTED_SIGNATURE_HASHES)}"
            )

        if not isinstance(self.valid_not_before_days, int) or self.valid_not_before_days < 0:
            raise ValueError("valid_not_before_days must be a non-negative integer")

        if not isinstance(self.valid_not_after_days, int) or self.valid_not_after_days <= 0:
            raise ValueError("valid_not_after_days must be a positive integer")

        if not isinstance(self.expired_not_after_days, int) or self.expired_not_after_days <= 0:
            raise ValueError("expired_not_after_days must be a positive integer")

        if (not isinstance(self.expired_not_before_days, int)
                or self.expired_not_before_days <= self.expired_not_after_days):
            raise ValueError("expired_not_before_days must be greater than expired_not_after_days")

        if self.log_level not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError("log_level must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL")


@dataclass
class ConfigValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    severity: str = "error"  # error, warning

    def __str__(self):
        return f"{self.severity.upper()}: {self.field} - {self.message}"


@dataclass
class ConfigValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: list[ConfigValidationError]
    warnings: list[ConfigValidationError]

    def __post_init__(self):
        """Separate errors and warnings."""
        all_issues = self.errors + self.warnings
        self.errors = [e for e in all_issues if e.severity == "error"]
        self.warnings = [e for e in all_issues if e.severity == "warning"]

    def has_errors(self) -> bool:
        """Check if there are any validation errors."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if there are any validation warnings."""
        return len(self.warnings) > 0

    def get_error_summary(self) -> str:
        """Get a formatted summary of all errors and warnings."""
        lines = []

        if self.errors:
            lines.append("Configuration Errors:")
            for error in self.errors:
                lines.append(f"  - {error}")

        if self.warnings:
            lines.append("Configuration Warnings:")
            for warning in self.warnings:
                lines.append(f"  - {warning}")

        return "\n".join(lines) if lines else "Configuration is valid"
