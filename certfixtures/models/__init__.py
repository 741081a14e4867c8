"""
Models package for the certificate fixture generator.
"""

from .config import GeneratorConfig, ConfigValidationError, ConfigValidationResult

__all__ = [
    'GeneratorConfig',
    'ConfigValidationError',
    'ConfigValidationResult'
]
