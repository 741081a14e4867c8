"""
Services package for the certificate fixture generator.
"""

from .config_service import ConfigService
from .logging_service import PerformanceMonitor, configure_logging

__all__ = [
    'ConfigService',
    'PerformanceMonitor',
    'configure_logging'
]
