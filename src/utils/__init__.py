"""
Utilities for the Promtail logging demo app
"""

from .config_manager import ConfigManager, config
from .logger import get_logger, DemoLogger, IsoTimestampFormatter

__all__ = [
    'ConfigManager',
    'config',
    'get_logger',
    'DemoLogger',
    'IsoTimestampFormatter'
]
