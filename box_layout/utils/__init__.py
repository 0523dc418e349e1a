"""
Utility modules for the layout engine.
"""

from box_layout.utils.config import Config
from box_layout.utils.logging import setup_logging, get_default_log_file, log_exception, PerformanceLogger

__all__ = [
    'Config',
    'setup_logging',
    'get_default_log_file',
    'log_exception',
    'PerformanceLogger',
]
