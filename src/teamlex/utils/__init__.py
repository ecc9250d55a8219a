"""Utility modules for teamlex.

Provides:
- logger: get_logger for library modules, configure_logging for the CLI
"""

from teamlex.utils.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
