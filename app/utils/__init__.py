"""Utility functions and helpers.

Currently holds the logging setup shared by all service entry points.
"""

from app.utils.logging import LOGGER_NAMESPACE, configure_logging, get_logger

__all__ = ["LOGGER_NAMESPACE", "configure_logging", "get_logger"]
