"""Utility functions for bezierpath.

This module provides utility functions including:

- Logging setup and configuration
"""

from bezierpath.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
