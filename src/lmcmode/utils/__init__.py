"""Utility modules for lmcmode.

Provides:
- logger: get_logger for logging
"""

from lmcmode.utils.logger import get_logger

__all__ = ["get_logger"]
