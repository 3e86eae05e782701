"""
Utility helpers shared across sqlweave packages.
"""

from .logging import DialectNameFilter, configure_logging, dialect_of, get_logger

__all__ = ["DialectNameFilter", "configure_logging", "dialect_of", "get_logger"]
