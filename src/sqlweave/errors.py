"""
Error hierarchy raised by dialects and fragment renderers.
"""

from __future__ import annotations


class DialectError(RuntimeError):
    """Base error for dialect-related failures."""


class UnsupportedOperationError(DialectError):
    """Raised when a dialect lacks an implementation for a requested operation."""


class MalformedInputError(DialectError, ValueError):
    """Raised when structural input would produce invalid SQL."""


class DialectConfigurationError(DialectError):
    """Raised when dialect configuration or settings are invalid."""
