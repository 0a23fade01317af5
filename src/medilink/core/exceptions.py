"""
Exception handling for MediLink application.

This module provides the infrastructure-level exception classes shared by
the configuration layer and the storage adapters.
"""

from typing import Any, Dict, Optional


class MediLinkException(Exception):
    """Base exception class for MediLink application."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(MediLinkException):
    """Raised when there's a configuration error."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, "CONFIG_ERROR", details)


class DatabaseError(MediLinkException):
    """Raised when the underlying store rejects or fails an operation.

    Unique-constraint violations and connection failures both end up here;
    the driver exception is kept as ``__cause__``.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, "DATABASE_ERROR", details)
