"""Shared domain components.

This module exports the exception hierarchy used across domain boundaries.
"""

from ibanscope.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
]
