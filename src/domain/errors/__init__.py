"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from src.domain.errors import ClearError, DuplicateAdapterError
"""

from src.domain.errors.clear_error import ClearError
from src.domain.errors.registry_error import DuplicateAdapterError

__all__ = [
    "ClearError",
    "DuplicateAdapterError",
]
