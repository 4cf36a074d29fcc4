"""Offline cache persistence infrastructure.

This module provides:
- Base model for offline cache tables
- Offline database engine and session management
- Offline cache repository
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import OfflineDatabase

__all__ = [
    "BaseModel",
    "OfflineDatabase",
]
