"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Categories:
- Timeouts: Default bounds for store clears and auth calls
- Prefixes: Standard protocol prefixes
- Limits: Truncation and safety limits
- Store names: Registry names of the built-in store adapters

Example:
    >>> from src.core.constants import BEARER_PREFIX, OFFLINE_DATABASE_STORE
    >>> header = f"{BEARER_PREFIX}{access_token}"
"""

# =============================================================================
# Timeouts
# =============================================================================

STORE_CLEAR_TIMEOUT_DEFAULT: float = 5.0
"""Default upper bound for a single store clear in seconds."""

AUTH_TIMEOUT_DEFAULT: float = 10.0
"""Default timeout for auth provider calls in seconds."""


# =============================================================================
# Prefixes
# =============================================================================

BEARER_PREFIX: str = "Bearer "
"""HTTP Authorization header prefix for Bearer tokens."""

AUTH_LOGOUT_PATH: str = "/auth/v1/logout"
"""Auth provider endpoint that terminates the current session."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum response body length kept in error details."""


# =============================================================================
# Store Names
# =============================================================================

OFFLINE_DATABASE_STORE: str = "offline_database"
"""Registry name of the offline trip/expense database adapter."""

LOCAL_STORAGE_STORE: str = "local_storage"
"""Registry name of the key-value local storage adapter."""

RESPONSE_CACHE_STORE: str = "response_cache"
"""Registry name of the network response cache adapter."""

LOCAL_STORAGE_SCAN_BATCH: int = 500
"""Keys fetched per SCAN iteration when clearing local storage."""

LOCAL_STORAGE_CLEAR_MAX_ROUNDS: int = 3
"""Scan-and-delete rounds before a local storage clear gives up on keys
written concurrently with it."""
