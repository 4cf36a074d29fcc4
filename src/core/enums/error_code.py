"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Store errors (STORE_*)
- Authentication errors (SESSION_*, AUTH_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Store errors
    STORE_UNAVAILABLE = "store_unavailable"
    STORE_ACCESS_DENIED = "store_access_denied"
    STORE_CLEAR_FAILED = "store_clear_failed"
    STORE_CLEAR_TIMEOUT = "store_clear_timeout"

    # Authentication errors
    SESSION_TERMINATION_FAILED = "session_termination_failed"
    AUTH_PROVIDER_UNAVAILABLE = "auth_provider_unavailable"
