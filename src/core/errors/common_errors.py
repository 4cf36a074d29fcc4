"""Common error classes used across all domains and layers.

These are generic errors that don't belong to any specific store or
workflow.

Error Types:
- AuthenticationError: Auth provider failures (session not terminated)

Usage:
    from src.core.errors import AuthenticationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=AuthenticationError(
        code=ErrorCode.SESSION_TERMINATION_FAILED,
        message="Auth provider rejected logout",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (session could not be terminated).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        status_code: HTTP status returned by the auth provider, if any.
        details: Additional context.
    """

    status_code: int | None = None
