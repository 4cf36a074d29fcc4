"""Logout commands (CQRS write operations).

Pattern:
- Commands are data containers (no logic)
- Handlers execute the workflow and return Result types
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class SecureLogout:
    """Sign the current user out after purging every local store.

    Attributes:
        user_id: User signing out.
        access_token: Bearer token of the session to terminate.

    Example:
        >>> command = SecureLogout(user_id=user_id, access_token=token)
        >>> result = await handler.handle(command)
    """

    user_id: UUID
    access_token: str
