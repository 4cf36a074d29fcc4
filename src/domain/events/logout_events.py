"""Secure logout domain events.

Published by the secure logout handler once the auth provider has answered.
The purge outcome is reported separately by the purge events.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class SecureLogoutSucceeded(DomainEvent):
    """Session terminated at the auth provider.

    Attributes:
        user_id: User who signed out.
        purge_succeeded: Whether every local store was cleared beforehand.
    """

    user_id: UUID
    purge_succeeded: bool


@dataclass(frozen=True, kw_only=True, slots=True)
class SecureLogoutFailed(DomainEvent):
    """Auth provider did not terminate the session.

    Attributes:
        user_id: User who attempted to sign out.
        reason: Machine-readable error code.
        purge_succeeded: Whether every local store was cleared beforehand.
    """

    user_id: UUID
    reason: str
    purge_succeeded: bool
