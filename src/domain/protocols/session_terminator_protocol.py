"""Session terminator protocol (auth provider boundary).

The auth provider is an external collaborator. The only call this
repository needs from it is "terminate the current session", which is the
sensitive action executed by the secure logout after the local purge.
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result


class SessionTerminatorProtocol(Protocol):
    """Protocol for ending the signed-in session at the auth provider."""

    async def terminate_session(self, access_token: str) -> Result[None, DomainError]:
        """Terminate the session identified by access_token.

        Args:
            access_token: Bearer token of the session to end.

        Returns:
            Success(None) if the session no longer exists.
            Failure(AuthenticationError) if the provider could not end it.
        """
        ...
