"""HTTP session terminator for the hosted auth provider.

Calls the provider's logout endpoint with the session's access token:

    POST {base_url}/auth/v1/logout?scope=global
    apikey: <project api key>
    Authorization: Bearer <access token>

Status handling:
    - 2xx: session ended
    - 401 / 404: session already expired or unknown, nothing left to end
    - anything else, timeouts and connection errors: Failure

Architecture:
    - Infrastructure layer (adapter for the auth provider)
    - Implements SessionTerminatorProtocol (structural typing)
    - Returns Result types (no exceptions for provider errors)
"""

import httpx
import structlog

from src.core.constants import (
    AUTH_LOGOUT_PATH,
    AUTH_TIMEOUT_DEFAULT,
    BEARER_PREFIX,
    RESPONSE_BODY_MAX_LENGTH,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success

# Statuses meaning the session is already gone
_ALREADY_ENDED_STATUSES = frozenset({401, 404})


class HttpSessionTerminator:
    """Ends sessions at the auth provider over HTTP.

    Attributes:
        _base_url: Auth provider base URL (without trailing slash).
        _api_key: Project API key sent as the "apikey" header.
        _timeout: HTTP request timeout in seconds.
        _scope: Logout scope ("global", "local" or "others").
        _logger: Structured logger.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str | None = None,
        timeout: float = AUTH_TIMEOUT_DEFAULT,
        scope: str = "global",
    ) -> None:
        """Initialize session terminator.

        Args:
            base_url: Auth provider base URL.
            api_key: Project API key, if the provider requires one.
            timeout: HTTP request timeout in seconds.
            scope: Which sessions to end ("global" ends every device).
        """
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._scope = scope
        self._logger = structlog.get_logger("auth_provider")

    def _headers(self, access_token: str) -> dict[str, str]:
        headers = {"Authorization": f"{BEARER_PREFIX}{access_token}"}
        if self._api_key:
            headers["apikey"] = self._api_key
        return headers

    async def terminate_session(
        self, access_token: str
    ) -> Result[None, AuthenticationError]:
        """Terminate the session identified by access_token.

        Args:
            access_token: Bearer token of the session to end.

        Returns:
            Success(None): Session ended or already gone.
            Failure(AuthenticationError): Provider unreachable or refused.
        """
        url = f"{self._base_url}{AUTH_LOGOUT_PATH}"

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    url,
                    headers=self._headers(access_token),
                    params={"scope": self._scope},
                )
        except httpx.TimeoutException as e:
            self._logger.warning("auth_logout_timeout", error=str(e))
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.AUTH_PROVIDER_UNAVAILABLE,
                    message="Auth provider logout request timed out",
                )
            )
        except httpx.RequestError as e:
            self._logger.warning("auth_logout_connection_error", error=str(e))
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.AUTH_PROVIDER_UNAVAILABLE,
                    message=f"Failed to connect to auth provider: {e}",
                )
            )

        status = response.status_code

        if response.is_success:
            self._logger.info("auth_session_terminated", status_code=status)
            return Success(value=None)

        if status in _ALREADY_ENDED_STATUSES:
            self._logger.info("auth_session_already_ended", status_code=status)
            return Success(value=None)

        if status >= 500:
            self._logger.warning("auth_logout_server_error", status_code=status)
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.AUTH_PROVIDER_UNAVAILABLE,
                    message=f"Auth provider server error: {status}",
                    status_code=status,
                    details={"response_body": response.text[:RESPONSE_BODY_MAX_LENGTH]},
                )
            )

        self._logger.warning("auth_logout_rejected", status_code=status)
        return Failure(
            error=AuthenticationError(
                code=ErrorCode.SESSION_TERMINATION_FAILED,
                message=f"Auth provider rejected logout: {status}",
                status_code=status,
                details={"response_body": response.text[:RESPONSE_BODY_MAX_LENGTH]},
            )
        )
