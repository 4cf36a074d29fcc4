"""Secure logout entry point.

Composition root for running a secure logout from the command line or a
desktop shell hook:

    python -m src.main --user-id <uuid> --access-token <token>

The access token may also come from the HALFTRIP_ACCESS_TOKEN environment
variable so it never shows up in the process list.

Exit codes:
    0: Session terminated (local purge may still have been partial)
    1: Auth provider did not terminate the session
    2: Invalid arguments
"""

import argparse
import asyncio
import os
import sys
from collections.abc import Sequence
from uuid import UUID

from src.application.commands import SecureLogout
from src.core.config import get_settings
from src.core.container import (
    get_local_storage,
    get_logger,
    get_offline_database,
    get_secure_logout_handler,
)
from src.core.result import Failure, Success

ACCESS_TOKEN_ENV = "HALFTRIP_ACCESS_TOKEN"


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="halftrip-logout",
        description=f"{settings.app_name}: clear every local cache, then end the auth session.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{settings.app_name} {settings.app_version}",
    )
    parser.add_argument("--user-id", required=True, type=UUID, help="Signed-in user id")
    parser.add_argument(
        "--access-token",
        default=None,
        help=f"Session access token (defaults to ${ACCESS_TOKEN_ENV})",
    )
    return parser


async def run_secure_logout(user_id: UUID, access_token: str) -> int:
    """Run one secure logout and release store connections.

    Args:
        user_id: User signing out.
        access_token: Bearer token of the session to end.

    Returns:
        int: Process exit code.
    """
    logger = get_logger()
    handler = get_secure_logout_handler()

    try:
        result = await handler.handle(
            SecureLogout(user_id=user_id, access_token=access_token)
        )
    finally:
        database = get_offline_database()
        if database is not None:
            await database.close()
        storage = get_local_storage()
        if storage is not None:
            await storage.close()

    match result:
        case Success(value=response):
            logger.info("logout_command_completed", user_id=str(user_id))
            print(response.message)
            return 0
        case Failure(error=err):
            logger.error("logout_command_failed", user_id=str(user_id), error_code=err.code.value)
            print(f"Logout failed: {err.message}", file=sys.stderr)
            return 1
        case _:
            return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the secure logout."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    access_token = args.access_token or os.environ.get(ACCESS_TOKEN_ENV)
    if not access_token:
        parser.print_usage(sys.stderr)
        print(
            f"error: --access-token or ${ACCESS_TOKEN_ENV} is required",
            file=sys.stderr,
        )
        return 2

    return asyncio.run(run_secure_logout(args.user_id, access_token))


if __name__ == "__main__":
    sys.exit(main())
