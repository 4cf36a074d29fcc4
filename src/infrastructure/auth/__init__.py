"""Auth provider adapters."""

from src.infrastructure.auth.http_session_terminator import HttpSessionTerminator

__all__ = [
    "HttpSessionTerminator",
]
