"""Event handlers for infrastructure integration.

Handlers:
    - LoggingEventHandler: Structured logging with appropriate severity levels
"""

from src.infrastructure.events.handlers.logging_event_handler import LoggingEventHandler

__all__ = [
    "LoggingEventHandler",
]
