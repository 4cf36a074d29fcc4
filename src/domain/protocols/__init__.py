"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.
Do NOT re-export from other domain subpackages (events, value objects) to
avoid circular import risks.

Usage:
    from src.domain.protocols import StoreAdapterProtocol, LoggerProtocol
"""

from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.purge_coordinator_protocol import PurgeCoordinatorProtocol
from src.domain.protocols.session_terminator_protocol import (
    SessionTerminatorProtocol,
)
from src.domain.protocols.store_adapter_protocol import StoreAdapterProtocol

__all__ = [
    "LoggerProtocol",
    "PurgeCoordinatorProtocol",
    "SessionTerminatorProtocol",
    "StoreAdapterProtocol",
]
