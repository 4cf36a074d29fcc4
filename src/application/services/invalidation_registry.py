"""Invalidation registry for local store adapters.

Ordered collection of store adapters cleared on secure logout. Order is
registration order, which matters when one store depends on another (the
offline database is cleared before the local-storage flag that marks it as
initialized).

Registration is expected at startup, before any purge pass. Registration
and snapshotting share one lock so a pass never iterates a list that is
being appended to.

Usage:
    >>> registry = InvalidationRegistry()
    >>> registry.register(offline_database_adapter)
    >>> registry.register(local_storage_adapter)
    >>> [adapter.name for adapter in registry.list()]
    ['offline_database', 'local_storage']
"""

import threading

from src.domain.errors import DuplicateAdapterError
from src.domain.protocols import StoreAdapterProtocol


class InvalidationRegistry:
    """Ordered, name-unique set of store adapters.

    Attributes:
        _adapters: Registered adapters in registration order.
        _lock: Guards registration against concurrent snapshots.
    """

    def __init__(self, adapters: list[StoreAdapterProtocol] | None = None) -> None:
        """Initialize registry, optionally registering adapters in order.

        Args:
            adapters: Adapters to register immediately.

        Raises:
            DuplicateAdapterError: If two different adapters share a name.
        """
        self._adapters: list[StoreAdapterProtocol] = []
        self._lock = threading.Lock()
        for adapter in adapters or []:
            self.register(adapter)

    def register(self, adapter: StoreAdapterProtocol) -> None:
        """Append adapter to the registry.

        Registering the same adapter instance twice is a no-op.

        Args:
            adapter: Store adapter to register.

        Raises:
            DuplicateAdapterError: If a different adapter already uses
                adapter.name. The registry is left unchanged.
        """
        with self._lock:
            for existing in self._adapters:
                if existing.name != adapter.name:
                    continue
                if existing is adapter:
                    return
                raise DuplicateAdapterError(adapter.name)
            self._adapters.append(adapter)

    def list(self) -> tuple[StoreAdapterProtocol, ...]:
        """Return a read-only snapshot in registration order."""
        with self._lock:
            return tuple(self._adapters)

    def names(self) -> tuple[str, ...]:
        """Return registered adapter names in registration order."""
        return tuple(adapter.name for adapter in self.list())

    def __contains__(self, name: object) -> bool:
        return name in self.names()

    def __len__(self) -> int:
        with self._lock:
            return len(self._adapters)
