"""Unit tests for InvalidationRegistry.

Tests cover:
- Registration order preserved in list() and names()
- Duplicate names rejected, registry left unchanged
- Re-registering the same instance is a no-op
- Snapshots are immutable copies
- Concurrent registration from threads
"""

import threading

import pytest

from src.application.services.invalidation_registry import InvalidationRegistry
from src.domain.errors import DuplicateAdapterError
from tests.utils.store_doubles import FailingStore, RecordingStore


@pytest.mark.unit
class TestInvalidationRegistryRegistration:
    """Test register() and ordering."""

    def test_new_registry_is_empty(self):
        registry = InvalidationRegistry()

        assert registry.list() == ()
        assert len(registry) == 0

    def test_list_preserves_registration_order(self):
        # Arrange
        registry = InvalidationRegistry()
        first = RecordingStore("offline_database")
        second = RecordingStore("local_storage")
        third = RecordingStore("response_cache")

        # Act
        registry.register(first)
        registry.register(second)
        registry.register(third)

        # Assert
        assert registry.list() == (first, second, third)
        assert registry.names() == ("offline_database", "local_storage", "response_cache")

    def test_constructor_registers_adapters_in_order(self):
        adapters = [RecordingStore("a"), RecordingStore("b")]

        registry = InvalidationRegistry(adapters)

        assert registry.names() == ("a", "b")

    def test_contains_checks_by_name(self):
        registry = InvalidationRegistry([RecordingStore("local_storage")])

        assert "local_storage" in registry
        assert "response_cache" not in registry


@pytest.mark.unit
class TestInvalidationRegistryDuplicates:
    """Test name uniqueness."""

    def test_duplicate_name_raises_and_leaves_registry_unchanged(self):
        # Arrange
        original = RecordingStore("local_storage")
        other = RecordingStore("offline_database")
        registry = InvalidationRegistry([original, other])

        # Act
        with pytest.raises(DuplicateAdapterError) as exc_info:
            registry.register(FailingStore("local_storage"))

        # Assert
        assert exc_info.value.adapter_name == "local_storage"
        assert registry.list() == (original, other)

    def test_duplicate_error_is_a_value_error(self):
        registry = InvalidationRegistry([RecordingStore("x")])

        with pytest.raises(ValueError, match="'x' is already registered"):
            registry.register(RecordingStore("x"))

    def test_reregistering_same_instance_is_noop(self):
        adapter = RecordingStore("response_cache")
        registry = InvalidationRegistry([adapter])

        registry.register(adapter)

        assert registry.list() == (adapter,)

    def test_constructor_rejects_duplicate_names(self):
        with pytest.raises(DuplicateAdapterError):
            InvalidationRegistry([RecordingStore("a"), RecordingStore("a")])


@pytest.mark.unit
class TestInvalidationRegistrySnapshots:
    """Test list() snapshots."""

    def test_snapshot_not_affected_by_later_registration(self):
        registry = InvalidationRegistry([RecordingStore("a")])

        snapshot = registry.list()
        registry.register(RecordingStore("b"))

        assert len(snapshot) == 1
        assert len(registry.list()) == 2

    def test_concurrent_registration_keeps_every_adapter(self):
        # Arrange
        registry = InvalidationRegistry()
        adapters = [RecordingStore(f"store_{i}") for i in range(50)]

        # Act
        threads = [
            threading.Thread(target=registry.register, args=(adapter,))
            for adapter in adapters
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        # Assert
        assert sorted(registry.names()) == sorted(a.name for a in adapters)
