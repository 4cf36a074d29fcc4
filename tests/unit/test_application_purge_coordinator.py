"""Unit tests for PurgeCoordinator.

Tests cover:
- One outcome per adapter, in registration order (both strategies)
- all_succeeded iff no adapter failed
- Isolation: raising, cancelled and malformed adapters become failed outcomes
- Empty registry
- Concurrent strategy overlaps clears, sequential does not
- Summary logging
"""

import asyncio

import pytest

from src.application.services.invalidation_registry import InvalidationRegistry
from src.application.services.purge_coordinator import PurgeCoordinator
from src.core.enums import ErrorCode, PurgeStrategy
from src.core.errors import DomainError
from src.core.result import Failure
from tests.utils.store_doubles import (
    CancelledStore,
    FailingStore,
    MalformedStore,
    RaisingStore,
    RecordingStore,
    SlowStore,
)

STRATEGIES = [PurgeStrategy.SEQUENTIAL, PurgeStrategy.CONCURRENT]


def _coordinator(adapters, logger, strategy=PurgeStrategy.SEQUENTIAL):
    return PurgeCoordinator(
        registry=InvalidationRegistry(adapters),
        logger=logger,
        strategy=strategy,
    )


@pytest.mark.unit
class TestPurgeCoordinatorOutcomes:
    """Test outcome collection."""

    @pytest.mark.parametrize("strategy", STRATEGIES)
    async def test_all_adapters_succeed(self, strategy, mock_logger):
        # Arrange
        stores = [
            RecordingStore("offline_database", {"trip-1": {}}),
            RecordingStore("local_storage", {"expense_templates": "[]"}),
            RecordingStore("response_cache", {"api-cache": b""}),
        ]
        coordinator = _coordinator(stores, mock_logger, strategy)

        # Act
        result = await coordinator.purge_all()

        # Assert
        assert result.all_succeeded is True
        assert [o.adapter_name for o in result.outcomes] == [s.name for s in stores]
        assert all(o.success and o.error is None for o in result.outcomes)
        assert all(store.items == {} for store in stores)

    @pytest.mark.parametrize("strategy", STRATEGIES)
    @pytest.mark.parametrize("failing", [set(), {1}, {0, 3}, {0, 1, 2, 3, 4}])
    async def test_n_adapters_k_failing(self, strategy, failing, mock_logger):
        # Arrange
        adapters = [
            FailingStore(f"store_{i}") if i in failing else RecordingStore(f"store_{i}")
            for i in range(5)
        ]
        coordinator = _coordinator(adapters, mock_logger, strategy)

        # Act
        result = await coordinator.purge_all()

        # Assert
        assert len(result.outcomes) == 5
        assert [o.adapter_name for o in result.outcomes] == [f"store_{i}" for i in range(5)]
        assert result.all_succeeded is (len(failing) == 0)
        assert {i for i, o in enumerate(result.outcomes) if not o.success} == failing
        assert all(adapter.clear_calls == 1 for adapter in adapters)

    async def test_failed_outcome_carries_adapter_error(self, mock_logger):
        coordinator = _coordinator(
            [FailingStore("local_storage", ErrorCode.STORE_UNAVAILABLE, "disabled")],
            mock_logger,
        )

        result = await coordinator.purge_all()

        outcome = result.outcomes[0]
        assert outcome.success is False
        assert outcome.error.code == ErrorCode.STORE_UNAVAILABLE
        assert outcome.error_message == "disabled"
        assert outcome.error.adapter_name == "local_storage"

    @pytest.mark.parametrize("strategy", STRATEGIES)
    async def test_empty_registry(self, strategy, mock_logger):
        coordinator = _coordinator([], mock_logger, strategy)

        result = await coordinator.purge_all()

        assert result.outcomes == ()
        assert result.all_succeeded is True

    async def test_each_pass_returns_fresh_result(self, mock_logger):
        coordinator = _coordinator([RecordingStore("a")], mock_logger)

        first = await coordinator.purge_all()
        second = await coordinator.purge_all()

        assert first is not second
        assert first == second


@pytest.mark.unit
class TestPurgeCoordinatorIsolation:
    """Test per-adapter isolation boundary."""

    @pytest.mark.parametrize("strategy", STRATEGIES)
    async def test_raising_first_adapter_does_not_stop_the_rest(
        self, strategy, mock_logger
    ):
        # Arrange
        raising = RaisingStore("offline_database", RuntimeError("disk exploded"))
        second = RecordingStore("local_storage", {"k": "v"})
        third = RecordingStore("response_cache", {"b": b""})
        coordinator = _coordinator([raising, second, third], mock_logger, strategy)

        # Act
        result = await coordinator.purge_all()

        # Assert
        assert [o.success for o in result.outcomes] == [False, True, True]
        assert second.items == {}
        assert third.items == {}
        error = result.outcomes[0].error
        assert error.code == ErrorCode.STORE_CLEAR_FAILED
        assert "disk exploded" in error.message
        assert error.details["error_type"] == "RuntimeError"

    @pytest.mark.parametrize("strategy", STRATEGIES)
    async def test_cancelled_store_driver_does_not_stop_the_rest(
        self, strategy, mock_logger
    ):
        # Arrange
        cancelled = CancelledStore("offline_database")
        second = RecordingStore("local_storage", {"k": "v"})
        coordinator = _coordinator([cancelled, second], mock_logger, strategy)

        # Act
        result = await coordinator.purge_all()

        # Assert
        assert [o.success for o in result.outcomes] == [False, True]
        assert result.outcomes[0].error.code == ErrorCode.STORE_CLEAR_FAILED
        assert result.outcomes[0].error.details["error_type"] == "CancelledError"
        assert second.items == {}

    async def test_cancelling_the_pass_still_propagates(self, mock_logger):
        # Arrange
        journal: list[str] = []
        coordinator = _coordinator([SlowStore("slow", 10.0, journal)], mock_logger)
        task = asyncio.create_task(coordinator.purge_all())
        await asyncio.sleep(0)

        # Act
        task.cancel()

        # Assert
        with pytest.raises(asyncio.CancelledError):
            await task
        assert journal == ["start:slow"]

    async def test_malformed_return_becomes_failure(self, mock_logger):
        coordinator = _coordinator(
            [MalformedStore("weird", value=None), RecordingStore("ok")],
            mock_logger,
        )

        result = await coordinator.purge_all()

        assert [o.success for o in result.outcomes] == [False, True]
        assert "NoneType" in result.outcomes[0].error.message

    async def test_foreign_error_type_is_wrapped(self, mock_logger):
        foreign = Failure(
            error=DomainError(code=ErrorCode.STORE_CLEAR_FAILED, message="nope")
        )
        coordinator = _coordinator([MalformedStore("foreign", value=foreign)], mock_logger)

        result = await coordinator.purge_all()

        outcome = result.outcomes[0]
        assert outcome.success is False
        assert outcome.error.adapter_name == "foreign"
        assert "nope" in outcome.error.message

    async def test_raising_adapter_logged_as_warning(self, mock_logger):
        coordinator = _coordinator([RaisingStore("bad")], mock_logger)

        await coordinator.purge_all()

        events = [c.args[0] for c in mock_logger.warning.call_args_list]
        assert "store_clear_raised" in events
        assert "cache_purge_partially_failed" in events


@pytest.mark.unit
class TestPurgeCoordinatorStrategies:
    """Test sequential vs concurrent execution."""

    def test_default_strategy_is_sequential(self, mock_logger):
        coordinator = PurgeCoordinator(registry=InvalidationRegistry(), logger=mock_logger)

        assert coordinator.strategy == PurgeStrategy.SEQUENTIAL

    async def test_sequential_runs_one_clear_at_a_time(self, mock_logger):
        journal: list[str] = []
        adapters = [SlowStore("a", 0.02, journal), SlowStore("b", 0.0, journal)]
        coordinator = _coordinator(adapters, mock_logger, PurgeStrategy.SEQUENTIAL)

        await coordinator.purge_all()

        assert journal == ["start:a", "end:a", "start:b", "end:b"]

    async def test_concurrent_overlaps_clears_but_keeps_order(self, mock_logger):
        # Arrange
        journal: list[str] = []
        adapters = [SlowStore("slow", 0.05, journal), SlowStore("fast", 0.0, journal)]
        coordinator = _coordinator(adapters, mock_logger, PurgeStrategy.CONCURRENT)

        # Act
        result = await coordinator.purge_all()

        # Assert - fast finished before slow, outcomes still in registration order
        assert journal.index("end:fast") < journal.index("end:slow")
        assert [o.adapter_name for o in result.outcomes] == ["slow", "fast"]


@pytest.mark.unit
class TestPurgeCoordinatorLogging:
    """Test summary logging."""

    async def test_success_logs_info_summary(self, mock_logger):
        coordinator = _coordinator([RecordingStore("a")], mock_logger)

        await coordinator.purge_all()

        mock_logger.info.assert_called_once_with(
            "cache_purge_completed",
            adapter_count=1,
            strategy="sequential",
        )

    async def test_partial_failure_logs_failed_names(self, mock_logger):
        coordinator = _coordinator(
            [RecordingStore("a"), FailingStore("b")], mock_logger
        )

        await coordinator.purge_all()

        summary = [
            c for c in mock_logger.warning.call_args_list
            if c.args[0] == "cache_purge_partially_failed"
        ]
        assert len(summary) == 1
        assert summary[0].kwargs["failed_adapters"] == ["b"]
