"""Purge coordinator.

Runs one purge pass over every adapter in the invalidation registry and
returns an AggregatePurgeResult. Each adapter clear runs under its own
isolation boundary: a returned Failure, a raised exception or a malformed
return value becomes a failed outcome and the pass moves on.

Strategies:
    - SEQUENTIAL: adapters are cleared one after another (default)
    - CONCURRENT: adapters are cleared with asyncio.gather

Either way outcomes are collected in registration order.

The coordinator imposes no overall timeout and has no cancel path. Adapters
wrapping I/O-backed stores bound their own latency. A CancelledError raised
from inside an adapter is a failed outcome; only cancellation of the pass
itself propagates.
"""

import asyncio

from src.application.services.invalidation_registry import InvalidationRegistry
from src.core.enums import ErrorCode, PurgeStrategy
from src.core.result import Failure, Success
from src.domain.errors import ClearError
from src.domain.protocols import LoggerProtocol, StoreAdapterProtocol
from src.domain.value_objects import AggregatePurgeResult, PurgeOutcome


class PurgeCoordinator:
    """Clears every registered store and reports per-store outcomes.

    Attributes:
        _registry: Source of adapters (snapshotted per pass).
        _logger: Structured logger for failed stores and pass summaries.
        _strategy: Sequential or concurrent execution.
    """

    def __init__(
        self,
        registry: InvalidationRegistry,
        logger: LoggerProtocol,
        strategy: PurgeStrategy = PurgeStrategy.SEQUENTIAL,
    ) -> None:
        """Initialize coordinator.

        Args:
            registry: Invalidation registry to purge.
            logger: Logger for purge diagnostics.
            strategy: Execution strategy for adapter clears.
        """
        self._registry = registry
        self._logger = logger
        self._strategy = strategy

    @property
    def strategy(self) -> PurgeStrategy:
        """Execution strategy used for adapter clears."""
        return self._strategy

    async def purge_all(self) -> AggregatePurgeResult:
        """Clear every registered store.

        Returns:
            AggregatePurgeResult with one outcome per adapter, in
            registration order. all_succeeded is True for an empty registry.
        """
        adapters = self._registry.list()
        if not adapters:
            return AggregatePurgeResult.from_outcomes(())

        if self._strategy == PurgeStrategy.CONCURRENT:
            # gather preserves argument order in its results
            outcomes = await asyncio.gather(
                *(self._clear_isolated(adapter) for adapter in adapters)
            )
        else:
            outcomes = [await self._clear_isolated(adapter) for adapter in adapters]

        result = AggregatePurgeResult.from_outcomes(outcomes)

        if result.all_succeeded:
            self._logger.info(
                "cache_purge_completed",
                adapter_count=len(result.outcomes),
                strategy=self._strategy.value,
            )
        else:
            self._logger.warning(
                "cache_purge_partially_failed",
                adapter_count=len(result.outcomes),
                failed_adapters=list(result.failed_adapters),
                strategy=self._strategy.value,
            )
        return result

    async def _clear_isolated(self, adapter: StoreAdapterProtocol) -> PurgeOutcome:
        """Clear one adapter, converting every failure mode into an outcome.

        Args:
            adapter: Adapter to clear.

        Returns:
            PurgeOutcome for this adapter. Never raises, except when the
            purge pass itself is being cancelled.
        """
        name = adapter.name
        try:
            result = await adapter.clear()
        except asyncio.CancelledError as e:
            task = asyncio.current_task()
            if task is not None and task.cancelling() > 0:
                raise
            # Cancelled from inside the adapter, not by our caller
            error = ClearError(
                code=ErrorCode.STORE_CLEAR_FAILED,
                message="Store clear was cancelled",
                adapter_name=name,
                details={"error_type": type(e).__name__, "error": str(e)},
            )
            self._logger.warning(
                "store_clear_cancelled",
                adapter_name=name,
                error_message=str(e),
            )
            return PurgeOutcome.failed(name, error)
        except Exception as e:
            error = ClearError(
                code=ErrorCode.STORE_CLEAR_FAILED,
                message=f"Unexpected error clearing store: {e}",
                adapter_name=name,
                details={"error_type": type(e).__name__, "error": str(e)},
            )
            self._logger.warning(
                "store_clear_raised",
                adapter_name=name,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return PurgeOutcome.failed(name, error)

        match result:
            case Success():
                self._logger.debug("store_cleared", adapter_name=name)
                return PurgeOutcome.succeeded(name)
            case Failure(error=ClearError() as err):
                self._logger.warning(
                    "store_clear_failed",
                    adapter_name=name,
                    error_code=err.code.value,
                    error_message=err.message,
                )
                return PurgeOutcome.failed(name, err)
            case Failure(error=other):
                err = ClearError(
                    code=ErrorCode.STORE_CLEAR_FAILED,
                    message=str(other),
                    adapter_name=name,
                )
                self._logger.warning(
                    "store_clear_failed",
                    adapter_name=name,
                    error_code=err.code.value,
                    error_message=err.message,
                )
                return PurgeOutcome.failed(name, err)
            case _:
                err = ClearError(
                    code=ErrorCode.STORE_CLEAR_FAILED,
                    message=f"Adapter returned {type(result).__name__} instead of a Result",
                    adapter_name=name,
                )
                self._logger.warning(
                    "store_clear_invalid_result",
                    adapter_name=name,
                    result_type=type(result).__name__,
                )
                return PurgeOutcome.failed(name, err)
