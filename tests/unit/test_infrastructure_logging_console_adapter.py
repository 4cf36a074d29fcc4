"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- Error enrichment for error() and critical()
- Context binding
- Renderer and level configuration
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import ConsoleAdapter, configure_logging

MODULE = "src.infrastructure.logging.console_adapter"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_level_methods_forward_message_and_context(self, level):
        with patch(f"{MODULE}.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)("store_cleared", adapter_name="local_storage")

            getattr(mock_logger, level).assert_called_once_with(
                "store_cleared",
                adapter_name="local_storage",
            )

    def test_error_adds_exception_details(self):
        with patch(f"{MODULE}.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("logout_failed", error=TimeoutError("slow"), user_id="u1")

            mock_logger.error.assert_called_once_with(
                "logout_failed",
                user_id="u1",
                error_type="TimeoutError",
                error_message="slow",
            )

    def test_critical_without_error_passes_context_only(self):
        with patch(f"{MODULE}.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.critical("client_crashed", phase="purge")

            mock_logger.critical.assert_called_once_with("client_crashed", phase="purge")


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """Test bind() / with_context()."""

    def test_bind_returns_new_adapter_with_bound_logger(self):
        with patch(f"{MODULE}.structlog") as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(transition_id="t-1")
            bound.info("purge_started")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(transition_id="t-1")
            bound_logger.info.assert_called_once_with("purge_started")
            mock_logger.info.assert_not_called()

    def test_with_context_is_alias_for_bind(self):
        with patch(f"{MODULE}.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.with_context(user_id="u1")

            mock_logger.bind.assert_called_once_with(user_id="u1")


@pytest.mark.unit
class TestConfigureLogging:
    """Test structlog configuration."""

    def test_json_renderer_when_requested(self):
        with patch(f"{MODULE}.structlog") as mock_structlog:
            configure_logging(use_json=True)

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert processors[-1] is mock_structlog.processors.JSONRenderer.return_value

    def test_console_renderer_by_default(self):
        with patch(f"{MODULE}.structlog") as mock_structlog:
            configure_logging()

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert processors[-1] is mock_structlog.dev.ConsoleRenderer.return_value

    @pytest.mark.parametrize(
        ("name", "level"),
        [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("bogus", logging.INFO)],
    )
    def test_log_level_filter(self, name, level):
        with patch(f"{MODULE}.structlog") as mock_structlog:
            configure_logging(log_level=name)

            mock_structlog.make_filtering_bound_logger.assert_called_once_with(level)
