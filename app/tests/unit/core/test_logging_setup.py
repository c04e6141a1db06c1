"""Unit tests for core.logging module."""

import logging

import pytest
import structlog

from core.config import Settings
from core.logging import (
    _is_test_environment,
    build_processors,
    configure_logging,
    get_module_logger,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_returns_bound_logger(self):
        """configure_logging returns a usable logger."""
        result = configure_logging(settings=Settings(_env_file=None))

        assert result is not None
        assert hasattr(result, "info")
        assert hasattr(result, "debug")
        assert hasattr(result, "warning")
        assert hasattr(result, "error")

    def test_suppresses_output_in_tests(self):
        """Logging is silenced while running under pytest."""
        configure_logging(log_level="DEBUG")
        assert logging.root.level > logging.CRITICAL


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger function."""

    def test_returns_logger(self):
        """get_module_logger returns a logger bound to the caller."""
        logger = get_module_logger()

        assert hasattr(logger, "info")
        logger.info("test_event", key="value")

    def test_module_loggers_are_usable(self):
        """Loggers created at import time accept structured events."""
        from translation import store

        store.logger.debug("test_event", dictionary="attributes")


@pytest.mark.unit
class TestBuildProcessors:
    """Test suite for build_processors function."""

    def test_production_renders_json(self):
        """Production output ends in a JSON renderer."""
        processors = build_processors(prod_mode=True)
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_development_renders_console(self):
        """Development output ends in a console renderer."""
        processors = build_processors(prod_mode=False)
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
