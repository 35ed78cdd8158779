"""Tests for logging utilities."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from ioc_registry.core.config import LoggingSettings
from ioc_registry.core.logging import PACKAGE_LOGGER, build_logging_config, configure_logging
from ioc_registry.core.registry import Registry


@pytest.fixture(autouse=True)
def package_logger() -> Iterator[logging.Logger]:
    """Restore the package logger's handlers, level and propagation."""

    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_configure_logging_sets_package_level(package_logger: logging.Logger) -> None:
    """configure_logging should set the package logger level from settings."""

    settings = LoggingSettings(level="DEBUG", structured=False)
    configure_logging(settings)
    assert package_logger.level == logging.DEBUG
    assert package_logger.propagate is False
    assert len(package_logger.handlers) == 1


def test_configure_logging_leaves_root_alone() -> None:
    """Only the package logger is configured."""

    root = logging.getLogger()
    root_handlers = list(root.handlers)
    root_level = root.level

    configure_logging(LoggingSettings(level="ERROR"))

    assert root.handlers == root_handlers
    assert root.level == root_level


def test_structured_formatter_uses_brace_style() -> None:
    """Structured logging switches the formatter to brace style."""

    config = build_logging_config(LoggingSettings(level="info", structured=True))
    assert config["formatters"]["registry"]["style"] == "{"
    assert config["loggers"][PACKAGE_LOGGER]["level"] == "INFO"


def test_registry_logs_binding_events(
    package_logger: logging.Logger, caplog: pytest.LogCaptureFixture
) -> None:
    """Binding, caching and flushing are reported at DEBUG level."""

    package_logger.propagate = True
    with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
        registry = Registry()
        registry.singleton("Widget", lambda params: object())
        registry.singleton("Widget", lambda params: object())
        registry.make("Widget", None, "a")
        registry.flush_instance("Widget", "a")

    messages = [record.getMessage() for record in caplog.records]
    assert "Bound widget (singleton=True)" in messages
    assert "Replaced binding for widget (singleton=True)" in messages
    assert "Cached singleton instance for widget (suffix='a')" in messages
    assert "Flushed instance widget (suffix='a')" in messages
