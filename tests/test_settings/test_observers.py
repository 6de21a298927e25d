"""Тесты наблюдателей настроек."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from container_api.settings.observers import LoggingSettingsObserver, SettingsObserver


@pytest.fixture
def target_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("container_api.tests.observer")
    previous = logger.level
    yield logger
    logger.setLevel(previous)


def test_logging_observer_matches_protocol() -> None:
    assert isinstance(LoggingSettingsObserver(), SettingsObserver)


def test_level_change_applied(target_logger: logging.Logger) -> None:
    observer = LoggingSettingsObserver(logger_name=target_logger.name)

    observer.on_setting_changed("logging", "level", "INFO", "debug")

    assert target_logger.level == logging.DEBUG


def test_other_changes_only_logged(
    target_logger: logging.Logger, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level("INFO")
    target_logger.setLevel(logging.WARNING)
    observer = LoggingSettingsObserver(logger_name=target_logger.name)

    observer.on_setting_changed("connection", "timeout_sec", 60, 30)

    assert target_logger.level == logging.WARNING
    assert "connection.timeout_sec" in caplog.text
