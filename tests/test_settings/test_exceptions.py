"""Тесты иерархии исключений."""

from __future__ import annotations

from pathlib import Path

import pytest

from container_api.exceptions import (
    ContainerAPIError,
    DockerAPIError,
    SettingsIOError,
    SettingsNotFoundError,
    SettingsValidationError,
)


def test_base_error_logs_context(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("ERROR")
    error = DockerAPIError("boom", context={"base_url": "tcp://host:2375"})

    assert isinstance(error, ContainerAPIError)
    assert str(error) == "boom"
    assert "tcp://host:2375" in caplog.text


def test_not_found_message() -> None:
    assert str(SettingsNotFoundError("connection", "color")) == "Setting 'connection.color' not found"
    assert str(SettingsNotFoundError("ui")) == "Setting 'ui' not found"


def test_validation_error_attributes() -> None:
    error = SettingsValidationError("logging.level", "TRACE", "not allowed")
    assert error.key == "logging.level"
    assert error.value == "TRACE"
    assert error.reason == "not allowed"
    assert error.context["reason"] == "not allowed"


def test_io_error_context(tmp_path: Path) -> None:
    error = SettingsIOError(tmp_path / "config.json", "denied")
    assert error.context == {"path": str(tmp_path / "config.json"), "reason": "denied"}
