"""Наблюдатели за изменениями настроек."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable


@runtime_checkable
class SettingsObserver(Protocol):
    """Базовый контракт наблюдателя."""

    def on_setting_changed(
        self,
        group: str,
        key: str,
        old_value: object,
        new_value: object,
    ) -> None:
        """Обрабатывает событие изменения конкретного ключа."""


class LoggingSettingsObserver:
    """Пишет изменения в журнал и применяет новый уровень логирования на лету."""

    def __init__(self, logger_name: str = "container_api") -> None:
        self._logger = logging.getLogger(__name__)
        self._target = logging.getLogger(logger_name)

    def on_setting_changed(
        self,
        group: str,
        key: str,
        old_value: object,
        new_value: object,
    ) -> None:
        self._logger.info("Setting changed: %s.%s (%r -> %r)", group, key, old_value, new_value)
        if group == "logging" and key == "level" and isinstance(new_value, str):
            self._target.setLevel(new_value.upper())
