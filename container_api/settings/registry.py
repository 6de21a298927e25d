"""Реестр настроек библиотеки (Singleton).

Реестр держит группы `connection` и `logging`, хранит их в одном JSON-файле
и уведомляет наблюдателей о каждом изменении. Переменные окружения docker CLI
(`DOCKER_HOST`, `DOCKER_API_VERSION`) накладываются поверх файла.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from container_api.exceptions import SettingsIOError, SettingsNotFoundError, SettingsValidationError
from container_api.settings.groups import ConnectionSettings, LoggingSettings, SettingsGroup
from container_api.settings.observers import SettingsObserver
from container_api.settings.schemas import DEFAULT_CONFIG, ENVIRONMENT_OVERRIDES
from container_api.utils.helpers import normalize_socket_path

DEFAULT_CONFIG_PATH = Path.home() / ".container_api" / "config.json"

_MISSING = object()


class SettingsRegistry:
    """Singleton-реестр групп настроек."""

    _instance: Optional["SettingsRegistry"] = None

    def __new__(cls, config_path: Optional[Path] = None) -> "SettingsRegistry":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._initialized = False
            cls._instance = instance
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        if self._initialized:
            if config_path is not None:
                self._file_path = config_path
            return

        self._logger = logging.getLogger(__name__)
        self._file_path = config_path or DEFAULT_CONFIG_PATH
        self._groups: Dict[str, SettingsGroup] = {
            group.group_name: group for group in (ConnectionSettings(), LoggingSettings())
        }
        self._observers: List[SettingsObserver] = []
        self._extra: Dict[str, Any] = self._non_group_entries(DEFAULT_CONFIG)
        self._dirty = False
        self._initialized = True

    @property
    def config_path(self) -> Path:
        return self._file_path

    @property
    def dirty(self) -> bool:
        """Есть ли несохранённые изменения."""

        return self._dirty

    # ------------------------------------------------------------------ values
    def get_group(self, group: str) -> SettingsGroup:
        settings_group = self._groups.get(group)
        if settings_group is None:
            raise SettingsNotFoundError(group)
        return settings_group

    def get_value(self, group: str, key: str, default: Any = _MISSING) -> Any:
        """Читает значение; default подставляется вместо отсутствующей группы/ключа."""

        settings_group = self._groups.get(group)
        if settings_group is not None and key in settings_group.keys():
            return settings_group.get(key)
        if default is not _MISSING:
            return default
        raise SettingsNotFoundError(group, key)

    def set_value(self, group: str, key: str, value: Any) -> None:
        settings_group = self.get_group(group)
        previous = settings_group.get(key)
        settings_group.set(key, value)
        self._dirty = True
        self._notify(group, key, previous, value)

    def apply_environment(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """Перекрывает настройки переменными окружения docker CLI."""

        env = os.environ if environ is None else environ
        for variable, (group, key) in ENVIRONMENT_OVERRIDES.items():
            raw_value = env.get(variable, "").strip()
            if not raw_value:
                continue
            if key == "base_url":
                raw_value = normalize_socket_path(raw_value)
            self._logger.debug("Applying %s to %s.%s", variable, group, key)
            self.set_value(group, key, raw_value)

    def validate(self) -> bool:
        """Проверяет все текущие значения; первая ошибка выбрасывается."""

        for name, settings_group in self._groups.items():
            for key, value in settings_group.to_dict().items():
                is_valid, reason = settings_group.validate(key, value)
                if not is_valid:
                    raise SettingsValidationError(key=f"{name}.{key}", value=value, reason=reason)
        return True

    def reset_to_defaults(self) -> None:
        for settings_group in self._groups.values():
            settings_group.reset_to_defaults()
        self._dirty = True

    # --------------------------------------------------------------- observers
    def register_observer(self, observer: SettingsObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unregister_observer(self, observer: SettingsObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify(self, group: str, key: str, old_value: Any, new_value: Any) -> None:
        for observer in tuple(self._observers):
            try:
                observer.on_setting_changed(group, key, old_value, new_value)
            except Exception:  # pragma: no cover
                self._logger.exception("Settings observer %r failed on %s.%s", observer, group, key)

    # ------------------------------------------------------------- persistence
    def snapshot(self) -> Dict[str, Any]:
        """Полное содержимое файла конфигурации."""

        payload = dict(self._extra)
        payload.update({name: group.to_dict() for name, group in self._groups.items()})
        return payload

    def save_to_disk(self, path: Optional[Path] = None) -> None:
        target = path or self._file_path
        staging = target.with_name(target.name + ".tmp")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            staging.write_text(
                json.dumps(self.snapshot(), indent=2, ensure_ascii=False), encoding="utf-8"
            )
            staging.replace(target)
        except OSError as exc:
            raise SettingsIOError(target, str(exc)) from exc
        self._logger.debug("Settings saved to %s", target)
        self._dirty = False

    def load_from_disk(self, path: Optional[Path] = None) -> None:
        """Читает файл; отсутствующий файл создаётся со значениями по умолчанию."""

        target = path or self._file_path
        if not target.exists():
            self._logger.info("Config file %s not found, writing defaults.", target)
            self.save_to_disk(target)
            return

        content = self._read_json(target)
        for name, settings_group in self._groups.items():
            settings_group.reset_to_defaults()
            section = content.get(name)
            if isinstance(section, dict):
                settings_group.from_dict(section)
        self._extra = self._non_group_entries({**copy.deepcopy(DEFAULT_CONFIG), **content})
        self.validate()
        self._dirty = False

    def export_to_json(self, path: Path) -> None:
        self.save_to_disk(path)

    def import_from_json(self, path: Path) -> None:
        self.load_from_disk(path)
        self.save_to_disk(self._file_path)

    # ----------------------------------------------------------------- helpers
    @staticmethod
    def _read_json(target: Path) -> Dict[str, Any]:
        try:
            content = json.loads(target.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise SettingsIOError(target, str(exc)) from exc
        if not isinstance(content, dict):
            raise SettingsIOError(target, "top-level JSON value must be an object")
        return content

    def _non_group_entries(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        return {key: value for key, value in data.items() if key not in self._groups}
