"""Группы настроек: значения по умолчанию и валидаторы для каждого ключа."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Tuple

from container_api.exceptions import SettingsNotFoundError, SettingsValidationError
from container_api.settings.schemas import DEFAULT_CONFIG
from container_api.settings.validators import (
    OK,
    CompositeValidator,
    EnumValidator,
    RangeValidator,
    RegexValidator,
    TypeValidator,
    ValidationResult,
    Validator,
)

BASE_URL_PATTERN = r"^(unix|tcp|npipe|http|https|ssh)://\S+$"
API_VERSION_PATTERN = r"^(auto|\d+\.\d+)$"


def _int_between(low: int, high: int) -> Validator:
    return CompositeValidator([TypeValidator(int), RangeValidator(low, high)])


class SettingsGroup(ABC):
    """Именованный набор ключей; значения по умолчанию берутся из DEFAULT_CONFIG."""

    group_name: str = ""

    def __init__(self) -> None:
        self._defaults: Dict[str, Any] = dict(DEFAULT_CONFIG.get(self.group_name, {}))
        self._validators: Dict[str, Validator] = self.build_validators()
        self._values: Dict[str, Any] = dict(self._defaults)

    @abstractmethod
    def build_validators(self) -> Dict[str, Validator]:
        """Валидаторы по ключам; ключ без валидатора принимает любое значение."""

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._defaults)

    def _require_key(self, key: str) -> None:
        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)

    def get(self, key: str, default: Any = None) -> Any:
        self._require_key(key)
        return self._values.get(key, default)

    def get_default(self, key: str) -> Any:
        self._require_key(key)
        return self._defaults[key]

    def validate(self, key: str, value: Any) -> ValidationResult:
        validator = self._validators.get(key)
        return validator.validate(value) if validator is not None else OK

    def _checked(self, key: str, value: Any) -> Any:
        self._require_key(key)
        is_valid, reason = self.validate(key, value)
        if not is_valid:
            raise SettingsValidationError(key=f"{self.group_name}.{key}", value=value, reason=reason)
        return value

    def set(self, key: str, value: Any) -> None:
        """Сохраняет значение; невалидное значение не меняет группу."""

        self._values[key] = self._checked(key, value)

    def from_dict(self, data: Mapping[str, Any]) -> None:
        """Применяет известные ключи из data целиком либо ничего не меняет."""

        accepted = {
            key: self._checked(key, value) for key, value in data.items() if key in self._defaults
        }
        self._values.update(accepted)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def reset_to_defaults(self) -> None:
        self._values = dict(self._defaults)


class ConnectionSettings(SettingsGroup):
    """Параметры подключения к Docker Engine."""

    group_name = "connection"

    def build_validators(self) -> Dict[str, Validator]:
        return {
            "base_url": CompositeValidator([TypeValidator(str), RegexValidator(BASE_URL_PATTERN)]),
            "api_version": CompositeValidator(
                [TypeValidator(str), RegexValidator(API_VERSION_PATTERN)]
            ),
            "timeout_sec": _int_between(1, 3600),
            "connect_timeout_sec": _int_between(0, 120),
            "use_ssh_client": TypeValidator(bool),
            "max_pool_size": _int_between(1, 100),
        }


class LoggingSettings(SettingsGroup):
    """Настройки логирования."""

    group_name = "logging"

    def build_validators(self) -> Dict[str, Validator]:
        return {
            "enabled": TypeValidator(bool),
            "level": EnumValidator(["DEBUG", "INFO", "WARNING", "ERROR"]),
            "max_file_size_mb": _int_between(1, 1000),
            "max_archived_files": _int_between(1, 50),
        }
