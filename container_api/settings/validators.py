"""Валидаторы значений настроек.

Каждый валидатор возвращает пару (ok, причина); пустая причина означает успех.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Pattern, Tuple

ValidationResult = Tuple[bool, str]

OK: ValidationResult = (True, "")


class Validator(ABC):
    """Абстрактный валидатор значения."""

    @abstractmethod
    def validate(self, value: Any) -> ValidationResult:
        """Возвращает OK либо (False, описание ошибки)."""


class TypeValidator(Validator):
    def __init__(self, expected_type: type | Tuple[type, ...]) -> None:
        self.expected_type = expected_type

    def validate(self, value: Any) -> ValidationResult:
        if isinstance(value, self.expected_type):
            return OK
        if isinstance(self.expected_type, tuple):
            expected = ", ".join(t.__name__ for t in self.expected_type)
        else:
            expected = self.expected_type.__name__
        return False, f"Expected value of type {expected}, got {type(value).__name__}"


class RangeValidator(Validator):
    """Числовое значение в пределах [min_value, max_value]; None - без границы."""

    def __init__(self, min_value: Optional[Any] = None, max_value: Optional[Any] = None) -> None:
        self.min_value = min_value
        self.max_value = max_value

    def validate(self, value: Any) -> ValidationResult:
        try:
            too_low = self.min_value is not None and value < self.min_value
            too_high = self.max_value is not None and value > self.max_value
        except TypeError:
            return False, f"Value {value!r} is not comparable"
        if too_low or too_high:
            return False, f"Value {value} is out of range [{self.min_value}, {self.max_value}]"
        return OK


class EnumValidator(Validator):
    def __init__(self, allowed_values: Iterable[Any]) -> None:
        self.allowed_values = list(allowed_values)

    def validate(self, value: Any) -> ValidationResult:
        if value in self.allowed_values:
            return OK
        return False, f"Value {value!r} not in allowed values: {self.allowed_values}"


class RegexValidator(Validator):
    """Строка целиком совпадает с шаблоном."""

    def __init__(self, pattern: str | Pattern[str]) -> None:
        self.pattern: Pattern[str] = re.compile(pattern) if isinstance(pattern, str) else pattern

    def validate(self, value: Any) -> ValidationResult:
        if not isinstance(value, str):
            return False, "RegexValidator expects string values"
        if self.pattern.fullmatch(value):
            return OK
        return False, f"Value '{value}' does not match pattern {self.pattern.pattern!r}"


class CompositeValidator(Validator):
    """Применяет валидаторы по порядку и возвращает первую ошибку."""

    def __init__(self, validators: Iterable[Validator]) -> None:
        self.validators: List[Validator] = list(validators)

    def validate(self, value: Any) -> ValidationResult:
        for validator in self.validators:
            result = validator.validate(value)
            if not result[0]:
                return result
        return OK
