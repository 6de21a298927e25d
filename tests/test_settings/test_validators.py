"""Проверки валидаторов настроек."""

from __future__ import annotations

import re

from container_api.settings.validators import (
    OK,
    CompositeValidator,
    EnumValidator,
    RangeValidator,
    RegexValidator,
    TypeValidator,
)


def test_type_validator_success() -> None:
    assert TypeValidator(int).validate(5) == OK


def test_type_validator_failure_names_types() -> None:
    is_valid, error = TypeValidator((int, float)).validate("5")
    assert not is_valid
    assert "int, float" in error
    assert "str" in error


def test_range_validator_bounds() -> None:
    validator = RangeValidator(1, 10)
    assert validator.validate(1) == OK
    assert validator.validate(10) == OK
    is_valid, error = validator.validate(11)
    assert not is_valid
    assert "out of range" in error


def test_range_validator_open_bound() -> None:
    assert RangeValidator(min_value=0).validate(10_000) == OK


def test_range_validator_rejects_incomparable() -> None:
    is_valid, error = RangeValidator(1, 10).validate("five")
    assert not is_valid
    assert "not comparable" in error


def test_enum_validator() -> None:
    validator = EnumValidator(["DEBUG", "INFO"])
    assert validator.validate("INFO") == OK
    assert not validator.validate("TRACE")[0]


def test_regex_validator() -> None:
    validator = RegexValidator(re.compile(r"\d+\.\d+"))
    assert validator.validate("1.43") == OK
    assert validator.validate("1.43a")[1].startswith("Value '1.43a' does not match")
    assert validator.validate(1.43) == (False, "RegexValidator expects string values")


def test_composite_returns_first_error() -> None:
    validator = CompositeValidator([TypeValidator(int), RangeValidator(1, 3)])
    assert validator.validate(2) == OK
    assert "Expected value of type int" in validator.validate("2")[1]
    assert "out of range" in validator.validate(4)[1]
