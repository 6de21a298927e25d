"""Тесты вспомогательных функций."""

from __future__ import annotations

import pytest

from container_api.utils.helpers import convert_kv_strings, normalize_socket_path, parse_time_value


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("/var/run/docker.sock", "unix:///var/run/docker.sock"),
        ("  /tmp/docker.sock ", "unix:///tmp/docker.sock"),
        ("unix:///var/run/docker.sock", "unix:///var/run/docker.sock"),
        ("TCP://10.0.0.5:2375", "TCP://10.0.0.5:2375"),
        ("ssh://user@host", "ssh://user@host"),
        ("", ""),
    ],
)
def test_normalize_socket_path(raw: str, expected: str) -> None:
    assert normalize_socket_path(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", None),
        ("1700000000", 1700000000),
        ("1700000000.5", 1700000000.5),
        ("2023-11-14T22:13:20Z", 1700000000),
        ("2023-11-14T22:13:20", 1700000000),
        ("2023-11-15T00:13:20+02:00", 1700000000),
        ("2023-11-14T22:13:20.123456789Z", 1700000000),
        ("2023-11-14T22:13:20.5Z", 1700000000),
        ("0", None),
        ("-5", None),
        ("0.0", None),
    ],
)
def test_parse_time_value(raw: str, expected: object) -> None:
    assert parse_time_value(raw) == expected


@pytest.mark.parametrize("raw", ["10m", "inf", "2024-13-01T00:00:00Z"])
def test_parse_time_value_rejects_unknown_forms(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_time_value(raw)


def test_convert_kv_strings() -> None:
    assert convert_kv_strings(["HTTP_PROXY=http://proxy:3128", "EMPTY=", "FLAG", "A=b=c"]) == {
        "HTTP_PROXY": "http://proxy:3128",
        "EMPTY": "",
        "FLAG": "",
        "A": "b=c",
    }
