"""Различные вспомогательные функции."""

from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from typing import Dict, Iterable, Union

_SOCKET_SCHEMES = ("unix://", "tcp://", "npipe://", "http://", "https://", "ssh://")

TimeValue = Union[int, float]

# дробная часть секунд: docker пишет наносекунды, datetime понимает 6 знаков
_FRACTION = re.compile(r"\.(\d+)")


def normalize_socket_path(raw_value: str) -> str:
    """Возвращает путь сокета с корректным префиксом unix://."""

    value = raw_value.strip()
    if not value:
        return value
    lowered = value.lower()
    if lowered.startswith(_SOCKET_SCHEMES):
        return value
    if value.startswith("/"):
        return f"unix://{value}"
    return value


def parse_time_value(value: str) -> TimeValue | None:
    """Превращает строковую отметку времени в значение, понятное docker SDK.

    Поддерживаются unix-время (целое или дробное) и ISO-8601 с любой точностью
    дробной части, которое переводится в целые секунды. Пустая строка, ноль и
    отрицательные значения означают отсутствие границы. Нераспознанное
    значение даёт ValueError.
    """

    text = value.strip()
    if not text:
        return None
    parsed: TimeValue
    try:
        parsed = int(text)
    except ValueError:
        try:
            parsed = float(text)
        except ValueError:
            parsed = _parse_iso_timestamp(text)
        else:
            if not math.isfinite(parsed):
                raise ValueError(f"Timestamp must be finite: {value!r}")
    return parsed if parsed > 0 else None


def _parse_iso_timestamp(text: str) -> int:
    normalized = _FRACTION.sub(
        lambda match: "." + match.group(1)[:6].ljust(6, "0"),
        text.replace("Z", "+00:00"),
        count=1,
    )
    timestamp = datetime.fromisoformat(normalized)
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return int(timestamp.timestamp())


def convert_kv_strings(values: Iterable[str]) -> Dict[str, str]:
    """Преобразует строки KEY=VALUE в словарь; KEY без '=' получает ''."""

    result: Dict[str, str] = {}
    for item in values:
        key, _, value = item.partition("=")
        result[key] = value
    return result
