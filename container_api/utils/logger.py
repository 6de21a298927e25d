"""Настройка логирования: ротация файлов и вывод в консоль."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, List, Optional, cast

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_FILE_NAME: Final[str] = "container_api.log"


def resolve_log_level(level_name: str) -> int:
    """Преобразует строковый уровень логирования в числовой."""

    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")
    return cast(int, level)


def configure_logging(
    log_dir: Optional[Path],
    *,
    log_file_name: str = LOG_FILE_NAME,
    level_name: str = "INFO",
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> None:
    """Настраивает корневой логгер.

    При log_dir=None пишет только в stderr, иначе дополнительно ведёт файл с
    ротацией по размеру.
    """

    log_level = resolve_log_level(level_name)
    formatter = logging.Formatter(LOG_FORMAT)
    handlers: List[logging.Handler] = []

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / log_file_name,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # stdout занят отчётом о версиях, поэтому журнал идёт в stderr
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    handlers.append(stream_handler)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)
