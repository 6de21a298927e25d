"""Точка входа: проверка связи с Docker Engine и отчёт о версиях."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional, TextIO

from container_api import __version__
from container_api.connections.models import Connection
from container_api.docker_api.api import EngineClient
from container_api.settings.observers import LoggingSettingsObserver
from container_api.settings.registry import SettingsRegistry
from container_api.types.system import Version, VersionResponse
from container_api.utils.logger import configure_logging

LOGGER = logging.getLogger(__name__)


def initialize_settings(config_path: Path) -> SettingsRegistry:
    """Получает singleton реестр настроек, загружает config.json и окружение."""

    registry = SettingsRegistry(config_path=config_path)
    registry.load_from_disk()
    registry.apply_environment()
    registry.register_observer(LoggingSettingsObserver())
    return registry


def setup_logging_from_settings(base_dir: Path, settings: SettingsRegistry) -> None:
    """Настраивает логирование в соответствии с группой logging."""

    logging_settings = settings.get_group("logging")
    if not logging_settings.get("enabled"):
        logging.disable(logging.CRITICAL)
        return

    logging.disable(logging.NOTSET)
    configure_logging(
        log_dir=base_dir / "logs",
        level_name=logging_settings.get("level", "INFO"),
        max_bytes=logging_settings.get("max_file_size_mb", 10) * 1024 * 1024,
        backup_count=logging_settings.get("max_archived_files", 5),
    )


def format_version_report(response: VersionResponse) -> str:
    """Формирует текстовый отчёт в духе `docker version`."""

    lines = ["Client:"]
    lines.extend(_format_version(response.client))
    if response.server is not None:
        lines.append("Server:")
        lines.extend(_format_version(response.server))
    else:
        lines.append("Server: unavailable")
    return "\n".join(lines)


def _format_version(version: Version) -> list[str]:
    rows = [
        ("Version", version.version),
        ("API version", version.api_version),
        ("Git commit", version.git_commit),
        ("Go version", version.go_version),
        ("OS/Arch", f"{version.os}/{version.arch}"),
        ("Kernel", version.kernel_version),
        ("Built", version.build_time),
    ]
    return [f"  {label}: {value}" for label, value in rows if value and value != "/"]


def main(output: Optional[TextIO] = None) -> int:
    """Готовит окружение, опрашивает сервер и печатает версии."""

    stream = output or sys.stdout
    home_dir = Path(os.environ.get("CAPI_HOME", Path.home()))
    base_dir = home_dir / ".container_api"
    configure_logging(None)

    settings = initialize_settings(base_dir / "config.json")
    setup_logging_from_settings(base_dir, settings)

    LOGGER.info("container-api %s starting", __version__)
    engine = EngineClient(Connection.from_settings(settings), settings)
    try:
        response = engine.server_version()
    finally:
        engine.close()

    print(format_version_report(response), file=stream)
    return 0 if response.server_ok() else 1


if __name__ == "__main__":
    sys.exit(main())
