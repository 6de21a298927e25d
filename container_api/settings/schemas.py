"""Дефолтная схема конфигурации библиотеки."""

from __future__ import annotations

from typing import Any, Dict

# DEFAULT_CONFIG служит шаблоном для начального config.json
DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "schema_version": 1,
    "connection": {
        "base_url": "unix:///var/run/docker.sock",
        "api_version": "auto",
        "timeout_sec": 60,
        "connect_timeout_sec": 5,
        "use_ssh_client": False,
        "max_pool_size": 10,
    },
    "logging": {
        "enabled": True,
        "level": "INFO",
        "max_file_size_mb": 10,
        "max_archived_files": 5,
    },
}

# Переменные окружения docker CLI, перекрывающие значения из файла
ENVIRONMENT_OVERRIDES: Dict[str, tuple[str, str]] = {
    "DOCKER_HOST": ("connection", "base_url"),
    "DOCKER_API_VERSION": ("connection", "api_version"),
}
