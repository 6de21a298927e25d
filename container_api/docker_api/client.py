"""Обёртка над низкоуровневым docker.APIClient с безопасной инициализацией."""

from __future__ import annotations

import logging
from typing import Any

import docker
from docker.errors import DockerException

from container_api.connections.models import Connection
from container_api.exceptions import DockerAPIError
from container_api.utils.helpers import TimeValue, parse_time_value

LOGGER = logging.getLogger(__name__)


class DockerClientWrapper:
    """Управляет созданием и использованием docker API client."""

    def __init__(self, connection: Connection, raw_client: Any | None = None) -> None:
        self.connection = connection  # Сохраняем описание соединения
        self._client = raw_client or self._create_client()  # Создаём docker client

    def _create_client(self) -> Any:
        try:
            return docker.APIClient(
                base_url=self.connection.base_url,
                version=self.connection.api_version,
                timeout=self.connection.timeout_sec,
                use_ssh_client=self.connection.use_ssh_client,
                max_pool_size=self.connection.max_pool_size,
            )
        except DockerException as exc:
            LOGGER.error(
                "Docker client init error for connection %s (%s) via %s: %s",
                self.connection.identifier,
                self.connection.name,
                self.connection.base_url,
                exc,
            )
            raise DockerAPIError(
                str(exc), context={"base_url": self.connection.base_url}
            ) from exc

    def get_raw_client(self) -> Any:
        """Возвращает внутренний docker client."""

        return self._client

    @property
    def api_version(self) -> str:
        """Версия API, согласованная с сервером."""

        return str(getattr(self._client, "api_version", self.connection.api_version))

    def ping(self) -> bool:
        """Проверяет доступность Docker."""

        try:
            self._client.ping()
            return True
        except DockerException as exc:
            LOGGER.error("Docker ping failed: %s", exc)
            return False

    def close(self) -> None:
        """Закрывает пул HTTP-соединений клиента."""

        close = getattr(self._client, "close", None)
        if close is not None:
            close()


def time_bound(name: str, value: str) -> TimeValue | None:
    """Переводит границу окна (since/until) в unix-время для docker SDK."""

    try:
        return parse_time_value(value)
    except ValueError as exc:
        raise DockerAPIError(f"Invalid {name} value: {value!r}", context={name: value}) from exc
