"""Модель параметров подключения к Docker Engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from container_api.utils.helpers import normalize_socket_path

DEFAULT_SOCKET = "unix:///var/run/docker.sock"


@dataclass(slots=True)
class Connection:
    """Описание одного подключения к Docker."""

    identifier: str
    name: str
    base_url: str = DEFAULT_SOCKET
    api_version: str = "auto"
    timeout_sec: int = 60
    use_ssh_client: bool = False
    max_pool_size: int = 10

    def __post_init__(self) -> None:
        self.base_url = normalize_socket_path(self.base_url) or DEFAULT_SOCKET

    @classmethod
    def from_settings(cls, settings: Any, identifier: str = "default") -> "Connection":
        """Строит соединение из группы настроек `connection`."""

        group = settings.get_group("connection")
        return cls(
            identifier=identifier,
            name=identifier,
            base_url=group.get("base_url"),
            api_version=group.get("api_version"),
            timeout_sec=group.get("timeout_sec"),
            use_ssh_client=group.get("use_ssh_client"),
            max_pool_size=group.get("max_pool_size"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Сериализует модель в dict."""

        return {
            "id": self.identifier,
            "name": self.name,
            "base_url": self.base_url,
            "api_version": self.api_version,
            "timeout_sec": self.timeout_sec,
            "use_ssh_client": self.use_ssh_client,
            "max_pool_size": self.max_pool_size,
        }
