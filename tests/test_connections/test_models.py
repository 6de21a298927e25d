"""Тесты модели Connection."""

from __future__ import annotations

from typing import Any, Dict

from container_api.connections.models import DEFAULT_SOCKET, Connection
from container_api.settings.groups import ConnectionSettings


class DummySettings:
    def __init__(self, **values: Any) -> None:
        self.connection = ConnectionSettings()
        for key, value in values.items():
            self.connection.set(key, value)

    def get_group(self, name: str) -> ConnectionSettings:
        assert name == "connection"
        return self.connection


def test_connection_normalizes_base_url() -> None:
    connection = Connection(identifier="local", name="Local", base_url="/run/docker.sock")
    assert connection.base_url == "unix:///run/docker.sock"


def test_connection_empty_base_url_uses_default() -> None:
    assert Connection(identifier="local", name="Local", base_url="").base_url == DEFAULT_SOCKET


def test_from_settings() -> None:
    settings = DummySettings(base_url="tcp://10.0.0.5:2375", api_version="1.43", timeout_sec=15)

    connection = Connection.from_settings(settings)

    assert connection.identifier == "default"
    assert connection.base_url == "tcp://10.0.0.5:2375"
    assert connection.api_version == "1.43"
    assert connection.timeout_sec == 15
    assert connection.max_pool_size == 10


def test_to_dict() -> None:
    payload: Dict[str, Any] = Connection(identifier="c1", name="Prod", use_ssh_client=True).to_dict()
    assert payload == {
        "id": "c1",
        "name": "Prod",
        "base_url": DEFAULT_SOCKET,
        "api_version": "auto",
        "timeout_sec": 60,
        "use_ssh_client": True,
        "max_pool_size": 10,
    }
