"""Тесты фасада EngineClient."""

from __future__ import annotations

import time
from typing import Any, Dict

import pytest

from container_api.connections.models import Connection
from container_api.docker_api import api, containers, images
from container_api.docker_api.api import EngineClient
from container_api.exceptions import DockerAPIError
from container_api.types import ContainerListOptions, ImagePushOptions


class DummySettings:
    """Минимальные настройки для тестов."""

    def __init__(self, connect_timeout: int = 1) -> None:
        self.connect_timeout = connect_timeout

    def get_value(self, group: str, key: str, default: Any = None) -> Any:
        if group == "connection" and key == "connect_timeout_sec":
            return self.connect_timeout
        return default


def _make_connection() -> Connection:
    return Connection(identifier="local", name="Local")


def test_container_list_delegates_single_options_object(
    wrapper: Any, monkeypatch: pytest.MonkeyPatch
) -> None:
    engine = EngineClient(_make_connection(), DummySettings(), wrapper=wrapper)
    seen: Dict[str, Any] = {}

    def fake_list(client: Any, options: ContainerListOptions) -> list:
        seen["client"] = client
        seen["options"] = options
        return [{"Id": "abc"}]

    monkeypatch.setattr(containers, "container_list", fake_list)
    options = ContainerListOptions(all=True, limit=5)

    assert engine.container_list(options) == [{"Id": "abc"}]
    assert seen["client"] is wrapper
    assert seen["options"] is options
    assert seen["options"].all is True
    assert seen["options"].limit == 5


def test_image_push_reaches_transport(wrapper: Any, raw_client: Any) -> None:
    engine = EngineClient(_make_connection(), DummySettings(), wrapper=wrapper)

    list(engine.image_push(ImagePushOptions(image_id="demo", tag="v1")))

    args, _ = raw_client.last_call("_post")
    assert args == ("http+docker://localhost/images/demo/push",)


def test_client_is_created_lazily_once(monkeypatch: pytest.MonkeyPatch) -> None:
    created = []

    class FakeWrapper:
        def __init__(self, connection: Connection) -> None:
            created.append(connection)

        def close(self) -> None:
            pass

    monkeypatch.setattr(api, "DockerClientWrapper", FakeWrapper)
    engine = EngineClient(_make_connection(), DummySettings(connect_timeout=0))

    first = engine.client()
    second = engine.client()

    assert first is second
    assert len(created) == 1
    engine.close()
    engine.client()
    assert len(created) == 2


def test_client_creation_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    class SlowWrapper:
        def __init__(self, connection: Connection) -> None:
            time.sleep(2)

    monkeypatch.setattr(api, "DockerClientWrapper", SlowWrapper)
    engine = EngineClient(_make_connection(), DummySettings(connect_timeout=1))

    with pytest.raises(DockerAPIError, match="timeout"):
        engine.client()


def test_server_version_without_daemon(monkeypatch: pytest.MonkeyPatch) -> None:
    class BrokenWrapper:
        def __init__(self, connection: Connection) -> None:
            raise DockerAPIError("cannot connect")

    monkeypatch.setattr(api, "DockerClientWrapper", BrokenWrapper)
    engine = EngineClient(_make_connection(), DummySettings(connect_timeout=0))

    response = engine.server_version()

    assert response.server is None
    assert not response.server_ok()
    assert response.client.api_version == "auto"
    assert engine.ping() is False


def test_image_operations_delegate(wrapper: Any, monkeypatch: pytest.MonkeyPatch) -> None:
    engine = EngineClient(_make_connection(), DummySettings(), wrapper=wrapper)
    monkeypatch.setattr(images, "image_list", lambda client, options: ["listed"])

    assert engine.image_list(object()) == ["listed"]  # type: ignore[arg-type]
