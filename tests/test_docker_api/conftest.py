"""Общие заглушки docker.APIClient для тестов транспорта."""

from __future__ import annotations

import io
import socket
from typing import Any, Dict, Iterator, List, Tuple

import pytest
from docker.errors import DockerException

from container_api.connections.models import Connection
from container_api.docker_api.client import DockerClientWrapper


class FakeResponse:
    def __init__(
        self,
        *,
        headers: Dict[str, str] | None = None,
        body: bytes = b"",
        messages: List[Dict[str, Any]] | None = None,
        json_body: Any = None,
    ) -> None:
        self.headers = headers or {}
        self.raw = io.BytesIO(body)
        self.messages = messages or []
        self.json_body = json_body


class FakeRawClient:
    """Записывает каждый вызов вместе с аргументами."""

    api_version = "1.43"

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Tuple[Any, ...], Dict[str, Any]]] = []
        self.fail_with: DockerException | None = None
        self.sockets: List[socket.socket] = []
        self.response = FakeResponse()
        self.returns: Dict[str, Any] = {}

    def _record(self, method: str, /, *args: Any, **kwargs: Any) -> Any:
        self.calls.append((method, args, kwargs))
        if self.fail_with is not None:
            raise self.fail_with
        return self.returns.get(method)

    def last_call(self, method: str) -> Tuple[Tuple[Any, ...], Dict[str, Any]]:
        for call_name, args, kwargs in reversed(self.calls):
            if call_name == method:
                return args, kwargs
        raise AssertionError(f"{method} was not called")

    def _socket(self) -> socket.socket:
        ours, theirs = socket.socketpair()
        self.sockets.append(theirs)
        return ours

    # ------------------------------------------------------------ public API
    def attach_socket(self, container: str, params: Dict[str, Any] | None = None) -> Any:
        self._record("attach_socket", container, params=params)
        return self._socket()

    def exec_start(self, exec_id: str, **kwargs: Any) -> Any:
        self._record("exec_start", exec_id, **kwargs)
        return self._socket()

    def commit(self, container: str, **kwargs: Any) -> Any:
        return self._record("commit", container, **kwargs)

    def exec_inspect(self, exec_id: str) -> Any:
        return self._record("exec_inspect", exec_id)

    def containers(self, **kwargs: Any) -> Any:
        return self._record("containers", **kwargs)

    def logs(self, container: str, **kwargs: Any) -> Any:
        return self._record("logs", container, **kwargs)

    def remove_container(self, container: str, **kwargs: Any) -> Any:
        return self._record("remove_container", container, **kwargs)

    def resize(self, container: str, **kwargs: Any) -> Any:
        return self._record("resize", container, **kwargs)

    def exec_resize(self, exec_id: str, **kwargs: Any) -> Any:
        return self._record("exec_resize", exec_id, **kwargs)

    def images(self, **kwargs: Any) -> Any:
        return self._record("images", **kwargs)

    def remove_image(self, image: str, **kwargs: Any) -> Any:
        return self._record("remove_image", image, **kwargs)

    def tag(self, image: str, repository: str, **kwargs: Any) -> Any:
        return self._record("tag", image, repository, **kwargs)

    def version(self) -> Any:
        return self._record("version")

    def events(self, **kwargs: Any) -> Any:
        return self._record("events", **kwargs)

    def ping(self) -> Any:
        return self._record("ping")

    # ------------------------------------------------------ private helpers
    def _url(self, pathfmt: str, *args: Any) -> str:
        return "http+docker://localhost" + pathfmt.format(*args)

    def _post(self, url: str, **kwargs: Any) -> FakeResponse:
        self._record("_post", url, **kwargs)
        return self.response

    def _put(self, url: str, **kwargs: Any) -> FakeResponse:
        self._record("_put", url, **kwargs)
        return self.response

    def _get(self, url: str, **kwargs: Any) -> FakeResponse:
        self._record("_get", url, **kwargs)
        return self.response

    def _raise_for_status(self, response: FakeResponse) -> None:
        return None

    def _result(self, response: FakeResponse, json: bool = False) -> Any:
        return response.json_body

    def _stream_helper(self, response: FakeResponse, decode: bool = False) -> Iterator[Any]:
        assert decode is True
        return iter(response.messages)


@pytest.fixture
def raw_client() -> Iterator[FakeRawClient]:
    client = FakeRawClient()
    yield client
    for sock in client.sockets:
        sock.close()


@pytest.fixture
def wrapper(raw_client: FakeRawClient) -> DockerClientWrapper:
    connection = Connection(identifier="local", name="Local")
    return DockerClientWrapper(connection, raw_client=raw_client)
