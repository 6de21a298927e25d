"""Единая точка входа для операций Docker Engine.

Класс объединяет описание соединения, настройки и функции из
`container_api.docker_api`: каждый метод принимает ровно один набор опций и
передаёт его соответствующей функции транспорта. Клиент docker SDK создаётся
лениво и с ограничением по времени.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError
from typing import Any, Dict, Iterator, List, Optional, Union

from container_api.connections.models import Connection
from container_api.docker_api import containers, images, system
from container_api.docker_api.client import DockerClientWrapper
from container_api.exceptions import DockerAPIError
from container_api.types import (
    ContainerAttachOptions,
    ContainerCommitOptions,
    ContainerExecInspect,
    ContainerListOptions,
    ContainerLogsOptions,
    ContainerRemoveOptions,
    CopyToContainerOptions,
    EventsOptions,
    HijackedResponse,
    ImageBuildOptions,
    ImageBuildResponse,
    ImageCreateOptions,
    ImageImportOptions,
    ImageListOptions,
    ImagePullOptions,
    ImagePushOptions,
    ImageRemoveOptions,
    ImageSearchOptions,
    ImageTagOptions,
    ResizeOptions,
    VersionResponse,
)

LOGGER = logging.getLogger(__name__)


class EngineClient:
    """Высокоуровневый API поверх одного соединения с Docker."""

    def __init__(
        self,
        connection: Connection,
        settings: Any,
        *,
        wrapper: Optional[DockerClientWrapper] = None,
    ) -> None:
        self._connection = connection
        self._settings = settings
        self._wrapper = wrapper

    @property
    def connection(self) -> Connection:
        return self._connection

    # ------------------------------------------------------------------ helpers
    def _create_client(self) -> DockerClientWrapper:
        """Создаёт Docker client, ограничивая время ожидания сервера."""

        timeout = int(self._settings.get_value("connection", "connect_timeout_sec", default=5))
        if timeout <= 0:
            return DockerClientWrapper(self._connection)

        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(DockerClientWrapper, self._connection)
        try:
            return future.result(timeout=timeout)
        except TimeoutError as exc:
            future.cancel()
            LOGGER.error(
                "Docker client creation timeout for connection %s (%s) after %s seconds",
                self._connection.identifier,
                self._connection.name,
                timeout,
            )
            raise DockerAPIError(f"Connection timeout after {timeout} seconds") from exc
        finally:
            executor.shutdown(wait=False)

    def client(self) -> DockerClientWrapper:
        """Возвращает (и при необходимости создаёт) обёртку docker client."""

        if self._wrapper is None:
            self._wrapper = self._create_client()
        return self._wrapper

    def close(self) -> None:
        if self._wrapper is not None:
            self._wrapper.close()
            self._wrapper = None

    # --------------------------------------------------------------- containers
    def container_attach(self, options: ContainerAttachOptions) -> HijackedResponse:
        return containers.container_attach(self.client(), options)

    def container_exec_attach(self, exec_id: str, *, tty: bool = False) -> HijackedResponse:
        return containers.container_exec_attach(self.client(), exec_id, tty=tty)

    def container_commit(self, options: ContainerCommitOptions) -> str:
        return containers.container_commit(self.client(), options)

    def container_exec_inspect(self, exec_id: str) -> ContainerExecInspect:
        return containers.container_exec_inspect(self.client(), exec_id)

    def container_list(self, options: ContainerListOptions) -> List[Dict[str, Any]]:
        return containers.container_list(self.client(), options)

    def container_logs(self, options: ContainerLogsOptions) -> Union[bytes, Iterator[bytes]]:
        return containers.container_logs(self.client(), options)

    def container_remove(self, options: ContainerRemoveOptions) -> None:
        containers.container_remove(self.client(), options)

    def copy_to_container(self, options: CopyToContainerOptions) -> None:
        containers.copy_to_container(self.client(), options)

    def container_resize(self, options: ResizeOptions) -> None:
        containers.container_resize(self.client(), options)

    def container_exec_resize(self, options: ResizeOptions) -> None:
        containers.container_exec_resize(self.client(), options)

    # ------------------------------------------------------------------- images
    def image_build(self, options: ImageBuildOptions) -> ImageBuildResponse:
        return images.image_build(self.client(), options)

    def image_create(self, options: ImageCreateOptions) -> Iterator[Dict[str, Any]]:
        return images.image_create(self.client(), options)

    def image_import(self, options: ImageImportOptions) -> Iterator[Dict[str, Any]]:
        return images.image_import(self.client(), options)

    def image_list(self, options: ImageListOptions) -> List[Dict[str, Any]]:
        return images.image_list(self.client(), options)

    def image_pull(self, options: ImagePullOptions) -> Iterator[Dict[str, Any]]:
        return images.image_pull(self.client(), options)

    def image_push(self, options: ImagePushOptions) -> Iterator[Dict[str, Any]]:
        return images.image_push(self.client(), options)

    def image_remove(self, options: ImageRemoveOptions) -> List[Dict[str, Any]]:
        return images.image_remove(self.client(), options)

    def image_search(self, options: ImageSearchOptions) -> List[Dict[str, Any]]:
        return images.image_search(self.client(), options)

    def image_tag(self, options: ImageTagOptions) -> None:
        images.image_tag(self.client(), options)

    # ------------------------------------------------------------------- system
    def server_version(self) -> VersionResponse:
        """Возвращает версии; при недоступном сервере server остаётся пустым."""

        try:
            wrapper = self.client()
        except DockerAPIError:
            return VersionResponse(client=system.client_version(self._connection.api_version))
        return system.server_version(wrapper)

    def events(self, options: EventsOptions) -> Iterator[Dict[str, Any]]:
        return system.events(self.client(), options)

    def ping(self) -> bool:
        try:
            return self.client().ping()
        except DockerAPIError:
            return False

