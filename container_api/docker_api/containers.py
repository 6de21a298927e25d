"""Функции для работы с контейнерами через Docker client."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Union

from docker.errors import DockerException

from container_api.docker_api.client import DockerClientWrapper, time_bound
from container_api.docker_api.sockets import hijack
from container_api.exceptions import DockerAPIError
from container_api.types.containers import (
    ContainerAttachOptions,
    ContainerCommitOptions,
    ContainerExecInspect,
    ContainerListOptions,
    ContainerLogsOptions,
    ContainerRemoveOptions,
    CopyToContainerOptions,
    ResizeOptions,
)
from container_api.types.hijack import HijackedResponse

LOGGER = logging.getLogger(__name__)


def container_attach(
    client: DockerClientWrapper, options: ContainerAttachOptions
) -> HijackedResponse:
    """Подключается к потокам контейнера и возвращает перехваченное соединение."""

    raw = client.get_raw_client()
    params = {
        "stdin": int(options.stdin),
        "stdout": int(options.stdout),
        "stderr": int(options.stderr),
        "stream": int(options.stream),
    }
    try:
        sock = raw.attach_socket(options.container_id, params=params)
    except DockerException as exc:
        raise DockerAPIError(str(exc), context={"container": options.container_id}) from exc
    LOGGER.debug("Attached to container %s with %s", options.container_id, params)
    return hijack(sock)


def container_exec_attach(
    client: DockerClientWrapper, exec_id: str, *, tty: bool = False
) -> HijackedResponse:
    """Запускает exec-сессию и возвращает её потоки."""

    raw = client.get_raw_client()
    try:
        sock = raw.exec_start(exec_id, detach=False, tty=tty, socket=True)
    except DockerException as exc:
        raise DockerAPIError(str(exc), context={"exec": exec_id}) from exc
    return hijack(sock)


def container_commit(client: DockerClientWrapper, options: ContainerCommitOptions) -> str:
    """Фиксирует контейнер в образ и возвращает идентификатор образа."""

    raw = client.get_raw_client()
    try:
        result = raw.commit(
            options.container_id,
            repository=options.repository_name or None,
            tag=options.tag or None,
            message=options.comment or None,
            author=options.author or None,
            pause=options.pause,
            changes=list(options.changes) or None,
            conf=options.config.to_dict() if options.config is not None else None,
        )
    except DockerException as exc:
        raise DockerAPIError(str(exc), context={"container": options.container_id}) from exc
    return str((result or {}).get("Id", ""))


def container_exec_inspect(client: DockerClientWrapper, exec_id: str) -> ContainerExecInspect:
    """Возвращает состояние exec-сессии."""

    raw = client.get_raw_client()
    try:
        data = raw.exec_inspect(exec_id)
    except DockerException as exc:
        raise DockerAPIError(str(exc), context={"exec": exec_id}) from exc
    return ContainerExecInspect.from_dict(data)


def container_list(
    client: DockerClientWrapper, options: ContainerListOptions
) -> List[Dict[str, Any]]:
    """Возвращает список контейнеров в сыром виде Engine API."""

    raw = client.get_raw_client()
    try:
        return raw.containers(
            quiet=options.quiet,
            all=options.all,
            latest=options.latest,
            since=options.since or None,
            before=options.before or None,
            limit=options.limit if options.limit > 0 else -1,
            size=options.size,
            filters=options.filter.to_dict() or None,
        )
    except DockerException as exc:
        raise DockerAPIError(str(exc)) from exc


def container_logs(
    client: DockerClientWrapper, options: ContainerLogsOptions
) -> Union[bytes, Iterator[bytes]]:
    """Возвращает логи контейнера; при follow - генератор фрагментов."""

    raw = client.get_raw_client()
    since = time_bound("since", options.since)
    try:
        return raw.logs(
            options.container_id,
            stdout=options.show_stdout,
            stderr=options.show_stderr,
            stream=options.follow,
            timestamps=options.timestamps,
            tail=_parse_tail(options.tail),
            since=since,
            follow=options.follow,
        )
    except DockerException as exc:
        raise DockerAPIError(str(exc), context={"container": options.container_id}) from exc


def container_remove(client: DockerClientWrapper, options: ContainerRemoveOptions) -> None:
    """Удаляет контейнер."""

    raw = client.get_raw_client()
    try:
        raw.remove_container(
            options.container_id,
            v=options.remove_volumes,
            link=options.remove_links,
            force=options.force,
        )
    except DockerException as exc:
        raise DockerAPIError(str(exc), context={"container": options.container_id}) from exc


def copy_to_container(client: DockerClientWrapper, options: CopyToContainerOptions) -> None:
    """Распаковывает tar-архив из options.content по пути внутри контейнера."""

    raw = client.get_raw_client()
    params = {"path": options.path}
    if not options.allow_overwrite_dir_with_file:
        params["noOverwriteDirNonDir"] = "true"
    url = raw._url("/containers/{0}/archive", options.container_id)
    try:
        response = raw._put(url, params=params, data=options.content)
        raw._raise_for_status(response)
    except DockerException as exc:
        raise DockerAPIError(
            str(exc), context={"container": options.container_id, "path": options.path}
        ) from exc


def container_resize(client: DockerClientWrapper, options: ResizeOptions) -> None:
    """Меняет размер tty контейнера."""

    raw = client.get_raw_client()
    try:
        raw.resize(options.id, height=options.height, width=options.width)
    except DockerException as exc:
        raise DockerAPIError(str(exc), context={"container": options.id}) from exc


def container_exec_resize(client: DockerClientWrapper, options: ResizeOptions) -> None:
    """Меняет размер tty exec-процесса."""

    raw = client.get_raw_client()
    try:
        raw.exec_resize(options.id, height=options.height, width=options.width)
    except DockerException as exc:
        raise DockerAPIError(str(exc), context={"exec": options.id}) from exc


def _parse_tail(value: str) -> Union[int, str]:
    text = value.strip()
    if text.isdigit():
        return int(text)
    return "all"

