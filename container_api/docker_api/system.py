"""Версии клиента/сервера и поток событий Docker."""

from __future__ import annotations

import logging
import platform
from typing import Any, Dict, Iterator

from docker.errors import DockerException

from container_api import __version__
from container_api.docker_api.client import DockerClientWrapper, time_bound
from container_api.exceptions import DockerAPIError
from container_api.types.system import EventsOptions, Version, VersionResponse

LOGGER = logging.getLogger(__name__)


def client_version(api_version: str) -> Version:
    """Описывает локальную сторону соединения."""

    return Version(
        version=__version__,
        api_version=api_version,
        os=platform.system().lower(),
        arch=platform.machine(),
    )


def server_version(client: DockerClientWrapper) -> VersionResponse:
    """Запрашивает версию сервера; при сбое поле server остаётся пустым."""

    response = VersionResponse(client=client_version(client.api_version))
    raw = client.get_raw_client()
    try:
        payload: Dict[str, Any] = raw.version()
    except DockerException as exc:
        LOGGER.error(
            "Cannot fetch server version via %s: %s", client.connection.base_url, exc
        )
        return response
    response.server = Version.from_dict(payload)
    return response


def events(client: DockerClientWrapper, options: EventsOptions) -> Iterator[Dict[str, Any]]:
    """Подписывается на события в заданном окне и отдаёт их по одному."""

    raw = client.get_raw_client()
    since = time_bound("since", options.since)
    until = time_bound("until", options.until)
    try:
        return raw.events(
            since=since,
            until=until,
            filters=options.filters.to_dict() or None,
            decode=True,
        )
    except DockerException as exc:
        raise DockerAPIError(str(exc)) from exc
