"""Функции для работы с образами Docker."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterator, List, Optional

from docker.auth import encode_header
from docker.errors import DockerException

from container_api.docker_api.client import DockerClientWrapper
from container_api.exceptions import DockerAPIError
from container_api.types.images import (
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
)
from container_api.utils.helpers import convert_kv_strings

LOGGER = logging.getLogger(__name__)

REGISTRY_AUTH_HEADER = "X-Registry-Auth"
REGISTRY_CONFIG_HEADER = "X-Registry-Config"


def image_build(client: DockerClientWrapper, options: ImageBuildOptions) -> ImageBuildResponse:
    """Отправляет контекст сборки и возвращает поток вывода сервера."""

    raw = client.get_raw_client()
    headers = {"Content-Type": "application/x-tar"}
    if options.auth_configs:
        headers[REGISTRY_CONFIG_HEADER] = encode_header(
            {registry: auth.to_dict() for registry, auth in options.auth_configs.items()}
        )
    try:
        response = raw._post(
            raw._url("/build"),
            data=options.context,
            params=build_query_params(options),
            headers=headers,
            stream=True,
            timeout=None,
        )
        raw._raise_for_status(response)
    except DockerException as exc:
        raise DockerAPIError(str(exc), context={"tags": list(options.tags)}) from exc
    LOGGER.info("Image build started for tags %s", options.tags)
    return ImageBuildResponse(body=response.raw, os_type=response.headers.get("Ostype", ""))


def build_query_params(options: ImageBuildOptions) -> Dict[str, Any]:
    """Преобразует ImageBuildOptions в параметры запроса POST /build."""

    params: Dict[str, Any] = {"t": list(options.tags)}
    if options.suppress_output:
        params["q"] = "1"
    if options.remote_context:
        params["remote"] = options.remote_context
    if options.no_cache:
        params["nocache"] = "1"
    params["rm"] = "1" if options.remove else "0"
    if options.force_remove:
        params["forcerm"] = "1"
    if options.pull_parent:
        params["pull"] = "1"
    if options.isolation:
        params["isolation"] = options.isolation
    params.update(
        {
            "cpusetcpus": options.cpu_set_cpus,
            "cpusetmems": options.cpu_set_mems,
            "cpushares": str(options.cpu_shares),
            "cpuquota": str(options.cpu_quota),
            "cpuperiod": str(options.cpu_period),
            "memory": str(options.memory),
            "memswap": str(options.memory_swap),
            "cgroupparent": options.cgroup_parent,
            "shmsize": options.shm_size,
            "dockerfile": options.dockerfile,
            "ulimits": json.dumps([ulimit.to_dict() for ulimit in options.ulimits]),
            "buildargs": json.dumps(convert_kv_strings(options.build_args)),
        }
    )
    return params


def image_create(
    client: DockerClientWrapper, options: ImageCreateOptions
) -> Iterator[Dict[str, Any]]:
    """Создаёт образ из родительского и отдаёт сообщения о прогрессе."""

    params = {"fromImage": options.parent, "tag": options.tag}
    return _stream_post(client, "/images/create", params, options.registry_auth)


def image_pull(client: DockerClientWrapper, options: ImagePullOptions) -> Iterator[Dict[str, Any]]:
    """Загружает образ из реестра."""

    params = {"fromImage": options.image_id, "tag": options.tag}
    return _stream_post(client, "/images/create", params, options.registry_auth)


def image_push(client: DockerClientWrapper, options: ImagePushOptions) -> Iterator[Dict[str, Any]]:
    """Публикует образ в реестр."""

    path = f"/images/{options.image_id}/push"
    return _stream_post(client, path, {"tag": options.tag}, options.registry_auth)


def image_import(
    client: DockerClientWrapper, options: ImageImportOptions
) -> Iterator[Dict[str, Any]]:
    """Импортирует образ из потока или внешнего источника."""

    source_name = options.source_name
    if options.source is not None and not source_name:
        source_name = "-"
    params: Dict[str, Any] = {
        "fromSrc": source_name,
        "repo": options.repository_name,
        "tag": options.tag,
        "message": options.message,
        "changes": list(options.changes),
    }
    return _stream_post(client, "/images/create", params, None, data=options.source)


def image_list(client: DockerClientWrapper, options: ImageListOptions) -> List[Dict[str, Any]]:
    """Возвращает список образов в сыром виде Engine API."""

    raw = client.get_raw_client()
    try:
        return raw.images(
            name=options.match_name or None,
            all=options.all,
            filters=options.filters.to_dict() or None,
        )
    except DockerException as exc:
        raise DockerAPIError(str(exc)) from exc


def image_remove(
    client: DockerClientWrapper, options: ImageRemoveOptions
) -> List[Dict[str, Any]]:
    """Удаляет образ и возвращает список удалённых/отвязанных слоёв."""

    raw = client.get_raw_client()
    try:
        result = raw.remove_image(
            options.image_id, force=options.force, noprune=not options.prune_children
        )
    except DockerException as exc:
        raise DockerAPIError(str(exc), context={"image": options.image_id}) from exc
    return list(result or [])


def image_search(
    client: DockerClientWrapper, options: ImageSearchOptions
) -> List[Dict[str, Any]]:
    """Ищет образы в реестре."""

    raw = client.get_raw_client()
    headers = _auth_headers(options.registry_auth)
    try:
        response = raw._get(
            raw._url("/images/search"), params={"term": options.term}, headers=headers
        )
        return raw._result(response, True)
    except DockerException as exc:
        raise DockerAPIError(str(exc), context={"term": options.term}) from exc


def image_tag(client: DockerClientWrapper, options: ImageTagOptions) -> None:
    """Назначает образу новое имя репозитория и тег."""

    raw = client.get_raw_client()
    try:
        raw.tag(
            options.image_id,
            options.repository_name,
            tag=options.tag or None,
            force=options.force,
        )
    except DockerException as exc:
        raise DockerAPIError(str(exc), context={"image": options.image_id}) from exc


def _auth_headers(registry_auth: Optional[str]) -> Dict[str, str]:
    if not registry_auth:
        return {}
    return {REGISTRY_AUTH_HEADER: registry_auth}


def _stream_post(
    client: DockerClientWrapper,
    path: str,
    params: Dict[str, Any],
    registry_auth: Optional[str],
    *,
    data: Any = None,
) -> Iterator[Dict[str, Any]]:
    raw = client.get_raw_client()
    url = raw._url(path)
    try:
        response = raw._post(
            url,
            data=data,
            params=params,
            headers=_auth_headers(registry_auth),
            stream=True,
            timeout=None,
        )
        raw._raise_for_status(response)
    except DockerException as exc:
        raise DockerAPIError(str(exc), context={"url": url}) from exc
    return raw._stream_helper(response, decode=True)
