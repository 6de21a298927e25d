"""Наборы параметров для операций над образами."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, BinaryIO, Dict, List, Optional, Protocol

from container_api.types.common import AuthConfig, FilterArgs, Ulimit


class ReadCloser(Protocol):
    """Поток, который вызывающий код обязан дочитать и закрыть."""

    def read(self, size: int = -1) -> bytes:  # pragma: no cover - протокол
        ...

    def close(self) -> None:  # pragma: no cover - протокол
        ...


@dataclass(slots=True)
class ImageBuildOptions:
    """Всё, что нужно серверу для сборки образа.

    build_args хранит сырые строки вида KEY=VALUE, а auth_configs сопоставляет
    хост реестра с учётными данными. Контекст сборки читается один раз.
    """

    tags: List[str] = field(default_factory=list)
    suppress_output: bool = False
    remote_context: str = ""
    no_cache: bool = False
    remove: bool = False
    force_remove: bool = False
    pull_parent: bool = False
    isolation: str = ""
    cpu_set_cpus: str = ""
    cpu_set_mems: str = ""
    cpu_shares: int = 0
    cpu_quota: int = 0
    cpu_period: int = 0
    memory: int = 0
    memory_swap: int = 0
    cgroup_parent: str = ""
    shm_size: str = ""
    dockerfile: str = ""
    ulimits: List[Ulimit] = field(default_factory=list)
    build_args: List[str] = field(default_factory=list)
    auth_configs: Dict[str, AuthConfig] = field(default_factory=dict)
    context: Optional[BinaryIO] = None


@dataclass(slots=True)
class ImageBuildResponse:
    """Результат сборки: поток вывода и тип ОС сервера."""

    body: ReadCloser
    os_type: str = ""


@dataclass(slots=True)
class ImageCreateOptions:
    # parent - образ, из которого создаётся новый
    parent: str = ""
    tag: str = ""
    # registry_auth - заранее закодированные учётные данные
    registry_auth: str = ""


@dataclass(slots=True)
class ImageImportOptions:
    """Параметры импорта образа из потока на стороне клиента."""

    source: Optional[BinaryIO] = None
    source_name: str = ""
    repository_name: str = ""
    message: str = ""
    tag: str = ""
    changes: List[str] = field(default_factory=list)


@dataclass(slots=True)
class ImageListOptions:
    match_name: str = ""
    all: bool = False
    filters: FilterArgs = field(default_factory=FilterArgs)


@dataclass(slots=True)
class ImagePullOptions:
    """Параметры загрузки образа из реестра."""

    image_id: str = ""
    tag: str = ""
    registry_auth: str = ""


@dataclass(slots=True)
class ImagePushOptions(ImagePullOptions):
    """Параметры публикации образа.

    Пока совпадает по форме с ImagePullOptions, но остаётся отдельным именем,
    чтобы в будущем получить собственные поля.
    """


@dataclass(slots=True)
class ImageRemoveOptions:
    image_id: str
    force: bool = False
    prune_children: bool = False


@dataclass(slots=True)
class ImageSearchOptions:
    term: str
    registry_auth: str = ""


@dataclass(slots=True)
class ImageTagOptions:
    image_id: str
    repository_name: str
    tag: str = ""
    force: bool = False


def fields_equal(left: Any, right: Any) -> bool:
    """Сравнивает два набора опций только по значениям полей."""

    return asdict(left) == asdict(right)
