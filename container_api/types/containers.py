"""Наборы параметров для операций над контейнерами."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, BinaryIO, Dict, List, Optional

from container_api.types.common import ContainerConfig, FilterArgs


@dataclass(slots=True)
class ContainerAttachOptions:
    """Параметры подключения к потокам запущенного контейнера."""

    container_id: str
    stream: bool = False
    stdin: bool = False
    stdout: bool = False
    stderr: bool = False


@dataclass(slots=True)
class ContainerCommitOptions:
    """Параметры фиксации изменений контейнера в новый образ."""

    container_id: str
    repository_name: str = ""
    tag: str = ""
    comment: str = ""
    author: str = ""
    changes: List[str] = field(default_factory=list)
    pause: bool = False
    config: Optional[ContainerConfig] = None


@dataclass(slots=True)
class ContainerExecInspect:
    """Снимок состояния exec-сессии.

    Код возврата имеет смысл только после завершения процесса (running=False).
    """

    exec_id: str
    container_id: str
    running: bool
    exit_code: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContainerExecInspect":
        """Строит объект из ответа exec_inspect."""

        return cls(
            exec_id=str(data.get("ID", "")),
            container_id=str(data.get("ContainerID", "")),
            running=bool(data.get("Running", False)),
            exit_code=int(data.get("ExitCode") or 0),
        )


@dataclass(slots=True)
class ContainerListOptions:
    """Фильтры и границы выборки списка контейнеров.

    limit <= 0 означает отсутствие ограничения.
    """

    quiet: bool = False
    size: bool = False
    all: bool = False
    latest: bool = False
    since: str = ""
    before: str = ""
    limit: int = 0
    filter: FilterArgs = field(default_factory=FilterArgs)


@dataclass(slots=True)
class ContainerLogsOptions:
    """Параметры выборки логов контейнера."""

    container_id: str
    show_stdout: bool = False
    show_stderr: bool = False
    since: str = ""
    timestamps: bool = False
    follow: bool = False
    tail: str = ""


@dataclass(slots=True)
class ContainerRemoveOptions:
    container_id: str
    remove_volumes: bool = False
    remove_links: bool = False
    force: bool = False


@dataclass(slots=True)
class CopyToContainerOptions:
    """Параметры записи архива внутрь контейнера.

    Поток content читается ровно один раз.
    """

    container_id: str
    path: str
    content: Optional[BinaryIO] = None
    allow_overwrite_dir_with_file: bool = False


@dataclass(slots=True)
class ResizeOptions:
    """Новые размеры tty контейнера или exec-процесса."""

    id: str
    height: int = 0
    width: int = 0
