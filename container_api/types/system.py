"""Структуры версий и подписки на события."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from container_api.types.common import FilterArgs


@dataclass(slots=True)
class Version:
    """Сведения о версии одной из сторон (клиент или сервер)."""

    version: str = ""
    api_version: str = ""
    git_commit: str = ""
    go_version: str = ""
    os: str = ""
    arch: str = ""
    kernel_version: str = ""
    experimental: bool = False
    build_time: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Version":
        """Разбирает ответ /version Engine API."""

        return cls(
            version=str(data.get("Version", "")),
            api_version=str(data.get("ApiVersion", "")),
            git_commit=str(data.get("GitCommit", "")),
            go_version=str(data.get("GoVersion", "")),
            os=str(data.get("Os", "")),
            arch=str(data.get("Arch", "")),
            kernel_version=str(data.get("KernelVersion", "")),
            experimental=bool(data.get("Experimental", False)),
            build_time=str(data.get("BuildTime", "")),
        )


@dataclass(slots=True)
class VersionResponse:
    """Версии клиента и сервера."""

    client: Version
    server: Optional[Version] = None

    def server_ok(self) -> bool:
        """True, если сервер ответил и его ответ удалось разобрать."""

        return self.server is not None


@dataclass(slots=True)
class EventsOptions:
    """Окно и фильтры подписки на события."""

    since: str = ""
    until: str = ""
    filters: FilterArgs = field(default_factory=FilterArgs)
