"""Общие структуры, которые разделяют опции контейнеров и образов."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional


class FilterArgs:
    """Набор фильтров вида ключ -> множество значений.

    Порядок добавления значений сохраняется, дубликаты игнорируются. Кодирование
    в параметры запроса выполняет docker SDK, поэтому наружу отдаётся простой
    словарь списков.
    """

    __slots__ = ("_fields",)

    def __init__(self, initial: Optional[Mapping[str, Iterable[str]]] = None) -> None:
        self._fields: Dict[str, Dict[str, bool]] = {}
        for key, values in (initial or {}).items():
            if isinstance(values, str):
                values = [values]
            for value in values:
                self.add(key, value)

    def add(self, key: str, value: str) -> None:
        """Добавляет значение к ключу."""

        self._fields.setdefault(key, {})[value] = True

    def delete(self, key: str, value: str) -> None:
        """Удаляет значение, пустые ключи исчезают целиком."""

        values = self._fields.get(key)
        if not values:
            return
        values.pop(value, None)
        if not values:
            del self._fields[key]

    def get(self, key: str) -> List[str]:
        return list(self._fields.get(key, {}))

    def contains(self, key: str) -> bool:
        return key in self._fields

    def to_dict(self) -> Dict[str, List[str]]:
        """Сериализует фильтры в форму, понятную docker.APIClient."""

        return {key: list(values) for key, values in self._fields.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Iterable[str]]) -> "FilterArgs":
        return cls(data)

    def __len__(self) -> int:
        return len(self._fields)

    def __bool__(self) -> bool:
        return bool(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilterArgs):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"FilterArgs({self.to_dict()!r})"


@dataclass(slots=True)
class Ulimit:
    """Именованный лимит ресурса (мягкое/жёсткое значение)."""

    name: str
    soft: int
    hard: int

    def to_dict(self) -> Dict[str, Any]:
        return {"Name": self.name, "Soft": self.soft, "Hard": self.hard}


@dataclass(slots=True)
class AuthConfig:
    """Учётные данные для одного реестра образов."""

    username: str = ""
    password: str = ""
    auth: str = ""
    email: str = ""
    server_address: str = ""
    identity_token: str = ""
    registry_token: str = ""

    def to_dict(self) -> Dict[str, str]:
        """Возвращает непустые поля с именами ключей Engine API."""

        payload = {
            "username": self.username,
            "password": self.password,
            "auth": self.auth,
            "email": self.email,
            "serveraddress": self.server_address,
            "identitytoken": self.identity_token,
            "registrytoken": self.registry_token,
        }
        return {key: value for key, value in payload.items() if value}


@dataclass(slots=True)
class ContainerConfig:
    """Часть конфигурации контейнера, которую можно встроить в commit."""

    hostname: str = ""
    domainname: str = ""
    user: str = ""
    env: List[str] = field(default_factory=list)
    cmd: List[str] = field(default_factory=list)
    entrypoint: List[str] = field(default_factory=list)
    image: str = ""
    working_dir: str = ""
    labels: Dict[str, str] = field(default_factory=dict)
    exposed_ports: List[str] = field(default_factory=list)
    volumes: List[str] = field(default_factory=list)
    stop_signal: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Сериализует только заданные поля в ключи `Config` Engine API."""

        payload: Dict[str, Any] = {
            "Hostname": self.hostname,
            "Domainname": self.domainname,
            "User": self.user,
            "Env": list(self.env),
            "Cmd": list(self.cmd),
            "Entrypoint": list(self.entrypoint),
            "Image": self.image,
            "WorkingDir": self.working_dir,
            "Labels": dict(self.labels),
            "ExposedPorts": {port: {} for port in self.exposed_ports},
            "Volumes": {volume: {} for volume in self.volumes},
            "StopSignal": self.stop_signal,
        }
        return {key: value for key, value in payload.items() if value}
