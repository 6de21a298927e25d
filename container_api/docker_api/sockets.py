"""Адаптеры сырых сокетов, которые docker SDK отдаёт для attach/exec."""

from __future__ import annotations

import io
import socket
from typing import Any

from container_api.types.hijack import HijackedResponse


def _unwrap(sock: Any) -> Any:
    # SocketIO из http.client прячет настоящий сокет в _sock
    return getattr(sock, "_sock", sock)


class StreamConnection(io.RawIOBase):
    """Соединение без поддержки полузакрытия (например, named pipe)."""

    def __init__(self, sock: Any) -> None:
        super().__init__()
        self._sock = _unwrap(sock)

    @property
    def raw_socket(self) -> Any:
        return self._sock

    def readable(self) -> bool:
        return True

    def writable(self) -> bool:
        return True

    def readinto(self, buffer: Any) -> int:
        if hasattr(self._sock, "recv_into"):
            return self._sock.recv_into(buffer)
        data = self._sock.recv(len(buffer))
        buffer[: len(data)] = data
        return len(data)

    def write(self, data: Any) -> int:
        return self._sock.send(data)

    def close(self) -> None:
        if self.closed:
            return
        try:
            self._sock.close()
        finally:
            super().close()


class SocketConnection(StreamConnection):
    """TCP/unix сокет: дополнительно умеет закрывать направление записи."""

    def close_write(self) -> None:
        self._sock.shutdown(socket.SHUT_WR)


def hijack(sock: Any) -> HijackedResponse:
    """Оборачивает сокет из APIClient в HijackedResponse."""

    raw = _unwrap(sock)
    if hasattr(raw, "shutdown"):
        return HijackedResponse.from_connection(SocketConnection(raw))
    return HijackedResponse.from_connection(StreamConnection(raw))
