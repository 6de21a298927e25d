"""Обёртка над соединением, перехваченным у HTTP-запроса (attach/exec)."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, runtime_checkable

LOGGER = logging.getLogger(__name__)


@runtime_checkable
class CloseWriter(Protocol):
    """Соединение, умеющее закрыть только исходящее направление."""

    def close_write(self) -> None:
        """Сообщает удалённой стороне, что записей больше не будет."""


@dataclass
class HijackedResponse:
    """Живое двунаправленное соединение и буферизованный читатель поверх него.

    Читать следует только через reader. close() вызывается один раз после
    завершения всех операций чтения и записи; повторные вызовы ничего не делают.
    """

    conn: Any
    reader: io.BufferedIOBase
    _closed: bool = field(default=False, init=False, repr=False)

    @classmethod
    def from_connection(
        cls, conn: Any, buffer_size: int = io.DEFAULT_BUFFER_SIZE
    ) -> "HijackedResponse":
        """Создаёт обёртку, строя BufferedReader над тем же соединением."""

        return cls(conn=conn, reader=io.BufferedReader(conn, buffer_size))

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Освобождает соединение; любая ошибка закрытия только журналируется."""

        if self._closed:
            return
        self._closed = True
        try:
            self.conn.close()
        except Exception as exc:
            LOGGER.warning("Failed to close hijacked connection: %s", exc, exc_info=True)

    def close_write(self) -> None:
        """Полузакрытие: доступно, только если соединение это поддерживает.

        Ошибка соединения пробрасывается без изменений. Если возможности нет,
        метод молча завершается и не трогает соединение.
        """

        if isinstance(self.conn, CloseWriter):
            self.conn.close_write()

    def __enter__(self) -> "HijackedResponse":
        return self

    def __exit__(self, exc_type: Optional[type], exc: Optional[BaseException], tb: Any) -> None:
        self.close()
