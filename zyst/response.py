"""Replies sent back to clients, with their wire encoding."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from zyst.errors import ZystError


class ZystResponse(ABC):
    """A reply to a command."""

    @abstractmethod
    def encode(self) -> str:
        """Return the reply in RESP form."""

    def __str__(self) -> str:
        return self.encode()


@dataclass(frozen=True)
class OkResponse(ZystResponse):
    def encode(self) -> str:
        return "+OK\r\n"


@dataclass(frozen=True)
class IntResponse(ZystResponse):
    value: int

    def encode(self) -> str:
        return f"+(integer) {self.value}\r\n"


@dataclass(frozen=True)
class SimpleStringResponse(ZystResponse):
    value: str

    def encode(self) -> str:
        return f"+{self.value}\r\n"


@dataclass(frozen=True)
class ListResponse(ZystResponse):
    values: list[str]

    def encode(self) -> str:
        parts = [f"*{len(self.values)}\r\n"]
        parts.extend(f"${len(value.encode('utf-8'))}\r\n{value}\r\n" for value in self.values)
        return "".join(parts)


@dataclass(frozen=True)
class NilResponse(ZystResponse):
    def encode(self) -> str:
        return "+(nil)\r\n"


@dataclass(frozen=True)
class EmptyArrayResponse(ZystResponse):
    def encode(self) -> str:
        return "+(empty array)\r\n"


@dataclass(frozen=True)
class ErrorResponse(ZystResponse):
    error: ZystError

    def encode(self) -> str:
        return f"-{self.error}\r\n"