"""Commands, their arguments, stored keys and the database mapping."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeAlias


class CommandType(Enum):
    DOCS = "DOCS"
    PONG = "PONG"
    GET = "GET"
    SET = "SET"
    DEL = "DEL"
    FLUSHDB = "FLUSHDB"
    KEYS = "KEYS"
    EXISTS = "EXISTS"
    EXPIRE = "EXPIRE"
    TTL = "TTL"
    INCR = "INCR"
    DECR = "DECR"
    INCRBY = "INCRBY"
    LPUSH = "LPUSH"
    LRANGE = "LRANGE"
    RPUSH = "RPUSH"
    LPOP = "LPOP"
    RPOP = "RPOP"
    HSET = "HSET"
    HGET = "HGET"
    HGETALL = "HGETALL"
    HDEL = "HDEL"
    CLIENT = "CLIENT"
    SADD = "SADD"
    SMEMBERS = "SMEMBERS"
    SREM = "SREM"


@dataclass(frozen=True)
class NoArgs:
    """A command without arguments (PING, FLUSHDB)."""


@dataclass(frozen=True)
class SingleKey:
    key: str


@dataclass(frozen=True)
class MultipleKeys:
    keys: list[str]


@dataclass(frozen=True)
class KeyWithValue:
    key: str
    value: str


@dataclass(frozen=True)
class KeyWithValues:
    key: str
    values: list[str]


@dataclass(frozen=True)
class HashFields:
    key: str
    fields: dict[str, str]


CommandArgs: TypeAlias = NoArgs | SingleKey | MultipleKeys | KeyWithValue | KeyWithValues | HashFields


@dataclass(frozen=True)
class Command:
    command_type: CommandType
    args: CommandArgs


def current_timestamp() -> int:
    """Current Unix time in whole seconds."""
    return int(time.time())


@dataclass
class KeyBase:
    """A stored key with its data and optional expiry timestamp."""

    name: str
    data: Any = None
    expires_at: int | None = None

    def get_ttl(self) -> int:
        """Seconds left before expiry, or -1 for a key without expiry."""
        if self.expires_at is None:
            return -1
        return self.expires_at - current_timestamp()

    def set_ttl(self, ttl: int) -> None:
        self.expires_at = current_timestamp() + ttl

    def is_expired(self) -> bool:
        """A key without expiry never expires."""
        return self.expires_at is not None and self.expires_at <= current_timestamp()


@dataclass
class StringKey(KeyBase):
    data: str | None = None


@dataclass
class ListKey(KeyBase):
    data: deque[str] = field(default_factory=deque)


@dataclass
class SetKey(KeyBase):
    data: set[str] = field(default_factory=set)


@dataclass
class HashKey(KeyBase):
    data: dict[str, str] = field(default_factory=dict)


class Db(dict[str, KeyBase]):
    """Insertion-ordered key space."""

    def swap_remove(self, key: str) -> KeyBase | None:
        """Remove ``key``, moving the last entry into its position.

        Returns the removed value, or None when the key is absent.
        """
        if key not in self:
            return None
        items = list(self.items())
        position = next(i for i, (name, _) in enumerate(items) if name == key)
        removed = items[position][1]
        last = items.pop()
        if position < len(items):
            items[position] = last
        self.clear()
        self.update(items)
        return removed


class ListPushType(Enum):
    LPUSH = "LPUSH"
    RPUSH = "RPUSH"


class PopType(Enum):
    LPOP = "LPOP"
    RPOP = "RPOP"