"""String key commands: GET, SET, DEL, INCR/DECR, KEYS, EXISTS, EXPIRE, TTL."""

from __future__ import annotations

import re

from zyst.errors import (
    InvalidCommand,
    NotInt,
    NotIntOrOutOfRange,
    RegexError,
    TTLRequired,
    WrongType,
)
from zyst.response import (
    EmptyArrayResponse,
    IntResponse,
    ListResponse,
    NilResponse,
    OkResponse,
    SimpleStringResponse,
    ZystResponse,
)
from zyst.types import (
    Command,
    Db,
    KeyWithValue,
    MultipleKeys,
    SingleKey,
    StringKey,
)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _parse_i64(text: str) -> int | None:
    """Parse a signed 64-bit integer, or return None when it is not one."""
    if not _INTEGER.fullmatch(text):
        return None
    number = int(text)
    if not _I64_MIN <= number <= _I64_MAX:
        return None
    return number


def _checked(number: int) -> int:
    if not _I64_MIN <= number <= _I64_MAX:
        raise NotIntOrOutOfRange()
    return number


def _keys_of(command: Command) -> list[str]:
    match command.args:
        case SingleKey(key=key):
            return [key]
        case MultipleKeys(keys=keys):
            return list(keys)
    raise InvalidCommand()


async def get_key(db: Db, command: Command) -> ZystResponse:
    """Return the string stored at a key, dropping it when it has expired."""
    if not isinstance(command.args, SingleKey):
        raise InvalidCommand()
    key = db.get(command.args.key)
    if key is None:
        return NilResponse()
    if not isinstance(key, StringKey):
        raise WrongType()
    if key.data is not None and not await delete_expired_key(db, key):
        return SimpleStringResponse(key.data)
    return NilResponse()


async def set_key(db: Db, command: Command) -> ZystResponse:
    if not isinstance(command.args, KeyWithValue):
        raise InvalidCommand()
    name = command.args.key
    db[name] = StringKey(name, command.args.value)
    return OkResponse()


async def delete_key(db: Db, command: Command) -> ZystResponse:
    """Delete the given keys and return how many existed."""
    keys = _keys_of(command)
    deleted = sum(1 for key in keys if db.swap_remove(key) is not None)
    return IntResponse(deleted)


def _string_key_for_update(db: Db, name: str) -> StringKey:
    key = db.get(name)
    if key is None:
        key = StringKey(name, "0")
        db[name] = key
    elif not isinstance(key, StringKey):
        raise WrongType()
    return key


def _add_to_key(db: Db, name: str, by: int) -> ZystResponse:
    key = _string_key_for_update(db, name)
    current = _parse_i64(key.data if key.data is not None else "0")
    if current is None:
        raise NotInt()
    new_value = _checked(current + by)
    key.data = str(new_value)
    return IntResponse(new_value)


async def incr(db: Db, command: Command) -> ZystResponse:
    """Add one to the integer at a key, starting from 0 when it is missing."""
    if not isinstance(command.args, SingleKey):
        raise InvalidCommand()
    return _add_to_key(db, command.args.key, 1)


async def decr(db: Db, command: Command) -> ZystResponse:
    """Subtract one from the integer at a key, starting from 0 when it is missing."""
    if not isinstance(command.args, SingleKey):
        raise InvalidCommand()
    return _add_to_key(db, command.args.key, -1)


async def incrby(db: Db, command: Command) -> ZystResponse:
    """Add an increment to the integer at a key, starting from 0 when it is missing."""
    if not isinstance(command.args, KeyWithValue):
        raise InvalidCommand()
    by = _parse_i64(command.args.value)
    if by is None:
        raise NotInt()
    return _add_to_key(db, command.args.key, by)


async def get_keys(db: Db, command: Command) -> ZystResponse:
    """Return the keys matching a glob-style pattern."""
    if not isinstance(command.args, SingleKey):
        raise InvalidCommand()
    try:
        matcher = re.compile(convert_redis_pattern_to_regex(command.args.key))
    except re.error as error:
        raise RegexError() from error
    results = [key for key in db if matcher.fullmatch(key)]
    if not results:
        return EmptyArrayResponse()
    return ListResponse(results)


async def exists(db: Db, command: Command) -> ZystResponse:
    keys = _keys_of(command)
    return IntResponse(sum(1 for key in keys if key in db))


async def expire(db: Db, command: Command) -> ZystResponse:
    """Set a time to live in seconds; 1 when the key exists, 0 otherwise."""
    if not isinstance(command.args, KeyWithValue):
        raise InvalidCommand()
    seconds = _parse_i64(command.args.value)
    if seconds is None:
        raise TTLRequired()
    key = db.get(command.args.key)
    if key is None:
        return IntResponse(0)
    key.set_ttl(seconds)
    return IntResponse(1)


async def ttl(db: Db, command: Command) -> ZystResponse:
    """Seconds left for a string key, -1 without expiry, -2 when missing."""
    if not isinstance(command.args, SingleKey):
        raise InvalidCommand()
    key = db.get(command.args.key)
    if key is None:
        return IntResponse(-2)
    if not isinstance(key, StringKey):
        raise WrongType()
    return IntResponse(key.get_ttl())


def convert_redis_pattern_to_regex(pattern: str) -> str:
    """Turn a glob pattern into an anchored regular expression.

    ``*`` becomes ``.*``, ``?`` becomes ``.``, brackets are kept and every
    other character is escaped.
    """
    translated = {"*": ".*", "?": ".", "[": "[", "]": "]"}
    body = "".join(translated.get(char, re.escape(char)) for char in pattern)
    return f"^{body}$"


async def delete_expired_key(db: Db, key: StringKey) -> bool:
    """Remove ``key`` from the database if it has expired."""
    if key.is_expired():
        db.swap_remove(key.name)
        return True
    return False