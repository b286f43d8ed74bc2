"""List commands: LPUSH, RPUSH, LRANGE, LPOP, RPOP."""

from __future__ import annotations

import re
from collections import deque
from itertools import islice

from zyst.errors import InvalidCommand, NotIntOrOutOfRange, WrongType
from zyst.response import (
    EmptyArrayResponse,
    IntResponse,
    ListResponse,
    NilResponse,
    SimpleStringResponse,
    ZystResponse,
)
from zyst.types import (
    Command,
    Db,
    KeyWithValue,
    KeyWithValues,
    ListKey,
    ListPushType,
    PopType,
    SingleKey,
    StringKey,
)

_SIGNED = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"\+?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _parse_index(text: str) -> int:
    if not _SIGNED.fullmatch(text):
        raise NotIntOrOutOfRange()
    number = int(text)
    if not _I64_MIN <= number <= _I64_MAX:
        raise NotIntOrOutOfRange()
    return number


def _parse_count(text: str | None) -> int:
    """Pop count: 1 when absent or not a non-negative integer."""
    if text is None or not _UNSIGNED.fullmatch(text):
        return 1
    number = int(text)
    return number if number < 2**64 else 1


async def _push(db: Db, command: Command, push_type: ListPushType) -> ZystResponse:
    if not isinstance(command.args, KeyWithValues):
        raise InvalidCommand()
    name = command.args.key
    values = list(command.args.values)
    existing = db.get(name)

    if existing is None:
        if push_type is ListPushType.LPUSH:
            values.reverse()
        db[name] = ListKey(name, deque(values))
        return IntResponse(len(values))
    if not isinstance(existing, ListKey):
        raise WrongType()

    if push_type is ListPushType.LPUSH:
        existing.data.extendleft(reversed(values))
    else:
        existing.data.extend(values)
    return IntResponse(len(existing.data))


async def lpush(db: Db, command: Command) -> ZystResponse:
    return await _push(db, command, ListPushType.LPUSH)


async def rpush(db: Db, command: Command) -> ZystResponse:
    return await _push(db, command, ListPushType.RPUSH)


async def lrange(db: Db, command: Command) -> ZystResponse:
    """Return list elements between two inclusive, possibly negative, indices."""
    if not isinstance(command.args, KeyWithValues):
        raise InvalidCommand()
    low = _parse_index(command.args.values[0])
    high = _parse_index(command.args.values[1])

    key = db.get(command.args.key)
    if isinstance(key, StringKey):
        raise WrongType()
    if not isinstance(key, ListKey):
        return EmptyArrayResponse()

    length = len(key.data)
    start = low if low >= 0 else max(length + low, 0)
    if high >= 0:
        stop = min(high + 1, length)
    else:
        stop = min(max(length + high + 1, 0), length)

    if start >= stop or start >= length:
        return EmptyArrayResponse()
    results = list(islice(key.data, start, stop))
    if not results:
        return EmptyArrayResponse()
    return ListResponse(results)


async def _pop(db: Db, command: Command, pop_type: PopType) -> ZystResponse:
    match command.args:
        case SingleKey(key=name):
            count_text = None
        case KeyWithValue(key=name, value=count_text):
            pass
        case _:
            raise InvalidCommand()

    key = db.get(name)
    if isinstance(key, StringKey):
        raise WrongType()
    if not isinstance(key, ListKey):
        return EmptyArrayResponse()

    requested = _parse_count(count_text)
    taken = min(requested, len(key.data))
    if pop_type is PopType.LPOP:
        removed = [key.data.popleft() for _ in range(taken)]
    else:
        removed = [key.data.pop() for _ in range(taken)]

    if not removed:
        return NilResponse()
    if requested == 1:
        return SimpleStringResponse(removed[0])
    return ListResponse(removed)


async def lpop(db: Db, command: Command) -> ZystResponse:
    return await _pop(db, command, PopType.LPOP)


async def rpop(db: Db, command: Command) -> ZystResponse:
    return await _pop(db, command, PopType.RPOP)