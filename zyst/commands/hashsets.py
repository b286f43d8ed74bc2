"""Hash commands: HSET, HGET, HGETALL, HDEL."""

from __future__ import annotations

from zyst.errors import InvalidCommand, WrongType
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
    HashFields,
    HashKey,
    KeyWithValue,
    KeyWithValues,
    SingleKey,
)


def _swap_remove_field(fields: dict[str, str], name: str) -> bool:
    """Remove a field, moving the last field into its position."""
    if name not in fields:
        return False
    items = list(fields.items())
    position = next(i for i, (field, _) in enumerate(items) if field == name)
    last = items.pop()
    if position < len(items):
        items[position] = last
    fields.clear()
    fields.update(items)
    return True


async def hset(db: Db, command: Command) -> ZystResponse:
    """Set hash fields and return how many new fields were added."""
    if not isinstance(command.args, HashFields):
        raise InvalidCommand()
    name = command.args.key
    fields = command.args.fields
    existing = db.get(name)

    if existing is None:
        db[name] = HashKey(name, dict(fields))
        return IntResponse(len(fields))
    if not isinstance(existing, HashKey):
        raise WrongType()

    before = len(existing.data)
    existing.data.update(fields)
    return IntResponse(len(existing.data) - before)


async def hget(db: Db, command: Command) -> ZystResponse:
    if not isinstance(command.args, KeyWithValue):
        raise InvalidCommand()
    key = db.get(command.args.key)
    if key is None:
        return NilResponse()
    if not isinstance(key, HashKey):
        raise WrongType()
    value = key.data.get(command.args.value)
    if value is None:
        return NilResponse()
    return SimpleStringResponse(value)


async def hgetall(db: Db, command: Command) -> ZystResponse:
    """Return fields and values interleaved."""
    if not isinstance(command.args, SingleKey):
        raise InvalidCommand()
    key = db.get(command.args.key)
    if key is None:
        return EmptyArrayResponse()
    if not isinstance(key, HashKey):
        raise WrongType()
    return ListResponse([item for pair in key.data.items() for item in pair])


async def hdel(db: Db, command: Command) -> ZystResponse:
    """Delete hash fields; the hash itself goes once it is empty."""
    if not isinstance(command.args, KeyWithValues):
        raise InvalidCommand()
    name = command.args.key
    key = db.get(name)
    if key is None:
        return IntResponse(0)
    if not isinstance(key, HashKey):
        raise WrongType()

    deleted = sum(1 for field in command.args.values if _swap_remove_field(key.data, field))
    if not key.data:
        db.swap_remove(name)
    return IntResponse(deleted)