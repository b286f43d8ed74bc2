"""Set commands: SADD, SMEMBERS, SREM."""

from __future__ import annotations

from zyst.errors import InvalidCommand, WrongType
from zyst.response import EmptyArrayResponse, IntResponse, ListResponse, ZystResponse
from zyst.types import Command, Db, KeyWithValues, SetKey, SingleKey


async def sadd(db: Db, command: Command) -> ZystResponse:
    """Add members to a set.

    For an existing set the reply is the set's new size; for a new set it is
    the number of members given.
    """
    if not isinstance(command.args, KeyWithValues):
        raise InvalidCommand()
    name = command.args.key
    values = command.args.values
    existing = db.get(name)

    if existing is None:
        db[name] = SetKey(name, set(values))
        return IntResponse(len(values))
    if not isinstance(existing, SetKey):
        raise WrongType()

    existing.data.update(values)
    return IntResponse(len(existing.data))


async def smembers(db: Db, command: Command) -> ZystResponse:
    if not isinstance(command.args, SingleKey):
        raise InvalidCommand()
    key = db.get(command.args.key)
    if key is None:
        return EmptyArrayResponse()
    if not isinstance(key, SetKey):
        raise WrongType()
    return ListResponse(list(key.data))


async def srem(db: Db, command: Command) -> ZystResponse:
    """Remove members; the set itself goes once it is empty."""
    if not isinstance(command.args, KeyWithValues):
        raise InvalidCommand()
    name = command.args.key
    key = db.get(name)
    if key is None:
        return IntResponse(0)
    if not isinstance(key, SetKey):
        raise WrongType()

    deleted = 0
    for member in command.args.values:
        if member in key.data:
            key.data.remove(member)
            deleted += 1
    if not key.data:
        db.swap_remove(name)
    return IntResponse(deleted)