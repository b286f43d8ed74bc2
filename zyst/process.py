"""Executing commands against the database."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence

from zyst.commands.db import flush_db
from zyst.commands.hashsets import hdel, hget, hgetall, hset
from zyst.commands.keys import (
    decr,
    delete_key,
    exists,
    expire,
    get_key,
    get_keys,
    incr,
    incrby,
    set_key,
    ttl,
)
from zyst.commands.lists import lpop, lpush, lrange, rpop, rpush
from zyst.commands.misc import client, docs, pong
from zyst.commands.sets import sadd, smembers, srem
from zyst.parser import parse_command
from zyst.response import ZystResponse
from zyst.types import Command, CommandType, Db

_Handler = Callable[[Db, Command], Awaitable[ZystResponse]]

_HANDLERS: dict[CommandType, _Handler] = {
    CommandType.DOCS: lambda db, command: docs(),
    CommandType.PONG: lambda db, command: pong(),
    CommandType.GET: get_key,
    CommandType.SET: set_key,
    CommandType.DEL: delete_key,
    CommandType.FLUSHDB: lambda db, command: flush_db(db),
    CommandType.KEYS: get_keys,
    CommandType.EXISTS: exists,
    CommandType.EXPIRE: expire,
    CommandType.TTL: ttl,
    CommandType.INCR: incr,
    CommandType.DECR: decr,
    CommandType.INCRBY: incrby,
    CommandType.LPUSH: lpush,
    CommandType.LRANGE: lrange,
    CommandType.RPUSH: rpush,
    CommandType.LPOP: lpop,
    CommandType.RPOP: rpop,
    CommandType.HSET: hset,
    CommandType.HGET: hget,
    CommandType.HGETALL: hgetall,
    CommandType.HDEL: hdel,
    CommandType.CLIENT: lambda db, command: client(),
    CommandType.SADD: sadd,
    CommandType.SMEMBERS: smembers,
    CommandType.SREM: srem,
}


async def process_command(command: Sequence[str], db: Db, restore: bool = False) -> ZystResponse:
    """Parse the words of a command and run it; errors are raised as ZystError."""
    parsed = await parse_command(command, restore)
    return await _HANDLERS[parsed.command_type](db, parsed)