"""Turning a list of words into a typed command."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from zyst.aof import write_aof
from zyst.commands.build import (
    build_client_command,
    build_decr_command,
    build_delete_command,
    build_docs_command,
    build_exists_command,
    build_expire_command,
    build_flush_db_command,
    build_get_command,
    build_hdel_command,
    build_hget_command,
    build_hgetall_command,
    build_hset_command,
    build_incr_command,
    build_incrby_command,
    build_keys_command,
    build_lpop_command,
    build_lpush_command,
    build_lrange_command,
    build_pong_command,
    build_rpop_command,
    build_rpush_command,
    build_sadd_command,
    build_set_command,
    build_smembers_command,
    build_srem_command,
    build_ttl_command,
)
from zyst.errors import InvalidCommand
from zyst.types import Command

_Builder = Callable[[Sequence[str]], Command]

_BUILDERS: dict[str, _Builder] = {
    "DOCS": lambda args: build_docs_command(),
    "PING": lambda args: build_pong_command(),
    "FLUSHDB": lambda args: build_flush_db_command(),
    "GET": build_get_command,
    "SET": build_set_command,
    "DEL": build_delete_command,
    "KEYS": build_keys_command,
    "EXISTS": build_exists_command,
    "EXPIRE": build_expire_command,
    "TTL": build_ttl_command,
    "INCR": build_incr_command,
    "DECR": build_decr_command,
    "INCRBY": build_incrby_command,
    "LPUSH": build_lpush_command,
    "RPUSH": build_rpush_command,
    "LRANGE": build_lrange_command,
    "LPOP": build_lpop_command,
    "RPOP": build_rpop_command,
    "HSET": build_hset_command,
    "HGET": build_hget_command,
    "HGETALL": build_hgetall_command,
    "HDEL": build_hdel_command,
    "CLIENT": build_client_command,
    "SADD": build_sadd_command,
    "SMEMBERS": build_smembers_command,
    "SREM": build_srem_command,
}


async def parse_command(args: Sequence[str], restore: bool = False) -> Command:
    """Build a command from its words and log it unless restoring.

    The command name is case-insensitive. Raises InvalidCommand for an empty
    or unknown command and the builder's error for bad arguments.
    """
    if not args:
        raise InvalidCommand()
    name, *rest = args
    builder = _BUILDERS.get(name.upper())
    if builder is None:
        raise InvalidCommand()
    command = builder(rest)
    if not restore:
        await write_aof(command)
    return command