"""Building typed commands from their argument words."""

from __future__ import annotations

from collections.abc import Sequence

from zyst.errors import WrongNumberArgs
from zyst.types import (
    Command,
    CommandType,
    HashFields,
    KeyWithValue,
    KeyWithValues,
    MultipleKeys,
    NoArgs,
    SingleKey,
)


def _require(args: Sequence[str], at_least: int) -> None:
    if len(args) < at_least:
        raise WrongNumberArgs()


def _single_key(args: Sequence[str], command_type: CommandType) -> Command:
    _require(args, 1)
    return Command(command_type, SingleKey(args[0]))


def _multiple_keys(args: Sequence[str], command_type: CommandType) -> Command:
    _require(args, 1)
    return Command(command_type, MultipleKeys(list(args)))


def _key_with_value(args: Sequence[str], command_type: CommandType) -> Command:
    return Command(command_type, KeyWithValue(args[0], args[1]))


def _key_with_values(args: Sequence[str], command_type: CommandType) -> Command:
    _require(args, 1)
    return Command(command_type, KeyWithValues(args[0], list(args[1:])))


def build_docs_command() -> Command:
    return Command(CommandType.DOCS, NoArgs())


def build_pong_command() -> Command:
    return Command(CommandType.PONG, NoArgs())


def build_flush_db_command() -> Command:
    return Command(CommandType.FLUSHDB, NoArgs())


def build_get_command(args: Sequence[str]) -> Command:
    return _single_key(args, CommandType.GET)


def build_keys_command(args: Sequence[str]) -> Command:
    return _single_key(args, CommandType.KEYS)


def build_set_command(args: Sequence[str]) -> Command:
    if len(args) != 2:
        raise WrongNumberArgs()
    return _key_with_value(args, CommandType.SET)


def build_delete_command(args: Sequence[str]) -> Command:
    return _multiple_keys(args, CommandType.DEL)


def build_exists_command(args: Sequence[str]) -> Command:
    return _multiple_keys(args, CommandType.EXISTS)


def build_expire_command(args: Sequence[str]) -> Command:
    _require(args, 2)
    return _key_with_value(args, CommandType.EXPIRE)


def build_ttl_command(args: Sequence[str]) -> Command:
    return _single_key(args, CommandType.TTL)


def build_incr_command(args: Sequence[str]) -> Command:
    return _single_key(args, CommandType.INCR)


def build_decr_command(args: Sequence[str]) -> Command:
    return _single_key(args, CommandType.DECR)


def build_incrby_command(args: Sequence[str]) -> Command:
    _require(args, 2)
    return _key_with_value(args, CommandType.INCRBY)


def build_lpush_command(args: Sequence[str]) -> Command:
    return _key_with_values(args, CommandType.LPUSH)


def build_rpush_command(args: Sequence[str]) -> Command:
    return _key_with_values(args, CommandType.RPUSH)


def build_lrange_command(args: Sequence[str]) -> Command:
    _require(args, 3)
    return Command(CommandType.LRANGE, KeyWithValues(args[0], [args[1], args[2]]))


def _pop_command(args: Sequence[str], command_type: CommandType) -> Command:
    _require(args, 1)
    if len(args) == 1:
        return Command(command_type, SingleKey(args[0]))
    return _key_with_value(args, command_type)


def build_lpop_command(args: Sequence[str]) -> Command:
    return _pop_command(args, CommandType.LPOP)


def build_rpop_command(args: Sequence[str]) -> Command:
    return _pop_command(args, CommandType.RPOP)


def build_hset_command(args: Sequence[str]) -> Command:
    if len(args) < 3 or len(args) % 2 == 0:
        raise WrongNumberArgs()
    fields = dict(zip(args[1::2], args[2::2]))
    return Command(CommandType.HSET, HashFields(args[0], fields))


def build_hget_command(args: Sequence[str]) -> Command:
    if len(args) != 2:
        raise WrongNumberArgs()
    return _key_with_value(args, CommandType.HGET)


def build_hgetall_command(args: Sequence[str]) -> Command:
    return _single_key(args, CommandType.HGETALL)


def build_hdel_command(args: Sequence[str]) -> Command:
    _require(args, 2)
    return _key_with_values(args, CommandType.HDEL)


def build_client_command(args: Sequence[str]) -> Command:
    _require(args, 2)
    return _key_with_values(args, CommandType.CLIENT)


def build_sadd_command(args: Sequence[str]) -> Command:
    _require(args, 2)
    return _key_with_values(args, CommandType.SADD)


def build_smembers_command(args: Sequence[str]) -> Command:
    return _single_key(args, CommandType.SMEMBERS)


def build_srem_command(args: Sequence[str]) -> Command:
    return _key_with_values(args, CommandType.SREM)