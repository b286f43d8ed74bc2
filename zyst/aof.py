"""Append-only file persistence."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Iterator
from pathlib import Path

from zyst.types import (
    Command,
    CommandArgs,
    CommandType,
    Db,
    HashFields,
    HashKey,
    KeyWithValue,
    KeyWithValues,
    ListKey,
    MultipleKeys,
    NoArgs,
    SetKey,
    SingleKey,
    StringKey,
)

logger = logging.getLogger(__name__)

AOF_FILE_NAME = "appendonly.aof"
DUMP_FILE_NAME = "db-dump.aof"

_READ_COMMANDS = frozenset(
    {
        CommandType.GET,
        CommandType.KEYS,
        CommandType.EXISTS,
        CommandType.TTL,
        CommandType.HGET,
        CommandType.HGETALL,
        CommandType.LRANGE,
    }
)


def get_aof_log_dir() -> Path:
    return Path.home() / ".local" / "share" / "zyst"


def get_aof_file() -> Path:
    return get_aof_log_dir() / AOF_FILE_NAME


def _remove_aof_file() -> None:
    if get_aof_log_dir().exists():
        try:
            get_aof_file().unlink()
        except OSError:
            pass


async def delete_aof_file() -> None:
    """Remove the append-only file, ignoring a missing file."""
    await asyncio.to_thread(_remove_aof_file)


def is_read_command(command_type: CommandType) -> bool:
    return command_type in _READ_COMMANDS


def format_command_args(args: CommandArgs, command_type: CommandType) -> str:
    """Render command arguments as they appear in the append-only file."""
    match args:
        case NoArgs():
            return command_type.name
        case SingleKey(key=key):
            return key
        case MultipleKeys(keys=keys):
            return " ".join(keys)
        case KeyWithValue(key=key, value=value):
            return f"{key} {value}"
        case KeyWithValues(key=key, values=values):
            return f"{key} {' '.join(values)}"
        case HashFields(key=key, fields=fields):
            pairs = " ".join(f"{name} {value}" for name, value in fields.items())
            return f"{key} {pairs}"
    raise TypeError(f"unsupported command arguments: {args!r}")


def _append_line(line: str) -> None:
    log_dir = get_aof_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    with open(log_dir / AOF_FILE_NAME, "a", encoding="utf-8") as aof:
        aof.write(line)


async def write_aof(command: Command) -> None:
    """Append a write command to the log; read commands are not logged."""
    if is_read_command(command.command_type):
        return
    arguments = format_command_args(command.args, command.command_type)
    await asyncio.to_thread(_append_line, f"{command.command_type.name} {arguments}\n")


def _dump_lines(db: Db) -> Iterator[str]:
    for key, value in db.items():
        match value:
            case StringKey(data=data):
                if data is not None:
                    yield f"SET {key} {data}"
            case ListKey(data=data):
                yield f"LPUSH {key} {' '.join(data)}"
            case SetKey(name=name, data=data):
                yield f"SADD {name} {' '.join(data)}"
            case HashKey(name=name, data=data):
                fields = " ".join(f"{field} {val}" for field, val in data.items())
                yield f"HSET {name} {fields}"


def _replace_aof(output: str) -> None:
    dump_file = get_aof_log_dir() / DUMP_FILE_NAME
    with open(dump_file, "w", encoding="utf-8") as dump:
        dump.write(output)
        dump.flush()
    _remove_aof_file()
    os.replace(dump_file, get_aof_file())


async def dump_db_to_aof(db: Db) -> None:
    """Rewrite the append-only file from the current database contents."""
    output = "".join(f"{line}\n" for line in _dump_lines(db))
    await asyncio.to_thread(_replace_aof, output)


async def clean_up_db(db: Db, interval: float = 60.0) -> None:
    """Compact the append-only file every ``interval`` seconds, forever."""
    while True:
        logger.info("Cleaning up Database")
        try:
            await dump_db_to_aof(db)
        except OSError as error:
            logger.debug("Database dump failed: %s", error)
        await asyncio.sleep(interval)