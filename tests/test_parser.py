from pathlib import Path

import pytest

from zyst.aof import get_aof_file
from zyst.errors import InvalidCommand, WrongNumberArgs
from zyst.parser import parse_command
from zyst.types import (
    Command,
    CommandType,
    HashFields,
    KeyWithValue,
    KeyWithValues,
    NoArgs,
    SingleKey,
)


@pytest.fixture(autouse=True)
def home(tmp_path, monkeypatch):
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    return tmp_path


@pytest.mark.asyncio
async def test_empty_command_is_invalid():
    with pytest.raises(InvalidCommand):
        await parse_command([], True)


@pytest.mark.asyncio
async def test_unknown_command_is_invalid():
    with pytest.raises(InvalidCommand):
        await parse_command(["NOPE", "x"], True)


@pytest.mark.asyncio
async def test_command_name_is_case_insensitive():
    command = await parse_command(["get", "name"], True)
    assert command == Command(CommandType.GET, SingleKey("name"))


@pytest.mark.asyncio
async def test_ping_maps_to_pong():
    command = await parse_command(["PING"], True)
    assert command == Command(CommandType.PONG, NoArgs())


@pytest.mark.asyncio
async def test_set_arguments():
    command = await parse_command(["SET", "name", "Alice"], True)
    assert command == Command(CommandType.SET, KeyWithValue("name", "Alice"))


@pytest.mark.asyncio
async def test_hset_fields():
    command = await parse_command(["HSET", "myhash", "name", "Smith", "age", "21"], True)
    assert command.command_type is CommandType.HSET
    assert command.args == HashFields("myhash", {"name": "Smith", "age": "21"})


@pytest.mark.asyncio
async def test_lpush_values():
    command = await parse_command(["LPUSH", "names", "Alice", "Bob"], True)
    assert command.args == KeyWithValues("names", ["Alice", "Bob"])


@pytest.mark.asyncio
async def test_builder_errors_propagate():
    with pytest.raises(WrongNumberArgs):
        await parse_command(["SET", "only_key"], True)


@pytest.mark.asyncio
async def test_caller_list_is_untouched():
    words = ["GET", "name"]
    await parse_command(words, True)
    assert words == ["GET", "name"]


@pytest.mark.asyncio
async def test_write_command_is_logged():
    await parse_command(["SET", "name", "Alice"], False)
    assert get_aof_file().read_text() == "SET name Alice\n"


@pytest.mark.asyncio
async def test_read_command_is_not_logged():
    await parse_command(["GET", "name"], False)
    assert not get_aof_file().exists()


@pytest.mark.asyncio
async def test_restore_does_not_log():
    await parse_command(["SET", "name", "Alice"], True)
    assert not get_aof_file().exists()