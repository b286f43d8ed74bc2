import pytest

from zyst.commands.build import build_sadd_command, build_smembers_command, build_srem_command
from zyst.commands.sets import sadd, smembers, srem
from zyst.errors import WrongType
from zyst.response import EmptyArrayResponse
from zyst.types import Db, StringKey


@pytest.fixture
def db():
    return Db()


@pytest.mark.asyncio
async def test_sadd(db):
    first = await sadd(db, build_sadd_command(["myset", "Hello", "World"]))
    second = await sadd(db, build_sadd_command(["myset", "How", "are", "you"]))
    third = await sadd(db, build_sadd_command(["myset", "World"]))
    assert str(first) == "+(integer) 2\r\n"
    assert second.value == 5
    assert third.value == 5


@pytest.mark.asyncio
async def test_smembers(db):
    members = ["Hello", "World", "You", "Are", "Lovely"]
    added = await sadd(db, build_sadd_command(["myset", *members]))
    assert added.value == 5
    result = await smembers(db, build_smembers_command(["myset"]))
    assert sorted(result.values) == sorted(members)
    empty = await smembers(db, build_smembers_command(["non_existing_set"]))
    assert isinstance(empty, EmptyArrayResponse)


@pytest.mark.asyncio
async def test_srem(db):
    await sadd(db, build_sadd_command(["myset", "Hello", "World", "You", "Are", "Lovely"]))
    removed = await srem(db, build_srem_command(["myset", "World", "Lovely"]))
    assert removed.value == 2
    remaining = await smembers(db, build_smembers_command(["myset"]))
    assert sorted(remaining.values) == sorted(["Hello", "You", "Are"])

    removed = await srem(db, build_srem_command(["myset", "Hello", "You", "Are"]))
    assert removed.value == 3
    assert isinstance(await smembers(db, build_smembers_command(["myset"])), EmptyArrayResponse)
    assert "myset" not in db


@pytest.mark.asyncio
async def test_srem_missing_set(db):
    result = await srem(db, build_srem_command(["ghost", "a"]))
    assert str(result) == "+(integer) 0\r\n"


@pytest.mark.asyncio
async def test_wrong_type(db):
    db["s"] = StringKey("s", "v")
    with pytest.raises(WrongType):
        await sadd(db, build_sadd_command(["s", "a"]))
    with pytest.raises(WrongType):
        await smembers(db, build_smembers_command(["s"]))
    with pytest.raises(WrongType):
        await srem(db, build_srem_command(["s", "a"]))