from collections import deque

from zyst.types import (
    Command,
    CommandType,
    Db,
    HashKey,
    KeyBase,
    ListKey,
    SetKey,
    SingleKey,
    StringKey,
    current_timestamp,
)


def test_key_without_ttl():
    key = StringKey("name", "Alice")
    assert key.get_ttl() == -1
    assert key.is_expired() is False


def test_set_ttl_counts_down():
    key = StringKey("name", "Alice")
    key.set_ttl(10)
    assert 0 < key.get_ttl() <= 10
    assert key.is_expired() is False


def test_zero_ttl_is_expired():
    key = KeyBase("name", "x")
    key.set_ttl(0)
    assert key.is_expired() is True


def test_past_expiry_is_expired():
    key = HashKey("h", {"a": "b"}, expires_at=current_timestamp() - 5)
    assert key.is_expired() is True
    assert key.get_ttl() < 0


def test_default_containers_are_independent():
    first = ListKey("a")
    second = ListKey("b")
    first.data.append("x")
    assert second.data == deque()
    assert SetKey("s").data == set()
    assert HashKey("h").data == {}


def test_swap_remove_moves_last_into_slot():
    db = Db()
    for name in "abcd":
        db[name] = StringKey(name, name)
    removed = db.swap_remove("b")
    assert removed == StringKey("b", "b")
    assert list(db) == ["a", "d", "c"]


def test_swap_remove_last_entry():
    db = Db()
    for name in "abc":
        db[name] = StringKey(name, name)
    db.swap_remove("c")
    assert list(db) == ["a", "b"]


def test_swap_remove_missing_key():
    db = Db(a=StringKey("a", "1"))
    assert db.swap_remove("zzz") is None
    assert list(db) == ["a"]


def test_command_holds_arguments():
    command = Command(CommandType.GET, SingleKey("name"))
    assert command.args.key == "name"
    assert command.command_type.name == "GET"