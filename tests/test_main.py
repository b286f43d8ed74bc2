import asyncio
import socket
from contextlib import suppress
from pathlib import Path

import platformdirs
import pytest

from zyst.config import Config
from zyst.main import main, serve


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    monkeypatch.setattr(platformdirs, "user_config_dir", lambda *args, **kwargs: str(tmp_path))
    return tmp_path


def free_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


async def connect(port):
    for _ in range(100):
        try:
            return await asyncio.open_connection("127.0.0.1", port)
        except OSError:
            await asyncio.sleep(0.02)
    raise AssertionError("server did not start")


@pytest.mark.asyncio
async def test_serve_answers_ping():
    port = free_port()
    task = asyncio.create_task(serve(Config(port=port, bind="127.0.0.1")))
    try:
        reader, writer = await connect(port)
        writer.write(b"*1\r\n$4\r\nPING\r\n")
        await writer.drain()
        line = await reader.readline()
        writer.close()
        await writer.wait_closed()
    finally:
        task.cancel()
        with suppress(asyncio.CancelledError):
            await task
    assert line == b"+PONG\r\n"


@pytest.mark.asyncio
async def test_serve_keeps_data_between_connections():
    port = free_port()
    task = asyncio.create_task(serve(Config(port=port, bind="127.0.0.1")))
    try:
        reader, writer = await connect(port)
        writer.write(b"*3\r\n$3\r\nSET\r\n$4\r\nname\r\n$5\r\nAlice\r\n")
        await writer.drain()
        first = await reader.readline()
        writer.close()
        await writer.wait_closed()

        reader, writer = await connect(port)
        writer.write(b"*2\r\n$3\r\nGET\r\n$4\r\nname\r\n")
        await writer.drain()
        second = await reader.readline()
        writer.close()
        await writer.wait_closed()
    finally:
        task.cancel()
        with suppress(asyncio.CancelledError):
            await task
    assert first == b"+OK\r\n"
    assert second == b"+Alice\r\n"


def test_main_rejects_bad_port():
    with pytest.raises(SystemExit) as info:
        main(["--port", "notanumber"])
    assert info.value.code == 2


def test_main_prints_version(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert "1.0.3" in capsys.readouterr().out