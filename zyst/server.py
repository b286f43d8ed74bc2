"""Serving one client connection."""

from __future__ import annotations

import asyncio
from contextlib import suppress

from zyst.errors import ZystError, format_redis_error
from zyst.process import process_command
from zyst.resp import parse_resp_command
from zyst.types import Db

_READ_SIZE = 1024


async def _send(writer: asyncio.StreamWriter, text: str) -> None:
    writer.write(text.encode("utf-8"))
    await writer.drain()


async def handle_client(reader: asyncio.StreamReader, writer: asyncio.StreamWriter, db: Db) -> None:
    """Read RESP requests, run each command and write back the replies.

    Returns when the client disconnects; the writer is closed on the way out.
    """
    try:
        while True:
            data = await reader.read(_READ_SIZE)
            if not data:
                return

            raw_command = data.decode("utf-8", errors="replace").strip()
            try:
                parsed_commands = parse_resp_command(raw_command)
            except ZystError as error:
                await _send(writer, format_redis_error(error))
                continue

            for words in parsed_commands:
                try:
                    reply = (await process_command(words, db, False)).encode()
                except ZystError as error:
                    reply = format_redis_error(error)
                await _send(writer, reply)
    finally:
        writer.close()
        with suppress(ConnectionError):
            await writer.wait_closed()