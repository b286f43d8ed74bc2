"""Database-wide commands."""

from __future__ import annotations

from zyst.aof import delete_aof_file
from zyst.response import OkResponse, ZystResponse
from zyst.types import Db


async def flush_db(db: Db) -> ZystResponse:
    """Remove every key and the append-only file."""
    db.clear()
    await delete_aof_file()
    return OkResponse()