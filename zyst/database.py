"""Background maintenance of the key space and restoring it at start-up."""

from __future__ import annotations

import asyncio
import logging

from zyst.aof import get_aof_file
from zyst.errors import ZystError
from zyst.process import process_command
from zyst.types import Db

logger = logging.getLogger(__name__)


def remove_expired_keys(db: Db) -> None:
    """Drop every expired key, keeping the order of the others."""
    expired = [name for name, key in db.items() if key.is_expired()]
    for name in expired:
        del db[name]


async def delete_expired_keys(db: Db, interval: float = 60.0) -> None:
    """Remove expired keys every ``interval`` seconds, forever."""
    while True:
        logger.info("Deleting expired keys")
        remove_expired_keys(db)
        await asyncio.sleep(interval)


async def restore_from_aof(db: Db) -> None:
    """Replay the append-only file into ``db``; lines that fail are skipped."""
    logger.info("Restoring DB from AOF file")
    path = get_aof_file()
    if not path.exists():
        return

    content = await asyncio.to_thread(path.read_text, encoding="utf-8")
    for line in content.split("\n"):
        if not line:
            continue
        try:
            await process_command(line.split(), db, True)
        except ZystError as error:
            logger.debug("Skipping AOF line %r: %s", line, error)

    logger.info("DB restored!")