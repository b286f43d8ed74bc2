"""Starting the server."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from zyst.aof import clean_up_db
from zyst.config import Config, get_config
from zyst.database import delete_expired_keys, restore_from_aof
from zyst.server import handle_client
from zyst.types import Db

logger = logging.getLogger(__name__)


async def serve(config: Config) -> None:
    """Listen for clients and run the background maintenance tasks until cancelled."""
    db = Db()

    async def on_client(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        address = writer.get_extra_info("peername")
        try:
            await handle_client(reader, writer, db)
        except Exception as error:
            logger.error("Error handling client %s: %r", address, error)

    server = await asyncio.start_server(on_client, config.bind, config.port)
    logger.info("Listening %s:%s...", config.bind, config.port)

    background = [
        asyncio.create_task(restore_from_aof(db)),
        asyncio.create_task(delete_expired_keys(db)),
        asyncio.create_task(clean_up_db(db)),
    ]
    try:
        async with server:
            await server.serve_forever()
    finally:
        for task in background:
            task.cancel()
        await asyncio.gather(*background, return_exceptions=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the server with configuration from ``argv`` and the config file."""
    logging.basicConfig(level=logging.INFO)
    config = get_config(argv)
    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        pass
    return 0