"""Replies to PING, DOCS and CLIENT."""

from __future__ import annotations

from zyst.response import SimpleStringResponse, ZystResponse


async def pong() -> ZystResponse:
    return SimpleStringResponse("PONG")


async def docs() -> ZystResponse:
    return SimpleStringResponse("DOCS is not implemented yet")


async def client() -> ZystResponse:
    return SimpleStringResponse("CLIENT SETINFO is not implemented yet")