"""Errors raised while parsing and executing commands."""

from __future__ import annotations


class ZystError(Exception):
    """Base class of every error the server reports to a client."""

    message = "ERR unexpected error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.message if message is None else message)


class InvalidCommand(ZystError):
    message = "Invalid command"


class NilError(ZystError):
    message = "(nil)"


class EmptyArrayError(ZystError):
    message = "(empty array)"


class WrongType(ZystError):
    message = "ERR WRONGTYPE Operation against a key holding the wrong kind of value"


class NotInt(ZystError):
    message = "ERR value is not an integer"


class NotIntOrOutOfRange(ZystError):
    message = "value is not an integer or out of range"


class DatabaseError(ZystError):
    message = "ERR unexpected database error"


class RegexError(ZystError):
    message = "ERR regex error"


class TTLRequired(ZystError):
    message = "Error: TTL is required"


class CustomError(ZystError):
    """An error carrying an arbitrary message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class WrongNumberArgs(ZystError):
    message = "Wrong number of argument"


class EmptyRequest(ZystError):
    message = "ERR Protocol error: empty request"


class InvalidArrayPrefix(ZystError):
    message = "ERR Protocol error: expected '*', got something else"


class InvalidArrayLength(ZystError):
    message = "ERR Protocol error: invalid array length"


class InvalidBulkStringPrefix(ZystError):
    message = "ERR Protocol error: expected '$', got something else"


class WrongElementCount(ZystError):
    message = "ERR Protocol error: wrong number of elements"


def format_redis_error(error: ZystError) -> str:
    """Render an error as a RESP error line."""
    return f"-{error}\r\n"