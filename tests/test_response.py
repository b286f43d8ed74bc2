from zyst.errors import WrongType, format_redis_error
from zyst.response import (
    EmptyArrayResponse,
    ErrorResponse,
    IntResponse,
    ListResponse,
    NilResponse,
    OkResponse,
    SimpleStringResponse,
)


def test_ok():
    assert OkResponse().encode() == "+OK\r\n"


def test_int():
    assert IntResponse(2).encode() == "+(integer) 2\r\n"
    assert IntResponse(-1).encode() == "+(integer) -1\r\n"


def test_simple_string():
    assert SimpleStringResponse("PONG").encode() == "+PONG\r\n"


def test_list():
    assert ListResponse(["foo", "foobar"]).encode() == "*2\r\n$3\r\nfoo\r\n$6\r\nfoobar\r\n"


def test_list_length_is_in_bytes():
    value = "héllo"
    encoded = ListResponse([value]).encode()
    header = encoded.split("\r\n")[1]
    assert int(header[1:]) == len(value.encode("utf-8"))


def test_nil_and_empty_array():
    assert NilResponse().encode() == "+(nil)\r\n"
    assert EmptyArrayResponse().encode() == "+(empty array)\r\n"


def test_error_matches_formatted_error():
    error = WrongType()
    assert ErrorResponse(error).encode() == format_redis_error(error)


def test_str_is_encoding():
    response = IntResponse(15)
    assert str(response) == response.encode()