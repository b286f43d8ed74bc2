# zyst

zyst is a small in-memory key-value server that accepts requests in the Redis
wire protocol (RESP). Every write is appended to a log file, and the log is
replayed when the server starts, so the data survives a restart.

## Installation

```
pip install zyst
```

## Running the server

```
zyst
```

The server listens on `127.0.0.1:6379` by default. Use `--port`/`-p` and
`--bind`/`-b` to change that, and `--version`/`-V` to print the version:

```
zyst --port 6380 --bind 0.0.0.0
```

The bind value must be an IP address; the port must be between 0 and 65535.

### Configuration file

On start, zyst looks for `zyst/config.toml` in your user configuration
directory (as reported by `platformdirs`). If the file is missing it is created
with these contents:

```toml
[main]
port = 6379
bind = "127.0.0.1"
```

The file is parsed and its contents are kept in `Config.settings`, but the
address the server listens on always comes from the command line (or its
defaults); the `port` and `bind` values in the file are not used for that.

## Persistence

Every command that changes data is appended to
`~/.local/share/zyst/appendonly.aof`, one command per line. Read commands
(`GET`, `KEYS`, `EXISTS`, `TTL`, `HGET`, `HGETALL`, `LRANGE`) are not logged.
At start-up the file is replayed into the database; lines that fail are
skipped.

When the server starts, and then once a minute, it compacts the log: the
current database is written out as `SET`, `LPUSH`, `SADD` and `HSET` lines and
replaces the old log. Also once a minute, keys whose time to live has run out
are removed. `FLUSHDB` empties the database and deletes the log.

## Supported commands

| Group   | Commands                                                        |
|---------|-----------------------------------------------------------------|
| Server  | `PING`, `FLUSHDB`, `DOCS`, `CLIENT`                             |
| Strings | `GET`, `SET`, `DEL`, `EXISTS`, `KEYS`, `INCR`, `DECR`, `INCRBY` |
| Expiry  | `EXPIRE`, `TTL`                                                 |
| Lists   | `LPUSH`, `RPUSH`, `LRANGE`, `LPOP`, `RPOP`                      |
| Hashes  | `HSET`, `HGET`, `HGETALL`, `HDEL`                               |
| Sets    | `SADD`, `SMEMBERS`, `SREM`                                      |

Command names are case-insensitive. Notes on behaviour:

- `KEYS` takes a glob pattern: `*` matches any run of characters, `?` one
  character, and `[...]` a character class.
- `GET` on a string key whose time to live has passed removes the key and
  returns nil.
- `EXPIRE` works on keys of any kind. `TTL` works on string keys only; it
  returns `-1` for a key without an expiry and `-2` for a missing key.
- `INCR`, `DECR` and `INCRBY` start from 0 when the key is missing and are
  limited to 64-bit signed integers.
- `LPOP` and `RPOP` take an optional count; with a count other than one they
  return a list.
- `SADD` on an existing set returns the set's new size; on a new set it
  returns the number of members given.
- `DOCS` and `CLIENT` only answer with a fixed message.
- Using a command on a key of the wrong kind returns a `WRONGTYPE` error.
- Removing the last field of a hash with `HDEL`, or the last member of a set
  with `SREM`, deletes the key.

## What it does not do

zyst covers only the commands above. There is no authentication, no choice of
database, no replication and no pub/sub. Integer, nil and empty-array replies
are sent as status lines such as `+(integer) 3` and `+(nil)` rather than as
native RESP integers and nulls, so clients see them as strings. Requests are
read in chunks of at most 1024 bytes, so a single request must fit in one
chunk.

## Using the engine from Python

The command engine can be driven without a network connection:

```python
import asyncio

from zyst.process import process_command
from zyst.types import Db


async def demo():
    db = Db()
    await process_command(["SET", "name", "Alice"], db, True)
    response = await process_command(["GET", "name"], db, True)
    print(repr(response.encode()))  # '+Alice\r\n'


asyncio.run(demo())
```

Passing `True` as the last argument marks the command as a replay, so it is not
written to the append-only log. Failed commands raise a subclass of
`zyst.errors.ZystError`; `zyst.errors.format_redis_error` turns one into the
error line sent to clients. `zyst.main.serve` runs the server for a given
`zyst.config.Config` inside an existing event loop.

## Running the tests

```
pip install "zyst[test]"
pytest
```