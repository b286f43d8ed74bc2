"""Server configuration from the command line and the configuration file."""

from __future__ import annotations

import argparse
import ipaddress
import tomllib
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import platformdirs

VERSION = "1.0.3"
DEFAULT_PORT = 6379
DEFAULT_BIND = "127.0.0.1"

_DEFAULT_CONFIG = f"""[main]
port = {DEFAULT_PORT}
bind = "{DEFAULT_BIND}"
"""


@dataclass(frozen=True)
class Config:
    """Where the server listens, plus the contents of the configuration file."""

    port: int = DEFAULT_PORT
    bind: str = DEFAULT_BIND
    settings: dict[str, Any] = field(default_factory=dict)


def _port(text: str) -> int:
    value = int(text)
    if not 0 <= value <= 65535:
        raise argparse.ArgumentTypeError(f"{text} is not in 0..65535")
    return value


def _ip_address(text: str) -> str:
    return str(ipaddress.ip_address(text))


def _argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zyst", description="Redis-compatible server")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-p", "--port", type=_port, default=DEFAULT_PORT)
    parser.add_argument("-b", "--bind", type=_ip_address, default=DEFAULT_BIND)
    return parser


def get_config_path() -> Path:
    return Path(platformdirs.user_config_dir()) / "zyst" / "config.toml"


def create_default_config(config_path: Path) -> None:
    """Write the default configuration file, creating its directory."""
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(_DEFAULT_CONFIG, encoding="utf-8")


def get_config(argv: Sequence[str] | None = None) -> Config:
    """Load the configuration; port and bind always come from the command line."""
    config_path = get_config_path()
    args = _argument_parser().parse_args(argv)

    if not config_path.exists():
        print(f'Config file not found. Creating default at "{config_path}"')
        create_default_config(config_path)

    with open(config_path, "rb") as config_file:
        settings = tomllib.load(config_file)

    return Config(port=args.port, bind=args.bind, settings=settings)