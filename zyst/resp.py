"""Splitting a RESP request into commands."""

from __future__ import annotations


def parse_resp_command(resp_command: str) -> list[list[str]]:
    """Split RESP text into a list of commands, each a list of words.

    A ``*<n>`` line opens a new command, ``$`` lines are skipped and every
    other line is a word of the current command.
    """
    lines = resp_command.split("\r\n")
    if lines and lines[-1] == "":
        lines.pop()

    commands: list[list[str]] = []
    for line in lines:
        rest = line[1:]
        if line.startswith("*") and rest and rest.isnumeric():
            commands.append([])
            continue
        if line.startswith("$"):
            continue
        if commands:
            commands[-1].append(line)
    return commands