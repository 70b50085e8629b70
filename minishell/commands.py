"""Command extraction and classification."""

from __future__ import annotations

import enum
from pathlib import Path

BUILTINS = (
    "echo", "printf", "read", "cd", "pwd", "pushd", "popd", "dirs", "let", "eval",
    "set", "unset", "export", "declare", "typeset", "readonly", "getopts", "source",
    "exit", "exec", "shopt", "caller", "true", "type", "hash", "bind", "help",
)


class CommandType(enum.IntEnum):
    """Kind of command named by the first word of a line."""

    BUILTIN = 1
    EXTERNAL = 2
    NO_COMMAND = 3


def get_command(line: str) -> str:
    """Return the first word of ``line``, up to the first space."""
    return line.partition(" ")[0]


def classify(command: str, external_commands) -> CommandType:
    """Classify ``command``; known external commands take precedence over builtins."""
    if command in external_commands:
        return CommandType.EXTERNAL
    if command in BUILTINS:
        return CommandType.BUILTIN
    return CommandType.NO_COMMAND


def load_external_commands(path) -> list[str]:
    """Read the whitespace-separated command names stored in ``path``."""
    return Path(path).read_text().split()