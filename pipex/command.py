"""Splitting command lines and locating executables on PATH."""

from __future__ import annotations

import os
from typing import List, Mapping, Optional, Tuple

from .errors import PipexError


class InvalidCommand(PipexError):
    """The command line holds no words."""


class CommandNotFound(PipexError):
    """No executable matches the command name."""


def split_words(text: str, separator: str) -> List[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    return [word for word in text.split(separator) if word]


def path_from_env(env: Mapping[str, str]) -> Optional[str]:
    """Return the PATH value of ``env``, or ``None`` when it has none."""
    return env.get("PATH")


def _is_executable(path: str) -> bool:
    return os.access(path, os.F_OK | os.X_OK)


def find_command_path(name: str, env: Mapping[str, str]) -> Optional[str]:
    """Locate ``name`` as given, then in each PATH directory in order."""
    if _is_executable(name):
        return name
    search = path_from_env(env)
    if search is None:
        return None
    for directory in split_words(search, ":"):
        candidate = directory + "/" + name
        if _is_executable(candidate):
            return candidate
    return None


def resolve_command(command: str, env: Mapping[str, str]) -> Tuple[str, List[str]]:
    """Return the executable path and argument list for a command line."""
    argv = split_words(command, " ")
    if not argv:
        raise InvalidCommand("Invalid command", 1)
    program = find_command_path(argv[0], env)
    if program is None:
        raise CommandNotFound("Command not found\n", 127)
    return program, argv