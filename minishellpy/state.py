"""Interpreter state and lookup of commands on the search path."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from .textutil import split_words

BUILTIN_NAMES = ("cd", "echo", "pwd", "export", "unset", "env")


def split_path(env: Mapping[str, str]) -> list[str]:
    """Return the non-empty directories listed in ``PATH`` of ``env``."""
    return split_words(env.get("PATH", ""), ":")


def find_executable(name: str, paths: Iterable[str]) -> str | None:
    """Locate ``name`` on ``paths``.

    A name holding a slash is returned unchanged. Otherwise the first
    ``dir/name`` that is executable is returned, or None if there is none.
    """
    if "/" in name:
        return name
    for directory in paths:
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def is_builtin(name: str | None) -> bool:
    """Return True if ``name`` starts with the name of a built-in command."""
    if not name:
        return False
    return any(name.startswith(builtin) for builtin in BUILTIN_NAMES)


@dataclass
class ShellState:
    """Environment and last exit status of a running shell."""

    env: dict[str, str] = field(default_factory=lambda: dict(os.environ))
    exit_code: int = 0

    def search_paths(self) -> list[str]:
        """Directories searched for external commands."""
        return split_path(self.env)