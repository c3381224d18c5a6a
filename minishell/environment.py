"""The shell's own copy of the environment, kept as ``NAME=value`` entries."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

from minishell.utils import is_name_char, is_name_start


def name_length(entry: str | None) -> int:
    """Return the length of the variable name that opens *entry*.

    A name starts with an ASCII letter or ``_`` and goes on with letters,
    digits and ``_``. Text that does not open with a name gives 0.
    """
    if not entry or not is_name_start(entry[0]):
        return 0
    length = 1
    for char in entry[1:]:
        if not is_name_char(char):
            break
        length += 1
    return length


def get_var(entry: str) -> str:
    """Return the variable name that opens *entry*."""
    return entry[: name_length(entry)]


def get_value(entry: str | None) -> str:
    """Return what follows the name and its ``=`` in *entry*.

    A missing entry (``None``) has the empty value.
    """
    if entry is None:
        return ""
    return entry[name_length(entry) + 1 :]


class Environment:
    """An ordered list of ``NAME=value`` entries with shell-style lookups."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = list(entries)

    @classmethod
    def from_environ(cls) -> Environment:
        """Copy the process environment, leaving ``OLDPWD`` out."""
        environment = cls(f"{name}={value}" for name, value in os.environ.items())
        environment.unset("OLDPWD")
        return environment

    def find(self, name: str) -> str | None:
        """Return the first entry whose variable is exactly *name*, or ``None``."""
        for entry in self._entries:
            if entry.startswith(name) and name_length(entry) == len(name):
                return entry
        return None

    def value(self, name: str) -> str | None:
        """Return the value of *name*, or ``None`` when it is not set."""
        entry = self.find(name)
        return None if entry is None else get_value(entry)

    def set(self, entry: str) -> None:
        """Store ``NAME=value``, replacing any earlier entry for ``NAME``.

        The new entry goes to the end. Raises :class:`ValueError` when *entry*
        does not open with a valid name directly followed by ``=``.
        """
        length = name_length(entry)
        if length == 0 or entry[length : length + 1] != "=":
            raise ValueError(f"not a variable assignment: {entry!r}")
        self.unset(entry[:length])
        self._entries.append(entry)

    def unset(self, name: str) -> None:
        """Remove the entry for *name*; nothing happens when it is not set."""
        entry = self.find(name)
        if entry is None:
            return
        # Remove that very entry, not just an equal string found earlier.
        for position, candidate in enumerate(self._entries):
            if candidate is entry:
                del self._entries[position]
                return

    def expand(self, text: str) -> str:
        """Replace every ``$NAME`` in *text* with the variable's value.

        Unset variables expand to nothing; a ``$`` that is not followed by a
        name is dropped.
        """
        pieces: list[str] = []
        rest = text
        while True:
            dollar = rest.find("$")
            if dollar == -1:
                pieces.append(rest)
                break
            pieces.append(rest[:dollar])
            rest = rest[dollar + 1 :]
            length = name_length(rest)
            pieces.append(get_value(self.find(rest[:length])) if length else "")
            rest = rest[length:]
        return "".join(pieces)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)