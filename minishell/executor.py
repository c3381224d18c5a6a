"""Start external programs with redirected standard input and output."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass, field

from minishell.environment import Environment, get_value
from minishell.utils import split

# Status of a command whose program could not be started.
_START_FAILURE = 1

# Most bytes read back from a captured command.
_CAPTURE_LIMIT = 255


@dataclass
class Command:
    """A program's argument list and the descriptors it reads and writes."""

    args: list[str] = field(default_factory=list)
    stdin: int = 0
    stdout: int = 1

    def close_descriptors(self) -> None:
        """Close the descriptors that are not the shell's own stdin/stdout."""
        if self.stdin != 0:
            os.close(self.stdin)
        if self.stdout != 1:
            os.close(self.stdout)


def find_executable(name: str, env: Environment) -> str | None:
    """Look *name* up in the directories listed in ``PATH``.

    Returns the first ``dir/name`` that exists and is executable, or ``None``
    when ``PATH`` is unset or no directory holds such a file.
    """
    path_entry = env.find("PATH")
    if path_entry is None:
        return None
    for directory in split(get_value(path_entry), ":"):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return None


def _environment_mapping(env: Environment) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in env:
        name, _, value = entry.partition("=")
        mapping[name] = value
    return mapping


def run_command(command: Command, env: Environment) -> int:
    """Run *command* and wait for it, returning its exit status.

    The program is looked up in ``PATH``; if it is not found there the first
    argument is used as a path. The command's descriptors other than 0 and 1
    are closed afterwards. A program that cannot be started gives status 1.
    """
    try:
        if not command.args:
            return _START_FAILURE
        program = find_executable(command.args[0], env) or command.args[0]
        try:
            completed = subprocess.run(
                command.args,
                executable=program,
                stdin=command.stdin,
                stdout=command.stdout,
                env=_environment_mapping(env),
                check=False,
            )
        except OSError:
            return _START_FAILURE
        return completed.returncode
    finally:
        command.close_descriptors()


def capture_output(command_line: str, env: Environment) -> str:
    """Run the space-separated *command_line* and return what it printed.

    At most 255 bytes are read back, and the last character (normally the
    trailing newline) is dropped.
    """
    read_end, write_end = os.pipe()
    try:
        run_command(Command(split(command_line, " "), 0, write_end), env)
        data = os.read(read_end, _CAPTURE_LIMIT)
    finally:
        os.close(read_end)
    return data.decode(errors="replace")[:-1]