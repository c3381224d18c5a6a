"""Build the prompt and read a command line from the user."""

from __future__ import annotations

try:
    import readline  # noqa: F401  # line editing and history for input()
except ImportError:  # pragma: no cover - platforms without readline
    readline = None

from minishell.builtins import Shell, exit_shell
from minishell.environment import Environment
from minishell.executor import capture_output


def build_prompt(env: Environment) -> str:
    """Return ``user@host$ `` from ``whoami`` and ``hostname``."""
    user = capture_output("/usr/bin/whoami", env)
    host = capture_output("/bin/hostname", env)
    return f"{user}@{host}$ "


def read_command_line(shell: Shell) -> str:
    """Prompt for and return one line; end of input exits the shell.

    Non-empty lines are added to the history by line editing.
    """
    try:
        return input(build_prompt(shell.env))
    except EOFError:
        exit_shell(shell, None)
        raise