"""Commands the shell runs itself: cd, echo, env, exit, export, pwd, unset."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from minishell.environment import Environment, get_value
from minishell.utils import atoll, is_name_char, is_name_start, quotes_len

_LLONG_MAX = "9223372036854775807"
_LLONG_MIN = "-9223372036854775807"
_DIGITS = frozenset("0123456789")


@dataclass
class Shell:
    """The state a builtin can read and change."""

    env: Environment = field(default_factory=Environment)
    status: int = 0


class ShellExit(Exception):
    """Raised by ``exit`` to end the shell with ``status``."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def _complain(*parts: str) -> None:
    sys.stderr.write("minishell: " + ": ".join(parts) + "\n")
    sys.stderr.flush()


def _chdir(path: str) -> bool:
    try:
        os.chdir(path)
    except (OSError, ValueError):
        return False
    return True


def _getcwd() -> str:
    try:
        return os.getcwd()
    except OSError:
        return ""


def _echo_word(word: str) -> str:
    """Drop backslashes and quotes from *word* unless a backslash precedes them."""
    kept: list[str] = []
    previous = ""
    for char in word:
        if char in ("\\", '"', "'") and previous != "\\":
            pass
        else:
            kept.append(char)
        previous = char
    return "".join(kept)


def _is_n_flag(arg: str) -> bool:
    return arg.startswith("-n") and all(char == "n" for char in arg[2:])


def echo(shell: Shell, args: Sequence[str]) -> None:
    """Print the arguments separated by spaces; leading ``-n`` flags drop the newline."""
    words = list(args[1:])
    flags = 0
    for word in words:
        if not _is_n_flag(word):
            break
        flags += 1
    text = " ".join(_echo_word(word) for word in words[flags:])
    sys.stdout.write(text if flags else text + "\n")


def _change_directory(shell: Shell, args: Sequence[str]) -> bool:
    target = args[1] if len(args) > 1 else None
    home = get_value(shell.env.find("HOME"))
    if target is None:
        if not _chdir(home):
            _complain("cd", "HOME", "not set")
            return False
        return True
    if target in ("''", '""'):
        _chdir(".")
        return True
    if target == "-":
        last = get_value(shell.env.find("OLDPWD"))
        if not _chdir(last):
            _complain("cd", "OLDPWD", "not set")
            return False
        sys.stdout.write(last + "\n")
        return True
    if not _chdir(target):
        _complain("cd", target, "No such file or directory")
        if target.startswith("$"):
            _chdir(home)
            return True
        return False
    return True


def cd(shell: Shell, args: Sequence[str]) -> None:
    """Change directory and keep ``OLDPWD`` and ``PWD`` up to date.

    With no operand the shell goes to ``HOME``; ``-`` goes to ``OLDPWD`` and
    prints it. A failed change sets the status to 1.
    """
    previous = _getcwd()
    if not _change_directory(shell, args):
        shell.status = 1
        return
    shell.env.set(f"OLDPWD={previous}")
    shell.env.set(f"PWD={_getcwd()}")
    shell.status = 0


def env(shell: Shell, args: Sequence[str]) -> None:
    """Print every environment entry, one per line."""
    for entry in shell.env:
        sys.stdout.write(entry + "\n")


def pwd(shell: Shell, args: Sequence[str]) -> None:
    """Print the current working directory."""
    sys.stdout.write(_getcwd() + "\n")


def _valid_export(var: str) -> bool:
    if not var or not is_name_start(var[0]):
        _complain("export", f'"{var}"', "not a valid identifier")
        return False
    for char in var[1:]:
        if not is_name_char(char):
            if char == "=":
                break
            if "=" not in var:
                return False
            _complain("export", f'"{var}"', "not a valid identifier")
            return False
    return True


def export(shell: Shell, args: Sequence[str]) -> None:
    """Set each ``NAME=value`` operand; invalid names set the status to 1."""
    shell.status = 0
    for arg in args[1:]:
        var = arg[quotes_len(arg):]
        if not _valid_export(var):
            shell.status = 1
            continue
        try:
            shell.env.set(var)
        except ValueError:
            pass


def _valid_unset(var: str) -> bool:
    if var and is_name_start(var[0]) and all(is_name_char(c) for c in var[1:]):
        return True
    _complain("unset", f'"{var}"', "not a valid identifier")
    return False


def unset(shell: Shell, args: Sequence[str]) -> None:
    """Remove each named variable; invalid names set the status to 1."""
    shell.status = 0
    for arg in args[1:]:
        if _valid_unset(arg):
            shell.env.unset(arg)
        else:
            shell.status = 1


def _fits_long_long(value: str) -> bool:
    negative = value.startswith("-") and len(value) > 1
    digits = value[1:] if negative else value
    if any(char not in _DIGITS for char in digits):
        return False
    limit = _LLONG_MIN if negative else _LLONG_MAX
    if len(value) > len(limit):
        return False
    if len(value) in (len(_LLONG_MAX), len(_LLONG_MIN)):
        return all(char <= bound for char, bound in zip(value, limit))
    return True


def exit_status(args: Sequence[str]) -> int:
    """Work out the status ``exit`` ends the shell with.

    No operand gives 0. A non-numeric or out-of-range operand gives 255, a
    second operand gives 1; otherwise the operand modulo 256.
    """
    status = 0
    for position, operand in enumerate(args[1:]):
        if position > 0:
            _complain("exit", "too many arguments")
            return 1
        status = atoll(operand)
        if not _fits_long_long(operand):
            _complain("exit", operand, "numeric argument required")
            return 255
    return status % 256


def exit_shell(shell: Shell, args: Sequence[str] | None) -> None:
    """Print ``exit`` and raise :class:`ShellExit`.

    With *args* the status comes from :func:`exit_status`; with ``None`` the
    shell's current status is kept.
    """
    sys.stdout.write("exit\n")
    sys.stdout.flush()
    if args is not None:
        shell.status = exit_status(args)
    raise ShellExit(shell.status)


_BUILTINS: dict[str, Callable[[Shell, Sequence[str]], None]] = {
    "cd": cd,
    "echo": echo,
    "env": env,
    "exit": exit_shell,
    "export": export,
    "pwd": pwd,
    "unset": unset,
}


def run_builtin(shell: Shell, args: Sequence[str]) -> bool:
    """Run *args* as a builtin; return False when it names none."""
    if not args:
        return False
    handler = _BUILTINS.get(args[0])
    if handler is None:
        return False
    handler(shell, args)
    return True