"""Small text helpers shared by the lexer, the environment and the builtins."""

from __future__ import annotations

import re
import sys

# Characters the shell treats as blanks between words.
WHITESPACE = " \n\t"

# Characters skipped before the number by ``atoll`` (space and \t through \r).
_NUMBER_LEADING_SPACE = " \t\n\v\f\r"

_ASCII_LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")
_ASCII_DIGITS = frozenset("0123456789")


def atoll(text: str) -> int:
    """Read a leading, optionally signed decimal integer from *text*.

    Leading whitespace is skipped, a single ``+`` or ``-`` is honoured and
    reading stops at the first non-digit. Text without digits gives 0.
    """
    rest = text.lstrip(_NUMBER_LEADING_SPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    total = 0
    for char in rest:
        if char not in _ASCII_DIGITS:
            break
        total = total * 10 + int(char)
    return sign * total


def quotes_len(text: str) -> int:
    """Return the offset of the quote closing the quoted run that opens *text*.

    If *text* does not start with a single or double quote the result is 0.
    When the quote is never closed, the length of *text* is returned.
    """
    if not text or text[0] not in ("'", '"'):
        return 0
    closing = text.find(text[0], 1)
    return len(text) if closing == -1 else closing


def skip_whitespace(text: str) -> str:
    """Return *text* without its leading spaces, tabs and newlines."""
    return text.lstrip(WHITESPACE)


def split(text: str, separators: str) -> list[str]:
    """Split *text* on any character of *separators*, dropping empty words."""
    if not separators:
        return [text] if text else []
    pattern = "[" + re.escape(separators) + "]+"
    return [word for word in re.split(pattern, text) if word]


def is_name_start(char: str) -> bool:
    """Tell whether *char* may begin a variable name (ASCII letter or ``_``)."""
    return char == "_" or char in _ASCII_LETTERS if len(char) == 1 else False


def is_name_char(char: str) -> bool:
    """Tell whether *char* may appear inside a variable name."""
    if len(char) != 1:
        return False
    return char == "_" or char in _ASCII_LETTERS or char in _ASCII_DIGITS


def report_error(message: str | BaseException) -> int:
    """Write a ``minishell:``-prefixed error to standard error.

    *message* is either plain text or an exception. For an :class:`OSError`
    the system's description of the error is appended and its error number is
    returned; otherwise the status returned is 1.
    """
    if isinstance(message, OSError):
        reason = message.strerror or str(message)
        if message.filename is not None:
            line = f"{message.filename}: {reason}"
        else:
            line = reason
        status = message.errno or 1
    else:
        line = str(message)
        status = 1
    sys.stderr.write(f"minishell: {line}\n")
    sys.stderr.flush()
    return status