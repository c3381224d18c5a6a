"""Split a command line into words, redirections and pipe separators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from minishell.utils import WHITESPACE, quotes_len, skip_whitespace

# Characters that end a plain word.
_WORD_BREAKS = WHITESPACE + "|><"


class TokenType(IntEnum):
    """The kind of a token."""

    WORD = 1
    REDIR = 2
    END = 3


@dataclass(frozen=True)
class Token:
    """One piece of a command line and its kind."""

    text: str
    type: TokenType


def get_token(line: str) -> str:
    """Return the token that opens *line*.

    ``>>`` and ``<<`` are two-character tokens, ``>``, ``<`` and ``|`` are
    one-character tokens. Anything else is a word that runs up to a blank or
    an operator; quoted runs inside a word are kept whole, blanks included.
    """
    if line.startswith((">>", "<<")):
        return line[:2]
    if line[:1] in (">", "<", "|"):
        return line[:1]
    length = 0
    while length < len(line) and line[length] not in _WORD_BREAKS:
        length += quotes_len(line[length:]) + 1
    return line[:length]


def token_type(token: str) -> TokenType:
    """Classify *token* as a redirection, a pipe separator or a word."""
    first = token[:1]
    if first in (">", "<"):
        return TokenType.REDIR
    if first == "|":
        return TokenType.END
    return TokenType.WORD


def tokenize(line: str) -> list[Token]:
    """Break *line* into its tokens, in order. A blank line gives no tokens."""
    tokens: list[Token] = []
    rest = skip_whitespace(line)
    while rest:
        text = get_token(rest)
        tokens.append(Token(text, token_type(text)))
        rest = skip_whitespace(rest[len(text):])
    return tokens