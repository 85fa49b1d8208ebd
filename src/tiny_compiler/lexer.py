"""Lexical analysis: source text to a flat list of tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from .errors import LexError


class TokenKind(str, Enum):
    """The four token classes of the input language."""
    PAREN = "paren"
    NUMBER = "number"
    STRING = "string"
    NAME = "name"


@dataclass(frozen=True)
class Token:
    """A single lexeme.

    Attributes:
        kind: The token class.
        text: The token text. For strings this excludes the quotes.
        position: 0-indexed offset of the token's first character. Not part
            of token equality.
    """
    kind: TokenKind
    text: str
    position: int = field(default=0, compare=False)

    def __repr__(self):
        return f"Token({self.kind.value}, {self.text!r})"


# ASCII only: str.isdigit() and str.isalpha() accept far more than the language does.
_NUMBER_RUN = re.compile(r'[0-9]+')
_NAME_RUN = re.compile(r'[A-Za-z]+')


def tokenizer(text: str) -> list[Token]:
    """Split source text into tokens.

    Args:
        text: The complete source text.

    Returns:
        The tokens in source order.

    Raises:
        LexError: On a character that starts no token, or on a string
            literal missing its closing quote.

    Example:
        >>> [t.text for t in tokenizer("(add 2 3)")]
        ['(', 'add', '2', '3', ')']
    """
    current = 0
    tokens: list[Token] = []

    while current < len(text):
        char = text[current]

        if char == '(' or char == ')':
            tokens.append(Token(TokenKind.PAREN, char, current))
            current += 1
            continue

        if char.isspace():
            current += 1
            continue

        match = _NUMBER_RUN.match(text, current)
        if match:
            tokens.append(Token(TokenKind.NUMBER, match.group(), current))
            current = match.end()
            continue

        if char == '"':
            closing = text.find('"', current + 1)
            if closing == -1:
                raise LexError(char, current, "unterminated string literal")
            tokens.append(Token(TokenKind.STRING, text[current + 1:closing], current))
            current = closing + 1
            continue

        match = _NAME_RUN.match(text, current)
        if match:
            tokens.append(Token(TokenKind.NAME, match.group(), current))
            current = match.end()
            continue

        raise LexError(char, current)

    return tokens
