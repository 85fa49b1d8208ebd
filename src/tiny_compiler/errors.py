"""Errors raised by the compiler stages and helpers to report them.

Every stage raises a subclass of CompilerError at the point where it detects
the problem; nothing in the pipeline catches and recovers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .lexer import TokenKind


class CompilerError(Exception):
    """Base class for all compiler errors.

    Attributes:
        message: Human readable description of the failure.
        position: 0-indexed character offset in the source text, or None
            when the failure happened at end of input.
    """

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.position = position


class LexError(CompilerError):
    """A character matched none of the token classes."""

    def __init__(self, char: str, position: Optional[int] = None, message: Optional[str] = None):
        if message is None:
            message = f"unrecognized character {char!r}"
        super().__init__(message, position)
        self.char = char


class ParseError(CompilerError):
    """The token sequence violates the grammar.

    Attributes:
        kind: The TokenKind of the unexpected token, or None when the input
            ran out where more tokens were expected.
    """

    def __init__(self, kind: Optional["TokenKind"], position: Optional[int] = None,
                 message: Optional[str] = None):
        if message is None:
            if kind is None:
                message = "unexpected end of input"
            else:
                message = f"unexpected {kind.value} token"
        super().__init__(message, position)
        self.kind = kind


class TraversalError(CompilerError):
    """The traversal engine met a node it does not know how to walk."""

    def __init__(self, kind: str):
        super().__init__(f"cannot traverse node of kind {kind!r}")
        self.kind = kind


class CodeGenError(CompilerError):
    """The code generator met a node it does not know how to render."""

    def __init__(self, kind: str):
        super().__init__(f"cannot generate code for node of kind {kind!r}")
        self.kind = kind


def line_column(code: str, offset: int) -> tuple[int, int]:
    """Convert a character offset into a 1-indexed (line, column) pair."""
    if offset < 0:
        offset = 0
    if offset > len(code):
        offset = len(code)
    text_before = code[:offset]
    line = text_before.count('\n') + 1
    last_newline = text_before.rfind('\n')
    return (line, offset - last_newline)


def format_syntax_error(code: str, error: CompilerError, origin: str = "<string>") -> str:
    """Render an error as a header, the offending source line and a caret.

    Args:
        code: The source text the error was raised for.
        error: A CompilerError carrying a character offset (or None for
            end of input).
        origin: Label for the source, e.g. a file name (default: "<string>").

    Returns:
        A multi-line string, for example::

            Syntax error in <string> at line 1, column 6: unrecognized character '#'
            (add #2)
                 ^
    """
    offset = len(code) if error.position is None else error.position
    line, column = line_column(code, offset)
    header = f"Syntax error in {origin} at line {line}, column {column}: {error.message}"

    lines = code.split('\n')
    if not 1 <= line <= len(lines):
        return header  # pragma: no cover
    source_line = lines[line - 1]
    caret_pos = min(max(column - 1, 0), len(source_line))
    # Expand tabs so the caret lines up with what a terminal displays.
    expanded_caret_pos = len(source_line[:caret_pos].expandtabs())
    return '\n'.join([header, source_line.expandtabs(), ' ' * expanded_caret_pos + '^'])
