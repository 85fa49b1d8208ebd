"""Recursive descent parser from tokens to the source tree.

Grammar::

    program := atom*
    atom    := Number | String | call
    call    := '(' Name atom* ')'
"""

from __future__ import annotations

from typing import Optional, Sequence

from .ast import source
from .ast.nodes import ASTNode
from .errors import ParseError
from .lexer import Token, TokenKind


class _TokenParser(object):
    """Single forward cursor over a token sequence, one token of lookahead."""

    def __init__(self, tokens: Sequence[Token]):
        self.tokens = tokens
        self.current = 0

    def _peek(self) -> Optional[Token]:
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        return None

    def _expect_more(self, what: str) -> Token:
        token = self._peek()
        if token is None:
            raise ParseError(None, None, f"unexpected end of input, expected {what}")
        return token

    def parse_program(self) -> source.Program:
        program = source.Program(body=[])
        while self._peek() is not None:
            program.body.append(self.parse_atom())
        return program

    def parse_atom(self) -> ASTNode:
        token = self._expect_more("an expression")

        if token.kind == TokenKind.NUMBER:
            self.current += 1
            return source.NumberLiteral(value=token.text)

        if token.kind == TokenKind.STRING:
            self.current += 1
            return source.StringLiteral(value=token.text)

        if token.kind == TokenKind.PAREN and token.text == '(':
            return self.parse_call()

        raise ParseError(token.kind, token.position)

    def parse_call(self) -> source.CallExpression:
        # Skip the opening paren.
        self.current += 1

        name = self._expect_more("a call name")
        if name.kind != TokenKind.NAME:
            raise ParseError(name.kind, name.position,
                             f"expected a call name, found {name.kind.value} token")
        self.current += 1

        node = source.CallExpression(name=name.text, params=[])
        while True:
            token = self._expect_more(f"')' to close call to {node.name!r}")
            if token.kind == TokenKind.PAREN and token.text == ')':
                break
            node.params.append(self.parse_atom())

        # Skip the closing paren.
        self.current += 1
        return node


def parser(tokens: Sequence[Token]) -> source.Program:
    """Build the source tree for a token sequence.

    Args:
        tokens: Tokens as produced by tokenizer().

    Returns:
        The source Program. Empty input gives an empty body.

    Raises:
        ParseError: When the tokens violate the grammar. ``kind`` is the
            kind of the offending token, or None if the input ended early.
    """
    return _TokenParser(tokens).parse_program()
