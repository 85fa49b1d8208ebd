"""Nodes of the source tree, the shape the parser produces.

``str()`` of any source node renders it back to the input language, so that
re-lexing and re-parsing the rendering yields an equal tree.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .nodes import ASTNode, NodeKind


@dataclass
class NumberLiteral(ASTNode):
    """A run of decimal digits.

    Attributes:
        value: The digits verbatim, as a string.
    """
    kind = NodeKind.NUMBER_LITERAL
    value: str

    def __str__(self):
        return self.value


@dataclass
class StringLiteral(ASTNode):
    """A double-quoted string.

    Attributes:
        value: The characters between the quotes, without escape processing.
    """
    kind = NodeKind.STRING_LITERAL
    value: str

    def __str__(self):
        return f'"{self.value}"'


@dataclass
class CallExpression(ASTNode):
    """A parenthesized prefix call such as ``(add 2 3)``.

    Attributes:
        name: The called name, a bare string.
        params: The argument nodes in source order.
    """
    kind = NodeKind.CALL_EXPRESSION
    name: str
    params: list[ASTNode] = field(default_factory=list)

    def __str__(self):
        return '(' + ' '.join([self.name] + [str(param) for param in self.params]) + ')'


@dataclass
class Program(ASTNode):
    """Root of the source tree: the top-level expressions in order."""
    kind = NodeKind.PROGRAM
    body: list[ASTNode] = field(default_factory=list)

    def __str__(self):
        return '\n'.join(str(node) for node in self.body)
