"""Nodes of the target tree, the C-style shape the code generator renders."""

from __future__ import annotations
from dataclasses import dataclass, field

from .nodes import ASTNode, NodeKind


@dataclass
class NumberLiteral(ASTNode):
    kind = NodeKind.NUMBER_LITERAL
    value: str


@dataclass
class StringLiteral(ASTNode):
    kind = NodeKind.STRING_LITERAL
    value: str


@dataclass
class Identifier(ASTNode):
    """A bare name, used as the callee of a call."""
    kind = NodeKind.IDENTIFIER
    name: str


@dataclass
class CallExpression(ASTNode):
    """A call ``callee(arg, ...)``.

    Attributes:
        callee: The called function's name.
        arguments: The argument expressions in order. Nested calls appear
            here unwrapped.
    """
    kind = NodeKind.CALL_EXPRESSION
    callee: Identifier
    arguments: list[ASTNode] = field(default_factory=list)


@dataclass
class ExpressionStatement(ASTNode):
    """An expression used as a top-level statement, rendered with a ``;``."""
    kind = NodeKind.EXPRESSION_STATEMENT
    expression: ASTNode


@dataclass
class Program(ASTNode):
    """Root of the target tree. Every body element is an ExpressionStatement."""
    kind = NodeKind.PROGRAM
    body: list[ASTNode] = field(default_factory=list)
