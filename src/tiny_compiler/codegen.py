"""Rendering of the target tree as C-style source text."""

from __future__ import annotations

from .ast import target
from .ast.nodes import ASTNode, kind_name
from .errors import CodeGenError


def code_generator(node: ASTNode) -> str:
    """Render a target tree node, recursing into its children.

    Raises:
        CodeGenError: For any node that is not a target tree node, including
            nodes of the source tree.
    """
    if isinstance(node, target.Program):
        return '\n'.join(code_generator(statement) for statement in node.body)

    if isinstance(node, target.ExpressionStatement):
        return code_generator(node.expression) + ';'

    if isinstance(node, target.CallExpression):
        arguments = ', '.join(code_generator(argument) for argument in node.arguments)
        return f"{code_generator(node.callee)}({arguments})"

    if isinstance(node, target.Identifier):
        return node.name

    if isinstance(node, target.NumberLiteral):
        return node.value

    if isinstance(node, target.StringLiteral):
        return f'"{node.value}"'

    raise CodeGenError(kind_name(node))
