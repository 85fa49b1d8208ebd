"""Source tree to target tree, built in a single traversal.

Each enter callback creates the replacement for the node it visits and
appends it to the build context its parent established. A call additionally
returns its new ``arguments`` list, which becomes the build context of its
own params, so nested calls land inside the call that contains them.
"""

from __future__ import annotations

from typing import Optional

from .ast import source, target
from .ast.nodes import ASTNode, NodeKind
from .traversal import Visitor, traverser


def _place(new_node: ASTNode, parent: Optional[ASTNode], context: list[ASTNode]):
    # Arguments go in as bare expressions; anything else is a top-level statement.
    if isinstance(parent, source.CallExpression):
        context.append(new_node)
    else:
        context.append(target.ExpressionStatement(expression=new_node))


def _enter_number(node: source.NumberLiteral, parent, context):
    _place(target.NumberLiteral(value=node.value), parent, context)


def _enter_string(node: source.StringLiteral, parent, context):
    _place(target.StringLiteral(value=node.value), parent, context)


def _enter_call(node: source.CallExpression, parent, context):
    expression = target.CallExpression(
        callee=target.Identifier(name=node.name),
        arguments=[],
    )
    _place(expression, parent, context)
    return expression.arguments


TRANSFORM_VISITORS: dict[NodeKind, Visitor] = {
    NodeKind.NUMBER_LITERAL: Visitor(enter=_enter_number),
    NodeKind.STRING_LITERAL: Visitor(enter=_enter_string),
    NodeKind.CALL_EXPRESSION: Visitor(enter=_enter_call),
}


def transformer(ast: source.Program) -> target.Program:
    """Build a new target Program from a source Program.

    The source tree is only read; every node of the result is newly created.

    Example:
        ``(add 2 (subtract 4 2))`` becomes one ExpressionStatement wrapping
        ``add(2, subtract(4, 2))``, with the inner call left unwrapped.
    """
    new_ast = target.Program(body=[])
    traverser(ast, TRANSFORM_VISITORS, context=new_ast.body)
    return new_ast
