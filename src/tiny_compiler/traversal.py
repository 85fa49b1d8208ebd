"""Generic depth-first traversal driven by a table of per-kind callbacks.

The engine decouples walking a tree from what is done at each node. A caller
supplies a mapping from NodeKind to a Visitor holding optional ``enter`` and
``exit`` callbacks, each called as ``callback(node, parent, context)``.

``context`` is the build context: whatever the caller wants a node to see
from its surroundings, typically the list a freshly built replacement node
should be appended to. The root receives the context passed to traverser().
A node's children receive the value returned by that node's ``enter``
callback, or the node's own context when ``enter`` is absent or returns None.
Nodes are never annotated or mutated by the engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence

from .ast import source, target
from .ast.nodes import ASTNode, NodeKind, kind_name
from .errors import TraversalError

Callback = Callable[[ASTNode, Optional[ASTNode], Any], Any]


@dataclass
class Visitor:
    """Callbacks for one node kind. Either may be left out."""
    enter: Optional[Callback] = None
    exit: Optional[Callback] = None


def _no_children(node) -> Sequence[ASTNode]:
    return ()


# Which sequence holds the children of each node class.
_CHILDREN: dict[type, Callable[[Any], Sequence[ASTNode]]] = {
    source.Program: lambda node: node.body,
    source.CallExpression: lambda node: node.params,
    source.NumberLiteral: _no_children,
    source.StringLiteral: _no_children,
    target.Program: lambda node: node.body,
    target.ExpressionStatement: lambda node: (node.expression,),
    target.CallExpression: lambda node: node.arguments,
    target.Identifier: _no_children,
    target.NumberLiteral: _no_children,
    target.StringLiteral: _no_children,
}


def children_of(node: ASTNode) -> Sequence[ASTNode]:
    """Return the children the engine descends into, in visiting order.

    Raises:
        TraversalError: If the node's class is not one the engine knows.
    """
    try:
        accessor = _CHILDREN[type(node)]
    except KeyError:
        raise TraversalError(kind_name(node)) from None
    return accessor(node)


def traverser(root: ASTNode, visitors: Mapping[NodeKind, Visitor], context: Any = None) -> None:
    """Visit every node under ``root`` exactly once, depth first.

    Args:
        root: The tree to walk. Its parent is reported as None.
        visitors: Callbacks keyed by NodeKind or by the kind's string value
            (``"CallExpression"``). Kinds without an entry are still walked,
            just without callbacks.
        context: Build context handed to the root's callbacks.

    Raises:
        TraversalError: On a node the engine cannot walk. Callbacks already
            run for earlier nodes are not undone.
        ValueError: If a key of ``visitors`` names no NodeKind.
    """
    table = {NodeKind(kind): visitor for kind, visitor in visitors.items()}

    def traverse_array(nodes: Sequence[ASTNode], parent: ASTNode, ctx: Any):
        for child in nodes:
            traverse_node(child, parent, ctx)

    def traverse_node(node: ASTNode, parent: Optional[ASTNode], ctx: Any):
        children = children_of(node)
        methods = table.get(node.kind)

        child_ctx = ctx
        if methods is not None and methods.enter is not None:
            established = methods.enter(node, parent, ctx)
            if established is not None:
                child_ctx = established

        traverse_array(children, node, child_ctx)

        if methods is not None and methods.exit is not None:
            methods.exit(node, parent, ctx)

    traverse_node(root, None, context)
