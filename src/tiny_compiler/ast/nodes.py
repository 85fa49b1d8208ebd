from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class NodeKind(str, Enum):
    """Tag naming every kind of node that can appear in either tree.

    The values double as the ``type`` field of the serialized form, and since
    NodeKind is a str enum, a kind compares equal to its string value.
    """
    PROGRAM = "Program"
    NUMBER_LITERAL = "NumberLiteral"
    STRING_LITERAL = "StringLiteral"
    CALL_EXPRESSION = "CallExpression"
    IDENTIFIER = "Identifier"
    EXPRESSION_STATEMENT = "ExpressionStatement"


# --- AST nodes base class. ---

@dataclass
class ASTNode(object):
    """Base class for the nodes of both the source and the target tree.

    Subclasses set ``kind`` to the NodeKind they represent. The source and
    target trees use distinct classes even where two kinds share a name and a
    shape, so a node always tells which tree it belongs to.
    """
    kind: ClassVar[NodeKind]


def kind_name(node) -> str:
    """Return the kind of ``node`` as a plain string, for error messages.

    Objects that are not AST nodes are named by their class.
    """
    kind = getattr(node, 'kind', None)
    if isinstance(kind, NodeKind):
        return kind.value
    return type(node).__name__
