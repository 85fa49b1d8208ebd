"""Source and target trees, their serialization, and the grammar-driven front end.

The two trees share kind names, so their node classes live in separate
modules and are used qualified::

    from tiny_compiler.ast import source, target

    call = source.CallExpression(name="add", params=[source.NumberLiteral(value="2")])
"""

from . import source, target
from .nodes import ASTNode, NodeKind, kind_name

# Import ASTBuilderVisitor and the PEG front end
from .builder import ASTBuilderVisitor, parse_source

# Import serialization functions
from .serialization import (
    ast_to_dict,
    ast_to_json,
    ast_from_dict,
    ast_from_json,
    ast_to_yaml,
    ast_from_yaml,
)
