"""JSON and YAML serialization for source and target AST trees.

Nodes serialize to plain dictionaries whose ``type`` key holds the node kind,
followed by the node's fields in declaration order::

    {"type": "CallExpression", "name": "add",
     "params": [{"type": "NumberLiteral", "value": "2"}]}

Because the source and target trees share kind names, deserialization needs
to be told which tree the data describes.

Example:
    from tiny_compiler.ast import ast_to_json, ast_from_json

    json_str = ast_to_json(program)
    program_restored = ast_from_json(json_str, tree="source")
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any

from . import source, target
from .nodes import ASTNode


# Registries mapping kind names to classes for deserialization
_NODE_REGISTRIES: dict[str, dict[str, type[ASTNode]]] = {
    "source": {
        cls.kind.value: cls
        for cls in [
            source.Program,
            source.CallExpression,
            source.NumberLiteral,
            source.StringLiteral,
        ]
    },
    "target": {
        cls.kind.value: cls
        for cls in [
            target.Program,
            target.ExpressionStatement,
            target.CallExpression,
            target.Identifier,
            target.NumberLiteral,
            target.StringLiteral,
        ]
    },
}


def _serialize_value(value: Any) -> Any:
    """Serialize a field value recursively."""
    if value is None:
        return None
    elif isinstance(value, ASTNode):
        return _serialize_node(value)
    elif isinstance(value, list):
        return [_serialize_value(item) for item in value]
    elif isinstance(value, str):
        return value
    else:
        raise TypeError(f"Unsupported type for serialization: {type(value)}")


def _serialize_node(node: ASTNode) -> dict[str, Any]:
    """Serialize a single AST node to a dictionary."""
    result: dict[str, Any] = {
        "type": node.kind.value,
    }
    for field in dataclasses.fields(node):
        result[field.name] = _serialize_value(getattr(node, field.name))
    return result


def ast_to_dict(ast: ASTNode | list[ASTNode] | None) -> dict[str, Any] | list[dict[str, Any]] | None:
    """Convert an AST to a Python dictionary (JSON-serializable).

    Args:
        ast: An AST node of either tree, a list of nodes, or None.

    Returns:
        A dictionary representation of the AST, a list of dictionaries, or None.
    """
    if ast is None:
        return None
    elif isinstance(ast, list):
        return [_serialize_node(node) for node in ast]
    else:
        return _serialize_node(ast)


def ast_to_json(ast: ASTNode | list[ASTNode] | None, indent: int | None = 2) -> str:
    """Serialize an AST to a JSON string.

    Args:
        ast: An AST node, list of AST nodes, or None.
        indent: Indentation level for pretty-printing. Use None for compact output.
    """
    return json.dumps(ast_to_dict(ast), indent=indent)


def _registry(tree: str) -> dict[str, type[ASTNode]]:
    try:
        return _NODE_REGISTRIES[tree]
    except KeyError:
        raise ValueError(f"Unknown tree {tree!r}, expected 'source' or 'target'") from None


def _deserialize_value(value: Any, registry: dict[str, type[ASTNode]]) -> Any:
    """Deserialize a field value recursively."""
    if value is None:
        return None
    elif isinstance(value, dict):
        return _deserialize_node(value, registry)
    elif isinstance(value, list):
        return [_deserialize_value(item, registry) for item in value]
    elif isinstance(value, str):
        return value
    else:
        raise TypeError(f"Unsupported type for deserialization: {type(value)}")


def _deserialize_node(data: dict[str, Any], registry: dict[str, type[ASTNode]]) -> ASTNode:
    """Deserialize a single AST node from a dictionary."""
    if "type" not in data:
        raise ValueError("Missing 'type' field in node data")

    type_name = data["type"]
    if type_name not in registry:
        raise ValueError(f"Unknown node type: {type_name}")

    node_class = registry[type_name]
    field_names = {f.name for f in dataclasses.fields(node_class)}

    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        if key in field_names:
            kwargs[key] = _deserialize_value(value, registry)

    return node_class(**kwargs)


def ast_from_dict(data: dict[str, Any] | list[dict[str, Any]] | None,
                  tree: str = "source") -> ASTNode | list[ASTNode] | None:
    """Reconstruct an AST from a Python dictionary.

    Args:
        data: A dictionary, list of dictionaries, or None (as returned by ast_to_dict).
        tree: Which tree the data describes, "source" or "target" (default: "source").

    Returns:
        An AST node, list of AST nodes, or None.

    Raises:
        ValueError: If ``tree`` is unknown, or the data contains a node type
            that tree does not have, or is malformed.
        TypeError: If the data were built with a required field missing.
    """
    registry = _registry(tree)
    if data is None:
        return None
    elif isinstance(data, list):
        return [_deserialize_node(item, registry) for item in data]
    else:
        return _deserialize_node(data, registry)


def ast_from_json(json_str: str, tree: str = "source") -> ASTNode | list[ASTNode] | None:
    """Deserialize an AST from a JSON string.

    Raises:
        ValueError: If the JSON contains an unknown node type or is malformed.
        json.JSONDecodeError: If the string is not valid JSON.
    """
    data = json.loads(json_str)
    return ast_from_dict(data, tree=tree)


def ast_to_yaml(ast: ASTNode | list[ASTNode] | None) -> str:
    """Serialize an AST to a YAML string.

    Requires PyYAML to be installed: pip install tiny_compiler[yaml]

    Raises:
        ImportError: If PyYAML is not installed.
    """
    try:
        import yaml
    except ImportError:
        raise ImportError(
            "PyYAML is required for YAML serialization. "
            "Install it with: pip install tiny_compiler[yaml]"
        )

    return yaml.dump(ast_to_dict(ast), default_flow_style=False, sort_keys=False, allow_unicode=True)


def ast_from_yaml(yaml_str: str, tree: str = "source") -> ASTNode | list[ASTNode] | None:
    """Deserialize an AST from a YAML string.

    Requires PyYAML to be installed: pip install tiny_compiler[yaml]

    Raises:
        ImportError: If PyYAML is not installed.
        ValueError: If the YAML contains an unknown node type or is malformed.
    """
    try:
        import yaml
    except ImportError:
        raise ImportError(
            "PyYAML is required for YAML deserialization. "
            "Install it with: pip install tiny_compiler[yaml]"
        )

    return ast_from_dict(yaml.safe_load(yaml_str), tree=tree)
