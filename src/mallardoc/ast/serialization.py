#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mallardoc/ast/serialization.py
"""JSON serialization and deserialization for AST nodes.

The external parser hands documents to the command-line driver as JSON. Each
node is an object whose ``node_type`` key names the node class; the remaining
keys are the dataclass fields of that class. Records that are not nodes
(``TableRows``, ``DescriptionListEntry``, ``SourceLocation``) use the same
discriminator.

Examples
--------
Serialize AST to JSON:

    >>> from mallardoc.ast import Document, Paragraph
    >>> from mallardoc.ast.serialization import ast_to_json
    >>> doc = Document(blocks=[Paragraph(text="Hello")])
    >>> json_str = ast_to_json(doc, indent=2)

Deserialize JSON back to AST:

    >>> from mallardoc.ast.serialization import json_to_ast
    >>> doc = json_to_ast(json_str)
    >>> doc.blocks[0].text
    'Hello'

"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from typing import Any

from mallardoc.ast.nodes import (
    BLOCK_NODE_TYPES,
    INLINE_NODE_TYPES,
    DescriptionListEntry,
    SourceLocation,
    TableRows,
)
from mallardoc.exceptions import ParsingError

NODE_TYPE_KEY = "node_type"

_RECORD_TYPES: dict[str, type] = {
    cls.__name__: cls
    for cls in (*BLOCK_NODE_TYPES, *INLINE_NODE_TYPES, DescriptionListEntry, TableRows, SourceLocation)
}


def _serialize_value(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return ast_to_dict(value)
    if isinstance(value, (list, tuple)):
        return [_serialize_value(item) for item in value]
    if isinstance(value, dict):
        return {key: _serialize_value(item) for key, item in value.items()}
    return value


def ast_to_dict(node: Any) -> dict[str, Any]:
    """Convert an AST node or record to a dictionary.

    Parameters
    ----------
    node : Node or record
        The AST node to convert

    Returns
    -------
    dict
        Dictionary representation with a ``node_type`` discriminator

    Raises
    ------
    ValueError
        If ``node`` is not one of the known node or record types

    """
    node_type = type(node).__name__
    if _RECORD_TYPES.get(node_type) is not type(node):
        raise ValueError(f"Unknown node type for serialization: {node_type}")

    result: dict[str, Any] = {NODE_TYPE_KEY: node_type}
    for node_field in fields(node):
        result[node_field.name] = _serialize_value(getattr(node, node_field.name))
    return result


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        if NODE_TYPE_KEY in value:
            return dict_to_ast(value)
        return {key: _deserialize_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_deserialize_value(item) for item in value]
    return value


def dict_to_ast(data: dict[str, Any]) -> Any:
    """Convert a dictionary produced by :func:`ast_to_dict` back into a node.

    Parameters
    ----------
    data : dict
        Dictionary with a ``node_type`` key

    Returns
    -------
    Node or record
        The reconstructed node

    Raises
    ------
    ParsingError
        If the node type is unknown or a field does not belong to it

    """
    if not isinstance(data, dict):
        raise ParsingError(f"Expected a node object, got {type(data).__name__}", parsing_stage="ast")

    node_type = data.get(NODE_TYPE_KEY)
    node_class = _RECORD_TYPES.get(node_type) if isinstance(node_type, str) else None
    if node_class is None:
        raise ParsingError(f"Unknown node type: {node_type!r}", parsing_stage="ast")

    known_fields = {node_field.name for node_field in fields(node_class)}
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        if key == NODE_TYPE_KEY:
            continue
        if key not in known_fields:
            raise ParsingError(f"Unknown field '{key}' for node type {node_type}", parsing_stage="ast")
        kwargs[key] = _deserialize_value(value)

    return node_class(**kwargs)


def ast_to_json(node: Any, indent: int | None = None) -> str:
    """Serialize an AST to a JSON string."""
    return json.dumps(ast_to_dict(node), indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str) -> Any:
    """Deserialize an AST from a JSON string.

    Raises
    ------
    ParsingError
        If the string is not valid JSON or does not describe a known AST

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid AST JSON: {e}", parsing_stage="json", original_error=e) from e
    return dict_to_ast(data)
