"""Serialization helpers for syntax tree nodes.

Markdown has no syntax for some HTML constructs (anchors, sized images),
so the renderer writes those elements back out as literal tags. The test
format dump is used by the command-line ``--tree`` option and by tests.
"""

from __future__ import annotations

from .node import ElementNode, Node, TextNode


def _escape_attr_value(value: str) -> str:
    return value.replace('"', "&quot;")


def serialize_start_tag(name: str, attrs: dict[str, str] | None) -> str:
    """Return ``<name a="1" b="2">`` with attributes sorted by name."""
    parts: list[str] = ["<", name]
    for key in sorted(attrs or {}):
        parts.extend([" ", key, '="', _escape_attr_value(attrs[key]), '"'])
    parts.append(">")
    return "".join(parts)


def serialize_end_tag(name: str) -> str:
    return f"</{name}>"


def to_test_format(node: Node, indent: int = 0) -> str:
    """Convert a tree to the html5lib test format ('| ' prefixed lines)."""
    if isinstance(node, TextNode):
        return f'| {" " * indent}"{node.data}"'

    assert isinstance(node, ElementNode)
    lines = [f"| {' ' * indent}<{node.tag_name}>"]
    for key in sorted(node.attrs):
        lines.append(f'| {" " * (indent + 2)}{key}="{node.attrs[key]}"')
    for child in node.children:
        lines.append(to_test_format(child, indent + 2))
    return "\n".join(lines)
