"""Canonicalize a parsed tree before rendering.

Two rewrites are applied at every level of the tree:

* tables are reshaped to ``table > thead > tr`` + ``table > tbody > tr*``
  using the rows found anywhere inside the table, whatever wrappers
  (``thead``, ``tbody``, ``tfoot``, ``caption``) the markup used;
* every run of adjacent ``ul``/``ol`` siblings is wrapped in a
  ``successive-lists-wrapper`` element, so the renderer can join the lists
  with single newlines instead of paragraph breaks.

The input tree is never modified; new element nodes are built instead.
"""

from .constants import SUCCESSIVE_LISTS_WRAPPER
from .node import ElementNode, TextNode


def restruct(node):
    if isinstance(node, TextNode):
        return TextNode(node.data)
    if node.tag_name == "table":
        return _restruct_table(node)
    if node.tag_name == SUCCESSIVE_LISTS_WRAPPER:
        # Already grouped by an earlier pass
        return ElementNode(node.tag_name, node.attrs, [restruct(child) for child in node.children])
    return ElementNode(node.tag_name, node.attrs, group_successive_lists(node.children))


def group_successive_lists(nodes):
    children = []
    successive_lists = []
    for child in nodes:
        if isinstance(child, ElementNode) and child.is_list:
            successive_lists.append(restruct(child))
            continue
        if successive_lists:
            children.append(ElementNode(SUCCESSIVE_LISTS_WRAPPER, children=successive_lists))
            successive_lists = []
        children.append(restruct(child))
    if successive_lists:
        children.append(ElementNode(SUCCESSIVE_LISTS_WRAPPER, children=successive_lists))
    return children


def _restruct_table(table):
    rows = []
    for child in table.children:
        _collect_rows(child, rows)

    new_table = ElementNode("table", table.attrs)
    if not rows:
        return new_table

    rows = [restruct(row) for row in rows]
    new_table.children.append(ElementNode("thead", children=rows[:1]))
    new_table.children.append(ElementNode("tbody", children=rows[1:]))
    return new_table


def _collect_rows(node, rows):
    """Append every ``tr`` below ``node`` in document order.

    Rows of nested tables belong to those tables and are left alone.
    """
    if isinstance(node, TextNode):
        return
    if node.tag_name == "tr":
        rows.append(node)
        return
    if node.tag_name == "table":
        return
    for child in node.children:
        _collect_rows(child, rows)
