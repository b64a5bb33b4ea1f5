"""Markdown rendering of a canonical (restructured) tree.

Every element is dispatched on its tag name through ``Renderer._HANDLERS``.
Handlers return the element's Markdown without a trailing newline; the
caller decides how sibling outputs are joined. While an element is being
rendered it sits on the renderer's context stack, which is how list items
find their list and line breaks know they are inside a table cell.
"""

import logging

from .constants import (
    BLOCK_ELEMENTS,
    HEADING_ELEMENTS,
    INLINE_WRAPPERS,
    LIST_ELEMENTS,
    PARAGRAPH_GROUPING_ELEMENTS,
    SUCCESSIVE_LISTS_WRAPPER,
    SUPPRESSED_ELEMENTS,
    TABLE_CELL_ELEMENTS,
    TRANSPARENT_INLINE_ELEMENTS,
)
from .entities import decode_entities_in_text
from .errors import OutsideOfList
from .node import ElementNode, TextNode
from .serialize import serialize_end_tag, serialize_start_tag

logger = logging.getLogger(__name__)


class RendererOpts:
    __slots__ = ("indent_width", "warn_unsupported")

    def __init__(self, indent_width=4, warn_unsupported=True):
        self.indent_width = indent_width
        self.warn_unsupported = bool(warn_unsupported)


def _is_block(node):
    return isinstance(node, ElementNode) and node.tag_name in BLOCK_ELEMENTS


def _prefix_lines(content, first_prefix, rest_prefix):
    lines = content.split("\n")
    out = [first_prefix + lines[0]]
    out.extend(rest_prefix + line for line in lines[1:])
    return "\n".join(out)


class Renderer:
    __slots__ = ("opts", "stack", "unsupported")

    def __init__(self, opts=None):
        self.opts = opts or RendererOpts()
        self.stack = []
        self.unsupported = []

    def render(self, node):
        """Render ``node`` to Markdown ending in exactly one newline."""
        self.stack = []
        self.unsupported = []
        return self._render_node(node).strip("\n") + "\n"

    # ---------------------
    # Traversal
    # ---------------------

    def _render_node(self, node):
        if isinstance(node, TextNode):
            return decode_entities_in_text(node.data)

        handler = self._HANDLERS.get(node.tag_name)
        if handler is None:
            return self._render_unsupported(node)

        self.stack.append(node)
        try:
            return handler(self, node)
        finally:
            self.stack.pop()

    def _render_children(self, node):
        return "".join(map(self._render_node, node.children))

    def _render_paragraphs(self, node):
        """Render children, opening a new paragraph around each block child."""
        paragraphs = []
        inline = []
        for child in node.children:
            content = self._render_node(child)
            if _is_block(child):
                if inline:
                    paragraphs.append("".join(inline))
                    inline = []
                paragraphs.append(content)
            else:
                inline.append(content)
        if inline:
            paragraphs.append("".join(inline))

        trimmed = (paragraph.strip("\n") for paragraph in paragraphs)
        return "\n\n".join(paragraph for paragraph in trimmed if paragraph)

    # ---------------------
    # Context queries
    # ---------------------

    def nearest_list(self):
        """Return the innermost ``ul``/``ol`` being rendered, or None."""
        for node in reversed(self.stack):
            if node.tag_name in LIST_ELEMENTS:
                return node
        return None

    def in_table_cell(self):
        return any(node.tag_name in TABLE_CELL_ELEMENTS for node in self.stack)

    # ---------------------
    # Element handlers
    # ---------------------

    def _render_nothing(self, node):
        return ""

    def _render_unsupported(self, node):
        self.unsupported.append(node.tag_name)
        level = logging.WARNING if self.opts.warn_unsupported else logging.DEBUG
        logger.log(level, "`%s` element is not supported. rendering nothing.", node.tag_name)
        return ""

    def _render_inline_wrapper(self, node):
        content = self._render_children(node)
        if not content:
            return ""
        prefix, suffix = INLINE_WRAPPERS[node.tag_name]
        return f"{prefix}{content}{suffix}"

    def _render_heading(self, node):
        level = int(node.tag_name[1])
        content = self._render_children(node).strip("\n")
        return f"{'#' * level} {content}"

    def _render_p(self, node):
        return self._render_children(node)

    def _render_br(self, node):
        # A Markdown table row cannot span lines
        if self.in_table_cell():
            return "<br>"
        return "\n"

    def _render_hr(self, node):
        return "---"

    def _render_pre(self, node):
        content = self._render_children(node).strip("\n")
        return f"```\n{content}\n```"

    def _render_blockquote(self, node):
        content = self._render_paragraphs(node)
        if not content:
            return ""
        return _prefix_lines(content, "> ", "> ")

    def _render_list(self, node):
        return "\n".join(filter(None, map(self._render_node, node.children)))

    def _render_li(self, node):
        list_node = self.nearest_list()
        if list_node is None:
            msg = "<li> element outside of <ul> or <ol>"
            raise OutsideOfList(msg)

        marker = "1." if list_node.tag_name == "ol" else "-"
        content = self._render_paragraphs(node)
        if content:
            item = _prefix_lines(content, marker + " ", " " * (len(marker) + 1))
        else:
            item = marker

        depth = list_node.list_depth()
        if not depth:
            return item
        indent = " " * (self.opts.indent_width * depth)
        return _prefix_lines(item, indent, indent)

    def _render_a(self, node):
        content = self._render_children(node)
        attrs = node.attrs
        if "name" in attrs:
            # Markdown has no anchor target syntax
            return f"{serialize_start_tag('a', attrs)}{content}{serialize_end_tag('a')}"
        if "href" in attrs:
            return f"[{content}]({attrs['href']})"
        return content

    def _render_img(self, node):
        return serialize_start_tag(node.tag_name, node.attrs)

    def _render_table(self, node):
        return "\n".join(filter(None, map(self._render_node, node.children)))

    def _render_thead(self, node):
        lines = []
        columns = 0
        for row in node.element_children():
            output = self._render_node(row)
            if output:
                lines.append(output)
            columns = max(columns, len(_cells(row)))
        if not lines:
            return ""
        lines.append("|---" * columns + "|")
        return "\n".join(lines)

    def _render_tbody(self, node):
        return "\n".join(filter(None, map(self._render_node, node.element_children())))

    def _render_tr(self, node):
        outputs = list(map(self._render_node, _cells(node)))
        matrix = [output.split("\n") for output in outputs]
        height = max((len(column) for column in matrix), default=0)
        rows = []
        for index in range(height):
            entries = [column[index] if index < len(column) else "" for column in matrix]
            rows.append("| " + " | ".join(entries) + " |")
        return "\n".join(rows)

    _HANDLERS = {
        **dict.fromkeys(SUPPRESSED_ELEMENTS, _render_nothing),
        **dict.fromkeys(TRANSPARENT_INLINE_ELEMENTS, _render_children),
        **dict.fromkeys(INLINE_WRAPPERS, _render_inline_wrapper),
        **dict.fromkeys(HEADING_ELEMENTS, _render_heading),
        **dict.fromkeys(PARAGRAPH_GROUPING_ELEMENTS, _render_paragraphs),
        "a": _render_a,
        "blockquote": _render_blockquote,
        "br": _render_br,
        "hr": _render_hr,
        "img": _render_img,
        "li": _render_li,
        "ol": _render_list,
        "p": _render_p,
        "pre": _render_pre,
        "table": _render_table,
        "tbody": _render_tbody,
        "thead": _render_thead,
        "tr": _render_tr,
        "ul": _render_list,
        SUCCESSIVE_LISTS_WRAPPER: _render_list,
    }


def _cells(row):
    return [child for child in row.element_children() if child.tag_name in TABLE_CELL_ELEMENTS]


def render(node, opts=None):
    return Renderer(opts).render(node)
