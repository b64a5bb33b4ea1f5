"""Strict tree construction from a token list.

Unlike an HTML5 tree builder there are no insertion modes and no error
recovery: every open tag must be closed by an end tag of the same name,
and any mismatch aborts the parse.
"""

from .constants import DOCUMENT_FRAGMENT, LIST_ELEMENTS
from .errors import NestingTooDeep, UnexpectedEndOfInput, UnexpectedToken
from .node import ElementNode, TextNode
from .tokens import Tag, TextToken

# Bounds the recursion depth of restructuring and rendering
DEFAULT_MAX_DEPTH = 200


def nesting_weight(name):
    """Levels an element occupies once the tree has been restructured.

    Every list gains a ``successive-lists-wrapper`` parent and every table
    gains a ``thead``/``tbody`` level, so both count twice.
    """
    if name in LIST_ELEMENTS or name == "table":
        return 2
    return 1


class ParserOpts:
    __slots__ = ("max_depth",)

    def __init__(self, max_depth=DEFAULT_MAX_DEPTH):
        self.max_depth = max_depth


class Parser:
    __slots__ = ("depth", "open_elements", "opts", "tokens", "top_level")

    def __init__(self, tokens, opts=None):
        self.tokens = tokens
        self.opts = opts or ParserOpts()
        self.open_elements = []
        self.top_level = []
        self.depth = 0

    def parse(self):
        """Build the tree and return its root node."""
        self.open_elements = []
        self.top_level = []
        self.depth = 0

        for token in self.tokens:
            if isinstance(token, TextToken):
                self._insert(TextNode(token.data))
            elif token.kind == Tag.VOID:
                self._insert(ElementNode(token.name, token.attrs))
            elif token.kind == Tag.OPEN:
                self._check_depth(token)
                element = ElementNode(token.name, token.attrs)
                self._insert(element)
                self.open_elements.append(element)
                self.depth += nesting_weight(token.name)
            else:
                self._close(token)

        if self.open_elements:
            current = self.open_elements[-1]
            msg = f"unexpected end of input: <{current.tag_name}> is never closed"
            raise UnexpectedEndOfInput(msg)

        return self._root()

    def _insert(self, node):
        if self.open_elements:
            self.open_elements[-1].append_child(node)
        else:
            self.top_level.append(node)

    def _check_depth(self, token):
        max_depth = self.opts.max_depth
        if max_depth is not None and self.depth + nesting_weight(token.name) > max_depth:
            msg = f"elements nested deeper than {max_depth} levels"
            raise NestingTooDeep(msg, token.line, token.column)

    def _close(self, token):
        if not self.open_elements:
            msg = f"unexpected end tag </{token.name}>"
            raise UnexpectedToken(msg, token.line, token.column, token=token)
        current = self.open_elements[-1]
        if current.tag_name != token.name:
            msg = f"expected </{current.tag_name}> but got </{token.name}>"
            raise UnexpectedToken(msg, token.line, token.column, token=token)
        self.open_elements.pop()
        self.depth -= nesting_weight(current.tag_name)

    def _root(self):
        top_level = self.top_level
        if len(top_level) == 1 and isinstance(top_level[0], ElementNode):
            return top_level[0]
        return ElementNode(DOCUMENT_FRAGMENT, children=top_level)


def parse(tokens, opts=None):
    return Parser(tokens, opts).parse()
