import re

from .constants import LIST_ELEMENTS, VOID_ELEMENTS

_DEPTH_SUFFIX = re.compile(r"-([0-9]+)$")


class Node:
    """Base class for syntax tree nodes.

    A tree is owned top-down: every ``ElementNode`` exclusively owns its
    ``children`` list and nodes keep no parent or sibling references, so a
    phase can build a new tree without touching the previous one.
    """

    __slots__ = ()

    name = ""


class TextNode(Node):
    __slots__ = ("data",)

    name = "#text"

    def __init__(self, data):
        self.data = data

    def __repr__(self):
        return f"TextNode({self.data!r})"

    def __eq__(self, other):
        if not isinstance(other, TextNode):
            return NotImplemented
        return self.data == other.data

    __hash__ = None


class ElementNode(Node):
    """An element with a lowercase tag name, attributes and owned children.

    - tag_name: e.g., 'div', 'p', or a synthetic name such as
      'successive-lists-wrapper'
    - attrs: dict of lowercased attribute names to values
    - children: list of child nodes in document order
    """

    __slots__ = ("attrs", "children", "tag_name")

    def __init__(self, tag_name, attrs=None, children=None):
        if tag_name is None or tag_name == "":
            msg = "Empty tag_name passed to ElementNode constructor"
            raise ValueError(msg)
        self.tag_name = tag_name
        self.attrs = dict(attrs) if attrs else {}
        self.children = list(children) if children else []

    @property
    def name(self):
        return self.tag_name

    @property
    def is_void(self):
        return self.tag_name in VOID_ELEMENTS

    @property
    def is_list(self):
        return self.tag_name in LIST_ELEMENTS

    def append_child(self, child):
        if self.is_void:
            msg = f"Void element <{self.tag_name}> cannot have children"
            raise ValueError(msg)
        self.children.append(child)

    def element_children(self):
        return [child for child in self.children if isinstance(child, ElementNode)]

    def classes(self):
        return self.attrs.get("class", "").split()

    def list_depth(self):
        """Nesting depth encoded in a class name suffix such as ``lst-kix_x-2``.

        Exported word-processor documents flatten nested lists and record
        the level in a class token instead. The last class token ending in
        ``-N`` wins; without one the depth is 0.
        """
        depth = 0
        for token in self.classes():
            match = _DEPTH_SUFFIX.search(token)
            if match:
                depth = int(match.group(1))
        return depth

    def __repr__(self):
        return f"<ElementNode {self.tag_name} attrs={self.attrs!r} children={len(self.children)}>"

    def __eq__(self, other):
        if not isinstance(other, ElementNode):
            return NotImplemented
        return self.tag_name == other.tag_name and self.attrs == other.attrs and self.children == other.children

    __hash__ = None
