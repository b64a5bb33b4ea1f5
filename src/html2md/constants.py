"""Element Constants

This module defines the fixed element sets the converter relies on.
Sets are kept as frozensets for lookups; the ordered tuples exist where
iteration order matters (tests walk them).

Usage:
    from html2md.constants import VOID_ELEMENTS, BLOCK_ELEMENTS
"""

# Elements that never have children or a closing tag
VOID_ELEMENT_NAMES = (
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
)
VOID_ELEMENTS = frozenset(VOID_ELEMENT_NAMES)

LIST_ELEMENTS = frozenset({"ul", "ol"})

# Synthetic element inserted by the restructurer around adjacent lists
SUCCESSIVE_LISTS_WRAPPER = "successive-lists-wrapper"

# Synthetic root used when the input is not a single top-level element
DOCUMENT_FRAGMENT = "#document-fragment"

# A block child opens a new paragraph when grouping mixed content
BLOCK_ELEMENTS = frozenset(
    {
        "address",
        "article",
        "aside",
        "blockquote",
        "canvas",
        "dd",
        "div",
        "dl",
        "dt",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "header",
        "hr",
        "li",
        "main",
        "nav",
        "noscript",
        "ol",
        "p",
        "pre",
        "section",
        "table",
        "tfoot",
        "ul",
        "video",
        SUCCESSIVE_LISTS_WRAPPER,
    }
)

HEADING_ELEMENTS = ("h1", "h2", "h3", "h4", "h5", "h6")

TABLE_CELL_ELEMENTS = frozenset({"th", "td"})

# Inline formatting: (prefix, suffix) placed around non-empty content
INLINE_WRAPPERS = {
    "b": ("**", "**"),
    "code": ("`", "`"),
    "del": ("~", "~"),
    "em": ("_", "_"),
    "i": ("_", "_"),
    "s": ("~", "~"),
    "strong": ("**", "**"),
}

# Inline elements whose children are rendered without decoration
TRANSPARENT_INLINE_ELEMENTS = frozenset(
    {
        "abbr",
        "bdi",
        "bdo",
        "cite",
        "data",
        "dfn",
        "ins",
        "kbd",
        "mark",
        "q",
        "ruby",
        "samp",
        "small",
        "span",
        "sub",
        "sup",
        "time",
        "u",
        "var",
        "wbr",
    }
)

# Containers whose children are grouped into blank-line separated paragraphs
PARAGRAPH_GROUPING_ELEMENTS = frozenset(
    {
        DOCUMENT_FRAGMENT,
        "address",
        "article",
        "aside",
        "blockquote",
        "body",
        "dd",
        "details",
        "div",
        "dl",
        "dt",
        "html",
        "main",
        "nav",
        "section",
        "summary",
        "td",
        "th",
    }
)

# Rendered as nothing, silently
SUPPRESSED_ELEMENTS = frozenset(
    {
        "area",
        "audio",
        "base",
        "button",
        "canvas",
        "caption",
        "col",
        "colgroup",
        "datalist",
        "dialog",
        "embed",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "head",
        "header",
        "hgroup",
        "iframe",
        "input",
        "label",
        "legend",
        "link",
        "map",
        "meta",
        "meter",
        "noscript",
        "object",
        "optgroup",
        "option",
        "output",
        "picture",
        "progress",
        "rp",
        "rt",
        "script",
        "search",
        "select",
        "slot",
        "source",
        "style",
        "template",
        "textarea",
        "tfoot",
        "title",
        "track",
        "video",
    }
)
