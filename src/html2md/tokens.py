class Tag:
    __slots__ = ("attrs", "column", "kind", "line", "name")

    OPEN = 0
    CLOSE = 1
    VOID = 2

    _KIND_NAMES = ("open", "close", "void")

    def __init__(self, kind, name, attrs=None, line=None, column=None):
        self.kind = kind
        self.name = name
        self.attrs = attrs if attrs is not None else {}
        # Position of the opening '<', used in parser error messages
        self.line = line
        self.column = column

    def __repr__(self):
        if self.attrs:
            parts = [f"{name}={value!r}" for name, value in self.attrs.items()]
            attrs = " " + " ".join(parts)
        else:
            attrs = ""
        return f"<{self._KIND_NAMES[self.kind]}:{self.name}{attrs}>"

    def __eq__(self, other):
        if not isinstance(other, Tag):
            return NotImplemented
        return self.kind == other.kind and self.name == other.name and self.attrs == other.attrs

    __hash__ = None


class TextToken:
    __slots__ = ("column", "data", "line")

    def __init__(self, data, line=None, column=None):
        self.data = data
        self.line = line
        self.column = column

    def __repr__(self):
        return f"TextToken({self.data!r})"

    def __eq__(self, other):
        if not isinstance(other, TextToken):
            return NotImplemented
        return self.data == other.data

    __hash__ = None


class IgnoredToken:
    """A consumed declaration (doctype, comment). Never leaves the tokenizer."""

    __slots__ = ()

    def __repr__(self):
        return "IgnoredToken()"
