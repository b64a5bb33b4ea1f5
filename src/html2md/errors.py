"""Conversion errors.

Fatal problems are raised as exceptions deriving from ``Html2MdError``.
Problems the tokenizer recovers from are recorded as ``ErrorRecord``
values instead, collected on ``Tokenizer.errors`` when requested.
"""


def _format_error(code, line, column, message):
    if line is not None and column is not None:
        if message != code:
            return f"({line},{column}): {code} - {message}"
        return f"({line},{column}): {code}"
    if message != code:
        return f"{code} - {message}"
    return code


class ErrorRecord:
    """A skipped malformed tag, kept for inspection after conversion.

    Records are made from the exception strict mode would have raised
    (``ErrorRecord.from_error``), so both agree on code and location.
    Two records are equal when they share code and location.
    """

    __slots__ = ("code", "column", "line", "message")

    def __init__(self, code, line=None, column=None, message=None):
        self.code = code
        self.line = line
        self.column = column
        self.message = message or code

    @classmethod
    def from_error(cls, error):
        return cls(error.code, error.line, error.column, error.message)

    @property
    def location(self):
        return self.line, self.column

    def __repr__(self):
        return f"ErrorRecord({self.code!r}, {self.line!r}, {self.column!r})"

    def __str__(self):
        return _format_error(self.code, self.line, self.column, self.message)

    def __eq__(self, other):
        if not isinstance(other, ErrorRecord):
            return NotImplemented
        return (self.code, self.location) == (other.code, other.location)

    __hash__ = None


class Html2MdError(Exception):
    """Base class for every fatal conversion error."""

    code = "error"

    def __init__(self, message=None, line=None, column=None):
        self.line = line
        self.column = column
        self.message = message or self.code
        super().__init__(self.message)

    def __str__(self):
        return _format_error(self.code, self.line, self.column, self.message)

    def to_record(self):
        return ErrorRecord.from_error(self)


class TokenizeError(Html2MdError):
    pass


class ParseError(Html2MdError):
    pass


class RenderError(Html2MdError):
    pass


class MalformedToken(TokenizeError):
    """Raised in strict mode for a tag the tokenizer would otherwise skip."""

    code = "malformed-token"

    @property
    def error(self):
        return self.to_record()


class UnexpectedEndOfInput(TokenizeError, ParseError):
    code = "unexpected-end-of-input"


class UnexpectedToken(ParseError):
    code = "unexpected-token"

    def __init__(self, message=None, line=None, column=None, token=None):
        super().__init__(message, line, column)
        self.token = token


class NestingTooDeep(ParseError):
    code = "nesting-too-deep"


class OutsideOfList(RenderError):
    code = "outside-of-list"
