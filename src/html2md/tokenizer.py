import logging

from .constants import VOID_ELEMENTS
from .errors import ErrorRecord, MalformedToken, UnexpectedEndOfInput
from .tokens import IgnoredToken, Tag, TextToken

logger = logging.getLogger(__name__)

_WHITESPACE = "\t\n\f\r "
_ASCII_LOWER_TABLE = str.maketrans({chr(code): chr(code + 32) for code in range(65, 91)})


def _is_attribute_name_char(c):
    return c.isascii() and (c.isalnum() or c in "-_")


class TokenizerOpts:
    __slots__ = ("collect_errors", "discard_bom", "strict")

    def __init__(self, collect_errors=False, strict=False, discard_bom=True):
        self.collect_errors = bool(collect_errors)
        self.strict = bool(strict)
        self.discard_bom = bool(discard_bom)


class Tokenizer:
    DATA = 0
    TAG_OPEN = 1
    MARKUP_DECLARATION = 2
    TAG_NAME = 3
    BEFORE_ATTRIBUTE_NAME = 4
    ATTRIBUTE_NAME = 5
    AFTER_ATTRIBUTE_NAME = 6
    BEFORE_ATTRIBUTE_VALUE = 7
    ATTRIBUTE_VALUE_QUOTED = 8
    SELF_CLOSING_START_TAG = 9
    BOGUS_TAG = 10

    __slots__ = (
        "bogus_reason",
        "buffer",
        "current_attr_name",
        "current_char",
        "current_quote",
        "current_tag_attrs",
        "current_tag_closing",
        "current_tag_name",
        "current_tag_self_closing",
        "errors",
        "length",
        "line",
        "line_pos",
        "line_start",
        "opts",
        "pos",
        "reconsume",
        "state",
        "tag_start",
        "tokens",
    )

    def __init__(self, opts=None):
        self.opts = opts or TokenizerOpts()
        self.state = self.DATA
        self.buffer = ""
        self.length = 0
        self.line = 1
        self.line_pos = 0
        self.line_start = 0
        self.pos = 0
        self.reconsume = False
        self.current_char = ""
        self.tokens = []
        self.errors = []

        self.tag_start = 0
        self.current_tag_name = []
        self.current_tag_attrs = {}
        self.current_tag_closing = False
        self.current_tag_self_closing = False
        self.current_attr_name = []
        self.current_quote = '"'
        self.bogus_reason = ""

    def run(self, html):
        """Tokenize ``html`` and return the list of tags and text tokens."""
        if html and html[0] == "\ufeff" and self.opts.discard_bom:
            html = html[1:]

        self.buffer = html or ""
        self.length = len(self.buffer)
        self.line = 1
        self.line_pos = 0
        self.line_start = 0
        self.pos = 0
        self.reconsume = False
        self.current_char = ""
        self.tokens = []
        self.errors = []
        self.state = self.DATA
        self._reset_tag()

        while True:
            state = self.state
            if state == self.DATA:
                if self._state_data():
                    break
            elif state == self.TAG_OPEN:
                self._state_tag_open()
            elif state == self.MARKUP_DECLARATION:
                self._state_markup_declaration()
            elif state == self.TAG_NAME:
                self._state_tag_name()
            elif state == self.BEFORE_ATTRIBUTE_NAME:
                self._state_before_attribute_name()
            elif state == self.ATTRIBUTE_NAME:
                self._state_attribute_name()
            elif state == self.AFTER_ATTRIBUTE_NAME:
                self._state_after_attribute_name()
            elif state == self.BEFORE_ATTRIBUTE_VALUE:
                self._state_before_attribute_value()
            elif state == self.ATTRIBUTE_VALUE_QUOTED:
                self._state_attribute_value_quoted()
            elif state == self.SELF_CLOSING_START_TAG:
                self._state_self_closing_start_tag()
            elif state == self.BOGUS_TAG:
                self._state_bogus_tag()
            else:
                self.state = self.DATA

        return self.tokens

    # ---------------------
    # Helper methods
    # ---------------------

    def _get_char(self):
        if self.reconsume:
            self.reconsume = False
            return self.current_char

        if self.pos >= self.length:
            self.current_char = None
            return None

        c = self.buffer[self.pos]
        self.pos += 1
        self.current_char = c
        return c

    def _reconsume_current(self):
        self.reconsume = True

    def _skip_whitespace(self):
        buffer = self.buffer
        pos = self.pos
        while pos < self.length and buffer[pos] in _WHITESPACE:
            pos += 1
        self.pos = pos

    def _get_char_after_whitespace(self):
        if self.reconsume:
            if self.current_char is None or self.current_char not in _WHITESPACE:
                return self._get_char()
            self.reconsume = False
        self._skip_whitespace()
        return self._get_char()

    def location(self, pos):
        """Return the 1-based (line, column) of buffer offset ``pos``.

        Offsets are requested in increasing order while tokenizing, so only
        the newlines since the previous request are counted. Asking for an
        earlier offset restarts the count from the beginning of the buffer.
        """
        if pos < self.line_pos:
            self.line = 1
            self.line_pos = 0
            self.line_start = 0
        newlines = self.buffer.count("\n", self.line_pos, pos)
        if newlines:
            self.line += newlines
            self.line_start = self.buffer.rfind("\n", self.line_pos, pos) + 1
        self.line_pos = pos
        return self.line, pos - self.line_start + 1

    def _unexpected_eof(self, where):
        line, column = self.location(self.length)
        raise UnexpectedEndOfInput(f"unexpected end of input {where}", line, column)

    def _reset_tag(self):
        self.current_tag_name = []
        self.current_tag_attrs = {}
        self.current_tag_closing = False
        self.current_tag_self_closing = False
        self.current_attr_name = []
        self.bogus_reason = ""

    def _finish_attribute(self, value=None):
        name = "".join(self.current_attr_name)
        self.current_attr_name = []
        if value is None:
            value = name
        self.current_tag_attrs[name] = value

    def _emit_token(self, token):
        if isinstance(token, IgnoredToken):
            return
        self.tokens.append(token)

    def _emit_error(self, message, pos):
        line, column = self.location(pos)
        error = MalformedToken(message, line, column)
        if self.opts.strict:
            raise error
        logger.debug("skipping malformed tag at %d:%d: %s", line, column, message)
        if self.opts.collect_errors:
            self.errors.append(ErrorRecord.from_error(error))

    def _emit_current_tag(self):
        name = "".join(self.current_tag_name)
        closing = self.current_tag_closing
        self_closing = self.current_tag_self_closing
        if not name:
            self._emit_error("Missing tag name", self.tag_start)
        elif name in VOID_ELEMENTS:
            if closing:
                self._emit_error(f"End tag for void element <{name}>", self.tag_start)
            else:
                self._emit_tag(Tag.VOID, name)
        elif self_closing:
            self._emit_error(f"Self-closing syntax on non-void element <{name}>", self.tag_start)
        elif closing:
            self._emit_tag(Tag.CLOSE, name)
        else:
            self._emit_tag(Tag.OPEN, name)
        self._reset_tag()
        self.state = self.DATA

    def _emit_tag(self, kind, name):
        line, column = self.location(self.tag_start)
        self._emit_token(Tag(kind, name, self.current_tag_attrs, line, column))

    def _start_bogus_tag(self, reason):
        self.bogus_reason = reason
        self._reconsume_current()
        self.state = self.BOGUS_TAG

    # ---------------------
    # State handlers
    # ---------------------

    def _state_data(self):
        self._skip_whitespace()
        if self.pos >= self.length:
            return True
        buffer = self.buffer
        start = self.pos
        if buffer[start] == "<":
            self.tag_start = start
            self.pos = start + 1
            self.state = self.TAG_OPEN
            return False
        end = buffer.find("<", start)
        if end == -1:
            end = self.length
        line, column = self.location(start)
        self._emit_token(TextToken(buffer[start:end], line, column))
        self.pos = end
        return False

    def _state_tag_open(self):
        c = self._get_char()
        if c is None:
            self._unexpected_eof("after '<'")
        if c == "!":
            self.state = self.MARKUP_DECLARATION
            return
        self._reset_tag()
        if c == "/":
            self.current_tag_closing = True
        else:
            self._reconsume_current()
        self.state = self.TAG_NAME

    def _state_markup_declaration(self):
        end = self.buffer.find(">", self.pos)
        if end == -1:
            self.pos = self.length
            self._unexpected_eof("in declaration")
        self.pos = end + 1
        self._emit_token(IgnoredToken())
        self.state = self.DATA

    def _state_tag_name(self):
        while True:
            c = self._get_char()
            if c is None:
                self._unexpected_eof("in tag name")
            if c.isalnum():
                self.current_tag_name.append(c.translate(_ASCII_LOWER_TABLE))
                continue
            self._reconsume_current()
            self.state = self.BEFORE_ATTRIBUTE_NAME
            return

    def _state_before_attribute_name(self):
        c = self._get_char_after_whitespace()
        if c is None:
            self._unexpected_eof("in tag")
        if c == ">":
            self._emit_current_tag()
            return
        if c == "/":
            self.state = self.SELF_CLOSING_START_TAG
            return
        if _is_attribute_name_char(c):
            self._reconsume_current()
            self.state = self.ATTRIBUTE_NAME
            return
        self._start_bogus_tag(f"Unexpected character {c!r} in tag")

    def _state_attribute_name(self):
        while True:
            c = self._get_char()
            if c is None:
                self._unexpected_eof("in attribute name")
            if _is_attribute_name_char(c):
                self.current_attr_name.append(c.translate(_ASCII_LOWER_TABLE))
                continue
            self._reconsume_current()
            self.state = self.AFTER_ATTRIBUTE_NAME
            return

    def _state_after_attribute_name(self):
        c = self._get_char_after_whitespace()
        if c is None:
            self._unexpected_eof("after attribute name")
        if c == "=":
            self.state = self.BEFORE_ATTRIBUTE_VALUE
            return
        # Boolean attribute: the value defaults to the name
        self._finish_attribute()
        self._reconsume_current()
        self.state = self.BEFORE_ATTRIBUTE_NAME

    def _state_before_attribute_value(self):
        c = self._get_char_after_whitespace()
        if c is None:
            self._unexpected_eof("before attribute value")
        if c in ('"', "'"):
            self.current_quote = c
            self.state = self.ATTRIBUTE_VALUE_QUOTED
            return
        self._start_bogus_tag("Attribute value must be quoted")

    def _state_attribute_value_quoted(self):
        end = self.buffer.find(self.current_quote, self.pos)
        if end == -1:
            self.pos = self.length
            self._unexpected_eof("in attribute value")
        self._finish_attribute(self.buffer[self.pos : end].lower())
        self.pos = end + 1
        self.state = self.BEFORE_ATTRIBUTE_NAME

    def _state_self_closing_start_tag(self):
        c = self._get_char_after_whitespace()
        if c is None:
            self._unexpected_eof("in tag")
        if c == ">":
            self.current_tag_self_closing = True
            self._emit_current_tag()
            return
        self._start_bogus_tag(f"Expected '>' after '/' but got {c!r}")

    def _state_bogus_tag(self):
        # Reconsumed character may already be the closing '>'
        c = self._get_char()
        if c != ">":
            end = self.buffer.find(">", self.pos)
            if end == -1:
                self.pos = self.length
                self._unexpected_eof("in tag")
            self.pos = end + 1
        self._emit_error(self.bogus_reason, self.tag_start)
        self._reset_tag()
        self.state = self.DATA


def tokenize(source, opts=None):
    """Convert ``source`` into an ordered list of ``Tag`` and ``TextToken``."""
    return Tokenizer(opts).run(source)
