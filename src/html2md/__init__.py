from .converter import HTML2Markdown, convert
from .errors import (
    ErrorRecord,
    Html2MdError,
    MalformedToken,
    NestingTooDeep,
    OutsideOfList,
    ParseError,
    RenderError,
    TokenizeError,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from .node import ElementNode, TextNode
from .parser import Parser, ParserOpts, parse
from .render import Renderer, RendererOpts, render
from .restruct import restruct
from .serialize import to_test_format
from .tokenizer import Tokenizer, TokenizerOpts, tokenize
from .tokens import Tag, TextToken

__all__ = [
    "ElementNode",
    "ErrorRecord",
    "HTML2Markdown",
    "Html2MdError",
    "MalformedToken",
    "NestingTooDeep",
    "OutsideOfList",
    "ParseError",
    "Parser",
    "ParserOpts",
    "RenderError",
    "Renderer",
    "RendererOpts",
    "Tag",
    "TextNode",
    "TextToken",
    "TokenizeError",
    "Tokenizer",
    "TokenizerOpts",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
    "convert",
    "parse",
    "render",
    "restruct",
    "to_test_format",
    "tokenize",
]
