"""HTML2Markdown pipeline entry point."""

from .errors import NestingTooDeep
from .parser import Parser
from .render import Renderer
from .restruct import restruct
from .tokenizer import Tokenizer, TokenizerOpts


class HTML2Markdown:
    """Run the whole pipeline over ``html`` and keep every intermediate.

    - tokens: the token list
    - root: the parsed tree
    - canonical: the restructured tree that was rendered
    - markdown: the result, ending in exactly one newline
    - errors: malformed tags the tokenizer skipped (when collected)
    - unsupported: tag names the renderer did not know
    """

    __slots__ = ("canonical", "errors", "markdown", "root", "tokens", "unsupported")

    def __init__(
        self,
        html,
        *,
        strict=False,
        collect_errors=False,
        tokenizer_opts=None,
        parser_opts=None,
        renderer_opts=None,
    ):
        opts = tokenizer_opts or TokenizerOpts(collect_errors=collect_errors, strict=strict)
        tokenizer = Tokenizer(opts)
        self.tokens = tokenizer.run(html or "")
        self.errors = tokenizer.errors
        self.root = Parser(self.tokens, parser_opts).parse()
        renderer = Renderer(renderer_opts)
        try:
            self.canonical = restruct(self.root)
            self.markdown = renderer.render(self.canonical)
        except RecursionError as exc:
            msg = "tree is too deep to convert; lower ParserOpts.max_depth"
            raise NestingTooDeep(msg) from exc
        self.unsupported = renderer.unsupported

    def __str__(self):
        return self.markdown


def convert(html, **kwargs):
    """Convert ``html`` to Markdown. See ``HTML2Markdown`` for options."""
    return HTML2Markdown(html, **kwargs).markdown
