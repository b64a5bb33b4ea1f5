"""Tests for the tokenizer."""

import unittest

from html2md.constants import VOID_ELEMENT_NAMES
from html2md.errors import MalformedToken, UnexpectedEndOfInput
from html2md.tokenizer import Tokenizer, TokenizerOpts, tokenize
from html2md.tokens import Tag, TextToken


class TestTokenize(unittest.TestCase):
    def test_empty(self):
        assert tokenize("") == []

    def test_only_doctype(self):
        assert tokenize("<!DOCTYPE html>") == []

    def test_doctype_and_open_element(self):
        assert tokenize("<!DOCTYPE html>\n<html>") == [Tag(Tag.OPEN, "html")]

    def test_doctype_and_close_element(self):
        assert tokenize("<!DOCTYPE html>\n</html>") == [Tag(Tag.CLOSE, "html")]

    def test_comment_is_discarded(self):
        assert tokenize("<!-- note -->hi") == [TextToken("hi")]

    def test_open_and_close_tag(self):
        assert tokenize("<html></html>") == [Tag(Tag.OPEN, "html"), Tag(Tag.CLOSE, "html")]

    def test_text(self):
        assert tokenize("abcde") == [TextToken("abcde")]

    def test_whitespace_between_tokens_is_skipped(self):
        tokens = tokenize("  hello <b>x</b>  \n")
        assert tokens == [
            TextToken("hello "),
            Tag(Tag.OPEN, "b"),
            TextToken("x"),
            Tag(Tag.CLOSE, "b"),
        ]

    def test_document_order_is_preserved(self):
        tokens = tokenize("<p>a<br>b</p>")
        assert tokens == [
            Tag(Tag.OPEN, "p"),
            TextToken("a"),
            Tag(Tag.VOID, "br"),
            TextToken("b"),
            Tag(Tag.CLOSE, "p"),
        ]

    def test_byte_order_mark_is_discarded(self):
        assert tokenize("\ufeffhi") == [TextToken("hi")]


class TestTagNames(unittest.TestCase):
    def test_uppercase_element(self):
        assert tokenize("<HTML>") == [Tag(Tag.OPEN, "html")]

    def test_case_and_trailing_space_do_not_matter(self):
        expected = [Tag(Tag.OPEN, "p")]
        for source in ("<P>", "<p>", "<P >"):
            with self.subTest(source=source):
                assert tokenize(source) == expected

    def test_void_tag_with_slash(self):
        assert tokenize("<hr/>") == [Tag(Tag.VOID, "hr")]

    def test_void_tags_with_and_without_slash(self):
        for name in VOID_ELEMENT_NAMES:
            with self.subTest(name=name):
                assert tokenize(f"<{name}>") == [Tag(Tag.VOID, name)]
                assert tokenize(f"<{name}/>") == [Tag(Tag.VOID, name)]
                assert tokenize(f"<{name} />") == [Tag(Tag.VOID, name)]

    def test_end_tag_for_void_element_is_skipped(self):
        for name in VOID_ELEMENT_NAMES:
            with self.subTest(name=name):
                assert tokenize(f"</{name}>") == []

    def test_self_closing_non_void_element_is_skipped(self):
        assert tokenize("<p/>text") == [TextToken("text")]

    def test_closed_self_closing_tag_is_skipped(self):
        assert tokenize("</foobar/>") == []

    def test_missing_tag_name_is_skipped(self):
        assert tokenize("<>") == []
        assert tokenize("< p>a") == [TextToken("a")]

    def test_recovery_continues_with_next_token(self):
        tokens = tokenize("<>a</br><b>c</b>")
        assert tokens == [TextToken("a"), Tag(Tag.OPEN, "b"), TextToken("c"), Tag(Tag.CLOSE, "b")]


class TestAttributes(unittest.TestCase):
    def test_one_attribute(self):
        tokens = tokenize('<img src="hello.png">')
        assert tokens == [Tag(Tag.VOID, "img", {"src": "hello.png"})]

    def test_multiple_attributes(self):
        tokens = tokenize('<img src="hello.png" width="300">')
        assert tokens == [Tag(Tag.VOID, "img", {"src": "hello.png", "width": "300"})]

    def test_boolean_attribute_value_is_its_name(self):
        assert tokenize("<input disabled>") == [Tag(Tag.VOID, "input", {"disabled": "disabled"})]

    def test_names_and_values_are_lowercased(self):
        tokens = tokenize('<a HREF="HTTP://Example.COM">x</a>')
        assert tokens[0] == Tag(Tag.OPEN, "a", {"href": "http://example.com"})

    def test_single_quoted_value(self):
        assert tokenize("<p class='x'>") == [Tag(Tag.OPEN, "p", {"class": "x"})]

    def test_whitespace_around_equals(self):
        assert tokenize('<p class = "x">') == [Tag(Tag.OPEN, "p", {"class": "x"})]

    def test_attribute_name_characters(self):
        tokens = tokenize('<div data-x_1="v">')
        assert tokens == [Tag(Tag.OPEN, "div", {"data-x_1": "v"})]

    def test_last_duplicate_wins(self):
        assert tokenize('<p id="a" id="b">') == [Tag(Tag.OPEN, "p", {"id": "b"})]

    def test_unquoted_value_makes_tag_malformed(self):
        assert tokenize("<a href=foo>x</a>") == [TextToken("x"), Tag(Tag.CLOSE, "a")]

    def test_invalid_character_makes_tag_malformed(self):
        assert tokenize("<a @>x") == [TextToken("x")]


class TestEndOfInput(unittest.TestCase):
    def test_only_opening_bracket(self):
        with self.assertRaises(UnexpectedEndOfInput):
            tokenize("<")

    def test_missing_closing_bracket(self):
        with self.assertRaises(UnexpectedEndOfInput):
            tokenize("<a")

    def test_inside_attribute_value(self):
        with self.assertRaises(UnexpectedEndOfInput):
            tokenize('<a href="x')

    def test_after_attribute_name(self):
        with self.assertRaises(UnexpectedEndOfInput):
            tokenize("<input disabled")

    def test_inside_declaration(self):
        with self.assertRaises(UnexpectedEndOfInput):
            tokenize("<!-- never closed")

    def test_inside_malformed_tag(self):
        with self.assertRaises(UnexpectedEndOfInput):
            tokenize("<a href=foo")

    def test_error_reports_end_position(self):
        with self.assertRaises(UnexpectedEndOfInput) as ctx:
            tokenize("<p>\n<a")
        assert ctx.exception.line == 2
        assert ctx.exception.column == 3


class TestTokenizerOpts(unittest.TestCase):
    def test_errors_not_collected_by_default(self):
        tokenizer = Tokenizer()
        tokenizer.run("<>")
        assert tokenizer.errors == []

    def test_collect_errors_records_location(self):
        tokenizer = Tokenizer(TokenizerOpts(collect_errors=True))
        tokenizer.run("<p>\n<>")
        assert len(tokenizer.errors) == 1
        error = tokenizer.errors[0]
        assert error.code == "malformed-token"
        assert error.line == 2
        assert error.column == 1

    def test_strict_mode_raises_on_malformed_tag(self):
        with self.assertRaises(MalformedToken) as ctx:
            Tokenizer(TokenizerOpts(strict=True)).run("<p>a</p></br>")
        assert ctx.exception.line == 1
        assert ctx.exception.column == 9

    def test_keep_byte_order_mark(self):
        tokens = Tokenizer(TokenizerOpts(discard_bom=False)).run("\ufeffhi")
        assert tokens == [TextToken("\ufeffhi")]

    def test_tag_positions(self):
        tokens = tokenize("<p>\n  <b>x</b></p>")
        assert (tokens[1].line, tokens[1].column) == (2, 3)

    def test_tokenizer_can_be_reused(self):
        tokenizer = Tokenizer()
        assert tokenizer.run("<p>") == [Tag(Tag.OPEN, "p")]
        assert tokenizer.run("x") == [TextToken("x")]


class TestLocation(unittest.TestCase):
    def setUp(self):
        self.tokenizer = Tokenizer()
        self.tokenizer.run("ab\ncd\n\nef")

    def test_forward(self):
        location = self.tokenizer.location
        assert location(0) == (1, 1)
        assert location(1) == (1, 2)
        assert location(3) == (2, 1)
        assert location(4) == (2, 2)
        assert location(7) == (4, 1)
        assert location(9) == (4, 3)

    def test_skipping_several_lines(self):
        assert self.tokenizer.location(8) == (4, 2)

    def test_same_offset_twice(self):
        assert self.tokenizer.location(4) == (2, 2)
        assert self.tokenizer.location(4) == (2, 2)

    def test_backward(self):
        location = self.tokenizer.location
        assert location(9) == (4, 3)
        assert location(1) == (1, 2)
        assert location(6) == (3, 1)

    def test_restarts_for_each_run(self):
        self.tokenizer.location(9)
        self.tokenizer.run("x")
        assert self.tokenizer.location(0) == (1, 1)

    def test_many_lines(self):
        n = 20000
        tokens = tokenize("<p>x</p>\n" * n)
        assert len(tokens) == 3 * n
        last = tokens[-1]
        assert (last.line, last.column) == (n, 5)


if __name__ == "__main__":
    unittest.main()
