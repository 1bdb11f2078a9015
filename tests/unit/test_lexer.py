"""Tests for the per-line lexical layer."""

import pytest

from renparse import parse_source
from renparse.core.errors import ErrorReason, LexError
from renparse.core.lexer import LineLexer, quote_string
from renparse.core.tokens import Token, TokenType


def lexer_for(text: str, line: int = 1, column: int = 1, start: int = 0) -> LineLexer:
    return LineLexer(Token(TokenType.TEXT, text, line, column, start, start + len(text)))


class TestNames:
    def test_read_names_in_sequence(self):
        lexer = lexer_for("eileen happy")
        assert lexer.read_name().value == "eileen"
        assert lexer.read_name().value == "happy"
        assert lexer.read_name() is None

    def test_name_positions_are_absolute(self):
        lexer = lexer_for("show x", line=3, column=5, start=20)
        show = lexer.read_name()
        x = lexer.read_name()
        assert (show.line, show.column, show.start, show.end) == (3, 5, 20, 24)
        assert (x.column, x.start) == (10, 25)

    def test_keyword_must_match_whole_identifier(self):
        lexer = lexer_for("shower")
        assert lexer.read_keyword("show") is None
        assert lexer.read_name().value == "shower"

    def test_keyword_token_type(self):
        token = lexer_for("menu:").read_keyword("menu")
        assert token.type == TokenType.KEYWORD
        assert token.value == "menu"

    def test_peek_does_not_consume(self):
        lexer = lexer_for("  label start")
        assert lexer.peek_name() == "label"
        assert lexer.read_name().value == "label"


class TestPunctuation:
    def test_equals_not_read_from_double_equals(self):
        assert lexer_for("== 1").read_punct("=") is None
        assert lexer_for("= 1").read_punct("=").type == TokenType.PUNCT

    def test_at_end_skips_comment(self):
        lexer = lexer_for("pass   # done")
        lexer.read_name()
        assert lexer.at_end()

    def test_mark_and_reset(self):
        lexer = lexer_for("a b")
        mark = lexer.mark()
        lexer.read_name()
        lexer.read_name()
        lexer.reset(mark)
        assert lexer.read_name().value == "a"


class TestStrings:
    def test_double_quoted(self):
        token = lexer_for('"Hello world"').read_string()
        assert token.type == TokenType.STRING
        assert token.value == "Hello world"
        assert token.raw == '"Hello world"'

    def test_single_quoted_with_other_quote_inside(self):
        assert lexer_for("'say \"hi\"'").read_string().value == 'say "hi"'

    @pytest.mark.parametrize(
        "source,expected",
        [
            (r'"a\nb"', "a\nb"),
            (r'"a\tb"', "a\tb"),
            (r'"back\\slash"', "back\\slash"),
            (r'"quote \" inside"', 'quote " inside'),
            (r"'it\'s'", "it's"),
            (r'"\q"', "q"),
        ],
    )
    def test_escapes(self, source: str, expected: str):
        assert lexer_for(source).read_string().value == expected

    def test_unterminated_string(self):
        lexer = lexer_for('e "Hello', line=3, column=5)
        lexer.read_name()
        with pytest.raises(LexError) as exc_info:
            lexer.read_string()
        assert exc_info.value.reason == ErrorReason.UNTERMINATED_STRING
        assert exc_info.value.context.line == 3
        assert exc_info.value.context.column == 7

    def test_escaped_quote_at_end_is_unterminated(self):
        with pytest.raises(LexError):
            lexer_for(r'"abc\"').read_string()

    @pytest.mark.parametrize(
        "literal",
        [
            '"Hello world"',
            "'single'",
            r'"say \"hi\""',
            r'"line\nbreak"',
            r'"tab\there"',
            r'"back\\slash"',
            "'don\"t'",
        ],
    )
    def test_quote_string_restores_literal(self, literal: str):
        token = lexer_for(literal).read_string()
        assert quote_string(token.value, literal[0]) == literal

    def test_quote_string_with_parsed_quote(self):
        (say,) = parse_source("e 'don\\'t'\n").statements
        literal = say.content.what
        assert literal.quote == "'"
        assert quote_string(literal.value, literal.quote) == literal.raw
        assert quote_string(literal.value) == '"don\'t"'


class TestFragments:
    def test_balanced_group(self):
        token = lexer_for("(a, (b)) rest").read_group()
        assert token.type == TokenType.EXPR_FRAGMENT
        assert token.value == "(a, (b))"

    def test_group_skips_brackets_in_strings(self):
        assert lexer_for('("a)", b)').read_group().value == '("a)", b)'

    def test_group_mixed_brackets(self):
        assert lexer_for("{'k': [1, 2]}").read_group().value == "{'k': [1, 2]}"

    def test_unclosed_group(self):
        with pytest.raises(LexError) as exc_info:
            lexer_for("(a, b").read_group()
        assert exc_info.value.reason == ErrorReason.UNTERMINATED_FRAGMENT

    def test_mismatched_group(self):
        with pytest.raises(LexError) as exc_info:
            lexer_for("(a]").read_group()
        assert exc_info.value.reason == ErrorReason.UNTERMINATED_FRAGMENT
        assert exc_info.value.context.column == 3

    def test_rest_stops_at_structural_colon(self):
        lexer = lexer_for("x == 1:")
        assert lexer.read_rest().value == "x == 1"
        assert lexer.current_char() == ":"

    def test_rest_keeps_colons_in_strings_and_groups(self):
        token = lexer_for('d["a:b"] and f(x[1:2]):').read_rest()
        assert token.value == 'd["a:b"] and f(x[1:2])'

    def test_rest_stops_at_comment(self):
        assert lexer_for("points + 1   # bonus").read_rest().value == "points + 1"

    def test_rest_keeps_hash_in_string(self):
        assert lexer_for('Character("E", color="#c8ffc8")').read_rest().value == (
            'Character("E", color="#c8ffc8")'
        )

    def test_empty_rest(self):
        assert lexer_for("   :").read_rest() is None
        assert lexer_for("").read_rest() is None

    @pytest.mark.parametrize("text,expected", [("1", "1"), ("-1", "-1"), ("0.5", "0.5"), (".5", ".5")])
    def test_numbers(self, text: str, expected: str):
        assert lexer_for(text).read_number().value == expected

    def test_number_must_not_run_into_name(self):
        assert lexer_for("1abc").read_number() is None
