"""Tests for say statement parsing."""

import pytest

from renparse.core import ir
from renparse.core.errors import ErrorReason, GrammarError, LexError


def say_of(parse, text: str) -> ir.SayStatement:
    (statement,) = parse(text).statements
    assert isinstance(statement, ir.SayStatement)
    return statement


class TestNarration:
    def test_narration(self, parse):
        say = say_of(parse, '"It was a dark and stormy night."\n')
        assert isinstance(say.content, ir.Narration)
        assert say.what == "It was a dark and stormy night."

    def test_single_quotes_and_escapes(self, parse):
        say = say_of(parse, "'She said \"hi\"\\nthen left.'\n")
        assert say.what == 'She said "hi"\nthen left.'
        assert say.content.what.quote == "'"
        assert say.content.what.raw == "'She said \"hi\"\\nthen left.'"


class TestDialogue:
    def test_speaker(self, parse):
        say = say_of(parse, 'e "Hello!"\n')
        assert isinstance(say.content, ir.Dialogue)
        assert say.who == "e"
        assert say.what == "Hello!"
        assert say.content.attributes == []
        assert say.content.temporary_attributes == []

    def test_attributes(self, parse):
        say = say_of(parse, 'e happy -sad @ vhappy "Great!"\n')
        content = say.content
        assert [(a.name, a.negated) for a in content.attributes] == [
            ("happy", False),
            ("sad", True),
        ]
        assert [str(a) for a in content.temporary_attributes] == ["vhappy"]

    def test_attribute_span_includes_minus(self, parse):
        say = say_of(parse, 'e -sad "Hm."\n')
        (attr,) = say.content.attributes
        assert (attr.span.column, attr.span.end_column) == (3, 7)

    @pytest.mark.parametrize("keyword", ["show", "jump", "menu", "label", "if", "pass", "return"])
    def test_statement_keyword_in_speaker_position(self, parse, keyword: str):
        say = say_of(parse, f'{keyword} "I am a character."\n')
        assert say.who == keyword
        assert say.what == "I am a character."

    def test_keyword_speaker_with_attributes(self, parse):
        say = say_of(parse, 'show at left "Odd, but dialogue."\n')
        assert say.who == "show"
        assert [a.name for a in say.content.attributes] == ["at", "left"]

    def test_trailing_comment(self, parse):
        say = say_of(parse, 'e "Hi"  # greeting\n')
        assert say.what == "Hi"


class TestDialogueErrors:
    def test_text_after_string_is_not_dialogue(self, parse):
        with pytest.raises(GrammarError) as exc_info:
            parse('e "Hi" with dissolve\n')
        assert "Expected a statement, got 'e'" in exc_info.value.message

    def test_unterminated_string(self, parse):
        with pytest.raises(LexError) as exc_info:
            parse('label start:\n    e "Hello\n')
        error = exc_info.value
        assert error.reason == ErrorReason.UNTERMINATED_STRING
        assert (error.context.line, error.context.column) == (2, 7)

    def test_two_strings(self, parse):
        with pytest.raises(GrammarError):
            parse('"One" "Two"\n')
