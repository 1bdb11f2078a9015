"""Tests for label, control flow and jump/call parsing."""

import pytest

from renparse.core import ir
from renparse.core.errors import GrammarError, UnexpectedEofError


class TestLabels:
    def test_global_label(self, parse):
        (label,) = parse("label start:\n    pass\n").statements
        assert str(label.name) == "start"

    def test_local_label(self, parse):
        (label,) = parse("label .branch:\n    pass\n").statements
        assert label.name.is_local
        assert label.name.name == "branch"
        assert str(label.name) == ".branch"

    def test_qualified_label(self, parse):
        (label,) = parse("label chapter1.branch:\n    pass\n").statements
        assert label.name.scope == "chapter1"
        assert label.name.name == "branch"
        assert label.name.is_qualified

    def test_label_requires_block(self, parse):
        with pytest.raises(UnexpectedEofError):
            parse("label start:\n")

    def test_label_requires_colon(self, parse):
        with pytest.raises(GrammarError) as exc_info:
            parse("label start\n    pass\n")
        error = exc_info.value
        assert error.message == "Expected ':', got end of line"
        assert (error.context.line, error.context.column) == (1, 12)

    def test_label_followed_by_unindented_line(self, parse):
        with pytest.raises(GrammarError) as exc_info:
            parse("label a:\nlabel b:\n    pass\n")
        assert not isinstance(exc_info.value, UnexpectedEofError)
        assert "Expected indent" in exc_info.value.message


class TestConditionals:
    def test_if_without_else(self, parse):
        (stmt,) = parse("if points > 10:\n    jump good_end\n").statements
        assert stmt.condition.text == "points > 10"
        assert stmt.condition.kind == ir.ExpressionKind.PYTHON
        assert stmt.elifs == []
        assert stmt.else_block is None

    def test_multiple_elifs(self, parse):
        text = """\
            if a:
                pass
            elif b:
                pass
            elif c:
                pass
        """
        (stmt,) = parse(text).statements
        assert [c.condition.text for c in stmt.elifs] == ["b", "c"]

    def test_condition_with_colon_in_string(self, parse):
        (stmt,) = parse('if name == "a:b":\n    pass\n').statements
        assert stmt.condition.text == 'name == "a:b"'

    def test_condition_with_slice(self, parse):
        (stmt,) = parse("if items[1:]:\n    pass\n").statements
        assert stmt.condition.text == "items[1:]"

    def test_else_dialogue_is_not_a_clause(self, parse):
        text = 'label a:\n    if x:\n        pass\n    else "I am a character."\n'
        (label,) = parse(text).statements
        if_stmt, say = label.block.statements
        assert if_stmt.else_block is None
        assert isinstance(say, ir.SayStatement)
        assert say.who == "else"

    def test_elif_at_outer_level_ends_inner_if(self, parse):
        text = """\
            if a:
                if b:
                    pass
            elif c:
                pass
        """
        (outer,) = parse(text).statements
        inner = outer.block.statements[0]
        assert inner.elifs == []
        assert [c.condition.text for c in outer.elifs] == ["c"]

    def test_elif_without_if(self, parse):
        with pytest.raises(GrammarError) as exc_info:
            parse("pass\nelif x:\n    pass\n")
        assert exc_info.value.message == "Expected a statement, got 'elif'"

    def test_if_requires_condition(self, parse):
        with pytest.raises(GrammarError) as exc_info:
            parse("if:\n    pass\n")
        assert exc_info.value.message == "Expected condition, got ':'"

    def test_while(self, parse):
        (stmt,) = parse("while count < 3:\n    pass\n").statements
        assert isinstance(stmt, ir.WhileStatement)
        assert stmt.condition.text == "count < 3"


class TestJumps:
    def test_jump(self, parse):
        (stmt,) = parse("jump ending\n").statements
        assert isinstance(stmt, ir.JumpStatement)
        assert str(stmt.target) == "ending"

    def test_jump_to_local_label(self, parse):
        (stmt,) = parse("jump .retry\n").statements
        assert stmt.target.is_local

    def test_call_with_from(self, parse):
        (stmt,) = parse("call chapter2.start from after_ch2\n").statements
        assert isinstance(stmt, ir.CallStatement)
        assert stmt.target.scope == "chapter2"
        assert stmt.target.name == "start"
        assert str(stmt.from_label) == "after_ch2"
        assert stmt.span.end_column == 35

    def test_call_without_from(self, parse):
        (stmt,) = parse("call subroutine\n").statements
        assert stmt.from_label is None

    def test_return_value(self, parse):
        (stmt,) = parse("return x + 1\n").statements
        assert isinstance(stmt, ir.ReturnStatement)
        assert stmt.value.text == "x + 1"

    def test_bare_return_and_pass(self, parse):
        ret, pass_ = parse("return\npass\n").statements
        assert ret.value is None
        assert isinstance(pass_, ir.PassStatement)

    def test_trailing_tokens(self, parse):
        with pytest.raises(GrammarError) as exc_info:
            parse("jump start now\n")
        assert exc_info.value.message == "Expected end of jump statement, got 'now'"
        assert exc_info.value.context.column == 12

    def test_label_name_with_space_before_dot(self, parse):
        with pytest.raises(GrammarError):
            parse("jump chapter .start\n")
