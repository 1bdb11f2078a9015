"""Tests for define/default/image parsing."""

import pytest

from renparse.core import ir
from renparse.core.errors import GrammarError


class TestDefine:
    def test_character_definition(self, parse):
        (stmt,) = parse('define e = Character("Eileen", color="#c8ffc8")\n').statements
        assert isinstance(stmt, ir.DefineStatement)
        assert stmt.name == "e"
        assert stmt.value.text == 'Character("Eileen", color="#c8ffc8")'
        assert stmt.value.kind == ir.ExpressionKind.PYTHON

    def test_dotted_name(self, parse):
        (stmt,) = parse("define config.rollback_enabled = False\n").statements
        assert stmt.name == "config.rollback_enabled"
        assert stmt.value.text == "False"

    def test_value_with_trailing_comment(self, parse):
        (stmt,) = parse("define gui.text_size = 22  # default is 20\n").statements
        assert stmt.value.text == "22"

    def test_missing_value(self, parse):
        with pytest.raises(GrammarError) as exc_info:
            parse("define e =\n")
        assert exc_info.value.message == "Expected value, got end of line"

    def test_comparison_is_not_assignment(self, parse):
        with pytest.raises(GrammarError) as exc_info:
            parse("define e == 1\n")
        assert exc_info.value.message == "Expected '=', got '=='"


class TestDefault:
    def test_default(self, parse):
        (stmt,) = parse("default points = 0\n").statements
        assert isinstance(stmt, ir.DefaultStatement)
        assert stmt.name == "points"
        assert stmt.value.text == "0"

    def test_default_collection(self, parse):
        (stmt,) = parse('default inventory = {"key": 1, "map": 0}\n').statements
        assert stmt.value.text == '{"key": 1, "map": 0}'


class TestImage:
    def test_image_definition(self, parse):
        (stmt,) = parse('image eileen happy = "eileen_happy.png"\n').statements
        assert isinstance(stmt, ir.ImageStatement)
        assert stmt.names == ["eileen", "happy"]
        assert stmt.value.text == '"eileen_happy.png"'

    def test_image_expression(self, parse):
        (stmt,) = parse('image bg black = Solid("#000")\n').statements
        assert stmt.names == ["bg", "black"]
        assert stmt.value.text == 'Solid("#000")'

    def test_image_requires_equals(self, parse):
        with pytest.raises(GrammarError):
            parse('image eileen happy "eileen_happy.png" extra\n')
