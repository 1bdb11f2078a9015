"""Tests for menu parsing."""

import pytest

from renparse.core import ir
from renparse.core.errors import GrammarError, UnexpectedEofError

MENU = """\
menu chapter_choice:
    e "What now?"
    "Stay" if not tired:
        pass
    "Leave":
        "You leave."
        return
"""


class TestMenu:
    def test_named_menu_with_caption(self, parse):
        (menu,) = parse(MENU).statements
        assert isinstance(menu, ir.MenuStatement)
        assert str(menu.name) == "chapter_choice"
        assert menu.caption is not None
        assert menu.caption.who == "e"
        assert menu.caption.what == "What now?"

    def test_choice_condition(self, parse):
        (menu,) = parse(MENU).statements
        stay, leave = menu.choices
        assert stay.condition is not None
        assert stay.condition.text == "not tired"
        assert leave.condition is None

    def test_choice_blocks(self, parse):
        (menu,) = parse(MENU).statements
        leave = menu.choices[1]
        assert leave.text.value == "Leave"
        assert [s.kind.value for s in leave.block.statements] == ["say", "return"]

    def test_narration_caption(self, parse):
        (menu,) = parse('menu:\n    "Where to?"\n    "Home":\n        pass\n').statements
        assert isinstance(menu.caption.content, ir.Narration)
        assert len(menu.choices) == 1

    def test_menu_span_ends_at_last_choice(self, parse):
        (menu,) = parse(MENU).statements
        assert menu.span.end_line == 7
        assert menu.span.end == menu.choices[-1].block.span.end

    def test_menu_inside_label(self, parse):
        text = """\
            label start:
                menu:
                    "A":
                        jump a
                "After the menu"
        """
        (label,) = parse(text).statements
        assert [s.kind.value for s in label.block.statements] == ["menu", "say"]


class TestMenuErrors:
    def test_caption_only(self, parse):
        with pytest.raises(UnexpectedEofError) as exc_info:
            parse('menu:\n    "Question?"\n')
        assert "a menu choice" in exc_info.value.message

    def test_caption_only_followed_by_more_script(self, parse):
        with pytest.raises(GrammarError) as exc_info:
            parse('menu:\n    "Question?"\njump a\n')
        assert exc_info.value.message == "Expected a menu choice, got dedent"

    def test_non_choice_line(self, parse):
        with pytest.raises(GrammarError) as exc_info:
            parse('menu:\n    "A":\n        pass\n    jump b\n')
        assert exc_info.value.message == "Expected menu choice, got 'jump'"

    def test_choice_without_block(self, parse):
        with pytest.raises(GrammarError):
            parse('menu:\n    "A":\n    "B":\n        pass\n')

    def test_choice_requires_colon(self, parse):
        with pytest.raises(GrammarError) as exc_info:
            parse('menu:\n    "A"\n    "B"\n')
        assert exc_info.value.message == "Expected ':', got end of line"
