"""
ActionContext のテスト

派生情報のアクセサと、コメント用説明文（get_description）の書式を確認する。
"""

from __future__ import annotations

from typing import Optional

import pytest

from uirec.actions.validation import to_action
from uirec.codegen.context import (
    ActionContext,
    ActionState,
    is_action_stateful,
    truncate_text,
)
from uirec.core.selector import BestSelectorResolver
from uirec.core.targets import ScriptType


class _FixedResolver:
    """常に同じセレクタを返すリゾルバ。"""

    def __init__(self, selector: Optional[str]) -> None:
        self.selector = selector
        self.calls: list[tuple] = []

    def resolve(self, action, script_type):
        self.calls.append((action, script_type))
        return self.selector


def _context(raw: dict, resolver=None, navigation: bool = False) -> ActionContext:
    action = to_action(raw, 0)
    return ActionContext(
        action=action,
        script_type=ScriptType.PLAYWRIGHT_JS,
        action_state=ActionState(
            causes_navigation=navigation, is_stateful=is_action_stateful(action),
        ),
        resolver=resolver or BestSelectorResolver(),
    )


class TestHelpers:
    def test_truncate_text(self) -> None:
        assert truncate_text("abcdef", 6) == "abcdef"
        assert truncate_text("abcdefg", 6) == "abcdef..."
        assert truncate_text("", 3) == ""

    def test_textarea_tag_is_stateful(self, action) -> None:
        assert is_action_stateful(to_action(action("input", tag="TEXTAREA"), 0))
        assert not is_action_stateful(to_action(action("input", tag="INPUT"), 0))
        assert is_action_stateful(to_action(action("click", tag="TEXTAREA"), 0))
        assert not is_action_stateful(to_action(action("click", tag="DIV"), 0))


class TestAccessors:
    def test_accessors(self, action) -> None:
        ctx = _context(
            action("input", tag="INPUT", value="v", input_type="email"), navigation=True,
        )
        assert ctx.type == "input"
        assert ctx.tag_name == "INPUT"
        assert ctx.value == "v"
        assert ctx.input_type == "email"
        assert ctx.causes_navigation is True
        assert ctx.is_stateful is False

    def test_get_best_selector_delegates(self, action) -> None:
        resolver = _FixedResolver("#fixed")
        ctx = _context(action("click"), resolver)
        assert ctx.get_best_selector() == "#fixed"
        assert resolver.calls == [(ctx.action, ScriptType.PLAYWRIGHT_JS)]


class TestDescription:
    """get_description() の書式。"""

    def test_click_with_text(self, action) -> None:
        ctx = _context(action("click", tag="BUTTON", text="  Save\n\n changes  "))
        assert ctx.get_description() == 'Click on <button> " Save changes "'

    def test_text_truncated(self, action) -> None:
        ctx = _context(action("dblclick", tag="SPAN", text="a" * 30))
        assert ctx.get_description() == f'DblClick on <span> "{"a" * 25}..."'

    def test_hover_falls_back_to_selector(self, action) -> None:
        ctx = _context(action("hover", tag="DIV", generalSelector="div.menu"))
        assert ctx.get_description() == "Hover over <div> div.menu"

    def test_tag_only(self, action) -> None:
        ctx = _context(action("click", tag="DIV"))
        assert ctx.get_description() == "Click on <div>"

    def test_input(self, action) -> None:
        ctx = _context(action("input", tag="INPUT", value="hello world!!", id="q"))
        assert ctx.get_description() == 'Fill "hello world!!" on <input> #q'

    def test_input_value_truncated(self, action) -> None:
        ctx = _context(action("input", tag="INPUT", value="0123456789abcdef", id="q"))
        assert ctx.get_description() == 'Fill "0123456789abcde... on <input> #q'

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ({"type": "keydown", "tagName": "INPUT", "key": "Enter"}, "Press Enter on input"),
            ({"type": "load", "url": "http://a/"}, 'Load "http://a/"'),
            ({"type": "resize", "width": 800, "height": 600}, "Resize window to 800 x 600"),
            ({"type": "wheel", "deltaX": 0, "deltaY": 120.5}, "Scroll wheel by X:0, Y:120.5"),
            ({"type": "fullScreenshot"}, "Take full page screenshot"),
            ({"type": "awaitText", "text": "Done"}, 'Wait for text "Done" to appear'),
            ({"type": "voice", "value": "check the total"}, "Voice: check the total"),
            ({"type": "navigate", "url": "http://a/"}, ""),
        ],
    )
    def test_templates(self, raw, expected) -> None:
        assert _context(raw).get_description() == expected

    def test_drag_and_drop(self, action) -> None:
        ctx = _context(action(
            "dragAndDrop", tag="LI", text="Item",
            sourceX=10, sourceY=20.5, targetX=30, targetY=40,
        ))
        assert ctx.get_description() == 'Drag n drop <li> "Item" from (10, 20.5) to (30, 40)'

    def test_await_text_truncated(self) -> None:
        ctx = _context({"type": "awaitText", "text": "x" * 40})
        assert ctx.get_description() == f'Wait for text "{"x" * 24}... to appear'
