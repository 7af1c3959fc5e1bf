"""
Eventstream ビルダー — 関数呼び出し列形式のスクリプトを生成
"""

from __future__ import annotations

from typing import Optional

from ...core.targets import ScriptLanguage
from ..builder import ScriptBuilder
from ..escape import floor_int, format_number, js_json_string, js_string


class EventstreamScriptBuilder(ScriptBuilder):
    """Eventstream 用ビルダー。"""

    language = ScriptLanguage.JS
    template_name = "eventstream.js.j2"

    def _push_action(self, action: str, causes_navigation: bool) -> EventstreamScriptBuilder:
        if causes_navigation:
            self.push_codes("\n".join([
                "PromiseAll([",
                f"  {action},",
                "  WaitForNavigation(),",
                self.statement("])"),
            ]))
        else:
            self.push_codes(self.statement(action))
        return self

    def click(self, selector: str, causes_navigation: bool) -> EventstreamScriptBuilder:
        return self._push_action(f"Click({js_string(selector)})", causes_navigation)

    def dbl_click(self, selector: str, causes_navigation: bool) -> EventstreamScriptBuilder:
        return self._push_action(f"DblClick({js_string(selector)})", causes_navigation)

    def hover(self, selector: str, causes_navigation: bool) -> EventstreamScriptBuilder:
        return self._push_action(f"Hover({js_string(selector)})", causes_navigation)

    def load(self, url: str) -> EventstreamScriptBuilder:
        self.push_codes(self.statement(f"Goto({js_string(url)})"))
        return self

    def resize(self, width: int, height: int) -> EventstreamScriptBuilder:
        self.push_codes(self.statement(f"SetViewportSize({{ width: {width}, height: {height} }})"))
        return self

    def fill(self, selector: str, value: str, causes_navigation: bool) -> EventstreamScriptBuilder:
        return self._push_action(
            f"Fill({js_string(selector)}, {js_json_string(value)})", causes_navigation
        )

    def type(self, selector: str, value: str, causes_navigation: bool) -> EventstreamScriptBuilder:
        return self._push_action(
            f"Type({js_string(selector)}, {js_json_string(value)})", causes_navigation
        )

    def select(self, selector: str, option: str, causes_navigation: bool) -> EventstreamScriptBuilder:
        return self._push_action(
            f"SelectOption({js_string(selector)}, {js_string(option)})", causes_navigation
        )

    def keydown(self, selector: str, key: str, causes_navigation: bool) -> EventstreamScriptBuilder:
        return self._push_action(
            f"Press({js_string(selector)}, {js_string(key)})", causes_navigation
        )

    def wheel(
        self,
        delta_x: float,
        delta_y: float,
        page_x_offset: Optional[float] = None,
        page_y_offset: Optional[float] = None,
    ) -> EventstreamScriptBuilder:
        self.push_codes(self.statement(f"MouseWheel({floor_int(delta_x)}, {floor_int(delta_y)})"))
        return self

    def full_screenshot(self) -> EventstreamScriptBuilder:
        self.push_codes(self.statement("Screenshot({ path: 'screenshot.png', fullPage: true })"))
        return self

    def await_text(self, text: str) -> EventstreamScriptBuilder:
        self.push_codes(self.statement(f"WaitForSelector({js_string('text=' + text)})"))
        return self

    def drag_and_drop(
        self,
        source_x: float,
        source_y: float,
        target_x: float,
        target_y: float,
    ) -> EventstreamScriptBuilder:
        self.push_codes("\n".join([
            self.statement(f"MouseMove({format_number(source_x)}, {format_number(source_y)})"),
            self.statement("MouseDown()"),
            self.statement(f"MouseMove({format_number(target_x)}, {format_number(target_y)})"),
            self.statement("MouseUp()"),
        ]))
        return self
