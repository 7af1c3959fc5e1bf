"""
Cypress ビルダー — it() ブロック形式のテストを生成

遷移を伴う操作の後は cy.wait() で固定時間待機する。入力値は特殊キー記法を
解釈させずにそのまま入力する。ドラッグ＆ドロップに相当する
組み込みコマンドは無く、空行のみを出力する。
"""

from __future__ import annotations

from typing import Optional

from ...core.targets import ScriptLanguage
from ..builder import NAVIGATION_WAIT_MS, ScriptBuilder
from ..escape import floor_int, js_json_string, js_string


class CypressScriptBuilder(ScriptBuilder):
    """Cypress 用ビルダー。"""

    language = ScriptLanguage.JS
    template_name = "cypress.js.j2"
    blank_line_before_comment = False

    def _push_command(self, command: str, causes_navigation: bool) -> CypressScriptBuilder:
        lines = [self.statement(command)]
        if causes_navigation:
            lines.append(self.statement(f"cy.wait({NAVIGATION_WAIT_MS})"))
        self.push_codes("\n".join(lines))
        return self

    def _get(self, selector: str) -> str:
        return f"cy.get({js_string(selector)})"

    def click(self, selector: str, causes_navigation: bool) -> CypressScriptBuilder:
        return self._push_command(f"{self._get(selector)}.click()", causes_navigation)

    def dbl_click(self, selector: str, causes_navigation: bool) -> CypressScriptBuilder:
        return self._push_command(f"{self._get(selector)}.dblclick()", causes_navigation)

    def hover(self, selector: str, causes_navigation: bool) -> CypressScriptBuilder:
        return self._push_command(f"{self._get(selector)}.trigger('mouseover')", causes_navigation)

    def load(self, url: str) -> CypressScriptBuilder:
        self.push_codes(self.statement(f"cy.visit({js_string(url)})"))
        return self

    def resize(self, width: int, height: int) -> CypressScriptBuilder:
        self.push_codes(self.statement(f"cy.viewport({width}, {height})"))
        return self

    def _type_literal(self, selector: str, value: str, causes_navigation: bool) -> CypressScriptBuilder:
        # 値中の {enter} などをキー操作として解釈させない
        return self._push_command(
            f"{self._get(selector)}.type({js_json_string(value)}, {{ parseSpecialCharSequences: false }})",
            causes_navigation,
        )

    def fill(self, selector: str, value: str, causes_navigation: bool) -> CypressScriptBuilder:
        return self._type_literal(selector, value, causes_navigation)

    def type(self, selector: str, value: str, causes_navigation: bool) -> CypressScriptBuilder:
        return self._type_literal(selector, value, causes_navigation)

    def select(self, selector: str, option: str, causes_navigation: bool) -> CypressScriptBuilder:
        return self._push_command(
            f"{self._get(selector)}.select({js_string(option)})", causes_navigation
        )

    def keydown(self, selector: str, key: str, causes_navigation: bool) -> CypressScriptBuilder:
        # 特殊キーは {Enter} のような波括弧記法で type に渡す
        return self._push_command(
            f"{self._get(selector)}.type({js_string('{' + key + '}')})", causes_navigation
        )

    def wheel(
        self,
        delta_x: float,
        delta_y: float,
        page_x_offset: Optional[float] = None,
        page_y_offset: Optional[float] = None,
    ) -> CypressScriptBuilder:
        # 差分ではなくスクロール後の絶対位置へ移動する
        x = floor_int(page_x_offset or 0)
        y = floor_int(page_y_offset or 0)
        self.push_codes(self.statement(f"cy.scrollTo({x}, {y})"))
        return self

    def full_screenshot(self) -> CypressScriptBuilder:
        self.push_codes(self.statement("cy.screenshot()"))
        return self

    def await_text(self, text: str) -> CypressScriptBuilder:
        self.push_codes(self.statement(f"cy.contains({js_string(text)})"))
        return self

    def drag_and_drop(
        self,
        source_x: float,
        source_y: float,
        target_x: float,
        target_y: float,
    ) -> CypressScriptBuilder:
        self.push_codes("")
        return self
