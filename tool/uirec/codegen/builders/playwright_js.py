"""
Playwright-JS ビルダー — @playwright/test 形式のスクリプトを生成

遷移を伴う操作は Promise.all で page.waitForNavigation() と並行実行する。
"""

from __future__ import annotations

from typing import Optional

from ...core.targets import ScriptLanguage
from ..builder import ScriptBuilder
from ..escape import floor_int, format_number, js_json_string, js_string


class PlaywrightJSScriptBuilder(ScriptBuilder):
    """Playwright-JS 用ビルダー。"""

    language = ScriptLanguage.JS
    template_name = "playwright_js.js.j2"

    def _wait_for_action_and_navigation(self, action: str) -> str:
        return "\n".join([
            "await Promise.all([",
            f"  {action},",
            "  page.waitForNavigation(),",
            self.statement("])"),
        ])

    def _push_action(self, action: str, causes_navigation: bool) -> PlaywrightJSScriptBuilder:
        if causes_navigation:
            self.push_codes(self._wait_for_action_and_navigation(action))
        else:
            self.push_codes(self.statement(f"await {action}"))
        return self

    def click(self, selector: str, causes_navigation: bool) -> PlaywrightJSScriptBuilder:
        return self._push_action(f"page.click({js_string(selector)})", causes_navigation)

    def dbl_click(self, selector: str, causes_navigation: bool) -> PlaywrightJSScriptBuilder:
        return self._push_action(f"page.dblclick({js_string(selector)})", causes_navigation)

    def hover(self, selector: str, causes_navigation: bool) -> PlaywrightJSScriptBuilder:
        return self._push_action(f"page.hover({js_string(selector)})", causes_navigation)

    def load(self, url: str) -> PlaywrightJSScriptBuilder:
        self.push_codes(self.statement(f"await page.goto({js_string(url)})"))
        return self

    def resize(self, width: int, height: int) -> PlaywrightJSScriptBuilder:
        self.push_codes(
            self.statement(f"await page.setViewportSize({{ width: {width}, height: {height} }})")
        )
        return self

    def fill(self, selector: str, value: str, causes_navigation: bool) -> PlaywrightJSScriptBuilder:
        action = f"page.fill({js_string(selector)}, {js_json_string(value)})"
        return self._push_action(action, causes_navigation)

    def type(self, selector: str, value: str, causes_navigation: bool) -> PlaywrightJSScriptBuilder:
        action = f"page.type({js_string(selector)}, {js_json_string(value)})"
        return self._push_action(action, causes_navigation)

    def select(self, selector: str, option: str, causes_navigation: bool) -> PlaywrightJSScriptBuilder:
        action = f"page.selectOption({js_string(selector)}, {js_string(option)})"
        return self._push_action(action, causes_navigation)

    def keydown(self, selector: str, key: str, causes_navigation: bool) -> PlaywrightJSScriptBuilder:
        action = f"page.press({js_string(selector)}, {js_string(key)})"
        return self._push_action(action, causes_navigation)

    def wheel(
        self,
        delta_x: float,
        delta_y: float,
        page_x_offset: Optional[float] = None,
        page_y_offset: Optional[float] = None,
    ) -> PlaywrightJSScriptBuilder:
        self.push_codes(
            self.statement(f"await page.mouse.wheel({floor_int(delta_x)}, {floor_int(delta_y)})")
        )
        return self

    def full_screenshot(self) -> PlaywrightJSScriptBuilder:
        self.push_codes(
            self.statement("await page.screenshot({ path: 'screenshot.png', fullPage: true })")
        )
        return self

    def await_text(self, text: str) -> PlaywrightJSScriptBuilder:
        self.push_codes(self.statement(f"await page.waitForSelector({js_string('text=' + text)})"))
        return self

    def drag_and_drop(
        self,
        source_x: float,
        source_y: float,
        target_x: float,
        target_y: float,
    ) -> PlaywrightJSScriptBuilder:
        self.push_codes("\n".join([
            self.statement(f"await page.mouse.move({format_number(source_x)}, {format_number(source_y)})"),
            self.statement("await page.mouse.down()"),
            self.statement(f"await page.mouse.move({format_number(target_x)}, {format_number(target_y)})"),
            self.statement("await page.mouse.up()"),
        ]))
        return self
