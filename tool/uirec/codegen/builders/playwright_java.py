"""
Playwright-Java ビルダー — AutomationScript クラス形式のスクリプトを生成

Python 版と同様に "|" 区切りのセレクタ候補を interact() ヘルパーに渡し、
遷移を伴う操作の後は page.waitForTimeout() で固定時間待機する。
"""

from __future__ import annotations

from typing import Optional

from ...core.targets import ScriptLanguage
from ..builder import NAVIGATION_WAIT_MS, ScriptBuilder
from ..escape import floor_int, format_number, java_string

_READ_TEXT_KEYS = ("r", "R")


class PlaywrightJavaScriptBuilder(ScriptBuilder):
    """Playwright-Java 用ビルダー。"""

    language = ScriptLanguage.JAVA
    template_name = "playwright_java.java.j2"

    def _wait_for_action_and_navigation(self, action: str, wait: bool) -> str:
        if not wait:
            return action
        return f"{action}\n{self.statement(f'page.waitForTimeout({NAVIGATION_WAIT_MS})')}"

    def _interact(
        self,
        selector: str,
        action: str,
        causes_navigation: bool,
        value: Optional[str] = None,
    ) -> PlaywrightJavaScriptBuilder:
        literal = java_string(value) if value is not None else "null"
        statement = self.statement(
            f"interact(page, {java_string(selector)}, {java_string(action)}, {literal})"
        )
        self.push_codes(self._wait_for_action_and_navigation(statement, causes_navigation))
        return self

    def click(self, selector: str, causes_navigation: bool) -> PlaywrightJavaScriptBuilder:
        return self._interact(selector, "click", causes_navigation)

    def dbl_click(self, selector: str, causes_navigation: bool) -> PlaywrightJavaScriptBuilder:
        return self._interact(selector, "dblclick", causes_navigation)

    def hover(self, selector: str, causes_navigation: bool) -> PlaywrightJavaScriptBuilder:
        return self._interact(selector, "hover", causes_navigation)

    def load(self, url: str) -> PlaywrightJavaScriptBuilder:
        self.push_codes(self.statement(f"page.navigate({java_string(url)})"))
        return self

    def resize(self, width: int, height: int) -> PlaywrightJavaScriptBuilder:
        self.push_codes(self.statement(f"page.setViewportSize({width}, {height})"))
        return self

    def fill(self, selector: str, value: str, causes_navigation: bool) -> PlaywrightJavaScriptBuilder:
        return self._interact(selector, "fill", causes_navigation, value)

    def type(self, selector: str, value: str, causes_navigation: bool) -> PlaywrightJavaScriptBuilder:
        return self._interact(selector, "type", causes_navigation, value)

    def select(self, selector: str, option: str, causes_navigation: bool) -> PlaywrightJavaScriptBuilder:
        return self._interact(selector, "selectOption", causes_navigation, option)

    def keydown(self, selector: str, key: str, causes_navigation: bool) -> PlaywrightJavaScriptBuilder:
        if key not in _READ_TEXT_KEYS:
            return self._interact(selector, "press", causes_navigation, key)

        code = self.statement(
            f"System.out.println(readInnerText(page, {java_string(selector)}))"
        )
        self.push_codes(self._wait_for_action_and_navigation(code, causes_navigation))
        return self

    def wheel(
        self,
        delta_x: float,
        delta_y: float,
        page_x_offset: Optional[float] = None,
        page_y_offset: Optional[float] = None,
    ) -> PlaywrightJavaScriptBuilder:
        self.push_codes(
            self.statement(f"page.mouse().wheel({floor_int(delta_x)}, {floor_int(delta_y)})")
        )
        return self

    def full_screenshot(self) -> PlaywrightJavaScriptBuilder:
        self.push_codes(self.statement(
            'page.screenshot(new Page.ScreenshotOptions()'
            '.setPath(Paths.get("screenshot.png")).setFullPage(true))'
        ))
        return self

    def await_text(self, text: str) -> PlaywrightJavaScriptBuilder:
        self.push_codes(self.statement(f"page.waitForSelector({java_string('text=' + text)})"))
        return self

    def drag_and_drop(
        self,
        source_x: float,
        source_y: float,
        target_x: float,
        target_y: float,
    ) -> PlaywrightJavaScriptBuilder:
        self.push_codes("\n".join([
            self.statement(f"page.mouse().move({format_number(source_x)}, {format_number(source_y)})"),
            self.statement("page.mouse().down()"),
            self.statement(f"page.mouse().move({format_number(target_x)}, {format_number(target_y)})"),
            self.statement("page.mouse().up()"),
        ]))
        return self
