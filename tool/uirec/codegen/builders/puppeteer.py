"""
Puppeteer ビルダー — require('puppeteer') による単体スクリプトを生成

Puppeteer の操作は要素の出現を自動待機しないため、要素操作の前に
page.waitForSelector() を挟む。fill が無いので type で代替する。
"""

from __future__ import annotations

from typing import Optional

from ...core.targets import ScriptLanguage
from ..builder import ScriptBuilder
from ..escape import floor_int, format_number, js_json_string, js_string


class PuppeteerScriptBuilder(ScriptBuilder):
    """Puppeteer 用ビルダー。"""

    language = ScriptLanguage.JS
    template_name = "puppeteer.js.j2"

    def _wait_for_selector(self, selector: str) -> str:
        return self.statement(f"await page.waitForSelector({js_string(selector)})")

    def _push_action(
        self,
        wait_selector: str,
        action: str,
        causes_navigation: bool,
    ) -> PuppeteerScriptBuilder:
        """要素の出現待ちに続けて操作を出力する。"""
        if causes_navigation:
            code = "\n".join([
                self._wait_for_selector(wait_selector),
                "await Promise.all([",
                f"  {action},",
                "  page.waitForNavigation(),",
                self.statement("])"),
            ])
        else:
            code = "\n".join([
                self._wait_for_selector(wait_selector),
                self.statement(f"await {action}"),
            ])
        self.push_codes(code)
        return self

    def click(self, selector: str, causes_navigation: bool) -> PuppeteerScriptBuilder:
        return self._push_action(selector, f"page.click({js_string(selector)})", causes_navigation)

    def dbl_click(self, selector: str, causes_navigation: bool) -> PuppeteerScriptBuilder:
        action = f"page.click({js_string(selector)}, {{ clickCount: 2 }})"
        return self._push_action(selector, action, causes_navigation)

    def hover(self, selector: str, causes_navigation: bool) -> PuppeteerScriptBuilder:
        return self._push_action(selector, f"page.hover({js_string(selector)})", causes_navigation)

    def load(self, url: str) -> PuppeteerScriptBuilder:
        self.push_codes(self.statement(f"await page.goto({js_string(url)})"))
        return self

    def resize(self, width: int, height: int) -> PuppeteerScriptBuilder:
        self.push_codes(
            self.statement(f"await page.setViewport({{ width: {width}, height: {height} }})")
        )
        return self

    def fill(self, selector: str, value: str, causes_navigation: bool) -> PuppeteerScriptBuilder:
        # 無効化された入力欄には入力できないので、有効になるまで待つ
        action = f"page.type({js_string(selector)}, {js_json_string(value)})"
        return self._push_action(f"{selector}:not([disabled])", action, causes_navigation)

    def type(self, selector: str, value: str, causes_navigation: bool) -> PuppeteerScriptBuilder:
        action = f"page.type({js_string(selector)}, {js_json_string(value)})"
        return self._push_action(selector, action, causes_navigation)

    def select(self, selector: str, option: str, causes_navigation: bool) -> PuppeteerScriptBuilder:
        action = f"page.select({js_string(selector)}, {js_string(option)})"
        return self._push_action(selector, action, causes_navigation)

    def keydown(self, selector: str, key: str, causes_navigation: bool) -> PuppeteerScriptBuilder:
        return self._push_action(selector, f"page.keyboard.press({js_string(key)})", causes_navigation)

    def wheel(
        self,
        delta_x: float,
        delta_y: float,
        page_x_offset: Optional[float] = None,
        page_y_offset: Optional[float] = None,
    ) -> PuppeteerScriptBuilder:
        self.push_codes(self.statement(
            f"await page.evaluate(() => window.scrollBy({floor_int(delta_x)}, {floor_int(delta_y)}))"
        ))
        return self

    def full_screenshot(self) -> PuppeteerScriptBuilder:
        self.push_codes(
            self.statement("await page.screenshot({ path: 'screenshot.png', fullPage: true })")
        )
        return self

    def await_text(self, text: str) -> PuppeteerScriptBuilder:
        self.push_codes(self.statement(
            "await page.waitForFunction("
            f"(text) => document.body.innerText.includes(text), {{}}, {js_json_string(text)})"
        ))
        return self

    def drag_and_drop(
        self,
        source_x: float,
        source_y: float,
        target_x: float,
        target_y: float,
    ) -> PuppeteerScriptBuilder:
        self.push_codes("\n".join([
            self.statement(f"await page.mouse.move({format_number(source_x)}, {format_number(source_y)})"),
            self.statement("await page.mouse.down()"),
            self.statement(f"await page.mouse.move({format_number(target_x)}, {format_number(target_y)})"),
            self.statement("await page.mouse.up()"),
        ]))
        return self
