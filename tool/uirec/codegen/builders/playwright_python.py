"""
Playwright-Python ビルダー — async API 形式のスクリプトを生成

セレクタは "|" 区切りの複数候補で受け取り、スクリプト側の interact() ヘルパーが
存在する最初の候補に対して操作する。Python 版には遷移イベントの待機手段を
用意していないため、遷移を伴う操作の後は固定時間スリープする。
"""

from __future__ import annotations

from typing import Optional

from ...core.targets import ScriptLanguage
from ..builder import NAVIGATION_WAIT_MS, ScriptBuilder, render_template
from ..escape import floor_int, format_number, python_string

# r / R キーの押下は「要素テキストの読み取り」操作として記録される
_READ_TEXT_KEYS = ("r", "R")


class PlaywrightPythonScriptBuilder(ScriptBuilder):
    """Playwright-Python 用ビルダー。"""

    language = ScriptLanguage.PYTHON
    template_name = "playwright_python.py.j2"

    def _wait_for_action_and_navigation(self, action: str, wait: bool) -> str:
        if not wait:
            return action
        return f"{action}\nawait asyncio.sleep({format_number(NAVIGATION_WAIT_MS / 1000)})"

    def _interact(
        self,
        selector: str,
        action: str,
        causes_navigation: bool,
        value: Optional[str] = None,
    ) -> PlaywrightPythonScriptBuilder:
        args = [python_string(selector), python_string(action)]
        if value is not None:
            args.append(python_string(value))
        statement = self.statement(f"await interact(page, {', '.join(args)})")
        self.push_codes(self._wait_for_action_and_navigation(statement, causes_navigation))
        return self

    def click(self, selector: str, causes_navigation: bool) -> PlaywrightPythonScriptBuilder:
        return self._interact(selector, "click", causes_navigation)

    def dbl_click(self, selector: str, causes_navigation: bool) -> PlaywrightPythonScriptBuilder:
        return self._interact(selector, "dblclick", causes_navigation)

    def hover(self, selector: str, causes_navigation: bool) -> PlaywrightPythonScriptBuilder:
        return self._interact(selector, "hover", causes_navigation)

    def load(self, url: str) -> PlaywrightPythonScriptBuilder:
        self.push_codes(self.statement(f"await page.goto({python_string(url)})"))
        return self

    def resize(self, width: int, height: int) -> PlaywrightPythonScriptBuilder:
        self.push_codes(
            self.statement(f"await page.set_viewport_size({{'width': {width}, 'height': {height}}})")
        )
        return self

    def fill(self, selector: str, value: str, causes_navigation: bool) -> PlaywrightPythonScriptBuilder:
        return self._interact(selector, "fill", causes_navigation, value)

    def type(self, selector: str, value: str, causes_navigation: bool) -> PlaywrightPythonScriptBuilder:
        return self._interact(selector, "type", causes_navigation, value)

    def select(self, selector: str, option: str, causes_navigation: bool) -> PlaywrightPythonScriptBuilder:
        return self._interact(selector, "select_option", causes_navigation, option)

    def keydown(self, selector: str, key: str, causes_navigation: bool) -> PlaywrightPythonScriptBuilder:
        if key not in _READ_TEXT_KEYS:
            return self._interact(selector, "press", causes_navigation, key)

        code = "\n".join([
            self.statement(f"v = await read_inner_text(page, {python_string(selector)})"),
            self.statement("print(v)"),
        ])
        self.push_codes(self._wait_for_action_and_navigation(code, causes_navigation))
        return self

    def wheel(
        self,
        delta_x: float,
        delta_y: float,
        page_x_offset: Optional[float] = None,
        page_y_offset: Optional[float] = None,
    ) -> PlaywrightPythonScriptBuilder:
        self.push_codes(
            self.statement(f"await page.mouse.wheel({floor_int(delta_x)}, {floor_int(delta_y)})")
        )
        return self

    def full_screenshot(self) -> PlaywrightPythonScriptBuilder:
        self.push_codes(self.statement("await page.screenshot(path='screenshot.png', full_page=True)"))
        return self

    def await_text(self, text: str) -> PlaywrightPythonScriptBuilder:
        self.push_codes(
            self.statement(f"await page.wait_for_selector({python_string('text=' + text)})")
        )
        return self

    def drag_and_drop(
        self,
        source_x: float,
        source_y: float,
        target_x: float,
        target_y: float,
    ) -> PlaywrightPythonScriptBuilder:
        self.push_codes("\n".join([
            self.statement(f"await page.mouse.move({format_number(source_x)}, {format_number(source_y)})"),
            self.statement("await page.mouse.down()"),
            self.statement(f"await page.mouse.move({format_number(target_x)}, {format_number(target_y)})"),
            self.statement("await page.mouse.up()"),
        ]))
        return self

    def build_script(self) -> str:
        """本文に文がない場合（コメントのみを含む）は pass を補って有効な関数にする。"""
        has_statement = any(
            line.strip() and not line.strip().startswith(self.config.comment_prefix)
            for line in self.codes
        )
        if has_statement:
            return super().build_script()
        body = "\n".join([*self.codes, f"{self.config.padding}pass"])
        return render_template(self.template_name, body=body)
