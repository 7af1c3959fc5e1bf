"""
ターゲット別ビルダーのテスト

各ターゲットのボイラープレート込みのゴールデン出力と、
ターゲット固有の出力規則（遷移待ち、fill の代替、r キー読み取り等）を確認する。
"""

from __future__ import annotations

import ast

import pytest

from uirec.codegen.builder import ScriptBuilder
from uirec.codegen.generator import gen_code
from uirec.codegen.registry import create_default_registry
from uirec.core.targets import ScriptType


@pytest.fixture
def login_actions(action) -> list[dict]:
    """load → 入力 → ログインボタン（遷移あり）。"""
    return [
        action("load", url="http://localhost:3000/"),
        action("input", tag="INPUT", input_type="text", value="bob", id="user"),
        action("click", tag="BUTTON", text="Login", id="login"),
        action("navigate", url="http://localhost:3000/home"),
    ]


def _builder(script_type: ScriptType, show_comments: bool = False) -> ScriptBuilder:
    return create_default_registry().create(script_type, show_comments)


# ===========================================================================
# ゴールデン出力
# ===========================================================================

class TestGoldenScripts:
    """コメントなしのログインフローの生成結果。"""

    def test_playwright_js(self, login_actions) -> None:
        assert gen_code(login_actions, False, ScriptType.PLAYWRIGHT_JS) == (
            "import { test, expect } from '@playwright/test';\n"
            "\n"
            "test('Written with Web UI Recorder', async ({ page }) => {\n"
            "  await page.goto('http://localhost:3000/');\n"
            "  await page.fill('#user', \"bob\");\n"
            "  await Promise.all([\n"
            "    page.click('text=Login'),\n"
            "    page.waitForNavigation(),\n"
            "  ]);\n"
            "});\n"
        )

    def test_puppeteer(self, login_actions) -> None:
        assert gen_code(login_actions, False, ScriptType.PUPPETEER) == (
            "const puppeteer = require('puppeteer');\n"
            "\n"
            "(async () => {\n"
            "  const browser = await puppeteer.launch({\n"
            "    // headless: false, slowMo: 100, // Uncomment to visualize test\n"
            "  });\n"
            "  const page = await browser.newPage();\n"
            "  await page.goto('http://localhost:3000/');\n"
            "  await page.waitForSelector('#user:not([disabled])');\n"
            "  await page.type('#user', \"bob\");\n"
            "  await page.waitForSelector('#login');\n"
            "  await Promise.all([\n"
            "    page.click('#login'),\n"
            "    page.waitForNavigation(),\n"
            "  ]);\n"
            "  await browser.close();\n"
            "})();\n"
        )

    def test_cypress(self, login_actions) -> None:
        assert gen_code(login_actions, False, ScriptType.CYPRESS) == (
            "it('Written with Web UI Recorder', () => {\n"
            "  cy.visit('http://localhost:3000/');\n"
            "  cy.get('#user').type(\"bob\", { parseSpecialCharSequences: false });\n"
            "  cy.get('#login').click();\n"
            "  cy.wait(2000);\n"
            "});\n"
        )

    def test_eventstream(self, login_actions) -> None:
        assert gen_code(login_actions, False, ScriptType.EVENTSTREAM) == (
            "test('Written with Web UI Recorder', async ({ page }) => {\n"
            "  Goto('http://localhost:3000/');\n"
            "  Fill('#user', \"bob\");\n"
            "  PromiseAll([\n"
            "    Click('text=Login'),\n"
            "    WaitForNavigation(),\n"
            "  ]);\n"
            "});\n"
        )

    def test_playwright_python(self, login_actions) -> None:
        script = gen_code(login_actions, False, ScriptType.PLAYWRIGHT_PYTHON)
        assert (
            "async def execute(page):\n"
            "\tawait page.goto('http://localhost:3000/')\n"
            "\tawait interact(page, '#user', 'fill', 'bob')\n"
            "\tawait interact(page, 'text=Login|#login', 'click')\n"
            "\tawait asyncio.sleep(2)\n"
        ) in script
        assert script.startswith("import asyncio\n")
        assert script.endswith("if __name__ == '__main__':\n    asyncio.run(main())\n")
        ast.parse(script)

    def test_playwright_java(self, login_actions) -> None:
        script = gen_code(login_actions, False, ScriptType.PLAYWRIGHT_JAVA)
        assert (
            "  public static void execute(Page page) {\n"
            "\tpage.navigate(\"http://localhost:3000/\");\n"
            "\tinteract(page, \"#user\", \"fill\", \"bob\");\n"
            "\tinteract(page, \"text=Login|#login\", \"click\", null);\n"
            "\tpage.waitForTimeout(2000);\n"
            "  }\n"
        ) in script
        assert script.startswith("import com.microsoft.playwright.*;\n")
        assert "public class AutomationScript {" in script
        assert script.count("{") == script.count("}")

    def test_comments_in_js(self, login_actions) -> None:
        script = gen_code(login_actions, True, ScriptType.PLAYWRIGHT_JS)
        assert (
            "\n"
            "  // Click on <button> \"Login\"\n"
            "  await Promise.all([\n"
        ) in script
        assert "  // Load \"http://localhost:3000/\"\n" in script

    def test_comments_in_cypress_have_no_blank_line(self, login_actions) -> None:
        script = gen_code(login_actions, True, ScriptType.CYPRESS)
        assert (
            "  cy.get('#user').type(\"bob\", { parseSpecialCharSequences: false });\n"
            "  // Click on <button> \"Login\"\n"
        ) in script


# ===========================================================================
# ターゲット固有の規則
# ===========================================================================

class TestPlaywrightJS:
    def test_element_operations(self) -> None:
        builder = _builder(ScriptType.PLAYWRIGHT_JS)
        builder.dbl_click("#a", False).hover("#b", False).select("#c", "x", False)
        builder.keydown("#d", "Enter", False).type("#e", "it's", False)
        assert builder.codes == [
            "  await page.dblclick('#a');",
            "  await page.hover('#b');",
            "  await page.selectOption('#c', 'x');",
            "  await page.press('#d', 'Enter');",
            "  await page.type('#e', \"it's\");",
        ]

    def test_page_operations(self) -> None:
        builder = _builder(ScriptType.PLAYWRIGHT_JS)
        builder.resize(1280, 720).wheel(10.9, -3.2).full_screenshot().await_text("Done")
        assert builder.codes == [
            "  await page.setViewportSize({ width: 1280, height: 720 });",
            "  await page.mouse.wheel(10, -4);",
            "  await page.screenshot({ path: 'screenshot.png', fullPage: true });",
            "  await page.waitForSelector('text=Done');",
        ]

    def test_drag_and_drop(self) -> None:
        builder = _builder(ScriptType.PLAYWRIGHT_JS)
        builder.drag_and_drop(1.0, 2.5, 30.0, 40.0)
        assert builder.codes == [
            "  await page.mouse.move(1, 2.5);",
            "  await page.mouse.down();",
            "  await page.mouse.move(30, 40);",
            "  await page.mouse.up();",
        ]

    def test_selector_quotes_escaped(self) -> None:
        builder = _builder(ScriptType.PLAYWRIGHT_JS)
        builder.click("a[title='x']", False)
        assert builder.codes == ["  await page.click('a[title=\\'x\\']');"]


class TestPuppeteer:
    def test_dblclick_uses_click_count(self) -> None:
        builder = _builder(ScriptType.PUPPETEER)
        builder.dbl_click("#a", False)
        assert builder.codes == [
            "  await page.waitForSelector('#a');",
            "  await page.click('#a', { clickCount: 2 });",
        ]

    def test_keydown_and_select(self) -> None:
        builder = _builder(ScriptType.PUPPETEER)
        builder.keydown("#a", "Tab", False).select("#s", "2", True)
        assert builder.codes == [
            "  await page.waitForSelector('#a');",
            "  await page.keyboard.press('Tab');",
            "  await page.waitForSelector('#s');",
            "  await Promise.all([",
            "    page.select('#s', '2'),",
            "    page.waitForNavigation(),",
            "  ]);",
        ]

    def test_page_operations(self) -> None:
        builder = _builder(ScriptType.PUPPETEER)
        builder.resize(800, 600).wheel(0.5, 99.9).await_text("It's done")
        assert builder.codes == [
            "  await page.setViewport({ width: 800, height: 600 });",
            "  await page.evaluate(() => window.scrollBy(0, 99));",
            "  await page.waitForFunction("
            "(text) => document.body.innerText.includes(text), {}, \"It's done\");",
        ]


class TestCypress:
    def test_element_operations(self) -> None:
        builder = _builder(ScriptType.CYPRESS)
        builder.dbl_click("#a", False).hover("#b", False).select("#c", "x", False)
        builder.keydown("#d", "Enter", False)
        assert builder.codes == [
            "  cy.get('#a').dblclick();",
            "  cy.get('#b').trigger('mouseover');",
            "  cy.get('#c').select('x');",
            "  cy.get('#d').type('{Enter}');",
        ]

    def test_values_typed_literally(self) -> None:
        builder = _builder(ScriptType.CYPRESS)
        builder.fill("#a", '{"a":1}', False).type("#b", "{enter}", False)
        assert builder.codes == [
            "  cy.get('#a').type(\"{\\\"a\\\":1}\", { parseSpecialCharSequences: false });",
            "  cy.get('#b').type(\"{enter}\", { parseSpecialCharSequences: false });",
        ]

    def test_navigation_waits_fixed_time(self) -> None:
        builder = _builder(ScriptType.CYPRESS)
        builder.click("#go", True)
        assert builder.codes == ["  cy.get('#go').click();", "  cy.wait(2000);"]

    def test_wheel_scrolls_to_page_offset(self) -> None:
        builder = _builder(ScriptType.CYPRESS)
        builder.wheel(5, 5).wheel(5, 5, 10.7, 300.2)
        assert builder.codes == ["  cy.scrollTo(0, 0);", "  cy.scrollTo(10, 300);"]

    def test_page_operations(self) -> None:
        builder = _builder(ScriptType.CYPRESS)
        builder.resize(375, 667).full_screenshot().await_text("Hello")
        assert builder.codes == [
            "  cy.viewport(375, 667);",
            "  cy.screenshot();",
            "  cy.contains('Hello');",
        ]

    def test_drag_and_drop_is_empty(self) -> None:
        builder = _builder(ScriptType.CYPRESS)
        builder.drag_and_drop(1, 2, 3, 4)
        assert builder.codes == ["  "]


class TestEventstream:
    def test_operations(self) -> None:
        builder = _builder(ScriptType.EVENTSTREAM)
        builder.hover("#a", False).keydown("#b", "Enter", True).resize(1, 2).wheel(1.5, 2.5)
        assert builder.codes == [
            "  Hover('#a');",
            "  PromiseAll([",
            "    Press('#b', 'Enter'),",
            "    WaitForNavigation(),",
            "  ]);",
            "  SetViewportSize({ width: 1, height: 2 });",
            "  MouseWheel(1, 2);",
        ]

    def test_screenshot_and_await_text(self) -> None:
        builder = _builder(ScriptType.EVENTSTREAM)
        builder.full_screenshot().await_text("ok").drag_and_drop(1, 2, 3, 4)
        assert builder.codes == [
            "  Screenshot({ path: 'screenshot.png', fullPage: true });",
            "  WaitForSelector('text=ok');",
            "  MouseMove(1, 2);",
            "  MouseDown();",
            "  MouseMove(3, 4);",
            "  MouseUp();",
        ]


class TestPlaywrightPython:
    def test_read_inner_text_key(self) -> None:
        builder = _builder(ScriptType.PLAYWRIGHT_PYTHON)
        builder.keydown("#a|#b", "r", False)
        assert builder.codes == [
            "\tv = await read_inner_text(page, '#a|#b')",
            "\tprint(v)",
        ]

    def test_other_keys_pressed(self) -> None:
        builder = _builder(ScriptType.PLAYWRIGHT_PYTHON)
        builder.keydown("#a", "Enter", True)
        assert builder.codes == [
            "\tawait interact(page, '#a', 'press', 'Enter')",
            "\tawait asyncio.sleep(2)",
        ]

    def test_empty_value_kept(self) -> None:
        builder = _builder(ScriptType.PLAYWRIGHT_PYTHON)
        builder.fill("#a", "", False).select("#s", "v", False)
        assert builder.codes == [
            "\tawait interact(page, '#a', 'fill', '')",
            "\tawait interact(page, '#s', 'select_option', 'v')",
        ]

    def test_page_operations(self) -> None:
        builder = _builder(ScriptType.PLAYWRIGHT_PYTHON)
        builder.resize(10, 20).wheel(1, 2).full_screenshot().await_text("x")
        assert builder.codes == [
            "\tawait page.set_viewport_size({'width': 10, 'height': 20})",
            "\tawait page.mouse.wheel(1, 2)",
            "\tawait page.screenshot(path='screenshot.png', full_page=True)",
            "\tawait page.wait_for_selector('text=x')",
        ]

    def test_empty_body_gets_pass(self) -> None:
        script = gen_code([], True, ScriptType.PLAYWRIGHT_PYTHON)
        assert "async def execute(page):\n\tpass\n" in script
        ast.parse(script)

    def test_comment_only_body_gets_pass(self) -> None:
        script = gen_code([{"type": "voice", "value": "memo"}], True, ScriptType.PLAYWRIGHT_PYTHON)
        assert "\t# Voice: memo\n\tpass\n" in script
        ast.parse(script)

    def test_generated_script_parses(self, action) -> None:
        actions = [
            action("load", url="http://a/"),
            action("input", tag="TEXTAREA", value="line1\nline2 'quoted'", id="memo"),
            action("keydown", tag="DIV", key="r", generalSelector="div.result"),
            action("dragAndDrop", tag="LI", sourceX=1, sourceY=2, targetX=3, targetY=4, id="it"),
        ]
        ast.parse(gen_code(actions, True, ScriptType.PLAYWRIGHT_PYTHON))

    def test_control_characters_in_values_parse(self) -> None:
        actions = [{"type": "input", "tagName": "TEXTAREA", "value": "a\x00b\x1b",
                    "selectors": {"id": "memo"}}]
        script = gen_code(actions, False, ScriptType.PLAYWRIGHT_PYTHON)
        assert "'a\\x00b\\x1b'" in script
        ast.parse(script)


class TestPlaywrightJava:
    def test_read_inner_text_key(self) -> None:
        builder = _builder(ScriptType.PLAYWRIGHT_JAVA)
        builder.keydown("#a", "R", True)
        assert builder.codes == [
            "\tSystem.out.println(readInnerText(page, \"#a\"));",
            "\tpage.waitForTimeout(2000);",
        ]

    def test_repeated_read_text_declares_no_locals(self) -> None:
        actions = [
            {"type": "keydown", "key": "r", "selectors": {"id": "a"}},
            {"type": "keydown", "key": "r", "selectors": {"id": "b"}},
        ]
        script = gen_code(actions, False, ScriptType.PLAYWRIGHT_JAVA)
        assert "String v =" not in script
        assert "System.out.println(readInnerText(page, \"#a\"));" in script
        assert "System.out.println(readInnerText(page, \"#b\"));" in script

    def test_values_double_quoted(self) -> None:
        builder = _builder(ScriptType.PLAYWRIGHT_JAVA)
        builder.type("#a", 'say "hi"', False).select("#s", "v", False)
        assert builder.codes == [
            "\tinteract(page, \"#a\", \"type\", \"say \\\"hi\\\"\");",
            "\tinteract(page, \"#s\", \"selectOption\", \"v\");",
        ]

    def test_page_operations(self) -> None:
        builder = _builder(ScriptType.PLAYWRIGHT_JAVA)
        builder.resize(10, 20).wheel(1.2, 2.8).full_screenshot().await_text("x")
        assert builder.codes == [
            "\tpage.setViewportSize(10, 20);",
            "\tpage.mouse().wheel(1, 2);",
            "\tpage.screenshot(new Page.ScreenshotOptions()"
            ".setPath(Paths.get(\"screenshot.png\")).setFullPage(true));",
            "\tpage.waitForSelector(\"text=x\");",
        ]

    def test_drag_and_drop(self) -> None:
        builder = _builder(ScriptType.PLAYWRIGHT_JAVA)
        builder.drag_and_drop(1, 2, 3, 4)
        assert builder.codes == [
            "\tpage.mouse().move(1, 2);",
            "\tpage.mouse().down();",
            "\tpage.mouse().move(3, 4);",
            "\tpage.mouse().up();",
        ]
