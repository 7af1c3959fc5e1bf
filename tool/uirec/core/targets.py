"""
ターゲット定義 — 生成対象のスクリプト種別と言語ファミリ
"""

from __future__ import annotations

from enum import Enum


class ScriptType(str, Enum):
    """生成対象のスクリプト種別（ターゲット）。"""

    PLAYWRIGHT_JS = "playwright"
    PLAYWRIGHT_PYTHON = "playwright-python"
    PLAYWRIGHT_JAVA = "playwright-java"
    PUPPETEER = "puppeteer"
    CYPRESS = "cypress"
    EVENTSTREAM = "eventstream"


class ScriptLanguage(str, Enum):
    """スクリプトの言語ファミリ。"""

    JS = "js"
    PYTHON = "python"
    JAVA = "java"
