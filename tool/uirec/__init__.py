"""
uirec — 記録したブラウザ操作からテストスクリプトを生成する

記録アクション列を Playwright (JS / Python / Java)・Puppeteer・Cypress・
Eventstream 向けのスクリプトに変換する。
"""

from __future__ import annotations

from .codegen.generator import gen_code
from .core.targets import ScriptLanguage, ScriptType
from .errors import (
    CodegenError,
    InvalidActionError,
    UnresolvedSelectorError,
    UnsupportedTargetError,
)

__version__ = "0.1.0"

__all__ = [
    "CodegenError",
    "InvalidActionError",
    "ScriptLanguage",
    "ScriptType",
    "UnresolvedSelectorError",
    "UnsupportedTargetError",
    "gen_code",
]
