"""
出力フォーマット設定 — スクリプト種別と言語ファミリごとの書式

ScriptConfig は生成するスクリプトのインデント単位・コメント記号・文末記号を保持する。
書式は言語ファミリ（JS / Python / Java）ごとの固定テーブルから選択される。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.targets import ScriptLanguage, ScriptType


@dataclass(frozen=True)
class _LanguageFormat:
    padding: str
    comment_prefix: str
    line_ending: str


_LANGUAGE_FORMATS: dict[ScriptLanguage, _LanguageFormat] = {
    ScriptLanguage.JS: _LanguageFormat(padding="  ", comment_prefix="//", line_ending=";"),
    ScriptLanguage.PYTHON: _LanguageFormat(padding="\t", comment_prefix="#", line_ending=""),
    ScriptLanguage.JAVA: _LanguageFormat(padding="\t", comment_prefix="//", line_ending=";"),
}


@dataclass(frozen=True)
class ScriptConfig:
    """スクリプト 1 本分の書式設定。

    Attributes:
        script_type: 生成対象のスクリプト種別
        language: 言語ファミリ
        show_comments: アクション説明コメントを出力するか
        padding: 各行に付与するインデント単位（未知の言語では None）
        comment_prefix: コメント記号（未知の言語では None）
        line_ending: 文末記号（未知の言語では None）
    """

    script_type: ScriptType
    language: ScriptLanguage
    show_comments: bool
    padding: Optional[str] = None
    comment_prefix: Optional[str] = None
    line_ending: Optional[str] = None

    @classmethod
    def create(
        cls,
        script_type: ScriptType,
        language: ScriptLanguage,
        show_comments: bool,
    ) -> ScriptConfig:
        """言語ファミリの書式テーブルから ScriptConfig を生成する。

        テーブルにない言語ファミリの場合、書式の 3 項目は None のままとなる。
        """
        fmt = _LANGUAGE_FORMATS.get(language)
        if fmt is None:
            return cls(script_type=script_type, language=language, show_comments=show_comments)
        return cls(
            script_type=script_type,
            language=language,
            show_comments=show_comments,
            padding=fmt.padding,
            comment_prefix=fmt.comment_prefix,
            line_ending=fmt.line_ending,
        )
