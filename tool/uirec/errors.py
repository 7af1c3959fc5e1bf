"""
エラー定義 — コード生成で発生する例外

generate 1 回の呼び出しに閉じた失敗を表す。リトライの概念はない。
"""

from __future__ import annotations

from typing import Optional


class CodegenError(Exception):
    """コード生成エラーの基底クラス。"""


class UnsupportedTargetError(CodegenError):
    """未対応のスクリプト種別（ターゲット）が指定された場合のエラー。"""

    def __init__(self, script_type: object) -> None:
        self.script_type = script_type
        super().__init__(f"未対応のスクリプト種別です: {script_type!r}")


class InvalidActionError(CodegenError):
    """アクションに必須フィールドが欠けている、または値が不正な場合のエラー。

    Attributes:
        index: 入力アクションリスト内のインデックス（0始まり）
        field: 問題のあるフィールド名
        reason: 失敗理由（"missing" 等）
    """

    def __init__(self, index: int, field: str, reason: str = "missing") -> None:
        self.index = index
        self.field = field
        self.reason = reason
        super().__init__(
            f"アクション #{index} が不正です: フィールド '{field}' ({reason})"
        )


class UnresolvedSelectorError(CodegenError):
    """要素操作アクションのセレクタを決定できなかった場合のエラー。

    Attributes:
        index: 入力アクションリスト内のインデックス（0始まり）
        action_type: アクション種別
    """

    def __init__(self, index: int, action_type: Optional[str] = None) -> None:
        self.index = index
        self.action_type = action_type
        super().__init__(
            f"アクション #{index} ({action_type}) のセレクタを決定できません"
        )
