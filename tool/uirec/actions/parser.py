"""
セッションパーサー — 記録済みセッションファイルの読み込み・検証

ruamel.yaml を使用して記録セッション（アクションのリスト）を読み込む。
JSON は YAML のサブセットのため、.json / .yaml のどちらも同じ経路で扱える。

ファイル形式:
  - トップレベルがアクションのリスト
  - または ``actions`` キーにアクションのリストを持つマッピング
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .validation import collect_action_errors


# ---------------------------------------------------------------------------
# バリデーションエラー表現
# ---------------------------------------------------------------------------

@dataclass
class ActionValidationError:
    """セッションファイルの検証で検出されたエラー。

    Attributes:
        message: エラーメッセージ
        location: エラー箇所（"actions[3].url" 等）
        line: ファイル内の行番号（取得可能な場合）
    """

    message: str
    location: str = ""
    line: Optional[int] = None


# ---------------------------------------------------------------------------
# ActionParser 本体
# ---------------------------------------------------------------------------

class ActionParser:
    """記録セッションファイルの読み込みと検証を担当するパーサー。

    load() は検証前の生データ（dict のリスト）を返す。
    ナビゲーション先読みは未対応種別を含む生のインデックスで行う必要があるため、
    モデルへの変換はコード生成側で行う。
    """

    def __init__(self) -> None:
        """ruamel.yaml インスタンスを初期化する。"""
        self._yaml = YAML(typ="safe")

    # ----- load -----

    def load(self, path: Path) -> list[dict[str, Any]]:
        """セッションファイルを読み込み、アクションの生データを返す。

        Args:
            path: 読み込むファイルのパス

        Returns:
            アクション dict のリスト

        Raises:
            FileNotFoundError: ファイルが存在しない場合
            ValueError: 構文エラーまたはファイル構造が不正な場合
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"セッションファイルが見つかりません: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = self._yaml.load(f)
        except YAMLError as e:
            line_info = ""
            if hasattr(e, "problem_mark") and e.problem_mark is not None:
                mark = e.problem_mark
                line_info = f" (行 {mark.line + 1}, 列 {mark.column + 1})"
            raise ValueError(f"構文エラー{line_info}: {e}") from e

        return self._extract_actions(data)

    # ----- validate -----

    def validate(self, path: Path) -> list[ActionValidationError]:
        """セッションファイルを検証し、問題箇所を全て報告する。

        エラーがない場合は空リストを返す。

        Args:
            path: 検証するファイルのパス

        Returns:
            検出されたバリデーションエラーのリスト
        """
        path = Path(path)

        if not path.exists():
            return [ActionValidationError(
                message=f"セッションファイルが見つかりません: {path}",
                location="file",
            )]

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = self._yaml.load(f)
        except YAMLError as e:
            line = None
            if hasattr(e, "problem_mark") and e.problem_mark is not None:
                line = e.problem_mark.line + 1
            return [ActionValidationError(
                message=f"構文エラー: {e}",
                location="file",
                line=line,
            )]

        try:
            actions = self._extract_actions(data)
        except ValueError as e:
            return [ActionValidationError(message=str(e), location="file")]

        return [
            ActionValidationError(
                message=str(err),
                location=f"actions[{err.index}].{err.field}",
            )
            for err in collect_action_errors(actions)
        ]

    # ----- ユーティリティ -----

    def _extract_actions(self, data: object) -> list[dict[str, Any]]:
        """読み込んだデータからアクションのリストを取り出す。

        Raises:
            ValueError: リストも actions キーも見つからない場合
        """
        if data is None:
            raise ValueError("セッションファイルが空です")
        if isinstance(data, dict):
            data = data.get("actions")
        if not isinstance(data, list):
            raise ValueError(
                "セッションファイルはアクションのリスト、"
                "または actions キーを持つマッピングである必要があります"
            )
        return data
