"""
テスト共通フィクスチャ定義

全テストモジュールで共有するフィクスチャとデータ生成器を提供する。
記録アクションは dict（レコーダーの出力形式）で組み立てる。
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import pytest


# ---------------------------------------------------------------------------
# アクション dict ファクトリ
# ---------------------------------------------------------------------------

def make_action(
    action_type: str,
    *,
    tag: str = "",
    text: Optional[str] = None,
    value: Optional[str] = None,
    input_type: Optional[str] = None,
    **fields: Any,
) -> dict[str, Any]:
    """記録アクションの dict を生成する。

    selectors 系のキー（testIdSelector, id, generalSelector 等）は
    fields に渡すと selectors の下に格納する。
    """
    selector_keys = {
        "testIdSelector", "id", "ariaSelector", "hrefSelector",
        "attrSelector", "formSelector", "generalSelector",
    }
    selectors: dict[str, Any] = {k: fields.pop(k) for k in list(fields) if k in selector_keys}
    if text is not None:
        selectors["text"] = text

    action: dict[str, Any] = {"type": action_type, "tagName": tag, "selectors": selectors}
    if value is not None:
        action["value"] = value
    if input_type is not None:
        action["inputType"] = input_type
    action.update(fields)
    return action


@pytest.fixture
def sample_actions() -> list[dict[str, Any]]:
    """ログインフローを記録したアクション列。

    load → ユーザー名入力 → パスワード入力 → ログインボタン（遷移あり）→ navigate。
    """
    return [
        make_action("load", url="http://localhost:3000/login"),
        make_action(
            "input", tag="INPUT", input_type="text", value="alice",
            id="username", generalSelector="form > input:nth-child(1)",
        ),
        make_action(
            "input", tag="INPUT", input_type="password", value="secret",
            formSelector="[name=\"password\"]",
        ),
        make_action(
            "click", tag="BUTTON", text="Sign in",
            testIdSelector="[data-testid=\"login\"]",
        ),
        make_action("navigate", url="http://localhost:3000/home"),
    ]


@pytest.fixture
def session_file(tmp_path: Path, sample_actions: list[dict[str, Any]]) -> Path:
    """sample_actions を JSON で書き出したセッションファイル。"""
    path = tmp_path / "session.json"
    path.write_text(json.dumps(sample_actions, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def action():
    """make_action をテストから使うためのフィクスチャ。"""
    return make_action
