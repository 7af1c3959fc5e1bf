"""
actions パッケージ — 記録されたブラウザ操作イベント

主な機能:
  - Action: 操作イベントの Pydantic モデル（type による Discriminated Union）
  - to_action: 生の記録データの検証と変換
  - ActionParser: 記録セッションファイルの読み込み・検証
"""

from __future__ import annotations

from .parser import ActionParser, ActionValidationError
from .schema import (
    Action,
    ActionType,
    BaseAction,
    Selectors,
    SUPPORTED_ACTION_TYPES,
    TagName,
    is_supported_action_type,
)
from .validation import action_type_of, collect_action_errors, to_action

__all__ = [
    "Action",
    "ActionParser",
    "ActionType",
    "ActionValidationError",
    "BaseAction",
    "SUPPORTED_ACTION_TYPES",
    "Selectors",
    "TagName",
    "action_type_of",
    "collect_action_errors",
    "is_supported_action_type",
    "to_action",
]
