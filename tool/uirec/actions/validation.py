"""
アクション検証 — 生の記録データを Action モデルに変換する

レコーダーから受け取った dict を Discriminated Union（Action）として検証し、
Pydantic の ValidationError を InvalidActionError に変換する。
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Optional

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..errors import InvalidActionError
from .schema import Action, BaseAction, is_supported_action_type

logger = logging.getLogger(__name__)

_ACTION_ADAPTER: TypeAdapter[Action] = TypeAdapter(Action)


def action_type_of(raw: Any) -> Optional[str]:
    """生データまたはモデルからアクション種別を取り出す。

    Args:
        raw: Action モデルまたは dict

    Returns:
        アクション種別の文字列。取り出せない場合は None
    """
    if isinstance(raw, BaseAction):
        return getattr(raw, "type", None)
    if isinstance(raw, dict):
        value = raw.get("type")
        if isinstance(value, Enum):
            value = value.value
        return value if isinstance(value, str) else None
    return None


def _error_field(loc: tuple) -> str:
    """Pydantic エラーの loc からフィールドパスを組み立てる。

    Discriminated Union の場合、先頭要素は判別子の値なので除外する。
    """
    parts = [str(part) for part in loc[1:]] if len(loc) > 1 else [str(part) for part in loc]
    return ".".join(parts) if parts else "type"


def to_action(raw: Any, index: int) -> BaseAction:
    """生の記録データを Action モデルに変換する。

    既に Action モデルの場合はそのまま返す。

    Args:
        raw: Action モデルまたは dict
        index: 入力リスト内のインデックス（エラー報告用）

    Returns:
        検証済みの Action モデル

    Raises:
        InvalidActionError: 必須フィールドの欠落や型不一致がある場合
    """
    if isinstance(raw, BaseAction):
        return raw

    if not isinstance(raw, dict):
        raise InvalidActionError(index, "type", "mapping_type")

    try:
        return _ACTION_ADAPTER.validate_python(raw)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = _error_field(tuple(first.get("loc", ())))
        reason = first.get("type", "invalid")
        logger.debug("アクション #%d の検証に失敗しました: %s", index, e)
        raise InvalidActionError(index, field, reason) from e


def collect_action_errors(raw_actions: list[Any]) -> list[InvalidActionError]:
    """対象種別の全アクションを検証し、エラーを全て収集する。

    未対応の種別はコード生成時に除外されるため検証しない。

    Args:
        raw_actions: 生の記録データのリスト

    Returns:
        検出された InvalidActionError のリスト
    """
    errors: list[InvalidActionError] = []
    for index, raw in enumerate(raw_actions):
        if not is_supported_action_type(action_type_of(raw)):
            continue
        try:
            to_action(raw, index)
        except InvalidActionError as exc:
            errors.append(exc)
    return errors
