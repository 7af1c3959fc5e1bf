"""
コード生成エントリポイント — 記録アクション列からスクリプト文字列を生成

処理の流れ:
  1. スクリプト種別からビルダーを生成（未知の種別は即座にエラー）
  2. 生のアクション列上で遷移の先読み（次の要素が navigate か）を計算
  3. 未対応種別を除外し、残りを検証して ActionContext を組み立て
  4. Sequencer で合成・ディスパッチ
  5. ボイラープレートに埋め込んだスクリプトを返す
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Union

from ..actions.schema import ActionType, is_supported_action_type
from ..actions.validation import action_type_of, to_action
from ..core.selector import BestSelectorResolver, SelectorResolver
from ..core.targets import ScriptType
from .context import ActionContext, ActionState, is_action_stateful
from .registry import BuilderRegistry, create_default_registry
from .sequencer import Sequencer

logger = logging.getLogger(__name__)


def _navigation_lookahead(raw_actions: Sequence[Any]) -> list[bool]:
    """各アクションの直後（生の並びで次）が navigate かどうかを返す。

    除外処理より前の生インデックスで判定する。
    """
    types = [action_type_of(raw) for raw in raw_actions]
    return [
        index + 1 < len(types) and types[index + 1] == ActionType.NAVIGATE.value
        for index in range(len(types))
    ]


def build_contexts(
    raw_actions: Sequence[Any],
    script_type: ScriptType,
    resolver: SelectorResolver,
) -> list[ActionContext]:
    """生のアクション列から ActionContext のリストを組み立てる。

    未対応種別のアクションは除外する。

    Raises:
        InvalidActionError: 対象種別のアクションに必須フィールドが欠けている場合
    """
    lookahead = _navigation_lookahead(raw_actions)
    contexts: list[ActionContext] = []

    for index, raw in enumerate(raw_actions):
        action_type = action_type_of(raw)
        if not is_supported_action_type(action_type):
            logger.debug("未対応のアクション #%d を除外します: type=%r", index, action_type)
            continue

        action = to_action(raw, index)
        contexts.append(
            ActionContext(
                action=action,
                script_type=script_type,
                action_state=ActionState(
                    causes_navigation=lookahead[index],
                    is_stateful=is_action_stateful(action),
                ),
                resolver=resolver,
                index=index,
            )
        )

    return contexts


def gen_code(
    actions: Sequence[Any],
    show_comments: bool,
    script_type: Union[ScriptType, str],
    *,
    resolver: Optional[SelectorResolver] = None,
    registry: Optional[BuilderRegistry] = None,
) -> str:
    """記録アクション列から指定ターゲットのスクリプトを生成する。

    同一の入力（決定的なリゾルバ）に対しては常に同一の文字列を返す。

    Args:
        actions: 記録されたアクション（Action モデルまたは dict）のリスト
        show_comments: アクション説明コメントを出力するか
        script_type: 生成対象のスクリプト種別
        resolver: セレクタリゾルバ。None の場合は BestSelectorResolver
        registry: ビルダーレジストリ。None の場合は標準 6 ターゲット

    Returns:
        生成されたスクリプト全体

    Raises:
        UnsupportedTargetError: 未知のスクリプト種別の場合
        InvalidActionError: アクションに必須フィールドが欠けている場合
        UnresolvedSelectorError: 要素操作のセレクタを決定できない場合
    """
    registry = registry or create_default_registry()
    builder = registry.create(script_type, show_comments)
    target = builder.config.script_type
    resolver = resolver or BestSelectorResolver()

    contexts = build_contexts(actions, target, resolver)
    logger.debug(
        "コード生成を開始します: target=%s, actions=%d, contexts=%d",
        target.value, len(actions), len(contexts),
    )

    Sequencer(builder).run(contexts)
    return builder.build_script()
