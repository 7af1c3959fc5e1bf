"""
セレクタリゾルバ — 記録アクションから出力用セレクタ文字列を決定

コード生成エンジンはセレクタの選定ロジックを持たず、SelectorResolver Protocol を
介して外部に委譲する。ここでは決定的に動作するデフォルト実装
BestSelectorResolver を提供する。

選定ルール:
  - 候補の優先順: text=（リンク/ボタンの短いテキスト）→ testId → id → aria
    → href → attr → form → general
  - text= は text エンジンを持つターゲット（Playwright 系, Eventstream）のみ
  - 複数候補を試行できるターゲット（Playwright-Python / Java）には
    重複除去した候補を "|" 区切りで返す
  - 候補がない場合は None
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Protocol, runtime_checkable

from ..actions.schema import ActionType, BaseAction, TagName
from .targets import ScriptType

logger = logging.getLogger(__name__)

# "|" 区切りの複数候補を受け取り、実行時に順に試行するターゲット
MULTI_SELECTOR_TARGETS: frozenset[ScriptType] = frozenset({
    ScriptType.PLAYWRIGHT_PYTHON,
    ScriptType.PLAYWRIGHT_JAVA,
})

# text= セレクタエンジンを解釈できるターゲット
_TEXT_ENGINE_TARGETS: frozenset[ScriptType] = frozenset({
    ScriptType.PLAYWRIGHT_JS,
    ScriptType.PLAYWRIGHT_PYTHON,
    ScriptType.PLAYWRIGHT_JAVA,
    ScriptType.EVENTSTREAM,
})

_TEXT_SELECTOR_ACTIONS = (ActionType.CLICK, ActionType.DBLCLICK, ActionType.HOVER)
_TEXT_SELECTOR_TAGS = (TagName.A, TagName.BUTTON)
_TEXT_SELECTOR_MAX_LEN = 64

# CSS の # 記法でそのまま書ける id
_PLAIN_ID = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")


@runtime_checkable
class SelectorResolver(Protocol):
    """アクションに対する出力用セレクタを決定するインターフェース。

    同期・副作用なしであること。None はセレクタを決定できないことを表す。
    """

    def resolve(self, action: BaseAction, script_type: ScriptType) -> Optional[str]:
        ...


class BestSelectorResolver:
    """デフォルトのセレクタリゾルバ。

    使用例::

        resolver = BestSelectorResolver()
        selector = resolver.resolve(action, ScriptType.PLAYWRIGHT_JS)
    """

    def resolve(self, action: BaseAction, script_type: ScriptType) -> Optional[str]:
        """アクションとターゲットからセレクタ文字列を決定する。

        Args:
            action: 記録されたアクション
            script_type: 生成対象のスクリプト種別

        Returns:
            セレクタ文字列。候補がない場合は None
        """
        script_type = ScriptType(script_type)
        candidates = self._candidates(action, script_type)
        if not candidates:
            logger.debug("セレクタ候補がありません: %s", getattr(action, "type", "?"))
            return None

        if script_type in MULTI_SELECTOR_TARGETS:
            return "|".join(candidates)
        return candidates[0]

    def _candidates(self, action: BaseAction, script_type: ScriptType) -> list[str]:
        """優先順に並べた重複なしのセレクタ候補を返す。"""
        selectors = action.selectors
        candidates: list[str] = []

        for value in (
            self._text_selector(action, script_type),
            selectors.testIdSelector,
            _id_selector(selectors.id) if selectors.id else None,
            selectors.ariaSelector,
            selectors.hrefSelector,
            selectors.attrSelector,
            selectors.formSelector,
            selectors.generalSelector,
        ):
            if value:
                candidates.append(value)

        return list(dict.fromkeys(candidates))

    def _text_selector(self, action: BaseAction, script_type: ScriptType) -> Optional[str]:
        """リンク・ボタン操作向けの text= セレクタを返す。"""
        if script_type not in _TEXT_ENGINE_TARGETS:
            return None
        if getattr(action, "type", None) not in _TEXT_SELECTOR_ACTIONS:
            return None
        if action.tagName not in _TEXT_SELECTOR_TAGS:
            return None

        text = " ".join((action.selectors.text or "").split())
        if not text or len(text) > _TEXT_SELECTOR_MAX_LEN or "|" in text:
            return None
        return f"text={text}"


def _id_selector(element_id: str) -> str:
    """id 属性値から CSS セレクタを生成する。"""
    if _PLAIN_ID.match(element_id):
        return f"#{element_id}"
    escaped = element_id.replace("\\", "\\\\").replace('"', '\\"')
    return f'[id="{escaped}"]'
