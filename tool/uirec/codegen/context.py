"""
ActionContext — アクションと派生情報のラッパー

1 つの Action に、ページ遷移を起こすか（causes_navigation）と
状態を持つ入力か（is_stateful）の派生情報を組み合わせる。
コメント用の説明文と、リゾルバ経由のセレクタ取得を提供する。
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Optional

from ..actions.schema import ActionType, BaseAction, TagName
from ..core.selector import SelectorResolver
from ..core.targets import ScriptType
from .escape import format_number

_WHITESPACE = re.compile(r"\s+")


def truncate_text(s: str, max_len: int) -> str:
    """max_len 文字を超える場合は切り詰めて "..." を付ける。"""
    return f"{s[:max_len]}{'...' if len(s) > max_len else ''}"


def is_action_stateful(action: BaseAction) -> bool:
    """textarea への入力は連続して記録されるため、最後の状態のみを出力対象とする。"""
    return action.tagName == TagName.TEXT_AREA


@dataclass(frozen=True)
class ActionState:
    """アクションの派生情報。

    Attributes:
        causes_navigation: 次の生アクションが navigate である
        is_stateful: textarea への入力である
    """

    causes_navigation: bool
    is_stateful: bool


@dataclass(frozen=True)
class ActionContext:
    """コード生成対象の 1 アクション。

    Attributes:
        action: 記録されたアクション
        script_type: 生成対象のスクリプト種別
        action_state: 派生情報
        resolver: セレクタリゾルバ
        index: 入力アクションリスト内のインデックス（除外前の生の位置）
    """

    action: BaseAction
    script_type: ScriptType
    action_state: ActionState
    resolver: SelectorResolver
    index: int = 0

    @property
    def type(self) -> str:
        return self.action.type  # type: ignore[attr-defined]

    @property
    def tag_name(self) -> str:
        return self.action.tagName

    @property
    def value(self) -> Optional[str]:
        return self.action.value

    @property
    def input_type(self) -> Optional[str]:
        return self.action.inputType

    @property
    def causes_navigation(self) -> bool:
        return self.action_state.causes_navigation

    @property
    def is_stateful(self) -> bool:
        return self.action_state.is_stateful

    def field(self, name: str) -> Any:
        """種別固有フィールド（url, key, width 等）を取得する。"""
        return getattr(self.action, name)

    def get_best_selector(self) -> Optional[str]:
        """リゾルバに委譲してセレクタを取得する。決定できない場合は None。"""
        return self.resolver.resolve(self.action, self.script_type)

    def get_text(self) -> str:
        """説明文用の対象要素表記（<tag> "テキスト" またはセレクタ）を返す。"""
        tag = f"<{self.tag_name.lower()}>"
        text = self.action.selectors.text
        if text:
            return f'{tag} "{truncate_text(_WHITESPACE.sub(" ", text), 25)}"'
        selector = self.get_best_selector()
        if selector:
            return f"{tag} {selector}"
        return tag

    def get_description(self) -> str:
        """アクションの説明文を返す。出力コメントにのみ使用する。"""
        action_type = self.type

        if action_type == ActionType.CLICK:
            return f"Click on {self.get_text()}"
        if action_type == ActionType.DBLCLICK:
            return f"DblClick on {self.get_text()}"
        if action_type == ActionType.HOVER:
            return f"Hover over {self.get_text()}"
        if action_type == ActionType.INPUT:
            value = json.dumps(self.value or "", ensure_ascii=False)
            return f"Fill {truncate_text(value, 16)} on {self.get_text()}"
        if action_type == ActionType.KEYDOWN:
            return f"Press {self.field('key')} on {self.tag_name.lower()}"
        if action_type == ActionType.LOAD:
            return f'Load "{self.field("url")}"'
        if action_type == ActionType.RESIZE:
            return f"Resize window to {self.field('width')} x {self.field('height')}"
        if action_type == ActionType.WHEEL:
            dx = format_number(self.field("deltaX"))
            dy = format_number(self.field("deltaY"))
            return f"Scroll wheel by X:{dx}, Y:{dy}"
        if action_type == ActionType.FULL_SCREENSHOT:
            return "Take full page screenshot"
        if action_type == ActionType.AWAIT_TEXT:
            text = json.dumps(self.field("text"), ensure_ascii=False)
            return f"Wait for text {truncate_text(text, 25)} to appear"
        if action_type == ActionType.DRAG_AND_DROP:
            sx, sy, tx, ty = (
                format_number(self.field(name))
                for name in ("sourceX", "sourceY", "targetX", "targetY")
            )
            return f"Drag n drop {self.get_text()} from ({sx}, {sy}) to ({tx}, {ty})"
        if action_type == ActionType.VOICE:
            return f"Voice: {self.value or ''}"
        return ""
