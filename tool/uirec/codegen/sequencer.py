"""
Sequencer — ActionContext 列の合成とビルダー操作へのディスパッチ

ActionContext を入力順に処理し、textarea 入力の連続（stateful run）を
最後の状態 1 件にまとめたうえで、アクション種別に応じたビルダー操作を呼び出す。

ディスパッチ規則:
  - click / dblclick / hover → 同名操作（selector, causes_navigation）
  - keydown → keydown(selector, key, causes_navigation)
  - input + SELECT → select
  - input + INPUT（fill 可能な inputType）/ TEXTAREA → fill
  - input（上記以外）→ type
  - load / resize / wheel / fullScreenshot / awaitText / dragAndDrop → 各操作
  - navigate / voice / 未知 → 出力なし
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..actions.schema import ActionType, TagName
from ..errors import UnresolvedSelectorError
from .builder import ScriptBuilder
from .context import ActionContext

logger = logging.getLogger(__name__)

FILLABLE_INPUT_TYPES: frozenset[str] = frozenset({
    "",
    "date",
    "datetime",
    "datetime-local",
    "email",
    "month",
    "number",
    "password",
    "search",
    "tel",
    "text",
    "time",
    "url",
    "week",
})


class Sequencer:
    """ActionContext 列をビルダー操作に変換する。

    使用例::

        Sequencer(builder).run(contexts)
        script = builder.build_script()
    """

    def __init__(self, builder: ScriptBuilder) -> None:
        self._builder = builder

    def run(self, contexts: Iterable[ActionContext]) -> ScriptBuilder:
        """stateful run を合成しながら全コンテキストをディスパッチする。

        連続する stateful コンテキストは最後の 1 件のみが出力される。
        末尾が stateful run の場合も最後の状態を出力する。

        Args:
            contexts: 入力順の ActionContext 列

        Returns:
            操作を適用したビルダー
        """
        pending: Optional[ActionContext] = None

        for context in contexts:
            if context.is_stateful:
                if pending is not None:
                    logger.debug("stateful アクション #%d を後続の入力で置き換えます", pending.index)
                pending = context
                continue

            if pending is not None:
                self.dispatch(pending)
                pending = None
            self.dispatch(context)

        if pending is not None:
            self.dispatch(pending)

        return self._builder

    def dispatch(self, context: ActionContext) -> None:
        """1 件のコンテキストをコメントとビルダー操作に変換する。

        Raises:
            UnresolvedSelectorError: 要素操作でセレクタを決定できない場合
        """
        builder = self._builder

        if builder.config.show_comments:
            description = context.get_description()
            if description:
                builder.push_comments(description)

        action_type = context.type
        causes_navigation = context.causes_navigation

        if action_type == ActionType.CLICK:
            builder.click(self._selector(context), causes_navigation)
        elif action_type == ActionType.DBLCLICK:
            builder.dbl_click(self._selector(context), causes_navigation)
        elif action_type == ActionType.HOVER:
            builder.hover(self._selector(context), causes_navigation)
        elif action_type == ActionType.KEYDOWN:
            builder.keydown(self._selector(context), context.field("key"), causes_navigation)
        elif action_type == ActionType.INPUT:
            self._dispatch_input(context)
        elif action_type == ActionType.LOAD:
            builder.load(context.field("url"))
        elif action_type == ActionType.RESIZE:
            builder.resize(context.field("width"), context.field("height"))
        elif action_type == ActionType.WHEEL:
            builder.wheel(
                context.field("deltaX"),
                context.field("deltaY"),
                context.field("pageXOffset"),
                context.field("pageYOffset"),
            )
        elif action_type == ActionType.FULL_SCREENSHOT:
            builder.full_screenshot()
        elif action_type == ActionType.AWAIT_TEXT:
            builder.await_text(context.field("text"))
        elif action_type == ActionType.DRAG_AND_DROP:
            builder.drag_and_drop(
                context.field("sourceX"),
                context.field("sourceY"),
                context.field("targetX"),
                context.field("targetY"),
            )

    def _dispatch_input(self, context: ActionContext) -> None:
        """input アクションを select / fill / type に振り分ける。"""
        selector = self._selector(context)
        value = context.value or ""
        tag_name = context.tag_name
        input_type = context.input_type

        if tag_name == TagName.SELECT:
            self._builder.select(selector, value, context.causes_navigation)
        elif tag_name == TagName.INPUT and input_type is not None and input_type in FILLABLE_INPUT_TYPES:
            self._builder.fill(selector, value, context.causes_navigation)
        elif tag_name == TagName.TEXT_AREA:
            self._builder.fill(selector, value, context.causes_navigation)
        else:
            self._builder.type(selector, value, context.causes_navigation)

    @staticmethod
    def _selector(context: ActionContext) -> str:
        selector = context.get_best_selector()
        if selector is None:
            raise UnresolvedSelectorError(context.index, context.type)
        return selector
