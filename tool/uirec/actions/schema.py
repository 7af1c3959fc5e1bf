"""
アクションスキーマ定義 — 記録されたブラウザ操作イベントのモデル

レコーダーが出力した操作イベント（click, input, load 等）を
Pydantic v2 モデルで表現する。type フィールドを判別子とした
Discriminated Union（Action）として扱い、記録後は不変（frozen）とする。

主な構成:
  - ActionType / TagName: アクション種別とタグ名の列挙
  - Selectors: 要素を特定するためのセレクタ候補と可視テキスト
  - 各アクションモデル（ClickAction, InputAction, LoadAction 等）
  - Action: 全アクションモデルの Union 型
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# 列挙型
# ---------------------------------------------------------------------------

class ActionType(str, Enum):
    """記録されたアクションの種別。"""

    CLICK = "click"
    DBLCLICK = "dblclick"
    HOVER = "hover"
    INPUT = "input"
    KEYDOWN = "keydown"
    LOAD = "load"
    NAVIGATE = "navigate"
    RESIZE = "resize"
    WHEEL = "wheel"
    FULL_SCREENSHOT = "fullScreenshot"
    AWAIT_TEXT = "awaitText"
    DRAG_AND_DROP = "dragAndDrop"
    VOICE = "voice"


class TagName(str, Enum):
    """アクション対象要素のタグ名（コード生成の分岐に使うもののみ）。"""

    INPUT = "INPUT"
    SELECT = "SELECT"
    TEXT_AREA = "TEXTAREA"
    A = "A"
    BUTTON = "BUTTON"


# コード生成対象として受け付けるアクション種別（値の集合）
SUPPORTED_ACTION_TYPES: frozenset[str] = frozenset(t.value for t in ActionType)


def is_supported_action_type(action_type: object) -> bool:
    """アクション種別がコード生成の対象かを返す。

    Args:
        action_type: アクション種別（文字列または ActionType）

    Returns:
        対象の場合は True
    """
    if isinstance(action_type, ActionType):
        return True
    return isinstance(action_type, str) and action_type in SUPPORTED_ACTION_TYPES


# ---------------------------------------------------------------------------
# セレクタ候補
# ---------------------------------------------------------------------------

class Selectors(BaseModel):
    """レコーダーが抽出したセレクタ候補と可視テキスト。

    どの候補を採用するかは SelectorResolver が決定する。
    レコーダー固有の未知キーは無視する。
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    testIdSelector: Optional[str] = Field(default=None, description="data-testid 属性ベースのセレクタ")
    id: Optional[str] = Field(default=None, description="要素の id 属性値")
    ariaSelector: Optional[str] = Field(default=None, description="ARIA 属性ベースのセレクタ")
    hrefSelector: Optional[str] = Field(default=None, description="リンク先 href ベースのセレクタ")
    attrSelector: Optional[str] = Field(default=None, description="その他属性ベースのセレクタ")
    formSelector: Optional[str] = Field(default=None, description="フォーム要素の name 等によるセレクタ")
    generalSelector: Optional[str] = Field(default=None, description="DOM 構造ベースの汎用 CSS セレクタ")
    text: Optional[str] = Field(default=None, description="要素の可視テキスト")


# ---------------------------------------------------------------------------
# アクション共通部
# ---------------------------------------------------------------------------

class BaseAction(BaseModel):
    """全アクション共通のフィールド。

    tagName は DOM の tagName（大文字）をそのまま保持する。
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    tagName: str = Field(default="", description="対象要素のタグ名（INPUT, SELECT 等）")
    selectors: Selectors = Field(default_factory=Selectors, description="セレクタ候補")
    value: Optional[str] = Field(default=None, description="入力値など")
    inputType: Optional[str] = Field(default=None, description="input 要素の type 属性")


# ---------------------------------------------------------------------------
# 要素操作アクション
# ---------------------------------------------------------------------------

class ClickAction(BaseAction):
    """要素のクリック。"""

    type: Literal["click"] = "click"


class DblClickAction(BaseAction):
    """要素のダブルクリック。"""

    type: Literal["dblclick"] = "dblclick"


class HoverAction(BaseAction):
    """要素へのマウスオーバー。"""

    type: Literal["hover"] = "hover"


class InputAction(BaseAction):
    """入力要素への値の入力（select の選択を含む）。"""

    type: Literal["input"] = "input"


class KeydownAction(BaseAction):
    """要素上でのキー押下。"""

    type: Literal["keydown"] = "keydown"
    key: str = Field(..., description="押下したキー名（Enter, Tab 等）")


# ---------------------------------------------------------------------------
# ページ・ウィンドウ操作アクション
# ---------------------------------------------------------------------------

class LoadAction(BaseAction):
    """ページの読み込み（記録開始時の URL 等）。"""

    type: Literal["load"] = "load"
    url: str = Field(..., description="読み込んだ URL")


class NavigateAction(BaseAction):
    """ページ遷移のマーカー。

    コードとしては出力せず、直前のアクションが遷移を起こしたことの判定にのみ使う。
    """

    type: Literal["navigate"] = "navigate"
    url: Optional[str] = Field(default=None, description="遷移先 URL")


class ResizeAction(BaseAction):
    """ウィンドウのリサイズ。"""

    type: Literal["resize"] = "resize"
    width: int = Field(..., description="ウィンドウ幅")
    height: int = Field(..., description="ウィンドウ高さ")


class WheelAction(BaseAction):
    """マウスホイールによるスクロール。"""

    type: Literal["wheel"] = "wheel"
    deltaX: float = Field(..., description="横方向のスクロール量")
    deltaY: float = Field(..., description="縦方向のスクロール量")
    pageXOffset: Optional[float] = Field(default=None, description="スクロール後の横位置")
    pageYOffset: Optional[float] = Field(default=None, description="スクロール後の縦位置")


class FullScreenshotAction(BaseAction):
    """ページ全体のスクリーンショット取得。"""

    type: Literal["fullScreenshot"] = "fullScreenshot"


class AwaitTextAction(BaseAction):
    """指定テキストの出現待機。"""

    type: Literal["awaitText"] = "awaitText"
    text: str = Field(..., description="出現を待つテキスト")


class DragAndDropAction(BaseAction):
    """座標指定のドラッグ＆ドロップ。"""

    type: Literal["dragAndDrop"] = "dragAndDrop"
    sourceX: float = Field(..., description="ドラッグ開始 X 座標")
    sourceY: float = Field(..., description="ドラッグ開始 Y 座標")
    targetX: float = Field(..., description="ドロップ先 X 座標")
    targetY: float = Field(..., description="ドロップ先 Y 座標")


class VoiceAction(BaseAction):
    """音声メモ。コメントとしてのみ出力される。"""

    type: Literal["voice"] = "voice"


# ---------------------------------------------------------------------------
# Action Union 型
# ---------------------------------------------------------------------------

Action = Annotated[
    Union[
        ClickAction,
        DblClickAction,
        HoverAction,
        InputAction,
        KeydownAction,
        LoadAction,
        NavigateAction,
        ResizeAction,
        WheelAction,
        FullScreenshotAction,
        AwaitTextAction,
        DragAndDropAction,
        VoiceAction,
    ],
    Field(discriminator="type"),
]
"""全アクション種別の Union 型。

type フィールドの値で対応するモデルが選択される。
"""
