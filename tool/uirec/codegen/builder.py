"""
ScriptBuilder — ターゲット別スクリプトビルダーの共通インターフェース

全ターゲットのビルダーはこの抽象クラスを継承し、アクション種別ごとの操作と
最終組み立て（build_script）を実装する。各操作はバッファに行を追加して
自分自身を返す（メソッドチェーン可能）。

バッファは 1 インスタンス専有の行リストで、外部と共有しない。
ボイラープレートは templates/ 配下の Jinja2 テンプレートで定義する。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar, Optional

from jinja2 import Environment, FileSystemLoader

from ..core.targets import ScriptLanguage
from .formatting import ScriptConfig

logger = logging.getLogger(__name__)

# テンプレートディレクトリのパス
_TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

# イベントベースの遷移待機を持たないターゲットで使う固定待機時間
NAVIGATION_WAIT_MS = 2000


def render_template(template_name: str, **context: object) -> str:
    """ボイラープレートテンプレートをレンダリングする。

    Args:
        template_name: templates/ 配下のテンプレートファイル名
        **context: テンプレート変数

    Returns:
        レンダリング結果
    """
    env = Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=False,
        keep_trailing_newline=True,
    )
    template = env.get_template(template_name)
    return template.render(**context)


class ScriptBuilder(ABC):
    """スクリプトビルダーの抽象基底クラス。

    サブクラスは language（対応する言語ファミリ）と template_name を定義する。
    """

    language: ClassVar[ScriptLanguage]
    template_name: ClassVar[str]

    # コメント行の前に空行を入れるか
    blank_line_before_comment: ClassVar[bool] = True

    def __init__(self, config: ScriptConfig) -> None:
        """ビルダーを初期化する。

        Args:
            config: 書式設定

        Raises:
            ValueError: config の言語ファミリがビルダーと一致しない場合
        """
        if config.language != self.language or config.padding is None:
            raise ValueError(
                f"{type(self).__name__} は {self.language.value} 用のビルダーです: "
                f"config.language={config.language!r}"
            )
        self._codes: list[str] = []
        self._config = config
        logger.debug("ビルダーを生成しました: %s", type(self).__name__)

    @property
    def config(self) -> ScriptConfig:
        return self._config

    @property
    def codes(self) -> list[str]:
        """バッファの内容（コピー）を返す。"""
        return list(self._codes)

    def get_latest_code(self) -> Optional[str]:
        """最後に追加された行を返す。"""
        return self._codes[-1] if self._codes else None

    # -------------------------------------------------------------------
    # バッファ追加
    # -------------------------------------------------------------------

    def push_codes(self, codes: str) -> ScriptBuilder:
        """コード片を行に分割し、各行にインデントを付けてバッファに追加する。

        空行も含め全ての行にインデントを付ける。
        """
        for line in codes.split("\n"):
            self._codes.append(f"{self._config.padding}{line}")
        return self

    def push_comments(self, comments: str) -> ScriptBuilder:
        """show_comments が有効な場合のみコメント行を追加する。"""
        if not self._config.show_comments:
            return self
        if self.blank_line_before_comment:
            self._codes.append("")
        text = " ".join(comments.splitlines())
        self._codes.append(f"{self._config.padding}{self._config.comment_prefix} {text}")
        return self

    def statement(self, code: str) -> str:
        """文末記号を付けた 1 文を返す。"""
        return f"{code}{self._config.line_ending}"

    def body(self) -> str:
        """バッファを改行で連結した本文を返す。"""
        return "\n".join(self._codes)

    # -------------------------------------------------------------------
    # アクション種別ごとの操作
    # -------------------------------------------------------------------

    @abstractmethod
    def click(self, selector: str, causes_navigation: bool) -> ScriptBuilder: ...

    @abstractmethod
    def dbl_click(self, selector: str, causes_navigation: bool) -> ScriptBuilder: ...

    @abstractmethod
    def hover(self, selector: str, causes_navigation: bool) -> ScriptBuilder: ...

    @abstractmethod
    def load(self, url: str) -> ScriptBuilder: ...

    @abstractmethod
    def resize(self, width: int, height: int) -> ScriptBuilder: ...

    @abstractmethod
    def fill(self, selector: str, value: str, causes_navigation: bool) -> ScriptBuilder: ...

    @abstractmethod
    def type(self, selector: str, value: str, causes_navigation: bool) -> ScriptBuilder: ...

    @abstractmethod
    def select(self, selector: str, option: str, causes_navigation: bool) -> ScriptBuilder: ...

    @abstractmethod
    def keydown(self, selector: str, key: str, causes_navigation: bool) -> ScriptBuilder: ...

    @abstractmethod
    def wheel(
        self,
        delta_x: float,
        delta_y: float,
        page_x_offset: Optional[float] = None,
        page_y_offset: Optional[float] = None,
    ) -> ScriptBuilder: ...

    @abstractmethod
    def drag_and_drop(
        self,
        source_x: float,
        source_y: float,
        target_x: float,
        target_y: float,
    ) -> ScriptBuilder: ...

    @abstractmethod
    def full_screenshot(self) -> ScriptBuilder: ...

    @abstractmethod
    def await_text(self, text: str) -> ScriptBuilder: ...

    # -------------------------------------------------------------------
    # 組み立て
    # -------------------------------------------------------------------

    def build_script(self) -> str:
        """バッファをボイラープレートに埋め込んだスクリプト全体を返す。"""
        script = render_template(self.template_name, body=self.body())
        logger.info(
            "スクリプトを生成しました: %s (%d 行)", self._config.script_type.value, len(self._codes),
        )
        return script
