"""
ビルダーレジストリ — スクリプト種別とビルダークラスの対応付け

生成対象のスクリプト種別（ターゲット）ごとにビルダークラスを登録し、
書式設定を組み立てたうえでビルダーを生成する。

主な構成:
  - BuilderInfo: ターゲットのメタ情報（識別子、表示名、言語ファミリ）
  - BuilderRegistry: ビルダークラスの登録・検索・一覧・生成
  - create_default_registry: 標準 6 ターゲットを登録済みのレジストリを返す
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..core.targets import ScriptLanguage, ScriptType
from ..errors import UnsupportedTargetError
from .builder import ScriptBuilder
from .formatting import ScriptConfig

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# ターゲットメタ情報
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BuilderInfo:
    """ターゲットのメタ情報。

    CLI の list-targets コマンドで一覧表示に使用する。

    Attributes:
        name: ターゲット識別子（ScriptType の値）
        label: 表示名
        language: 言語ファミリ
    """

    name: str
    label: str
    language: ScriptLanguage


def _normalize(script_type: object) -> ScriptType:
    """文字列または ScriptType を ScriptType に変換する。

    Raises:
        UnsupportedTargetError: 未知の識別子の場合
    """
    try:
        return ScriptType(script_type)
    except ValueError as e:
        raise UnsupportedTargetError(script_type) from e


# ---------------------------------------------------------------------------
# BuilderRegistry 本体
# ---------------------------------------------------------------------------

class BuilderRegistry:
    """スクリプト種別ごとのビルダークラスを管理するレジストリ。

    使用例::

        registry = BuilderRegistry()
        registry.register(ScriptType.CYPRESS, CypressScriptBuilder, info=BuilderInfo(...))
        builder = registry.create(ScriptType.CYPRESS, show_comments=True)
    """

    def __init__(self) -> None:
        """空のレジストリを初期化する。"""
        self._builders: dict[ScriptType, type[ScriptBuilder]] = {}
        self._info: dict[ScriptType, BuilderInfo] = {}

    def register(
        self,
        script_type: ScriptType,
        builder_cls: type[ScriptBuilder],
        *,
        info: Optional[BuilderInfo] = None,
    ) -> None:
        """ビルダークラスを登録する。

        同じスクリプト種別が既に登録されている場合は上書きする（警告を出力）。

        Args:
            script_type: スクリプト種別
            builder_cls: ScriptBuilder のサブクラス
            info: ターゲットのメタ情報。None の場合はデフォルト値を使用

        Raises:
            TypeError: builder_cls が ScriptBuilder のサブクラスでない場合
            UnsupportedTargetError: script_type が未知の識別子の場合
        """
        if not (isinstance(builder_cls, type) and issubclass(builder_cls, ScriptBuilder)):
            raise TypeError(
                f"builder_cls は ScriptBuilder のサブクラスである必要があります: {builder_cls!r}"
            )

        key = _normalize(script_type)

        if key in self._builders:
            logger.warning(
                "ターゲット '%s' のビルダーを上書きします（既存: %s → 新規: %s）",
                key.value,
                self._builders[key].__name__,
                builder_cls.__name__,
            )

        self._builders[key] = builder_cls
        self._info[key] = info or BuilderInfo(
            name=key.value,
            label=key.value,
            language=builder_cls.language,
        )
        logger.debug("ターゲット '%s' を登録しました: %s", key.value, builder_cls.__name__)

    def get(self, script_type: ScriptType) -> type[ScriptBuilder]:
        """スクリプト種別でビルダークラスを取得する。

        Raises:
            UnsupportedTargetError: 未知または未登録のスクリプト種別の場合
        """
        key = _normalize(script_type)
        if key not in self._builders:
            raise UnsupportedTargetError(script_type)
        return self._builders[key]

    def has(self, script_type: object) -> bool:
        """指定のスクリプト種別が登録されているかを返す。"""
        try:
            return _normalize(script_type) in self._builders
        except UnsupportedTargetError:
            return False

    def info(self, script_type: ScriptType) -> BuilderInfo:
        """スクリプト種別のメタ情報を返す。"""
        self.get(script_type)
        return self._info[_normalize(script_type)]

    def list_all(self) -> list[BuilderInfo]:
        """登録済み全ターゲットのメタ情報を識別子順で返す。"""
        return sorted(self._info.values(), key=lambda i: i.name)

    def create(self, script_type: ScriptType, show_comments: bool) -> ScriptBuilder:
        """書式設定を組み立ててビルダーを生成する。

        Args:
            script_type: スクリプト種別
            show_comments: アクション説明コメントを出力するか

        Returns:
            空のバッファを持つ新しいビルダー

        Raises:
            UnsupportedTargetError: 未知または未登録のスクリプト種別の場合
        """
        builder_cls = self.get(script_type)
        key = _normalize(script_type)
        config = ScriptConfig.create(key, builder_cls.language, show_comments)
        return builder_cls(config)

    @property
    def names(self) -> list[str]:
        """登録済み全ターゲット識別子をソート済みリストで返す。"""
        return sorted(key.value for key in self._builders)


def create_default_registry() -> BuilderRegistry:
    """標準 6 ターゲットを登録したレジストリを生成する。"""
    from .builders import (
        CypressScriptBuilder,
        EventstreamScriptBuilder,
        PlaywrightJSScriptBuilder,
        PlaywrightJavaScriptBuilder,
        PlaywrightPythonScriptBuilder,
        PuppeteerScriptBuilder,
    )

    registry = BuilderRegistry()
    defaults: list[tuple[ScriptType, type[ScriptBuilder], str]] = [
        (ScriptType.PLAYWRIGHT_JS, PlaywrightJSScriptBuilder, "Playwright-JS Library"),
        (ScriptType.PLAYWRIGHT_PYTHON, PlaywrightPythonScriptBuilder, "Playwright-Python Library"),
        (ScriptType.PLAYWRIGHT_JAVA, PlaywrightJavaScriptBuilder, "Playwright-Java Library"),
        (ScriptType.PUPPETEER, PuppeteerScriptBuilder, "Puppeteer-JS Library"),
        (ScriptType.CYPRESS, CypressScriptBuilder, "Cypress-JS Library"),
        (ScriptType.EVENTSTREAM, EventstreamScriptBuilder, "Eventstream-JS Library"),
    ]
    for script_type, builder_cls, label in defaults:
        registry.register(
            script_type,
            builder_cls,
            info=BuilderInfo(name=script_type.value, label=label, language=builder_cls.language),
        )
    return registry
