"""
ジェネレーター設定 — 環境変数・CLI 引数からの設定読み込み

環境変数または CLI オプションでコード生成の既定値を制御する。
CLI オプション > 環境変数 > デフォルト値 の優先順位で適用される。

環境変数一覧:
  UIREC_SCRIPT_TYPE     : 既定のターゲット（デフォルト: playwright）
  UIREC_SHOW_COMMENTS   : アクション説明コメントの出力（true/false, デフォルト: true）
  UIREC_OUTPUT_ENCODING : 出力ファイルのエンコーディング（デフォルト: utf-8）
"""

from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass, replace
from typing import Optional

from .core.targets import ScriptType
from .errors import UnsupportedTargetError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# 環境変数キー定数
# ---------------------------------------------------------------------------

_ENV_SCRIPT_TYPE = "UIREC_SCRIPT_TYPE"
_ENV_SHOW_COMMENTS = "UIREC_SHOW_COMMENTS"
_ENV_OUTPUT_ENCODING = "UIREC_OUTPUT_ENCODING"


# ---------------------------------------------------------------------------
# 設定データクラス
# ---------------------------------------------------------------------------

@dataclass
class GeneratorConfig:
    """コード生成の実行時設定。

    Attributes:
        script_type: 生成対象のスクリプト種別
        show_comments: アクション説明コメントを出力するか
        output_encoding: generate -o で書き出すファイルのエンコーディング
    """

    script_type: ScriptType = ScriptType.PLAYWRIGHT_JS
    show_comments: bool = True
    output_encoding: str = "utf-8"


# ---------------------------------------------------------------------------
# 環境変数からの読み込み
# ---------------------------------------------------------------------------

def _parse_bool(value: str) -> bool:
    """文字列を bool に変換する。

    Args:
        value: "true", "1", "yes" → True、それ以外 → False

    Returns:
        変換結果
    """
    return value.strip().lower() in ("true", "1", "yes")


def load_config_from_env() -> GeneratorConfig:
    """環境変数から GeneratorConfig を生成する。

    設定されていない、または不正な値の環境変数はデフォルト値を使用する。

    Returns:
        環境変数から読み込んだ設定
    """
    config = GeneratorConfig()

    if _ENV_SCRIPT_TYPE in os.environ:
        val = os.environ[_ENV_SCRIPT_TYPE]
        try:
            config.script_type = ScriptType(val)
        except ValueError:
            logger.warning("%s の値が不正です: %s", _ENV_SCRIPT_TYPE, val)

    if _ENV_SHOW_COMMENTS in os.environ:
        config.show_comments = _parse_bool(os.environ[_ENV_SHOW_COMMENTS])

    if _ENV_OUTPUT_ENCODING in os.environ:
        val = os.environ[_ENV_OUTPUT_ENCODING]
        try:
            codecs.lookup(val)
            config.output_encoding = val
        except LookupError:
            logger.warning("%s の値が不正です: %s", _ENV_OUTPUT_ENCODING, val)

    logger.debug("設定を読み込みました: %s", config)
    return config


def apply_overrides(
    config: GeneratorConfig,
    *,
    script_type: Optional[str] = None,
    show_comments: Optional[bool] = None,
) -> GeneratorConfig:
    """CLI オプションを GeneratorConfig に適用する。

    指定されたオプションのみ上書きする。元の設定は変更しない。

    Args:
        config: ベースとなる設定（環境変数から読み込み済み）
        script_type: --target の値
        show_comments: --comments/--no-comments の値

    Returns:
        CLI オプションが適用された設定

    Raises:
        UnsupportedTargetError: script_type が未知の識別子の場合
    """
    result = replace(config)

    if script_type is not None:
        try:
            result.script_type = ScriptType(script_type)
        except ValueError as e:
            raise UnsupportedTargetError(script_type) from e

    if show_comments is not None:
        result.show_comments = show_comments

    return result
