"""
codegen パッケージ — 記録アクション列からテストスクリプトを生成

主な機能:
  - gen_code: アクション列 → スクリプト文字列
  - ScriptBuilder: ターゲット別ビルダーの抽象基底クラス
  - BuilderRegistry: ターゲットとビルダーの対応付け
  - Sequencer: textarea 入力の合成とディスパッチ
"""

from __future__ import annotations

from .builder import NAVIGATION_WAIT_MS, ScriptBuilder
from .context import ActionContext, ActionState
from .formatting import ScriptConfig
from .generator import build_contexts, gen_code
from .registry import BuilderInfo, BuilderRegistry, create_default_registry
from .sequencer import Sequencer

__all__ = [
    "ActionContext",
    "ActionState",
    "BuilderInfo",
    "BuilderRegistry",
    "NAVIGATION_WAIT_MS",
    "ScriptBuilder",
    "ScriptConfig",
    "Sequencer",
    "build_contexts",
    "create_default_registry",
    "gen_code",
]
