# コアモジュール
# ターゲット定義とセレクタリゾルバを提供

from .selector import BestSelectorResolver, SelectorResolver
from .targets import ScriptLanguage, ScriptType

__all__ = [
    "BestSelectorResolver",
    "ScriptLanguage",
    "ScriptType",
    "SelectorResolver",
]
