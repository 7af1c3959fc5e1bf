"""
文字列リテラル生成 — ターゲット言語ごとのエスケープ

セレクタや入力値をスクリプトに埋め込む前に、各言語の文字列リテラル規則に従って
エスケープする。返り値は引用符を含むリテラル全体。
"""

from __future__ import annotations

import json
import math


_NAMED_CONTROLS = {"\n": "\\n", "\r": "\\r", "\t": "\\t"}


def _control_table(hex_format: str) -> dict[int, str]:
    """C0 制御文字 (U+0000..U+001F) の置換表を作る。"""
    table = {}
    for code in range(0x20):
        ch = chr(code)
        table[code] = _NAMED_CONTROLS.get(ch, hex_format.format(code))
    return table


_PYTHON_CONTROLS = _control_table("\\x{:02x}")
_UNICODE_CONTROLS = _control_table("\\u{:04x}")


def _escape_common(s: str, quote: str, controls: dict[int, str] = _UNICODE_CONTROLS) -> str:
    """バックスラッシュ・引用符・制御文字をエスケープする。

    改行・復帰・タブ以外の制御文字は controls の書式 (\\xNN / \\uNNNN) で出力する。
    """
    return s.replace("\\", "\\\\").replace(quote, "\\" + quote).translate(controls)


def js_string(s: str) -> str:
    """JavaScript のシングルクォート文字列リテラルを返す。

    JS では U+2028 / U+2029 も行終端として扱われるためエスケープする。
    """
    escaped = _escape_common(s, "'").replace("\u2028", "\\u2028").replace("\u2029", "\\u2029")
    return f"'{escaped}'"


def js_json_string(s: str) -> str:
    """JSON 形式のダブルクォート文字列リテラルを返す（JSON.stringify 相当）。"""
    return json.dumps(s, ensure_ascii=False)


def python_string(s: str) -> str:
    """Python のシングルクォート文字列リテラルを返す。"""
    return "'" + _escape_common(s, "'", _PYTHON_CONTROLS) + "'"


def java_string(s: str) -> str:
    """Java のダブルクォート文字列リテラルを返す。"""
    return '"' + _escape_common(s, '"') + '"'


def format_number(value: float) -> str:
    """数値をスクリプト用に整形する。

    整数値の float は小数点なしで出力する（100.0 → "100"）。
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def floor_int(value: float) -> int:
    """小数点以下を切り捨てた整数を返す（Math.floor 相当）。"""
    return math.floor(value)
