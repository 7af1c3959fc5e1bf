"""
CLI エントリポイント — Typer ベースのコマンドラインインターフェース

uirec コマンドとして以下のサブコマンドを提供する:
  - generate: 記録セッション → テストスクリプト生成
  - validate: 記録セッションのスキーマ検証
  - list-targets: 対応ターゲット一覧
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Typer アプリ定義
# ---------------------------------------------------------------------------

app = typer.Typer(
    help=(
        "uirec — 記録したブラウザ操作からテストスクリプトを生成するツール\n\n"
        "基本の流れ:\n"
        "  1. uirec validate session.json        記録内容を検証\n"
        "  2. uirec generate session.json -t cypress  スクリプトを生成\n\n"
        "詳しくは各コマンドに --help を付けてください。"
    ),
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="デバッグログを表示する"),
) -> None:
    """ログ出力レベルを設定する。"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s - %(message)s",
    )


# ---------------------------------------------------------------------------
# generate コマンド
# ---------------------------------------------------------------------------

@app.command()
def generate(
    session_file: Path = typer.Argument(..., help="記録セッションファイル（JSON / YAML）"),
    target: Optional[str] = typer.Option(
        None, "--target", "-t",
        help="生成対象（playwright, playwright-python, playwright-java, puppeteer, cypress, eventstream）",
    ),
    comments: Optional[bool] = typer.Option(
        None, "--comments/--no-comments", help="アクション説明コメントを出力する",
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="出力先ファイル（省略時は標準出力）",
    ),
) -> None:
    """記録セッションからテストスクリプトを生成する。"""
    from .actions.parser import ActionParser
    from .codegen.generator import gen_code
    from .config import apply_overrides, load_config_from_env

    try:
        config = apply_overrides(
            load_config_from_env(), script_type=target, show_comments=comments,
        )
        actions = ActionParser().load(session_file)
        script = gen_code(actions, config.show_comments, config.script_type)

        if output is None:
            typer.echo(script, nl=not script.endswith("\n"))
        else:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(script, encoding=config.output_encoding)
            typer.echo(f"スクリプトを生成しました: {output} ({config.script_type.value})")
    except Exception as exc:
        typer.echo(f"エラー: {exc}", err=True)
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# validate コマンド
# ---------------------------------------------------------------------------

@app.command()
def validate(
    session_file: Path = typer.Argument(..., help="検証する記録セッションファイル"),
) -> None:
    """記録セッションのスキーマ検証を行う。"""
    from .actions.parser import ActionParser

    parser = ActionParser()
    errors = parser.validate(session_file)

    if not errors:
        typer.echo(f"✓ {session_file}: スキーマ検証 OK")
    else:
        for err in errors:
            line_info = f" (行 {err.line})" if err.line else ""
            typer.echo(
                f"✗ {err.location}{line_info}: {err.message}",
                err=True,
            )
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# list-targets コマンド
# ---------------------------------------------------------------------------

@app.command("list-targets")
def list_targets() -> None:
    """対応ターゲットの一覧を表示する。"""
    from .codegen.registry import create_default_registry

    registry = create_default_registry()
    all_targets = registry.list_all()

    for info in all_targets:
        typer.echo(f"  {info.name:20s} {info.label:28s} [{info.language.value}]")

    typer.echo(f"\n合計: {len(all_targets)} ターゲット")
