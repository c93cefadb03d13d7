#!/usr/bin/env python3
"""
Xiangqi Rules 主入口文件

提供命令行接口查询初始局面的走法与局面状态。
"""

from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from xiangqi_project import __version__, __description__
from xiangqi_project.src.xiangqi_rules_engine.config import ConfigManager, DEFAULT_RULES_CONFIG
from xiangqi_project.src.xiangqi_rules_engine.rules_engine import ChessBoard, Color, RuleEngine
from xiangqi_project.src.xiangqi_rules_engine.utils import XiangqiError, setup_logger

console = Console()


def print_banner():
    """打印项目横幅"""
    banner_text = Text()
    banner_text.append("♜ Xiangqi Rules ♜\n", style="bold red")
    banner_text.append(f"版本: {__version__}\n", style="green")
    banner_text.append(__description__, style="white")

    panel = Panel(
        banner_text,
        title="中国象棋规则引擎",
        title_align="center",
        border_style="red",
        padding=(1, 2)
    )
    console.print(panel)


@click.group()
@click.version_option(version=__version__, prog_name="Xiangqi Rules")
@click.option('--debug', is_flag=True, help='启用调试模式')
@click.option('--config', type=click.Path(exists=True), help='配置文件路径')
@click.pass_context
def cli(ctx: click.Context, debug: bool, config: Optional[str]):
    """中国象棋规则引擎 - 合法走法、将军与将死判定"""
    rules_config = DEFAULT_RULES_CONFIG
    log_level = 'DEBUG' if debug else 'WARNING'

    if config:
        try:
            configs = ConfigManager(initialize=False).load_from_file(config)
        except XiangqiError as e:
            raise click.ClickException(str(e))
        rules_config = configs['rules']
        system_config = configs['system']
        if not debug:
            log_level = system_config.log_level
        setup_logger(level=log_level, log_file=system_config.log_file,
                     log_dir=system_config.log_dir, max_size=system_config.log_max_size,
                     backup_count=system_config.log_backup_count)
        console.print(f"[green]使用配置文件: {config}[/green]")
    else:
        setup_logger(level=log_level)

    if debug:
        console.print("[yellow]调试模式已启用[/yellow]")

    try:
        ctx.obj = RuleEngine(rules_config)
    except XiangqiError as e:
        raise click.ClickException(str(e))


@cli.command()
def info():
    """显示系统信息"""
    print_banner()

    board = ChessBoard()
    console.print(Panel(board.to_visual_string(), title="初始局面", border_style="yellow"))


@cli.command()
@click.argument('row', type=int)
@click.argument('col', type=int)
@click.pass_obj
def moves(engine: RuleEngine, row: int, col: int):
    """列出初始局面中 (ROW, COL) 处棋子的合法走法"""
    board = ChessBoard()
    piece = board.get_piece_at((row, col))
    if piece is None:
        raise click.ClickException(f"位置 ({row}, {col}) 没有棋子")

    destinations = engine.legal_destinations(piece, board)

    table = Table(title=f"{piece.color.display_name}{piece.name} ({row}, {col}) 的合法走法")
    table.add_column("目标", style="cyan")
    table.add_column("吃子", style="red")
    for destination in destinations:
        captured = board.get_piece_at(destination)
        table.add_row(str(destination), captured.name if captured else "")

    console.print(table)
    console.print(f"[green]共 {len(destinations)} 步[/green]")


@cli.command()
@click.option('--color', type=click.Choice(['red', 'black']), default='red', help='走子方')
@click.pass_obj
def status(engine: RuleEngine, color: str):
    """显示初始局面的将军与终局状态"""
    game_status = engine.get_game_status(Color(color), ChessBoard())

    status_text = Text()
    status_text.append(f"走子方: {game_status['current_player_name']}\n", style="bold yellow")
    status_text.append(f"局面状态: {game_status['status']}\n", style="white")
    status_text.append(f"被将军: {'是' if game_status['in_check'] else '否'}\n", style="white")
    status_text.append(f"合法走法数: {game_status['legal_moves_count']}\n", style="white")
    status_text.append(f"对局结束: {'是' if game_status['game_over'] else '否'}", style="white")

    console.print(Panel(status_text, title="局面状态", border_style="yellow"))


if __name__ == '__main__':
    cli()
