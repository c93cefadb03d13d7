"""
将军检测

判断某一方的帅/将是否受到攻击。每次调用都重新计算，不做缓存。
"""

from dataclasses import dataclass, field
from typing import List

from .chess_board import ChessBoard
from .movement import candidate_moves_for, generals_line_of_sight
from .pieces import Color, Piece, Position


@dataclass(frozen=True)
class CheckStatus:
    """将军状态"""
    color: Color
    in_check: bool
    attackers: List[Piece] = field(default_factory=list)


def is_square_attacked(square: Position, by_color: Color, board: ChessBoard) -> bool:
    """
    检查某个位置是否处于指定一方的攻击之下

    Args:
        square: 目标位置
        by_color: 攻击方颜色
        board: 棋盘

    Returns:
        bool: 是否被攻击
    """
    return any(square in candidate_moves_for(piece, board) for piece in board.get_pieces(by_color))


def is_in_check(color: Color, board: ChessBoard) -> bool:
    """
    检查指定一方是否被将军

    找不到帅/将时视为未被将军。

    Args:
        color: 被检查的一方
        board: 棋盘

    Returns:
        bool: 是否被将军
    """
    general = board.find_general(color)
    if general is None:
        return False
    return is_square_attacked(general, color.opponent, board)


def get_check_status(color: Color, board: ChessBoard) -> CheckStatus:
    """
    获取将军状态，列出所有正在将军的敌方棋子

    Args:
        color: 被检查的一方
        board: 棋盘

    Returns:
        CheckStatus: 将军状态
    """
    general = board.find_general(color)
    if general is None:
        return CheckStatus(color=color, in_check=False)

    attackers = [
        piece for piece in board.get_pieces(color.opponent)
        if general in candidate_moves_for(piece, board)
    ]
    return CheckStatus(color=color, in_check=bool(attackers), attackers=attackers)


def generals_facing(board: ChessBoard) -> bool:
    """
    检查帅将是否照面（同一直线且中间无子）

    Args:
        board: 棋盘

    Returns:
        bool: 是否照面，缺少任一方帅/将时为False
    """
    red = board.find_general(Color.RED)
    black = board.find_general(Color.BLACK)
    if red is None or black is None:
        return False
    return generals_line_of_sight(red, black, board)
