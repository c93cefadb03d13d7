"""
终局状态判定

通过枚举一方的全部合法走法判断将死与困毙。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .chess_board import ChessBoard
from .check_detector import is_in_check
from .move_validator import legal_destinations
from .pieces import Color


class GameStatus(Enum):
    """走子方面临的局面状态"""
    ONGOING = "ongoing"        # 正常进行
    IN_CHECK = "in_check"      # 被将军但可以应将
    CHECKMATE = "checkmate"    # 将死
    STALEMATE = "stalemate"    # 困毙

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE)


class StalemateOutcome(Enum):
    """困毙的判定结果（规则选择）"""
    LOSS = "loss"  # 被困毙方负，中国象棋通行规则
    DRAW = "draw"  # 和棋


@dataclass(frozen=True)
class GameOutcome:
    """对局结果"""
    status: GameStatus
    winner: Optional[Color] = None
    is_draw: bool = False


def can_escape_check(color: Color, board: ChessBoard) -> bool:
    """
    检查一方是否至少有一步合法走法

    找到第一步合法走法即返回。

    Args:
        color: 走子方
        board: 棋盘

    Returns:
        bool: 是否存在合法走法
    """
    return any(legal_destinations(piece, board) for piece in board.get_pieces(color))


def is_checkmate(color: Color, board: ChessBoard) -> bool:
    """被将军且无合法走法"""
    return is_in_check(color, board) and not can_escape_check(color, board)


def is_stalemate(color: Color, board: ChessBoard) -> bool:
    """未被将军但无合法走法"""
    return not is_in_check(color, board) and not can_escape_check(color, board)


def classify_position(color: Color, board: ChessBoard) -> GameStatus:
    """
    判定走子方的局面状态

    Args:
        color: 走子方
        board: 棋盘

    Returns:
        GameStatus: 局面状态
    """
    in_check = is_in_check(color, board)
    if can_escape_check(color, board):
        return GameStatus.IN_CHECK if in_check else GameStatus.ONGOING
    return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE


def evaluate_outcome(color: Color, board: ChessBoard,
                     stalemate_outcome: StalemateOutcome = StalemateOutcome.LOSS) -> GameOutcome:
    """
    判定对局结果

    Args:
        color: 走子方
        board: 棋盘
        stalemate_outcome: 困毙按负还是按和处理

    Returns:
        GameOutcome: 对局结果
    """
    status = classify_position(color, board)
    if status is GameStatus.CHECKMATE:
        return GameOutcome(status=status, winner=color.opponent)
    if status is GameStatus.STALEMATE:
        if stalemate_outcome is StalemateOutcome.DRAW:
            return GameOutcome(status=status, is_draw=True)
        return GameOutcome(status=status, winner=color.opponent)
    return GameOutcome(status=status)


def determine_winner(color: Color, board: ChessBoard,
                     stalemate_outcome: StalemateOutcome = StalemateOutcome.LOSS) -> Optional[Color]:
    """获取胜方，对局未结束或和棋时返回None"""
    return evaluate_outcome(color, board, stalemate_outcome).winner
