"""
棋子走法生成

按棋子类型分派到各自独立的生成函数，计算候选目标位置。
候选走法只考虑棋子自身的移动几何（蹩马腿、塞象眼、炮架等），
不考虑走子后己方是否被将军。
"""

from typing import Callable, Dict, List

from .chess_board import ChessBoard
from .pieces import (
    Color, Piece, PieceType, Position,
    has_crossed_river, in_palace, is_on_board, on_own_side, forward_step
)

# 上下左右
ORTHOGONAL_DIRECTIONS = [(-1, 0), (1, 0), (0, -1), (0, 1)]
# 仕/士：斜向一格
DIAGONAL_DIRECTIONS = [(-1, -1), (-1, 1), (1, -1), (1, 1)]
# 相/象：田字
ELEPHANT_DIRECTIONS = [(-2, -2), (-2, 2), (2, -2), (2, 2)]
# 马：日字，马腿沿位移较大的方向
HORSE_JUMPS = [
    (-2, -1), (-2, 1),
    (-1, -2), (-1, 2),
    (1, -2), (1, 2),
    (2, -1), (2, 1)
]

MoveGenerator = Callable[[Color, Position, ChessBoard], List[Position]]


def _horse_leg(dr: int, dc: int) -> Position:
    """马腿相对位置"""
    if abs(dr) == 2:
        return (dr // 2, 0)
    return (0, dc // 2)


def generals_line_of_sight(a: Position, b: Position, board: ChessBoard) -> bool:
    """
    检查两点是否在同一直线上且中间无子

    Args:
        a: 位置一
        b: 位置二
        board: 棋盘

    Returns:
        bool: 是否直接相望
    """
    if a == b:
        return False
    return board.pieces_between(a, b) == 0


def _general_moves(color: Color, pos: Position, board: ChessBoard) -> List[Position]:
    """帅/将：九宫内上下左右一格；与对方将帅直接相望时对方将帅位置也算作攻击目标"""
    row, col = pos
    moves = []

    for dr, dc in ORTHOGONAL_DIRECTIONS:
        target = (row + dr, col + dc)
        if in_palace(target, color) and not board.is_own_piece(target, color):
            moves.append(target)

    enemy_general = board.find_general(color.opponent)
    if (enemy_general is not None and enemy_general not in moves
            and generals_line_of_sight(pos, enemy_general, board)):
        moves.append(enemy_general)

    return moves


def _advisor_moves(color: Color, pos: Position, board: ChessBoard) -> List[Position]:
    """仕/士：九宫内斜走一格"""
    row, col = pos
    moves = []

    for dr, dc in DIAGONAL_DIRECTIONS:
        target = (row + dr, col + dc)
        if in_palace(target, color) and not board.is_own_piece(target, color):
            moves.append(target)

    return moves


def _elephant_moves(color: Color, pos: Position, board: ChessBoard) -> List[Position]:
    """相/象：走田字，不能过河，象眼被塞时不能走"""
    row, col = pos
    moves = []

    for dr, dc in ELEPHANT_DIRECTIONS:
        target = (row + dr, col + dc)
        if not is_on_board(target) or not on_own_side(target, color):
            continue
        # 塞象眼
        if not board.is_empty((row + dr // 2, col + dc // 2)):
            continue
        if not board.is_own_piece(target, color):
            moves.append(target)

    return moves


def _horse_moves(color: Color, pos: Position, board: ChessBoard) -> List[Position]:
    """马：走日字，马腿被绊时不能走"""
    row, col = pos
    moves = []

    for dr, dc in HORSE_JUMPS:
        target = (row + dr, col + dc)
        if not is_on_board(target):
            continue
        leg_dr, leg_dc = _horse_leg(dr, dc)
        if not board.is_empty((row + leg_dr, col + leg_dc)):
            continue
        if not board.is_own_piece(target, color):
            moves.append(target)

    return moves


def _chariot_moves(color: Color, pos: Position, board: ChessBoard) -> List[Position]:
    """车：直线滑行，遇己方棋子前停止，遇敌方棋子可吃并停止"""
    row, col = pos
    moves = []

    for dr, dc in ORTHOGONAL_DIRECTIONS:
        target = (row + dr, col + dc)
        while is_on_board(target):
            if board.is_empty(target):
                moves.append(target)
            else:
                if board.is_enemy_piece(target, color):
                    moves.append(target)
                break
            target = (target[0] + dr, target[1] + dc)

    return moves


def _cannon_moves(color: Color, pos: Position, board: ChessBoard) -> List[Position]:
    """炮：不吃子时如车直行；吃子时必须隔一个炮架，炮架后的第一个棋子终止该方向"""
    row, col = pos
    moves = []

    for dr, dc in ORTHOGONAL_DIRECTIONS:
        found_mount = False
        target = (row + dr, col + dc)
        while is_on_board(target):
            if not found_mount:
                if board.is_empty(target):
                    moves.append(target)
                else:
                    found_mount = True
            elif not board.is_empty(target):
                if board.is_enemy_piece(target, color):
                    moves.append(target)
                break
            target = (target[0] + dr, target[1] + dc)

    return moves


def _soldier_moves(color: Color, pos: Position, board: ChessBoard) -> List[Position]:
    """兵/卒：只能前进一格，过河后可左右平移一格，不能后退"""
    row, col = pos
    moves = []

    forward = (row + forward_step(color), col)
    if is_on_board(forward) and not board.is_own_piece(forward, color):
        moves.append(forward)

    if has_crossed_river(pos, color):
        for dc in (-1, 1):
            side = (row, col + dc)
            if is_on_board(side) and not board.is_own_piece(side, color):
                moves.append(side)

    return moves


# 走法规则表：棋子类型 -> 生成函数
MOVEMENT_RULES: Dict[PieceType, MoveGenerator] = {
    PieceType.GENERAL: _general_moves,
    PieceType.ADVISOR: _advisor_moves,
    PieceType.ELEPHANT: _elephant_moves,
    PieceType.HORSE: _horse_moves,
    PieceType.CHARIOT: _chariot_moves,
    PieceType.CANNON: _cannon_moves,
    PieceType.SOLDIER: _soldier_moves,
}


def candidate_moves(piece_type, color, position: Position, board: ChessBoard) -> List[Position]:
    """
    生成棋子的候选目标位置

    不检查走子后是否送将。对未知棋子类型、未知颜色或棋盘外的位置返回空列表。

    Args:
        piece_type: 棋子类型 (PieceType、编码或名称)
        color: 棋子颜色 (Color 或 'red'/'black')
        position: 棋子位置
        board: 棋盘

    Returns:
        List[Tuple[int, int]]: 有序的候选目标位置
    """
    kind = PieceType.parse(piece_type)
    side = Color.parse(color)
    if kind is None or side is None or not is_on_board(position):
        return []
    return MOVEMENT_RULES[kind](side, (int(position[0]), int(position[1])), board)


def candidate_moves_for(piece: Piece, board: ChessBoard) -> List[Position]:
    """生成指定棋子的候选目标位置"""
    return candidate_moves(piece.piece_type, piece.color, piece.position, board)
