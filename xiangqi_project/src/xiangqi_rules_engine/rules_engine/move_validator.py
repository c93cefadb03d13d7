"""
走法合法性验证

在候选走法的基础上，通过在临时棋盘上模拟走子，
排除送将和帅将照面的走法。非法走法以结构化结果返回，不抛出异常。
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .chess_board import ChessBoard
from .check_detector import generals_facing, is_in_check
from .move import Move
from .movement import candidate_moves_for
from .pieces import Color, Piece, PieceType, Position, is_on_board


class MoveRejection(str, Enum):
    """走法被拒绝的原因"""
    INVALID_COORDINATE = "invalid_coordinate"
    PIECE_NOT_ON_BOARD = "piece_not_on_board"
    NOT_BASIC_MOVE = "not_basic_move"
    OWN_PIECE_AT_DESTINATION = "own_piece_at_destination"
    FACING_GENERALS = "facing_generals"
    SUICIDE_MOVE = "suicide_move"

    @property
    def message(self) -> str:
        return REJECTION_MESSAGES[self]


REJECTION_MESSAGES = {
    MoveRejection.INVALID_COORDINATE: "坐标超出棋盘范围",
    MoveRejection.PIECE_NOT_ON_BOARD: "棋盘上该位置没有这个棋子",
    MoveRejection.NOT_BASIC_MOVE: "不符合棋子的走法规则",
    MoveRejection.OWN_PIECE_AT_DESTINATION: "不能吃己方棋子",
    MoveRejection.FACING_GENERALS: "将帅不能照面！",
    MoveRejection.SUICIDE_MOVE: "禁止送将！",
}


@dataclass(frozen=True)
class ValidationResult:
    """走法验证结果"""
    valid: bool
    reason: Optional[MoveRejection] = None

    @property
    def message(self) -> str:
        return self.reason.message if self.reason else ""

    def __bool__(self) -> bool:
        return self.valid

    @classmethod
    def ok(cls) -> 'ValidationResult':
        return cls(valid=True)

    @classmethod
    def reject(cls, reason: MoveRejection) -> 'ValidationResult':
        return cls(valid=False, reason=reason)


def _is_on_board_as_given(piece: Piece, board: ChessBoard) -> bool:
    """检查棋盘上该位置确实是这个棋子"""
    occupant = board.get_piece_at(piece.position)
    return (occupant is not None and occupant.piece_type is piece.piece_type
            and occupant.color is piece.color)


def _hypothetical_rejection(piece: Piece, destination: Position,
                            board: ChessBoard) -> Optional[MoveRejection]:
    """
    在临时棋盘上执行走子并检查走子方的安全

    临时棋盘只在本次检查内存在，不会与调用方的棋盘共享数据。
    """
    after, _ = board.simulate_move(piece.position, destination)
    if generals_facing(after):
        return MoveRejection.FACING_GENERALS
    if is_in_check(piece.color, after):
        return MoveRejection.SUICIDE_MOVE
    return None


def validate_move(piece: Piece, destination: Position, board: ChessBoard) -> ValidationResult:
    """
    验证走法是否合法

    Args:
        piece: 要移动的棋子
        destination: 目标位置
        board: 当前棋盘

    Returns:
        ValidationResult: 验证结果，非法时附带原因
    """
    if not is_on_board(destination) or not is_on_board(piece.position):
        return ValidationResult.reject(MoveRejection.INVALID_COORDINATE)

    kind = PieceType.parse(piece.piece_type)
    color = Color.parse(piece.color)
    if kind is None or color is None:
        return ValidationResult.reject(MoveRejection.NOT_BASIC_MOVE)

    piece = Piece(kind, color, (int(piece.position[0]), int(piece.position[1])))
    if not _is_on_board_as_given(piece, board):
        return ValidationResult.reject(MoveRejection.PIECE_NOT_ON_BOARD)

    destination = (int(destination[0]), int(destination[1]))

    # (a) 必须是候选走法
    if destination not in candidate_moves_for(piece, board):
        return ValidationResult.reject(MoveRejection.NOT_BASIC_MOVE)

    # (b) 不能吃己方棋子
    if board.is_own_piece(destination, piece.color):
        return ValidationResult.reject(MoveRejection.OWN_PIECE_AT_DESTINATION)

    # (c)-(e) 模拟走子后检查照面与送将
    rejection = _hypothetical_rejection(piece, destination, board)
    if rejection is not None:
        return ValidationResult.reject(rejection)

    return ValidationResult.ok()


def is_legal_move(piece: Piece, destination: Position, board: ChessBoard) -> bool:
    """检查走法是否合法"""
    return validate_move(piece, destination, board).valid


def legal_destinations(piece: Piece, board: ChessBoard) -> List[Position]:
    """
    获取棋子的所有合法目标位置

    Args:
        piece: 棋子
        board: 棋盘

    Returns:
        List[Tuple[int, int]]: 合法目标位置，顺序与候选走法一致
    """
    if not is_on_board(piece.position) or not _is_on_board_as_given(piece, board):
        return []
    return [
        destination for destination in candidate_moves_for(piece, board)
        if _hypothetical_rejection(piece, destination, board) is None
    ]


def generate_legal_moves(color: Color, board: ChessBoard) -> List[Move]:
    """
    生成指定一方的所有合法走法

    Args:
        color: 走子方
        board: 棋盘

    Returns:
        List[Move]: 合法走法列表
    """
    moves = []
    for piece in board.get_pieces(color):
        for destination in legal_destinations(piece, board):
            moves.append(Move(
                piece=piece,
                from_pos=piece.position,
                to_pos=destination,
                captured_piece=board.get_piece_at(destination)
            ))
    return moves
