"""
象棋走法数据结构

走法是临时值，由走法生成和合法性验证产生，规则引擎不会持久化保存。
"""

from dataclasses import dataclass
from typing import Optional

from .pieces import Color, Piece, Position, is_on_board
from ..utils.exceptions import InvalidCoordinateError


@dataclass
class Move:
    """
    象棋走法类

    表示一个象棋走法，包含移动的棋子、起始位置、目标位置和被吃掉的棋子。
    """
    piece: Piece                           # 移动的棋子
    from_pos: Position                     # 起始位置 (行, 列)
    to_pos: Position                       # 目标位置 (行, 列)
    captured_piece: Optional[Piece] = None  # 被吃掉的棋子

    def __post_init__(self):
        """初始化后验证数据有效性"""
        for pos in (self.from_pos, self.to_pos):
            if not is_on_board(pos):
                raise InvalidCoordinateError(pos)
        self.from_pos = tuple(self.from_pos)
        self.to_pos = tuple(self.to_pos)

    @property
    def color(self) -> Color:
        return self.piece.color

    @property
    def is_capture(self) -> bool:
        return self.captured_piece is not None

    def inverse(self) -> 'Move':
        """
        反向走法

        Returns:
            Move: 从目标位置回到起始位置的走法（不含吃子）
        """
        return Move(
            piece=self.piece.moved_to(self.to_pos),
            from_pos=self.to_pos,
            to_pos=self.from_pos
        )

    def __str__(self) -> str:
        suffix = f"x{self.captured_piece.name}" if self.captured_piece else ""
        return f"{self.piece.name}{self.from_pos}->{self.to_pos}{suffix}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Move):
            return False
        return (self.piece.piece_type == other.piece.piece_type and
                self.piece.color == other.piece.color and
                self.from_pos == other.from_pos and
                self.to_pos == other.to_pos)

    def __hash__(self) -> int:
        return hash((self.piece.piece_type, self.piece.color, self.from_pos, self.to_pos))

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'piece_type': self.piece.piece_type.name.lower(),
            'color': self.piece.color.value,
            'from_pos': self.from_pos,
            'to_pos': self.to_pos,
            'captured_piece': self.captured_piece.piece_type.name.lower() if self.captured_piece else None
        }
