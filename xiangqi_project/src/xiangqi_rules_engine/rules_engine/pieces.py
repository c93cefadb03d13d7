"""
棋子与棋盘几何定义

定义棋子颜色、七种棋子类型、棋子数据结构以及九宫、河界等几何常量。
"""

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Optional, Tuple, Union

Position = Tuple[int, int]

# 棋盘尺寸 (行 x 列)
BOARD_ROWS = 10
BOARD_COLS = 9

# 九宫范围
PALACE_COLS = (3, 4, 5)
RED_PALACE_ROWS = (7, 8, 9)
BLACK_PALACE_ROWS = (0, 1, 2)

# 河界：红方本方为 5-9 行，黑方本方为 0-4 行
RED_SIDE_MIN_ROW = 5
BLACK_SIDE_MAX_ROW = 4


class Color(Enum):
    """棋子颜色"""
    RED = "red"
    BLACK = "black"

    @property
    def opponent(self) -> 'Color':
        """对方颜色"""
        return Color.BLACK if self is Color.RED else Color.RED

    @property
    def sign(self) -> int:
        """棋盘矩阵中的符号 (红方为正, 黑方为负)"""
        return 1 if self is Color.RED else -1

    @property
    def display_name(self) -> str:
        return "红方" if self is Color.RED else "黑方"

    @classmethod
    def from_sign(cls, value: int) -> 'Color':
        return cls.RED if value > 0 else cls.BLACK

    @classmethod
    def parse(cls, value) -> Optional['Color']:
        """解析颜色，接受 Color 或 'red'/'black'，无法识别时返回None"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None


class PieceType(Enum):
    """棋子类型，值为棋盘矩阵中使用的绝对编码"""
    GENERAL = 1    # 帅/将
    ADVISOR = 2    # 仕/士
    ELEPHANT = 3   # 相/象
    HORSE = 4      # 马
    CHARIOT = 5    # 车
    CANNON = 6     # 炮
    SOLDIER = 7    # 兵/卒

    @classmethod
    def parse(cls, value) -> Optional['PieceType']:
        """
        宽松地解析棋子类型

        Args:
            value: PieceType、整数编码或名称 (如 'horse')

        Returns:
            Optional[PieceType]: 无法识别时返回None
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            try:
                return cls(abs(value))
            except ValueError:
                return None
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None


# 棋子中文名称
PIECE_NAMES = {
    (PieceType.GENERAL, Color.RED): "帅", (PieceType.GENERAL, Color.BLACK): "将",
    (PieceType.ADVISOR, Color.RED): "仕", (PieceType.ADVISOR, Color.BLACK): "士",
    (PieceType.ELEPHANT, Color.RED): "相", (PieceType.ELEPHANT, Color.BLACK): "象",
    (PieceType.HORSE, Color.RED): "马", (PieceType.HORSE, Color.BLACK): "马",
    (PieceType.CHARIOT, Color.RED): "车", (PieceType.CHARIOT, Color.BLACK): "车",
    (PieceType.CANNON, Color.RED): "炮", (PieceType.CANNON, Color.BLACK): "炮",
    (PieceType.SOLDIER, Color.RED): "兵", (PieceType.SOLDIER, Color.BLACK): "卒",
}


@dataclass(frozen=True)
class Piece:
    """
    棋子

    某一局面快照中的棋子。不可变，走子会产生新的局面而不是修改棋子。
    """
    piece_type: PieceType
    color: Color
    position: Position

    @property
    def code(self) -> int:
        """棋盘矩阵中的带符号编码"""
        return self.piece_type.value * self.color.sign

    @property
    def name(self) -> str:
        return PIECE_NAMES[(self.piece_type, self.color)]

    def moved_to(self, position: Position) -> 'Piece':
        """返回移动到新位置后的棋子"""
        return Piece(self.piece_type, self.color, position)

    @classmethod
    def from_code(cls, code: int, position: Position) -> 'Piece':
        """
        从带符号编码创建棋子

        Args:
            code: 棋盘矩阵中的编码 (非零)
            position: 棋子位置

        Returns:
            Piece: 棋子
        """
        return cls(PieceType(abs(int(code))), Color.from_sign(code), position)

    def __str__(self) -> str:
        return f"{self.name}{self.position}"


def is_on_board(position: Union[Position, object]) -> bool:
    """检查坐标是否在棋盘范围内，格式不正确的坐标同样视为越界"""
    try:
        row, col = position
    except (TypeError, ValueError):
        return False
    for value in (row, col):
        if isinstance(value, bool) or not isinstance(value, Integral):
            return False
    return 0 <= row < BOARD_ROWS and 0 <= col < BOARD_COLS


def palace_rows(color: Color) -> Tuple[int, ...]:
    return RED_PALACE_ROWS if color is Color.RED else BLACK_PALACE_ROWS


def in_palace(position: Position, color: Color) -> bool:
    """检查位置是否在指定颜色的九宫内"""
    row, col = position
    return row in palace_rows(color) and col in PALACE_COLS


def on_own_side(position: Position, color: Color) -> bool:
    """检查位置是否在本方河界一侧"""
    row = position[0]
    if color is Color.RED:
        return RED_SIDE_MIN_ROW <= row < BOARD_ROWS
    return 0 <= row <= BLACK_SIDE_MAX_ROW


def has_crossed_river(position: Position, color: Color) -> bool:
    """检查兵/卒是否已过河"""
    return not on_own_side(position, color)


def forward_step(color: Color) -> int:
    """前进方向的行增量：红方向第0行前进，黑方向第9行前进"""
    return -1 if color is Color.RED else 1
