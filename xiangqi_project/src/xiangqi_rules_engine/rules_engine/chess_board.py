"""
象棋棋盘数据结构

定义局面快照的表示与查询。棋盘按约定不可变：所有走子操作都返回新的棋盘，
不会修改调用方持有的棋盘。
"""

from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from .pieces import (
    BOARD_COLS, BOARD_ROWS, Color, Piece, PieceType, Position, is_on_board
)
from ..utils.exceptions import BoardStructureError, InvalidCoordinateError


class ChessBoard:
    """
    象棋棋盘类

    以 10x9 的带符号整数矩阵作为按坐标索引的棋子表，占用查询为 O(1)。
    红方棋子为正数，黑方棋子为负数，0 表示空位。
    """

    EMPTY = 0
    # 红方棋子 (正数)
    RED_GENERAL = 1    # 帅
    RED_ADVISOR = 2    # 仕
    RED_ELEPHANT = 3   # 相
    RED_HORSE = 4      # 马
    RED_CHARIOT = 5    # 车
    RED_CANNON = 6     # 炮
    RED_SOLDIER = 7    # 兵

    # 黑方棋子 (负数)
    BLACK_GENERAL = -1   # 将
    BLACK_ADVISOR = -2   # 士
    BLACK_ELEPHANT = -3  # 象
    BLACK_HORSE = -4     # 马
    BLACK_CHARIOT = -5   # 车
    BLACK_CANNON = -6    # 炮
    BLACK_SOLDIER = -7   # 卒

    VALID_CODES = frozenset(range(-7, 8))

    def __init__(self, matrix: Optional[np.ndarray] = None):
        """
        初始化棋盘

        Args:
            matrix: 10x9的棋盘矩阵，如果为None则创建初始局面
        """
        if matrix is None:
            self._board = self._initial_matrix()
        else:
            self._board = self._checked_matrix(matrix)
        self._board.flags.writeable = False

    @staticmethod
    def _initial_matrix() -> np.ndarray:
        """象棋初始局面"""
        board = np.zeros((BOARD_ROWS, BOARD_COLS), dtype=np.int8)

        # 黑方 (上方)
        board[0] = [-5, -4, -3, -2, -1, -2, -3, -4, -5]  # 车马象士将士象马车
        board[2] = [0, -6, 0, 0, 0, 0, 0, -6, 0]         # 炮
        board[3] = [-7, 0, -7, 0, -7, 0, -7, 0, -7]      # 卒

        # 红方 (下方)
        board[6] = [7, 0, 7, 0, 7, 0, 7, 0, 7]           # 兵
        board[7] = [0, 6, 0, 0, 0, 0, 0, 6, 0]           # 炮
        board[9] = [5, 4, 3, 2, 1, 2, 3, 4, 5]           # 车马相仕帅仕相马车
        return board

    @classmethod
    def _checked_matrix(cls, matrix) -> np.ndarray:
        raw = np.asarray(matrix)
        if raw.shape != (BOARD_ROWS, BOARD_COLS):
            raise BoardStructureError(f"棋盘尺寸错误: {raw.shape}", "应为(10, 9)")
        if not np.issubdtype(raw.dtype, np.integer):
            raise BoardStructureError(f"棋盘数据类型错误: {raw.dtype}", "应为整数")
        invalid = set(np.unique(raw).tolist()) - cls.VALID_CODES
        if invalid:
            raise BoardStructureError(f"未知的棋子编码: {sorted(invalid)}")
        return raw.astype(np.int8)

    # ==================== 构造方法 ====================

    @classmethod
    def empty(cls) -> 'ChessBoard':
        """创建空棋盘"""
        return cls(np.zeros((BOARD_ROWS, BOARD_COLS), dtype=np.int8))

    @classmethod
    def from_matrix(cls, matrix: np.ndarray) -> 'ChessBoard':
        """
        从矩阵创建棋盘对象

        Args:
            matrix: 10x9的棋盘矩阵

        Returns:
            ChessBoard: 棋盘对象
        """
        return cls(matrix)

    @classmethod
    def from_pieces(cls, pieces: Iterable[Piece]) -> 'ChessBoard':
        """
        从棋子列表创建棋盘

        Args:
            pieces: 棋子列表

        Returns:
            ChessBoard: 棋盘对象

        Raises:
            InvalidCoordinateError: 棋子位置越界
            BoardStructureError: 两个棋子占据同一位置
        """
        board = np.zeros((BOARD_ROWS, BOARD_COLS), dtype=np.int8)
        for piece in pieces:
            if not is_on_board(piece.position):
                raise InvalidCoordinateError(piece.position, f"棋子 {piece.name} 不在棋盘上")
            row, col = piece.position
            if board[row, col] != cls.EMPTY:
                raise BoardStructureError(
                    f"位置 {piece.position} 被多个棋子占据",
                    f"{Piece.from_code(board[row, col], piece.position).name} 与 {piece.name}"
                )
            board[row, col] = piece.code
        return cls(board)

    def to_matrix(self) -> np.ndarray:
        """
        转换为矩阵格式

        Returns:
            np.ndarray: 10x9的棋盘矩阵副本
        """
        return self._board.copy()

    # ==================== 查询方法 ====================

    def get_code_at(self, pos: Position) -> int:
        """
        获取指定位置的棋子编码

        Args:
            pos: 位置坐标 (行, 列)

        Returns:
            int: 棋子编码，越界时返回0
        """
        if not is_on_board(pos):
            return self.EMPTY
        return int(self._board[pos[0], pos[1]])

    def get_piece_at(self, pos: Position) -> Optional[Piece]:
        """
        获取指定位置的棋子

        Args:
            pos: 位置坐标 (行, 列)

        Returns:
            Optional[Piece]: 棋子，空位或越界时返回None
        """
        code = self.get_code_at(pos)
        if code == self.EMPTY:
            return None
        return Piece.from_code(code, (int(pos[0]), int(pos[1])))

    def is_empty(self, pos: Position) -> bool:
        """检查指定位置是否为空"""
        return self.get_code_at(pos) == self.EMPTY

    def is_own_piece(self, pos: Position, color: Color) -> bool:
        """检查指定位置是否为己方棋子"""
        return self.get_code_at(pos) * color.sign > 0

    def is_enemy_piece(self, pos: Position, color: Color) -> bool:
        """检查指定位置是否为敌方棋子"""
        return self.get_code_at(pos) * color.sign < 0

    def find_general(self, color: Color) -> Optional[Position]:
        """
        找到指定颜色的帅/将

        Args:
            color: 棋子颜色

        Returns:
            Optional[Tuple[int, int]]: 位置，找不到返回None
        """
        found = np.argwhere(self._board == PieceType.GENERAL.value * color.sign)
        if len(found) == 0:
            return None
        row, col = found[0]
        return (int(row), int(col))

    def get_pieces(self, color: Optional[Color] = None) -> List[Piece]:
        """
        获取所有棋子，按行列顺序排列

        Args:
            color: 指定颜色，None表示获取所有棋子

        Returns:
            List[Piece]: 棋子列表
        """
        if color is None:
            mask = self._board != self.EMPTY
        else:
            mask = self._board * color.sign > 0
        return [
            Piece.from_code(self._board[row, col], (int(row), int(col)))
            for row, col in np.argwhere(mask)
        ]

    def count_pieces(self, color: Optional[Color] = None) -> Dict[Tuple[PieceType, Color], int]:
        """
        统计棋子数量

        Args:
            color: 指定颜色，None表示统计所有棋子

        Returns:
            Dict: {(棋子类型, 颜色): 数量}
        """
        counts: Dict[Tuple[PieceType, Color], int] = {}
        for piece in self.get_pieces(color):
            key = (piece.piece_type, piece.color)
            counts[key] = counts.get(key, 0) + 1
        return counts

    def pieces_between(self, start: Position, end: Position) -> int:
        """
        统计同一直线上两点之间（不含端点）的棋子数量

        Args:
            start: 起点
            end: 终点

        Returns:
            int: 棋子数量；不在同一直线时返回-1
        """
        (r1, c1), (r2, c2) = start, end
        if r1 == r2:
            lo, hi = sorted((c1, c2))
            segment = self._board[r1, lo + 1:hi]
        elif c1 == c2:
            lo, hi = sorted((r1, r2))
            segment = self._board[lo + 1:hi, c1]
        else:
            return -1
        return int(np.count_nonzero(segment))

    # ==================== 局面派生 ====================

    def simulate_move(self, from_pos: Position, to_pos: Position) -> Tuple['ChessBoard', Optional[Piece]]:
        """
        在临时棋盘上执行走子

        Args:
            from_pos: 起始位置
            to_pos: 目标位置

        Returns:
            Tuple[ChessBoard, Optional[Piece]]: (新棋盘, 被吃掉的棋子)
        """
        for pos in (from_pos, to_pos):
            if not is_on_board(pos):
                raise InvalidCoordinateError(pos)

        captured = self.get_piece_at(to_pos)
        matrix = self._board.copy()
        matrix[to_pos[0], to_pos[1]] = matrix[from_pos[0], from_pos[1]]
        matrix[from_pos[0], from_pos[1]] = self.EMPTY
        return ChessBoard(matrix), captured

    def with_move(self, from_pos: Position, to_pos: Position) -> 'ChessBoard':
        """返回执行走子后的新棋盘"""
        return self.simulate_move(from_pos, to_pos)[0]

    def with_piece(self, pos: Position, piece: Optional[Piece]) -> 'ChessBoard':
        """
        返回在指定位置放置（或移除）棋子后的新棋盘

        Args:
            pos: 位置
            piece: 棋子，None表示清空该位置
        """
        if not is_on_board(pos):
            raise InvalidCoordinateError(pos)
        matrix = self._board.copy()
        matrix[pos[0], pos[1]] = piece.code if piece else self.EMPTY
        return ChessBoard(matrix)

    # ==================== 实用工具方法 ====================

    def to_visual_string(self) -> str:
        """
        转换为可视化字符串

        Returns:
            str: 可视化的棋盘字符串
        """
        lines = ["   0 1 2 3 4 5 6 7 8"]
        for row in range(BOARD_ROWS):
            cells = []
            for col in range(BOARD_COLS):
                piece = self.get_piece_at((row, col))
                cells.append(piece.name if piece else "・")
            lines.append(f"{row}  " + "".join(cells))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_visual_string()

    def __repr__(self) -> str:
        return f"ChessBoard(pieces={int(np.count_nonzero(self._board))})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ChessBoard):
            return False
        return np.array_equal(self._board, other._board)

    def __hash__(self) -> int:
        return hash(self._board.tobytes())
