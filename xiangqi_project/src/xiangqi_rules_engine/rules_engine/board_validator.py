"""
棋局合法性验证器

对局面做诊断性检查并生成报告。检查结果只用于报告，
缺少帅/将等问题不会影响规则引擎的查询。
"""

from typing import Any, Dict, List, Tuple

from .chess_board import ChessBoard
from .check_detector import generals_facing
from .pieces import Color, PieceType, PIECE_NAMES, in_palace, on_own_side


class BoardValidator:
    """
    棋局合法性验证器

    提供各种棋局状态的验证功能。
    """

    # 每方棋子数量上限
    PIECE_LIMITS = {
        PieceType.GENERAL: 1,
        PieceType.ADVISOR: 2,
        PieceType.ELEPHANT: 2,
        PieceType.HORSE: 2,
        PieceType.CHARIOT: 2,
        PieceType.CANNON: 2,
        PieceType.SOLDIER: 5
    }

    def validate_piece_counts(self, board: ChessBoard) -> Tuple[bool, List[str]]:
        """
        验证棋子数量

        Args:
            board: 要验证的棋盘

        Returns:
            Tuple[bool, List[str]]: (是否合法, 错误信息列表)
        """
        errors = []
        counts = board.count_pieces()

        for color in Color:
            for piece_type, limit in self.PIECE_LIMITS.items():
                count = counts.get((piece_type, color), 0)
                if count > limit:
                    name = PIECE_NAMES[(piece_type, color)]
                    errors.append(f"{color.display_name}{name}数量超限: {count} > {limit}")

        return len(errors) == 0, errors

    def validate_generals_present(self, board: ChessBoard) -> Tuple[bool, List[str]]:
        """
        验证双方帅/将都在棋盘上

        Args:
            board: 要验证的棋盘

        Returns:
            Tuple[bool, List[str]]: (是否合法, 错误信息列表)
        """
        errors = []
        for color in Color:
            if board.find_general(color) is None:
                name = PIECE_NAMES[(PieceType.GENERAL, color)]
                errors.append(f"{color.display_name}缺少{name}")
        return len(errors) == 0, errors

    def validate_piece_positions(self, board: ChessBoard) -> Tuple[bool, List[str]]:
        """
        验证棋子位置的合法性

        帅/将、仕/士必须在九宫内，相/象不能过河。

        Args:
            board: 要验证的棋盘

        Returns:
            Tuple[bool, List[str]]: (是否合法, 错误信息列表)
        """
        errors = []

        for piece in board.get_pieces():
            if piece.piece_type in (PieceType.GENERAL, PieceType.ADVISOR):
                if not in_palace(piece.position, piece.color):
                    errors.append(f"{piece.color.display_name}{piece.name}位置错误: {piece.position}, 应在九宫内")
            elif piece.piece_type is PieceType.ELEPHANT:
                if not on_own_side(piece.position, piece.color):
                    errors.append(f"{piece.color.display_name}{piece.name}过河: {piece.position}")

        return len(errors) == 0, errors

    def validate_generals_facing(self, board: ChessBoard) -> Tuple[bool, List[str]]:
        """
        验证帅将是否照面

        Args:
            board: 要验证的棋盘

        Returns:
            Tuple[bool, List[str]]: (是否合法, 错误信息列表)
        """
        if generals_facing(board):
            return False, ["帅将照面，中间无棋子阻挡"]
        return True, []

    def _validations(self) -> Dict[str, Any]:
        return {
            'piece_counts': self.validate_piece_counts,
            'generals_present': self.validate_generals_present,
            'piece_positions': self.validate_piece_positions,
            'generals_facing': self.validate_generals_facing
        }

    def full_validation(self, board: ChessBoard) -> Tuple[bool, List[str]]:
        """
        完整的棋局验证

        Args:
            board: 要验证的棋盘

        Returns:
            Tuple[bool, List[str]]: (是否合法, 所有错误信息列表)
        """
        all_errors = []
        for validation_func in self._validations().values():
            _, errors = validation_func(board)
            all_errors.extend(errors)
        return len(all_errors) == 0, all_errors

    def get_validation_report(self, board: ChessBoard) -> Dict[str, Any]:
        """
        获取详细的验证报告

        Args:
            board: 要验证的棋盘

        Returns:
            Dict[str, Any]: 验证报告
        """
        report = {
            'overall_valid': True,
            'total_errors': 0,
            'validations': {}
        }

        for test_name, test_func in self._validations().items():
            is_valid, errors = test_func(board)
            report['validations'][test_name] = {
                'valid': is_valid,
                'errors': errors,
                'error_count': len(errors)
            }

            if not is_valid:
                report['overall_valid'] = False
                report['total_errors'] += len(errors)

        return report
