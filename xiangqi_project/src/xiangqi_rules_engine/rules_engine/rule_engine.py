"""
象棋规则引擎

将走法生成、将军检测、合法性验证和终局判定组合为一个带配置和日志的入口。
"""

from typing import Any, Dict, List, Optional

from .chess_board import ChessBoard
from .check_detector import CheckStatus, get_check_status, is_in_check
from .move import Move
from .move_validator import ValidationResult, generate_legal_moves, legal_destinations, validate_move
from .movement import candidate_moves_for
from .pieces import Color, Piece, Position
from .terminal import (
    GameOutcome, GameStatus, StalemateOutcome,
    classify_position, evaluate_outcome, is_checkmate, is_stalemate
)
from ..config.rules_config import RulesConfig, DEFAULT_RULES_CONFIG
from ..utils.exceptions import ConfigurationError
from ..utils.logger import LoggerMixin


class RuleEngine(LoggerMixin):
    """
    象棋规则引擎

    负责生成合法走法、验证走法合法性、检测终局状态等。
    引擎本身不保存局面，每次调用都针对传入的棋盘重新计算。
    """

    def __init__(self, config: Optional[RulesConfig] = None):
        """
        初始化规则引擎

        Args:
            config: 规则配置，None表示使用默认配置
        """
        self.config = config or DEFAULT_RULES_CONFIG
        try:
            self.stalemate_outcome = StalemateOutcome(str(self.config.stalemate_outcome).lower())
        except ValueError as e:
            raise ConfigurationError(
                'stalemate_outcome', f"无效的困毙规则: {self.config.stalemate_outcome}"
            ) from e

    def generate_piece_moves(self, piece: Piece, board: ChessBoard) -> List[Move]:
        """
        生成指定棋子的所有候选走法（不检查送将）

        Args:
            piece: 棋子
            board: 当前棋盘状态

        Returns:
            List[Move]: 候选走法列表
        """
        return [
            Move(piece=piece, from_pos=piece.position, to_pos=destination,
                 captured_piece=board.get_piece_at(destination))
            for destination in candidate_moves_for(piece, board)
        ]

    def generate_legal_moves(self, color: Color, board: ChessBoard) -> List[Move]:
        """
        生成指定一方的所有合法走法

        Args:
            color: 走子方
            board: 当前棋盘状态

        Returns:
            List[Move]: 合法走法列表
        """
        return generate_legal_moves(color, board)

    def legal_destinations(self, piece: Piece, board: ChessBoard) -> List[Position]:
        """获取棋子的所有合法目标位置"""
        return legal_destinations(piece, board)

    def validate_move(self, piece: Piece, destination: Position, board: ChessBoard) -> ValidationResult:
        """
        验证走法是否合法

        Args:
            piece: 要移动的棋子
            destination: 目标位置
            board: 当前棋盘状态

        Returns:
            ValidationResult: 验证结果
        """
        result = validate_move(piece, destination, board)
        if not result.valid:
            self.log_debug(f"走法被拒绝: {piece} -> {destination}, 原因: {result.reason.value}")
        return result

    def is_legal_move(self, piece: Piece, destination: Position, board: ChessBoard) -> bool:
        """检查走法是否合法"""
        return self.validate_move(piece, destination, board).valid

    def is_in_check(self, color: Color, board: ChessBoard) -> bool:
        """检查指定一方是否被将军"""
        return is_in_check(color, board)

    def get_check_status(self, color: Color, board: ChessBoard) -> CheckStatus:
        """获取将军状态及所有将军的棋子"""
        return get_check_status(color, board)

    def is_checkmate(self, color: Color, board: ChessBoard) -> bool:
        """检查指定一方是否被将死"""
        return is_checkmate(color, board)

    def is_stalemate(self, color: Color, board: ChessBoard) -> bool:
        """检查指定一方是否被困毙"""
        return is_stalemate(color, board)

    def classify_position(self, color: Color, board: ChessBoard) -> GameStatus:
        """判定走子方的局面状态"""
        return classify_position(color, board)

    def evaluate_outcome(self, color: Color, board: ChessBoard) -> GameOutcome:
        """
        按配置的困毙规则判定对局结果

        Args:
            color: 走子方
            board: 当前棋盘状态

        Returns:
            GameOutcome: 对局结果
        """
        outcome = evaluate_outcome(color, board, self.stalemate_outcome)
        if outcome.status.is_terminal:
            self.log_info(f"{color.display_name}{'被将死' if outcome.status is GameStatus.CHECKMATE else '被困毙'}")
        return outcome

    def get_game_status(self, color: Color, board: ChessBoard) -> Dict[str, Any]:
        """
        获取走子方视角的游戏状态

        Args:
            color: 走子方
            board: 棋盘状态

        Returns:
            Dict: 游戏状态信息
        """
        check_status = self.get_check_status(color, board)
        legal_moves = self.generate_legal_moves(color, board)
        outcome = self.evaluate_outcome(color, board)

        status = {
            'current_player': color.value,
            'current_player_name': color.display_name,
            'in_check': check_status.in_check,
            'attackers': [str(piece) for piece in check_status.attackers],
            'status': outcome.status.value,
            'checkmate': outcome.status is GameStatus.CHECKMATE,
            'stalemate': outcome.status is GameStatus.STALEMATE,
            'game_over': outcome.status.is_terminal,
            'winner': outcome.winner.value if outcome.winner else None,
            'draw': outcome.is_draw,
            'legal_moves_count': len(legal_moves)
        }

        if outcome.status is GameStatus.CHECKMATE:
            status['end_reason'] = '将死'
        elif outcome.status is GameStatus.STALEMATE:
            status['end_reason'] = '困毙和棋' if outcome.is_draw else '困毙'

        return status
