"""
象棋规则引擎模块

包含局面表示、走法生成、将军检测、合法性验证和终局判定。
"""

from .pieces import Color, PieceType, Piece, Position, is_on_board
from .chess_board import ChessBoard
from .move import Move
from .movement import candidate_moves, candidate_moves_for, MOVEMENT_RULES
from .check_detector import CheckStatus, is_in_check, get_check_status, is_square_attacked, generals_facing
from .move_validator import (
    MoveRejection, ValidationResult, validate_move, is_legal_move,
    legal_destinations, generate_legal_moves
)
from .terminal import (
    GameStatus, StalemateOutcome, GameOutcome,
    can_escape_check, is_checkmate, is_stalemate,
    classify_position, evaluate_outcome, determine_winner
)
from .board_validator import BoardValidator
from .rule_engine import RuleEngine

__all__ = [
    'Color', 'PieceType', 'Piece', 'Position', 'is_on_board',
    'ChessBoard', 'Move',
    'candidate_moves', 'candidate_moves_for', 'MOVEMENT_RULES',
    'CheckStatus', 'is_in_check', 'get_check_status', 'is_square_attacked', 'generals_facing',
    'MoveRejection', 'ValidationResult', 'validate_move', 'is_legal_move',
    'legal_destinations', 'generate_legal_moves',
    'GameStatus', 'StalemateOutcome', 'GameOutcome',
    'can_escape_check', 'is_checkmate', 'is_stalemate',
    'classify_position', 'evaluate_outcome', 'determine_winner',
    'BoardValidator', 'RuleEngine'
]
