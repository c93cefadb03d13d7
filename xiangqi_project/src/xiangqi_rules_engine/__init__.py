"""
中国象棋规则引擎

给定局面快照，计算合法走法，判定将军、将死与困毙。
包括局面表示、走法生成、将军检测、合法性验证、终局判定和对局会话。
"""

__version__ = "0.1.0"
__author__ = "Xiangqi Rules Team"

from .rules_engine import (
    Color, PieceType, Piece, ChessBoard, Move, RuleEngine, BoardValidator,
    MoveRejection, ValidationResult, GameStatus, StalemateOutcome, GameOutcome
)
from .game_interface import GameSession, GameResult, TurnPhase
from .config import ConfigManager, RulesConfig, GameConfig, SystemConfig
from .utils import setup_logger, get_logger, XiangqiError

__all__ = [
    "__version__", "__author__",
    "Color", "PieceType", "Piece", "ChessBoard", "Move", "RuleEngine", "BoardValidator",
    "MoveRejection", "ValidationResult", "GameStatus", "StalemateOutcome", "GameOutcome",
    "GameSession", "GameResult", "TurnPhase",
    "ConfigManager", "RulesConfig", "GameConfig", "SystemConfig",
    "setup_logger", "get_logger", "XiangqiError"
]
