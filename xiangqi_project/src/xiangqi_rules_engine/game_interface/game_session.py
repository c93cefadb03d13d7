"""
对局会话管理

实现每一回合的状态机：选子 -> 选择目标 -> 走子 -> 判定对方局面。
会话持有局面快照、走子方、走法历史和被吃掉的棋子，规则判定全部委托给规则引擎。
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from ..config.rules_config import GameConfig, RulesConfig, DEFAULT_GAME_CONFIG
from ..rules_engine.chess_board import ChessBoard
from ..rules_engine.move import Move
from ..rules_engine.move_validator import MoveRejection, ValidationResult
from ..rules_engine.pieces import Color, Piece, Position, is_on_board
from ..rules_engine.rule_engine import RuleEngine
from ..rules_engine.terminal import GameOutcome, GameStatus
from ..utils.exceptions import GameStateError, IllegalMoveError
from ..utils.logger import LoggerMixin


class TurnPhase(Enum):
    """回合阶段"""
    AWAITING_SELECTION = "awaiting_selection"      # 等待选子
    AWAITING_DESTINATION = "awaiting_destination"  # 已选子，等待选择目标
    CHECK_EVALUATION = "check_evaluation"          # 走子完成，判定对方局面
    FINISHED = "finished"                          # 对局结束


class GameResult(Enum):
    """对局结果"""
    ONGOING = "ongoing"      # 进行中
    RED_WIN = "red_win"      # 红方胜
    BLACK_WIN = "black_win"  # 黑方胜
    DRAW = "draw"            # 和棋


@dataclass
class MoveRecord:
    """走法记录，保存走子前的局面以便悔棋"""
    move: Move
    board_before: ChessBoard
    outcome_before: GameOutcome
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return {
            'move': self.move.to_dict(),
            'timestamp': self.timestamp.isoformat()
        }


class GameSession(LoggerMixin):
    """
    对局会话

    非法操作会抛出 IllegalMoveError，且不改变会话状态；
    对局结束后继续走子会抛出 GameStateError。
    """

    def __init__(self, board: Optional[ChessBoard] = None, to_move: Color = Color.RED,
                 config: Optional[GameConfig] = None,
                 rules_config: Optional[RulesConfig] = None):
        """
        初始化对局会话

        Args:
            board: 初始局面，None表示标准开局
            to_move: 先走的一方
            config: 对局配置
            rules_config: 规则配置
        """
        self.config = config or DEFAULT_GAME_CONFIG
        self.engine = RuleEngine(rules_config)

        self.board = board if board is not None else ChessBoard()
        self.to_move = to_move
        self.move_history: List[MoveRecord] = []

        self.selected: Optional[Piece] = None
        self.selected_destinations: List[Position] = []

        self.outcome = self.engine.evaluate_outcome(self.to_move, self.board)
        self.phase = TurnPhase.FINISHED if self.outcome.status.is_terminal else TurnPhase.AWAITING_SELECTION

    # ==================== 状态查询 ====================

    @property
    def status(self) -> GameStatus:
        """走子方的局面状态"""
        return self.outcome.status

    @property
    def winner(self) -> Optional[Color]:
        return self.outcome.winner

    @property
    def is_over(self) -> bool:
        return self.phase is TurnPhase.FINISHED

    @property
    def result(self) -> GameResult:
        if self.outcome.winner is Color.RED:
            return GameResult.RED_WIN
        if self.outcome.winner is Color.BLACK:
            return GameResult.BLACK_WIN
        if self.outcome.is_draw:
            return GameResult.DRAW
        return GameResult.ONGOING

    @property
    def captured_pieces(self) -> List[Piece]:
        """按时间顺序排列的被吃棋子"""
        return [record.move.captured_piece for record in self.move_history
                if record.move.captured_piece is not None]

    @property
    def total_moves(self) -> int:
        return len(self.move_history)

    def get_status(self) -> Dict[str, Any]:
        """
        获取会话状态

        Returns:
            Dict[str, Any]: 会话状态信息
        """
        return {
            'to_move': self.to_move.value,
            'phase': self.phase.value,
            'status': self.status.value,
            'in_check': self.status in (GameStatus.IN_CHECK, GameStatus.CHECKMATE),
            'result': self.result.value,
            'total_moves': self.total_moves,
            'captured': [str(piece) for piece in self.captured_pieces],
            'selected': str(self.selected) if self.selected else None
        }

    # ==================== 回合操作 ====================

    def _ensure_active(self):
        if self.is_over:
            raise GameStateError(f"对局已结束 ({self.result.value})", "不能继续走子")

    def _piece_of_side_to_move(self, pos: Position, action: str) -> Piece:
        """取出走子方在指定位置的棋子，否则抛出 IllegalMoveError"""
        if not is_on_board(pos):
            raise IllegalMoveError(f"{action} {pos}", ValidationResult.reject(MoveRejection.INVALID_COORDINATE))

        piece = self.board.get_piece_at(pos)
        if piece is None:
            raise IllegalMoveError(f"{action} {pos}", ValidationResult.reject(MoveRejection.PIECE_NOT_ON_BOARD))
        if piece.color is not self.to_move:
            raise IllegalMoveError(f"{action} {piece}", ValidationResult.reject(MoveRejection.NOT_BASIC_MOVE))
        return piece

    def select_piece(self, pos: Position) -> List[Position]:
        """
        选择走子方的棋子

        Args:
            pos: 棋子位置

        Returns:
            List[Tuple[int, int]]: 该棋子的合法目标位置
        """
        self._ensure_active()
        piece = self._piece_of_side_to_move(pos, "选子")

        self.selected = piece
        self.selected_destinations = self.engine.legal_destinations(piece, self.board)
        self.phase = TurnPhase.AWAITING_DESTINATION
        return list(self.selected_destinations)

    def clear_selection(self):
        """取消选子"""
        self._ensure_active()
        self.selected = None
        self.selected_destinations = []
        self.phase = TurnPhase.AWAITING_SELECTION

    def move_selected(self, destination: Position) -> Move:
        """
        将已选中的棋子走到目标位置

        Args:
            destination: 目标位置

        Returns:
            Move: 执行的走法
        """
        self._ensure_active()
        if self.phase is not TurnPhase.AWAITING_DESTINATION or self.selected is None:
            raise GameStateError(f"当前阶段: {self.phase.value}", "尚未选子")
        return self.make_move(self.selected.position, destination)

    def make_move(self, from_pos: Position, to_pos: Position) -> Move:
        """
        执行走法

        验证、执行、切换走子方并判定对方局面。

        Args:
            from_pos: 起始位置
            to_pos: 目标位置

        Returns:
            Move: 执行的走法

        Raises:
            IllegalMoveError: 走法不合法
            GameStateError: 对局已结束
        """
        self._ensure_active()
        piece = self._piece_of_side_to_move(from_pos, "走子")

        result = self.engine.validate_move(piece, to_pos, self.board)
        if not result.valid:
            self.log_debug(f"拒绝走法: {piece} -> {to_pos} ({result.reason.value})")
            raise IllegalMoveError(f"{piece} -> {to_pos}", result)

        new_board, captured = self.board.simulate_move(piece.position, to_pos)
        move = Move(piece=piece, from_pos=piece.position, to_pos=to_pos, captured_piece=captured)
        self.move_history.append(MoveRecord(move=move, board_before=self.board, outcome_before=self.outcome))

        self.board = new_board
        self.to_move = self.to_move.opponent
        self.selected = None
        self.selected_destinations = []
        self.phase = TurnPhase.CHECK_EVALUATION
        self._evaluate_turn()

        self.log_debug(f"走法执行成功: {move}")
        return move

    def _evaluate_turn(self):
        """判定新走子方的局面，决定对局是否结束"""
        self.outcome = self.engine.evaluate_outcome(self.to_move, self.board)

        if self.outcome.status.is_terminal:
            self.phase = TurnPhase.FINISHED
        elif self.config.max_moves and self.total_moves >= self.config.max_moves:
            self.outcome = GameOutcome(status=self.outcome.status, is_draw=True)
            self.phase = TurnPhase.FINISHED
            self.log_info(f"达到最大步数 {self.config.max_moves}，判和")
        else:
            self.phase = TurnPhase.AWAITING_SELECTION

        if self.outcome.status is GameStatus.IN_CHECK:
            self.log_debug(f"{self.to_move.display_name}被将军")

    def undo_move(self) -> Move:
        """
        撤销上一步走法

        恢复走子前的局面、走子方和被吃掉的棋子。

        Returns:
            Move: 被撤销的走法
        """
        if not self.config.allow_undo:
            raise GameStateError("悔棋", "当前配置不允许悔棋")
        if not self.move_history:
            raise GameStateError("悔棋", "没有可以撤销的走法")

        record = self.move_history.pop()
        self.board = record.board_before
        self.to_move = record.move.color
        self.outcome = record.outcome_before
        self.selected = None
        self.selected_destinations = []
        self.phase = TurnPhase.AWAITING_SELECTION

        self.log_debug(f"撤销走法成功: {record.move}")
        return record.move
