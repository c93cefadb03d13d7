"""
对局接口模块

提供回合管理和对局会话。
"""

from .game_session import GameSession, GameResult, TurnPhase, MoveRecord

__all__ = ['GameSession', 'GameResult', 'TurnPhase', 'MoveRecord']
