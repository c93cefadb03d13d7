"""
规则与对局配置数据结构

定义各种配置类和默认参数。
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class RulesConfig:
    """规则配置"""
    stalemate_outcome: str = 'loss'      # 困毙判定: 'loss' 被困毙方负, 'draw' 和棋
    enforce_facing_generals: bool = True  # 禁止帅将照面（始终生效，仅作记录）


@dataclass
class GameConfig:
    """对局配置"""
    allow_undo: bool = True   # 是否允许悔棋
    max_moves: int = 300      # 最大步数，达到后判和，0表示不限制


@dataclass
class SystemConfig:
    """系统配置"""
    log_level: str = 'INFO'                       # 日志级别
    log_file: Optional[str] = None                # 日志文件名，None表示不写文件
    log_dir: str = 'logs/xiangqi_rules_engine'    # 日志目录
    log_max_size: int = 10                        # 日志文件最大大小(MB)
    log_backup_count: int = 5                     # 备份文件数量


# 默认配置实例
DEFAULT_RULES_CONFIG = RulesConfig()
DEFAULT_GAME_CONFIG = GameConfig()
DEFAULT_SYSTEM_CONFIG = SystemConfig()
