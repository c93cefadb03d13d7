"""
配置管理模块

包含规则配置、对局配置和系统配置。
"""

from .config_manager import ConfigManager
from .rules_config import (
    RulesConfig, GameConfig, SystemConfig,
    DEFAULT_RULES_CONFIG, DEFAULT_GAME_CONFIG, DEFAULT_SYSTEM_CONFIG
)

__all__ = [
    'ConfigManager', 'RulesConfig', 'GameConfig', 'SystemConfig',
    'DEFAULT_RULES_CONFIG', 'DEFAULT_GAME_CONFIG', 'DEFAULT_SYSTEM_CONFIG'
]
