"""
Xiangqi Rules 源代码模块

- xiangqi_rules_engine: 象棋规则引擎
"""

from . import xiangqi_rules_engine

__all__ = [
    "xiangqi_rules_engine",
]
