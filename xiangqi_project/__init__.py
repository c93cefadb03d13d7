"""
中国象棋规则引擎 (Xiangqi Rules)

走法生成、将军检测、合法性验证和将死/困毙判定。
"""

__version__ = "0.1.0"
__author__ = "Xiangqi Rules Team"
__description__ = "中国象棋规则引擎 - 合法走法、将军与将死判定"

from xiangqi_project.src import xiangqi_rules_engine

__all__ = [
    "xiangqi_rules_engine",
    "__version__",
    "__author__",
    "__description__",
]
