"""
异常定义

定义象棋规则引擎的各种异常类型。

规则查询本身（走法生成、将军检测、合法性验证）不抛出异常，
只有棋盘结构错误和会话命令才会抛出。
"""


class XiangqiError(Exception):
    """
    象棋规则引擎基础异常

    所有规则引擎相关异常的基类。
    """

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


class InvalidCoordinateError(XiangqiError, ValueError):
    """
    无效坐标异常

    当坐标超出 10x9 棋盘范围时抛出。
    """

    def __init__(self, position, reason: str = ""):
        message = f"无效的位置坐标: {position}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "INVALID_COORDINATE")
        self.position = position
        self.reason = reason


class BoardStructureError(XiangqiError):
    """
    棋盘结构异常

    当棋盘本身不成立时抛出，例如两个棋子占据同一位置。
    """

    def __init__(self, description: str, reason: str = ""):
        message = f"棋盘结构错误: {description}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "BOARD_STRUCTURE_ERROR")
        self.description = description
        self.reason = reason


class IllegalMoveError(XiangqiError):
    """
    非法走法异常

    当会话中尝试提交未通过验证的走法时抛出。
    """

    def __init__(self, move_str: str, result=None):
        message = f"非法走法: {move_str}"
        if result is not None and result.message:
            message += f" - {result.message}"
        super().__init__(message, "ILLEGAL_MOVE")
        self.move_str = move_str
        self.result = result

    @property
    def reason(self):
        """拒绝原因"""
        return self.result.reason if self.result is not None else None


class GameStateError(XiangqiError):
    """
    游戏状态异常

    当游戏状态不允许当前操作时抛出。
    """

    def __init__(self, state_description: str, reason: str = ""):
        message = f"游戏状态错误: {state_description}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "GAME_STATE_ERROR")
        self.state_description = state_description
        self.reason = reason


class ConfigurationError(XiangqiError):
    """
    配置错误异常

    当配置参数无效时抛出。
    """

    def __init__(self, config_name: str, reason: str = ""):
        message = f"配置错误 - {config_name}"
        if reason:
            message += f": {reason}"
        super().__init__(message, "CONFIG_ERROR")
        self.config_name = config_name
        self.reason = reason
