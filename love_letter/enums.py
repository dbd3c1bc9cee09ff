"""游戏状态枚举，独立出来供 engine / win_checker 等模块共同导入"""

from enum import Enum


class GameState(Enum):
    """游戏状态枚举"""

    NOT_STARTED = "not_started"  # 未开始
    IN_PROGRESS = "in_progress"  # 进行中
    COMPLETE = "complete"  # 已结束
