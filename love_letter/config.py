"""游戏配置中心 (SSOT - 单一事实来源)

所有可配置的引擎参数应在此定义，支持从环境变量覆盖。
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _get_env_int(key: str, default: int | None) -> int | None:
    """从环境变量获取整数配置"""
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _get_env_bool(key: str, default: bool) -> bool:
    """从环境变量获取布尔配置"""
    value = os.environ.get(key, "").lower()
    if value in ("true", "1", "yes", "on"):
        return True
    elif value in ("false", "0", "no", "off"):
        return False
    return default


@dataclass(frozen=True)
class GameConfig:
    """引擎配置类 (不可变)

    以下配置项支持通过环境变量覆盖：
    - LOVE_LETTER_SEED: 默认洗牌种子（未注入洗牌器时使用）
    - LOVE_LETTER_LOCALE: 错误信息与事件描述的语言
    - LOVE_LETTER_LOG_LEVEL: 日志级别
    - LOVE_LETTER_DEBUG: 每个动作后执行牌数守恒校验，并把控制台日志调到 DEBUG
    - LOVE_LETTER_LOG_FILE: 日志文件路径

    玩家人数与两人局移出的牌数是规则的一部分，定义在 engine 模块中，不可配置。
    """
    # ==================== 随机性 ====================
    seed: int | None = field(
        default_factory=lambda: _get_env_int("LOVE_LETTER_SEED", None)
    )

    # ==================== 本地化 ====================
    locale: str = field(
        default_factory=lambda: os.environ.get("LOVE_LETTER_LOCALE", "zh_CN")
    )

    # ==================== 日志与调试 ====================
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOVE_LETTER_LOG_LEVEL", "INFO")
    )
    debug_mode: bool = field(
        default_factory=lambda: _get_env_bool("LOVE_LETTER_DEBUG", False)
    )
    log_file: str | None = field(
        default_factory=lambda: os.environ.get("LOVE_LETTER_LOG_FILE") or None
    )

    @classmethod
    def from_env(cls) -> GameConfig:
        """从环境变量创建配置实例"""
        return cls()


# 全局配置单例
_config: GameConfig | None = None


def get_config() -> GameConfig:
    """获取全局配置实例（懒加载）"""
    global _config
    if _config is None:
        _config = GameConfig.from_env()
    return _config


def reset_config() -> None:
    """重置配置（用于测试）"""
    global _config
    _config = None
