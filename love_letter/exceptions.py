"""游戏异常模块
定义情书引擎中的各类异常，提供明确的错误类型和信息

``GameError`` 及其子类表示调用方提交了不合法的动作，
引擎在抛出前不会修改任何状态。``InternalStateError`` 表示引擎
自身的不变量被破坏，不属于规则错误。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .i18n import card_name
from .i18n import t as _t

if TYPE_CHECKING:
    from .card import Card


class GameError(Exception):
    """游戏异常基类

    所有规则相关的异常都应该继承此类，
    提供统一的异常处理接口。
    """

    def __init__(self, message: str | None = None, details: dict | None = None):
        """初始化游戏异常

        Args:
            message: 错误消息
            details: 额外的错误详情（可选）
        """
        if message is None:
            message = _t("exc.game_error")
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ==================== 游戏状态相关异常 ====================


class InvalidPlayerCountError(GameError):
    """玩家人数异常

    开始游戏时人数不在允许范围内时抛出
    """

    def __init__(self, players: int, min_players: int = 2, max_players: int = 4):
        message = _t(
            "exc.invalid_player_count", players=players, min=min_players, max=max_players
        )
        super().__init__(message, {"players": players})
        self.players = players


class GameNotInProgressError(GameError):
    """游戏未进行异常

    游戏尚未开始或已经结束时尝试出牌抛出
    """

    def __init__(self, current_state: str | None = None):
        details = {}
        if current_state:
            details["current_state"] = current_state
        super().__init__(_t("exc.game_not_in_progress"), details)
        self.current_state = current_state


# ==================== 玩家相关异常 ====================


class PlayerError(GameError):
    """玩家异常基类"""

    def __init__(self, message: str, player_id: int | None = None):
        details = {}
        if player_id is not None:
            details["player_id"] = player_id
        super().__init__(message, details)
        self.player_id = player_id


class PlayerNotFoundError(PlayerError):
    """玩家未找到异常

    出牌者或目标的座位号不存在时抛出
    """

    def __init__(self, player_id: int):
        super().__init__(_t("exc.player_not_found", player=player_id), player_id)


class NotPlayerTurnError(PlayerError):
    """非玩家回合异常

    非当前回合玩家尝试出牌时抛出
    """

    def __init__(self, player_id: int, current_player_id: int | None = None):
        super().__init__(_t("exc.not_player_turn", player=player_id), player_id)
        self.current_player_id = current_player_id
        if current_player_id is not None:
            self.details["current_player_id"] = current_player_id


class CardNotHeldError(PlayerError):
    """手牌缺失异常

    玩家试图打出自己手中没有的牌时抛出
    """

    def __init__(self, player_id: int, card: Card):
        super().__init__(
            _t("exc.card_not_held", player=player_id, card=card_name(card)), player_id
        )
        self.card = card
        self.details["card"] = card.name


# ==================== 目标相关异常 ====================


class InvalidTargetError(GameError):
    """无效目标异常基类

    当选择的目标不合法时抛出
    """

    def __init__(
        self,
        message: str | None = None,
        target_id: int | None = None,
        reason: str | None = None,
    ):
        if message is None:
            message = _t("exc.invalid_target")
        details: dict = {}
        if target_id is not None:
            details["target_id"] = target_id
        if reason:
            details["reason"] = reason
        super().__init__(message, details)
        self.target_id = target_id
        self.reason = reason


class MustProvideTargetError(InvalidTargetError):
    """存在合法目标却没有指定目标"""

    def __init__(self, card: Card):
        super().__init__(
            _t("exc.must_provide_target", card=card_name(card)), reason="missing_target"
        )
        self.card = card


class CannotTargetSelfError(InvalidTargetError):
    """除王子外，不能以自己为目标"""

    def __init__(self, card: Card, player_id: int):
        super().__init__(
            _t("exc.cannot_target_self", card=card_name(card)),
            target_id=player_id,
            reason="self_target",
        )
        self.card = card


class ProtectedTargetError(InvalidTargetError):
    """目标受侍女保护"""

    def __init__(self, target_id: int):
        super().__init__(
            _t("exc.protected_target", target=target_id), target_id=target_id, reason="protected"
        )


class EliminatedTargetError(InvalidTargetError):
    """目标已出局"""

    def __init__(self, target_id: int):
        super().__init__(
            _t("exc.eliminated_target", target=target_id),
            target_id=target_id,
            reason="eliminated",
        )


# ==================== 出牌限制异常 ====================


class CountessLockError(GameError):
    """伯爵夫人限制

    手持伯爵夫人时不能打出王子或国王
    """

    def __init__(self, card: Card, player_id: int):
        super().__init__(
            _t("exc.countess_lock", card=card_name(card)),
            {"player_id": player_id, "card": card.name},
        )
        self.card = card
        self.player_id = player_id


# ==================== 配置相关异常 ====================


class ConfigurationError(GameError):
    """配置错误异常

    当引擎配置有问题时抛出（如没有可用的洗牌器）
    """

    def __init__(self, message: str | None = None, config_key: str | None = None):
        if message is None:
            message = _t("exc.config_error")
        details = {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
        self.config_key = config_key


# ==================== 内部错误 ====================


class InternalStateError(RuntimeError):
    """引擎内部不变量被破坏

    例如按规则应只有一张手牌的玩家手牌数不为 1。
    这表示引擎本身的缺陷，而不是调用方的错误，因此不继承 GameError。
    """
