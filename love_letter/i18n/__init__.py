"""轻量级 i18n 框架，零外部依赖。

用法::

    from love_letter.i18n import t, set_locale

    set_locale("en_US")
    print(t("exc.not_player_turn", player=1))

    # 领域助手
    from love_letter.i18n import card_name
    print(card_name("princess"))   # → "公主" / "Princess"
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_DEFAULT_LOCALE = "zh_CN"

_locale: str = _DEFAULT_LOCALE
_tables: dict[str, dict[str, str]] = {}


def _load_table(locale: str) -> dict[str, str]:
    """按需加载翻译表。"""
    if locale == "zh_CN":
        from .zh_CN import STRINGS
    elif locale == "en_US":
        from .en_US import STRINGS
    else:
        raise ValueError(f"Unsupported locale: {locale}")
    return STRINGS


def _table(locale: str) -> dict[str, str]:
    if locale not in _tables:
        _tables[locale] = _load_table(locale)
    return _tables[locale]


def set_locale(locale: str) -> None:
    """设置当前语言。"""
    global _locale
    # 预加载以确保 locale 有效
    _table(locale)
    _locale = locale


def get_locale() -> str:
    """获取当前语言。"""
    return _locale


def get_available_locales() -> list[str]:
    """返回所有可用的 locale 列表。"""
    return ["zh_CN", "en_US"]


def t(key: str, **kwargs: object) -> str:
    """翻译函数。

    查找当前 locale 对应的字符串，用 ``kwargs`` 做 format 替换。
    若 key 缺失则回退到 zh_CN，仍缺失则返回 ``[key]``。

    Args:
        key: 翻译键，如 ``"exc.player_not_found"``。
        **kwargs: 格式化参数，如 ``player=2``。
    """
    template = _table(_locale).get(key)

    if template is None and _locale != _DEFAULT_LOCALE:
        template = _table(_DEFAULT_LOCALE).get(key)
        if template is not None:
            logger.debug("i18n fallback: '%s' not in %s, using zh_CN", key, _locale)

    if template is None:
        logger.warning("i18n missing key: '%s' (lang=%s)", key, _locale)
        return f"[{key}]"

    if kwargs:
        try:
            return template.format_map(kwargs)
        except KeyError as e:
            logger.warning("i18n format error: key='%s', missing=%s", key, e)
            return template
    return template


_ = t


def card_name(card: object) -> str:
    """获取卡牌的国际化显示名。

    Args:
        card: ``Card`` 枚举成员，或其小写名称，如 ``"guard"``。
    """
    card_id = getattr(card, "name", card)
    key = f"card.{str(card_id).lower()}"
    result = t(key)
    return str(card_id) if result == f"[{key}]" else result
