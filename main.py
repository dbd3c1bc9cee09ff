# -*- coding: utf-8 -*-
"""
情书 (Love Letter) - 热座终端版
主程序入口

使用方法:
    python main.py --players 3 --seed 42 --lang en_US
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import random
import sys

from logging_config import setup_logging
from love_letter.actions import StartGame
from love_letter.config import GameConfig, get_config
from love_letter.engine import MAX_PLAYERS, MIN_PLAYERS, Game
from love_letter.events import GameEvent
from love_letter.exceptions import GameError
from love_letter.i18n import get_available_locales, set_locale
from love_letter.i18n import t as _t
from ui.rich_ui import RichTerminalUI

logger = logging.getLogger(__name__)


def build_parser(config: GameConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=_t("main.description"))
    parser.add_argument(
        '-p', '--players', type=int, default=2,
        help=f'玩家人数 ({MIN_PLAYERS}-{MAX_PLAYERS})',
    )
    parser.add_argument('-s', '--seed', type=int, default=config.seed, help='洗牌随机种子')
    parser.add_argument(
        '--lang', choices=get_available_locales(), default=config.locale, help='界面语言',
    )
    parser.add_argument('--log-level', default=config.log_level, help='日志级别')
    return parser


def run_game(game: Game, players: int, ui: RichTerminalUI) -> list[GameEvent]:
    """运行一局热座游戏，返回完整事件记录

    Raises:
        GameError: 开局参数不合法
    """
    log = game.perform_action(StartGame(players=players))

    while not game.is_over:
        seat = game.turn
        ui.pass_device(seat)
        ui.show_game_state(game, log, seat)
        action = ui.ask_play(game)
        try:
            log.extend(game.perform_action(action))
        except GameError as e:
            ui.show_error(e)

    ui.show_game_over(game, log)
    return log


def main(argv: list[str] | None = None) -> int:
    """程序入口"""
    config = get_config()
    args = build_parser(config).parse_args(argv)

    config = dataclasses.replace(config, seed=args.seed, locale=args.lang, log_level=args.log_level)
    setup_logging(config)
    set_locale(config.locale)

    ui = RichTerminalUI()
    ui.show_title()
    game = Game(shuffler=random.Random(config.seed), config=config)

    try:
        run_game(game, args.players, ui)
    except GameError as e:
        ui.show_error(e)
        return 2
    except (KeyboardInterrupt, EOFError):
        logger.info("Interrupted - exiting")
        ui.console.print(f"\n{_t('main.goodbye')}")
        return 0

    ui.console.print(_t("main.goodbye"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
