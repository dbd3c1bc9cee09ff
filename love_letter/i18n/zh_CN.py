"""简体中文翻译表。"""

STRINGS: dict[str, str] = {
    # ── 卡牌 ──
    "card.guard": "卫兵",
    "card.priest": "牧师",
    "card.baron": "男爵",
    "card.handmaid": "侍女",
    "card.prince": "王子",
    "card.king": "国王",
    "card.countess": "伯爵夫人",
    "card.princess": "公主",
    "player.label": "玩家{seat}",
    # ── 异常 ──
    "exc.game_error": "游戏错误",
    "exc.invalid_player_count": "玩家人数无效: {players}，需要 {min}-{max} 人",
    "exc.game_not_in_progress": "当前没有进行中的游戏",
    "exc.player_not_found": "玩家{player}不存在",
    "exc.not_player_turn": "现在不是玩家{player}的回合",
    "exc.card_not_held": "玩家{player}手中没有【{card}】",
    "exc.invalid_target": "无效的目标",
    "exc.must_provide_target": "使用【{card}】时必须指定目标",
    "exc.cannot_target_self": "使用【{card}】时不能以自己为目标",
    "exc.protected_target": "玩家{target}受到侍女保护，不能成为目标",
    "exc.eliminated_target": "玩家{target}已出局，不能成为目标",
    "exc.countess_lock": "手持【伯爵夫人】时不能使用【{card}】",
    "exc.config_error": "配置错误",
    # ── 事件 ──
    "event.new_game": "新游戏开始，共 {players} 名玩家",
    "event.register_player": "{player} 加入游戏",
    "event.burn_card": "一张牌被面朝下移出",
    "event.remove_card": "【{card}】被公开移出游戏",
    "event.deal_card": "{player} 摸到【{card}】",
    "event.deal_card.hidden": "{player} 摸了一张牌",
    "event.ready_to_play": "轮到 {player} 出牌",
    "event.play_card": "{player} 打出【{card}】",
    "event.guess": "猜测 {target} 手中是【{guess}】",
    "event.show_card": "{target} 向 {player} 展示了【{card}】",
    "event.show_card.hidden": "{target} 向 {player} 展示了手牌",
    "event.compare_hands": "{player}【{player_card}】与 {target}【{target_card}】比较手牌",
    "event.compare_hands.hidden": "{player} 与 {target} 比较手牌",
    "event.discard_card": "{target} 弃置了【{card}】",
    "event.swap_hands": "{player} 与 {target} 交换了手牌",
    "event.eliminate_player": "{player} 出局",
    "event.reveal_card": "{player} 亮出【{card}】",
    "event.game_over": "游戏结束，获胜者: {winners}",
    # ── 终端界面 ──
    "ui.title": "情书 Love Letter",
    "ui.turn_header": "{player} 的回合",
    "ui.pass_device": "请将设备交给 {player}，按回车继续...",
    "ui.your_hand": "你的手牌",
    "ui.log": "事件记录",
    "ui.seats": "玩家状态",
    "ui.seat": "座位",
    "ui.status": "状态",
    "ui.discards": "弃牌",
    "ui.status.active": "在局",
    "ui.status.protected": "受保护",
    "ui.status.eliminated": "出局",
    "ui.deck_remaining": "牌堆剩余 {count} 张",
    "ui.choose_card": "选择要打出的牌",
    "ui.choose_target": "选择目标",
    "ui.no_target": "没有可选目标，该牌不产生效果",
    "ui.choose_guess": "猜测一张牌",
    "ui.invalid_choice": "无效选择",
    "ui.rule_error": "规则错误: {error}",
    "ui.game_over": "游戏结束",
    # ── 主程序 ──
    "main.description": "情书 (Love Letter) 热座终端版",
    "main.goodbye": "感谢游玩！",
}
