"""English translation table."""

STRINGS: dict[str, str] = {
    # ── Cards ──
    "card.guard": "Guard",
    "card.priest": "Priest",
    "card.baron": "Baron",
    "card.handmaid": "Handmaid",
    "card.prince": "Prince",
    "card.king": "King",
    "card.countess": "Countess",
    "card.princess": "Princess",
    "player.label": "Player {seat}",
    # ── Exceptions ──
    "exc.game_error": "Game error",
    "exc.invalid_player_count": (
        "Invalid number of players: {players}. There must be between {min} and {max} players."
    ),
    "exc.game_not_in_progress": "No game is in progress.",
    "exc.player_not_found": "Player {player} does not exist.",
    "exc.not_player_turn": "It is not Player {player}'s turn.",
    "exc.card_not_held": "Player {player} is not holding a {card}.",
    "exc.invalid_target": "Invalid target.",
    "exc.must_provide_target": "You must provide a target when playing the {card}.",
    "exc.cannot_target_self": "You cannot target yourself when playing the {card}.",
    "exc.protected_target": "Player {target} is protected and cannot be targeted.",
    "exc.eliminated_target": "Player {target} has been eliminated and cannot be targeted.",
    "exc.countess_lock": "You cannot play the {card} while holding the Countess.",
    "exc.config_error": "Configuration error",
    # ── Events ──
    "event.new_game": "A new game begins with {players} players",
    "event.register_player": "{player} joins the game",
    "event.burn_card": "A card is set aside face down",
    "event.remove_card": "{card} is removed from the game",
    "event.deal_card": "{player} draws a {card}",
    "event.deal_card.hidden": "{player} draws a card",
    "event.ready_to_play": "{player} to play",
    "event.play_card": "{player} plays the {card}",
    "event.guess": "{target} is guessed to hold a {guess}",
    "event.show_card": "{target} shows {player} a {card}",
    "event.show_card.hidden": "{target} shows {player} their hand",
    "event.compare_hands": "{player} ({player_card}) compares hands with {target} ({target_card})",
    "event.compare_hands.hidden": "{player} compares hands with {target}",
    "event.discard_card": "{target} discards a {card}",
    "event.swap_hands": "{player} swaps hands with {target}",
    "event.eliminate_player": "{player} is eliminated",
    "event.reveal_card": "{player} reveals a {card}",
    "event.game_over": "Game over. Winners: {winners}",
    # ── Terminal UI ──
    "ui.title": "Love Letter",
    "ui.turn_header": "{player}'s turn",
    "ui.pass_device": "Pass the device to {player} and press Enter...",
    "ui.your_hand": "Your hand",
    "ui.log": "Event log",
    "ui.seats": "Players",
    "ui.seat": "Seat",
    "ui.status": "Status",
    "ui.discards": "Discards",
    "ui.status.active": "active",
    "ui.status.protected": "protected",
    "ui.status.eliminated": "eliminated",
    "ui.deck_remaining": "{count} cards left in the deck",
    "ui.choose_card": "Choose a card to play",
    "ui.choose_target": "Choose a target",
    "ui.no_target": "No legal target; the card has no effect",
    "ui.choose_guess": "Guess a card",
    "ui.invalid_choice": "Invalid choice",
    "ui.rule_error": "Rule violation: {error}",
    "ui.game_over": "Game over",
    # ── Main ──
    "main.description": "Love Letter hot-seat terminal game",
    "main.goodbye": "Thanks for playing!",
}
