# -*- coding: utf-8 -*-
"""
Rich TUI Module
Uses the 'rich' library to render a hot-seat Love Letter game in the terminal.

The engine treats every event as a public fact; this module decides what each
seat is allowed to see (drawn cards, Priest reveals, Baron comparisons).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, Optional

from rich.box import DOUBLE, ROUNDED
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from love_letter.actions import PlayCard, details_for
from love_letter.card import Card
from love_letter.describe import describe_event
from love_letter.events import (
    CompareHands,
    DealCard,
    GameEvent,
    GameOver,
    ShowCard,
)
from love_letter.i18n import card_name
from love_letter.i18n import t as _t

if TYPE_CHECKING:
    from love_letter.engine import Game
    from love_letter.player import Player


CARD_COLORS = {
    Card.GUARD: "white",
    Card.PRIEST: "cyan",
    Card.BARON: "green",
    Card.HANDMAID: "blue",
    Card.PRINCE: "yellow",
    Card.KING: "magenta",
    Card.COUNTESS: "bright_magenta",
    Card.PRINCESS: "bold red",
}


def is_revealed_to(event: GameEvent, viewer: Optional[int]) -> bool:
    """Whether the private card in an event may be shown to ``viewer``.

    ``viewer=None`` means a spectator view after the game, where everything is shown.
    """
    if viewer is None:
        return True
    if isinstance(event, DealCard):
        return event.player_idx == viewer
    if isinstance(event, ShowCard):
        return viewer in (event.player_idx, event.target_idx)
    if isinstance(event, CompareHands):
        return viewer in (event.player_idx, event.target_idx)
    return True


class RichTerminalUI:
    """
    Rich TUI Class
    Renders the event log, the table and the current hand, and asks for plays.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        input_func: Callable[[str], str] = input,
    ):
        self.console = console or Console(highlight=False)
        self.input = input_func
        self.max_log_lines = 15

    # --- Rendering ---

    def show_title(self) -> None:
        self.console.print(Panel(Text(_t("ui.title"), style="bold red"), box=DOUBLE))

    def pass_device(self, seat: int) -> None:
        self.console.clear()
        self.input(_t("ui.pass_device", player=_t("player.label", seat=seat)))

    def _card_text(self, card: Card) -> Text:
        return Text(f"{card_name(card)}({card.rank})", style=CARD_COLORS.get(card, "white"))

    def _render_logs(self, events: Sequence[GameEvent], viewer: Optional[int]) -> Panel:
        log_text = Text()
        for event in list(events)[-self.max_log_lines:]:
            style = "bold yellow" if isinstance(event, GameOver) else ""
            log_text.append(describe_event(event, is_revealed_to(event, viewer)) + "\n", style=style)
        return Panel(log_text, title=_t("ui.log"), border_style="cyan")

    def _render_table(self, game: Game) -> Panel:
        table = Table(box=ROUNDED, show_edge=False, expand=True)
        table.add_column(_t("ui.seat"))
        table.add_column(_t("ui.status"))
        table.add_column(_t("ui.discards"))

        for p in game.players:
            name = p.name
            if p.seat == game.turn and p.active:
                name = f"▶ {name}"
            if not p.active:
                status = Text(_t("ui.status.eliminated"), style="red")
                name_txt = Text(name, style="strike")
            elif p.protected:
                status = Text(_t("ui.status.protected"), style="blue")
                name_txt = Text(name)
            else:
                status = Text(_t("ui.status.active"), style="green")
                name_txt = Text(name)

            discards = Text(" ")
            for card in p.discards:
                discards.append(self._card_text(card))
                discards.append(" ")
            table.add_row(name_txt, status, discards)

        return Panel(
            table,
            title=_t("ui.seats"),
            subtitle=_t("ui.deck_remaining", count=game.deck_remaining),
        )

    def _render_hand(self, player: Player) -> Panel:
        hand_text = Text()
        for i, card in enumerate(player.hand, 1):
            hand_text.append(f"[{i}] ")
            hand_text.append(self._card_text(card))
            hand_text.append("   ")
        return Panel(hand_text, title=_t("ui.your_hand"), border_style="green")

    def show_game_state(self, game: Game, events: Sequence[GameEvent], viewer: int) -> None:
        """Render the log, the table and the viewer's hand."""
        self.console.print(self._render_logs(events, viewer))
        self.console.print(self._render_table(game))
        self.console.print(self._render_hand(game.player(viewer)))

    def show_game_over(self, game: Game, events: Sequence[GameEvent]) -> None:
        self.console.print(self._render_logs(events, None))
        self.console.print(self._render_table(game))
        self.console.print(Panel(_t("ui.game_over"), style="bold yellow", box=DOUBLE))

    def show_error(self, error: Exception) -> None:
        self.console.print(f"[red]{_t('ui.rule_error', error=getattr(error, 'message', error))}[/red]")

    # --- Interaction Methods ---

    def _selection_menu(self, title: str, items: Sequence[Any], item_formatter) -> Any:
        """Generic selection menu helper (no cancel: a play must be made)"""
        self.console.print(f"\n[bold cyan]{title}[/bold cyan]:")
        for i, item in enumerate(items, 1):
            self.console.print(f"  [{i}] {item_formatter(item)}")

        while True:
            choice = self.input(f"[1-{len(items)}]: ").strip()
            if choice.isdigit() and 1 <= int(choice) <= len(items):
                return items[int(choice) - 1]
            self.console.print(f"[red]{_t('ui.invalid_choice')}[/red]")

    def choose_card(self, player: Player) -> Card:
        return self._selection_menu(_t("ui.choose_card"), list(player.hand), card_name)

    def choose_target(self, game: Game, seat: int, card: Card) -> Optional[int]:
        targets = game.legal_targets(seat, card)
        if not targets:
            self.console.print(f"[yellow]{_t('ui.no_target')}[/yellow]")
            return None
        return self._selection_menu(
            _t("ui.choose_target"), targets, lambda s: _t("player.label", seat=s)
        )

    def choose_guess(self) -> Card:
        return self._selection_menu(
            _t("ui.choose_guess"), list(Card), lambda c: f"{card_name(c)}({c.rank})"
        )

    def ask_play(self, game: Game) -> PlayCard:
        """Ask the current player for a card, a target and (for the Guard) a guess."""
        seat = game.turn
        card = self.choose_card(game.player(seat))
        target = self.choose_target(game, seat, card) if card.requires_target else None
        guess = self.choose_guess() if card is Card.GUARD else None
        return PlayCard(player_idx=seat, details=details_for(card, target=target, guess=guess))
