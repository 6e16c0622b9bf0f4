"""Turns game events into the lines the player sees."""

from typing import Callable

from blackjack.game.events import EventType, GameEvent
from terminal_ui.console import Console


class TableRenderer:
    """Writes a line to the console for every event the player should see.

    Subscribe it to a game with `game.subscribe(renderer.handle)`.
    """

    def __init__(self, console: Console) -> None:
        self.console = console
        self._handlers: dict[EventType, Callable[[GameEvent], str | None]] = {
            EventType.BET_PLACED: self._bet_placed,
            EventType.DEALER_SHOWS: self._dealer_shows,
            EventType.PLAYER_HIT: self._player_hand,
            EventType.PLAYER_BUSTS: lambda event: "BUST!",
            EventType.DEALER_HITS: lambda event: f"Dealer draws {event.data['card']}",
            EventType.DEALER_STANDS: self._dealer_hand,
            EventType.DEALER_BUSTS: self._dealer_hand,
            EventType.PLAYER_WINS: lambda event: "WIN",
            EventType.PLAYER_LOSES: self._player_loses,
            EventType.PUSH: lambda event: "PUSH!",
            EventType.ROUND_ENDED: lambda event: f"Balance: ${event.data['balance']}",
        }

    def handle(self, event: GameEvent) -> None:
        """Render one event; events without a handler print nothing."""
        handler = self._handlers.get(event.event_type)
        if handler is None:
            return
        line = handler(event)
        if line is not None:
            self.console.say(line)

    def _bet_placed(self, event: GameEvent) -> str:
        return f"Bet placed: ${event.data['amount']}"

    def _dealer_shows(self, event: GameEvent) -> str:
        data = event.data
        self.console.say(f"Your hand: {data['player_cards']} (Value: {data['player_value']})")
        return f"Dealer shows: {data['card']}"

    def _player_hand(self, event: GameEvent) -> str:
        return f"Your hand: {event.data['cards']} (Value: {event.data['hand_value']})"

    def _dealer_hand(self, event: GameEvent) -> str:
        return f"Dealer's hand: {event.data['cards']} (Value: {event.data['hand_value']})"

    def _player_loses(self, event: GameEvent) -> str | None:
        # A bust has already been announced.
        if event.data.get("busted"):
            return None
        return "LOSE!"
