"""Round controller and state management."""

from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.state import GameState
from blackjack.game.engine import BlackjackGame, RoundResult

__all__ = [
    "EventEmitter",
    "EventType",
    "GameEvent",
    "GameState",
    "BlackjackGame",
    "RoundResult",
]
