"""Tests for the event emitter."""

from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.state import GameState


class TestEventEmitter:

    def test_typed_subscriber(self):
        emitter = EventEmitter()
        seen = []
        emitter.subscribe(seen.append, EventType.PUSH)

        emitter.emit_new(EventType.PUSH, amount=10)
        emitter.emit_new(EventType.PLAYER_WINS, amount=10)

        assert [e.event_type for e in seen] == [EventType.PUSH]
        assert seen[0].data == {"amount": 10}

    def test_catch_all_subscriber(self):
        emitter = EventEmitter()
        seen = []
        emitter.subscribe(seen.append)

        emitter.emit_new(EventType.PUSH)
        emitter.emit_new(EventType.PLAYER_WINS)

        assert len(seen) == 2

    def test_typed_handlers_run_before_catch_all(self):
        emitter = EventEmitter()
        order = []
        emitter.subscribe(lambda e: order.append("all"))
        emitter.subscribe(lambda e: order.append("push"), EventType.PUSH)

        emitter.emit_new(EventType.PUSH)

        assert order == ["push", "all"]

    def test_history(self):
        emitter = EventEmitter()
        event = emitter.emit_new(EventType.ROUND_STARTED)

        assert isinstance(event, GameEvent)
        assert emitter.history == [event]

    def test_history_is_a_copy(self):
        emitter = EventEmitter()
        emitter.emit_new(EventType.ROUND_STARTED)

        emitter.history.clear()

        assert len(emitter.history) == 1


def test_state_str():
    assert str(GameState.PLAYER_TURN) == "Player Turn"
