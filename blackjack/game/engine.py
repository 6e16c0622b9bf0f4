"""Blackjack round controller with state machine."""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Protocol

from transitions import Machine, MachineError

from blackjack.account import Account
from blackjack.cards import Card, Deck
from blackjack.errors import InvalidBetError
from blackjack.hand import BLACKJACK, Hand, Outcome, evaluate_hands
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.state import GameState

logger = logging.getLogger(__name__)

# Dealer draws below this total and stands on anything at or above it.
DEALER_STANDS_ON = 17

# ASCII digits only, as typed at the bet prompt.
_BET_PATTERN = re.compile(r"-?[0-9]+")


def balance_change(outcome: Outcome, bet: int) -> int:
    """Even money: a win pays the bet, a loss costs it, a push returns it."""
    if outcome == Outcome.WIN:
        return bet
    if outcome == Outcome.LOSE:
        return -bet
    return 0


class BalanceStore(Protocol):
    """Anything that can persist an account, e.g. storage.AccountStore."""

    def save(self, account: Account) -> None: ...


@dataclass(frozen=True)
class RoundResult:
    """Summary of a settled round."""

    outcome: Outcome
    bet: int
    player_value: int
    dealer_value: int
    balance: int
    player_busted: bool = False

    @property
    def delta(self) -> int:
        """Change applied to the balance."""
        return balance_change(self.outcome, self.bet)


class BlackjackGame:
    """
    Single-player round controller using a state machine.

    The controller owns no I/O. Callers drive it with start_round, bet, hit
    and stand; everything it decides is reported through events.
    """

    STATES = [s.name.lower() for s in GameState]

    TRANSITIONS = [
        {"trigger": "place_bet", "source": "start", "dest": "bet_placed"},
        {"trigger": "deal_cards", "source": "bet_placed", "dest": "player_turn"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "player_busts", "source": "player_turn", "dest": "settled"},
        {"trigger": "dealer_plays", "source": "dealer_turn", "dest": "settled"},
        {"trigger": "new_round", "source": "settled", "dest": "start"},
    ]

    def __init__(
        self,
        deck: Deck,
        account: Account,
        store: BalanceStore | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize a round controller.

        Args:
            deck: Deck to deal from; a hook it already has keeps running
            account: Account settled after every round
            store: Where the balance is written after settlement, if anywhere
            events: Event emitter (a fresh one if not provided)
        """
        self.deck = deck
        self.account = account
        self.store = store
        self.events = events or EventEmitter()
        self._deck_hook = deck.on_shuffle
        self.deck.on_shuffle = self._announce_shuffle

        self.player_hand = Hand()
        self.dealer_hand = Hand()
        self.current_bet = 0
        self.result: RoundResult | None = None

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="start",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current round state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    @property
    def balance(self) -> int:
        return self.account.balance

    def start_round(self) -> None:
        """Clear the table and shuffle a fresh working deck."""
        if self.state == GameState.SETTLED:
            self.new_round()
        elif self.state != GameState.START:
            raise MachineError(f"Cannot start a round while in state {self.state.name}")

        self.player_hand.clear()
        self.dealer_hand.clear()
        self.current_bet = 0
        self.result = None

        self.deck.shuffle()
        self.events.emit_new(EventType.ROUND_STARTED, balance=self.balance)

    def validate_bet(self, amount: int | str) -> int:
        """
        Check a bet against the current balance.

        Args:
            amount: Bet as an integer or as the text the player typed

        Returns:
            The bet as an integer

        Raises:
            InvalidBetError: if the bet is not a whole number in 1..balance
        """
        if isinstance(amount, str):
            text = amount.strip()
            if not _BET_PATTERN.fullmatch(text):
                raise InvalidBetError(amount, "Bet must be a whole number")
            value = int(text)
        elif isinstance(amount, bool) or not isinstance(amount, int):
            raise InvalidBetError(amount, "Bet must be a whole number")
        else:
            value = amount

        if value <= 0:
            raise InvalidBetError(amount, "Bet must be positive")
        if value > self.balance:
            raise InvalidBetError(amount, f"Bet cannot exceed your balance of ${self.balance}")
        return value

    def bet(self, amount: int | str) -> RoundResult | None:
        """
        Place a bet and deal the opening cards.

        Returns:
            The round result if the round is already settled, else None

        Raises:
            InvalidBetError: if the bet is rejected; the round stays in START
        """
        if self.state != GameState.START:
            raise MachineError(f"Cannot bet while in state {self.state.name}")

        try:
            value = self.validate_bet(amount)
        except InvalidBetError as exc:
            self.events.emit_new(EventType.INVALID_BET, amount=amount, reason=exc.reason)
            raise

        self.current_bet = value
        self.place_bet()
        logger.info("Bet %d placed (balance %d)", value, self.balance)
        self.events.emit_new(EventType.BET_PLACED, amount=value, balance=self.balance)

        return self._deal_initial_cards()

    def _deal_initial_cards(self) -> RoundResult | None:
        """Deal two cards to the player, then two to the dealer."""
        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.dealer_hand)
        self._deal_card_to_hand(self.dealer_hand, face_up=False)

        self.events.emit_new(
            EventType.DEALER_SHOWS,
            card=str(self.dealer_hand.cards[0]),
            player_cards=str(self.player_hand),
            player_value=self.player_hand.value,
        )
        self.deal_cards()

        if self.player_hand.value >= BLACKJACK:
            return self._finish_player_turn()
        return None

    def _deal_card_to_hand(self, hand: Hand, face_up: bool = True) -> Card:
        """Deal a card to a hand."""
        card = self.deck.deal_one()
        hand.add_card(card)
        is_dealer = hand is self.dealer_hand
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            hand="dealer" if is_dealer else "player",
            hand_value=hand.value if face_up and not is_dealer else None,
        )
        return card

    def _announce_shuffle(self, cards: int) -> None:
        if self._deck_hook is not None:
            self._deck_hook(cards)
        self.events.emit_new(EventType.DECK_SHUFFLED, cards=cards)

    @property
    def can_hit(self) -> bool:
        """Check if the player may still draw."""
        return self.state == GameState.PLAYER_TURN and self.player_hand.value < BLACKJACK

    def hit(self) -> RoundResult | None:
        """Player takes another card. The turn ends once the value reaches 21."""
        if self.state != GameState.PLAYER_TURN:
            raise MachineError(f"Cannot hit while in state {self.state.name}")

        self._deal_card_to_hand(self.player_hand)
        self.events.emit_new(
            EventType.PLAYER_HIT,
            cards=str(self.player_hand),
            hand_value=self.player_hand.value,
        )

        if self.player_hand.value >= BLACKJACK:
            return self._finish_player_turn()
        return None

    def stand(self) -> RoundResult:
        """Player keeps the current hand."""
        if self.state != GameState.PLAYER_TURN:
            raise MachineError(f"Cannot stand while in state {self.state.name}")

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player_hand.value)
        return self._finish_player_turn()

    def _finish_player_turn(self) -> RoundResult:
        if self.player_hand.is_busted:
            self.events.emit_new(
                EventType.PLAYER_BUSTS,
                cards=str(self.player_hand),
                hand_value=self.player_hand.value,
            )
            self.player_busts()
            return self._settle()

        self.player_done()
        return self._play_dealer()

    def _play_dealer(self) -> RoundResult:
        """Dealer draws to 17 with no player interaction."""
        while self.dealer_hand.value < DEALER_STANDS_ON:
            card = self._deal_card_to_hand(self.dealer_hand)
            self.events.emit_new(
                EventType.DEALER_HITS,
                card=str(card),
                hand_value=self.dealer_hand.value,
            )

        event_type = EventType.DEALER_BUSTS if self.dealer_hand.is_busted else EventType.DEALER_STANDS
        self.events.emit_new(
            event_type,
            cards=str(self.dealer_hand),
            hand_value=self.dealer_hand.value,
        )

        self.dealer_plays()
        return self._settle()

    def _settle(self) -> RoundResult:
        """Apply the outcome to the balance, reshuffle and persist."""
        outcome = evaluate_hands(self.player_hand, self.dealer_hand)
        self.account.balance += balance_change(outcome, self.current_bet)
        result = RoundResult(
            outcome=outcome,
            bet=self.current_bet,
            player_value=self.player_hand.value,
            dealer_value=self.dealer_hand.value,
            balance=self.balance,
            player_busted=self.player_hand.is_busted,
        )

        outcome_event = {
            Outcome.WIN: EventType.PLAYER_WINS,
            Outcome.LOSE: EventType.PLAYER_LOSES,
            Outcome.PUSH: EventType.PUSH,
        }[outcome]
        self.events.emit_new(
            outcome_event,
            amount=result.bet,
            busted=result.player_busted,
        )
        logger.info(
            "Round settled: %s, player %d vs dealer %d, balance %d",
            outcome,
            result.player_value,
            result.dealer_value,
            self.balance,
        )

        self.deck.shuffle()
        if self.store is not None:
            self.store.save(self.account)
            self.events.emit_new(EventType.BALANCE_SAVED, balance=self.balance)

        self.result = result
        self.events.emit_new(EventType.ROUND_ENDED, outcome=str(outcome), balance=self.balance)
        return result
