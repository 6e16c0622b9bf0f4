"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

from blackjack.cards import Card

BLACKJACK = 21


class Outcome(Enum):
    """Result of a settled round from the player's point of view."""

    WIN = "WIN"
    LOSE = "LOSE"
    PUSH = "PUSH"

    def __str__(self) -> str:
        return self.value


def _as_card(card: Card | str) -> Card:
    if isinstance(card, Card):
        return card
    return Card.from_string(card)


def card_value(card: Card | str) -> int:
    """Return the point value of a card or card token (Ace counts high)."""
    return _as_card(card).value


def hand_value(cards: Iterable[Card | str]) -> int:
    """
    Calculate the best value of a set of cards.

    Aces count 11 until the total passes 21, then drop to 1 one at a time.
    The result does not depend on card order.
    """
    total = 0
    aces = 0

    for card in map(_as_card, cards):
        total += card.value
        if card.is_ace:
            aces += 1

    while total > BLACKJACK and aces > 0:
        total -= 10
        aces -= 1

    return total


@dataclass
class Hand:
    """Cards held by the player or the dealer for one round."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def value(self) -> int:
        return hand_value(self.cards)

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > BLACKJACK

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return ", ".join(str(card) for card in self.cards)

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> Outcome:
    """Compare a finished player hand against the dealer's."""
    if player_hand.is_busted:
        return Outcome.LOSE

    if dealer_hand.is_busted:
        return Outcome.WIN

    player_value = player_hand.value
    dealer_value = dealer_hand.value

    if player_value > dealer_value:
        return Outcome.WIN
    if dealer_value > player_value:
        return Outcome.LOSE
    return Outcome.PUSH
