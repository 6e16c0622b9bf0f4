"""Card model and the deck cards are dealt from."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Callable, Iterable, Iterator

from blackjack.errors import DeckConfigError

logger = logging.getLogger(__name__)


class Suit(Enum):
    """Card suits."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        return _SUIT_SYMBOLS[self]


_SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}

_SUIT_MARKERS = {
    "C": Suit.CLUBS,
    "♣": Suit.CLUBS,
    "D": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "H": Suit.HEARTS,
    "♥": Suit.HEARTS,
    "S": Suit.SPADES,
    "♠": Suit.SPADES,
}


class Rank(Enum):
    """Card ranks."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the point value (Ace = 11, face cards = 10)."""
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return 11
        return 10

    @property
    def is_ace(self) -> bool:
        return self == Rank.ACE


_RANK_MARKERS = {str(rank): rank for rank in Rank}
_RANK_MARKERS["T"] = Rank.TEN


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card. Only the rank matters for scoring."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the point value of this card."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a token like '10♠', 'AH' or 'kd'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s!r}")

        rank_str = s[:-1]
        suit_str = s[-1]

        if rank_str not in _RANK_MARKERS:
            raise ValueError(f"Invalid rank: {rank_str!r}")
        if suit_str not in _SUIT_MARKERS:
            raise ValueError(f"Invalid suit: {suit_str!r}")

        return cls(_RANK_MARKERS[rank_str], _SUIT_MARKERS[suit_str])


def standard_deck() -> list[Card]:
    """Return the 52 cards of a standard deck in suit order."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


class Deck:
    """
    The working deck, refilled from a read-only canonical deck.

    The canonical deck is whatever the deck configuration lists; it may hold
    duplicates (a multi-deck shoe) but must not be empty.
    """

    def __init__(
        self,
        canonical: Iterable[Card],
        rng: Random | None = None,
        on_shuffle: Callable[[int], None] | None = None,
    ) -> None:
        """
        Initialize a deck.

        Args:
            canonical: Template cards, copied and never mutated
            rng: Random number generator for shuffling
            on_shuffle: Called with the deck size after every shuffle
        """
        self._canonical: tuple[Card, ...] = tuple(canonical)
        if not self._canonical:
            raise DeckConfigError("Deck configuration contains no cards")

        self._rng = rng or Random()
        self.on_shuffle = on_shuffle
        self._cards: list[Card] = list(self._canonical)
        self.shuffle_count = 0

    def shuffle(self) -> None:
        """Replace the working deck with a fresh permutation of the canonical deck."""
        self._cards = list(self._canonical)
        # Random.shuffle is an in-place Fisher-Yates shuffle.
        self._rng.shuffle(self._cards)
        self.shuffle_count += 1
        logger.debug("Shuffled %d cards", len(self._cards))

        if self.on_shuffle is not None:
            self.on_shuffle(len(self._cards))

    def deal_one(self) -> Card:
        """Deal a card from the end of the deck, reshuffling first if it is empty."""
        if not self._cards:
            logger.info("Deck exhausted, reshuffling")
            self.shuffle()
        return self._cards.pop()

    @property
    def canonical(self) -> tuple[Card, ...]:
        """Return the canonical deck."""
        return self._canonical

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards left in the working deck."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
