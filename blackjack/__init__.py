"""Terminal blackjack - core engine is UI-agnostic."""

from blackjack.account import Account
from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.errors import BlackjackError, DeckConfigError, InvalidBetError
from blackjack.hand import Hand, Outcome, card_value, hand_value

__all__ = [
    "Account",
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "BlackjackError",
    "DeckConfigError",
    "InvalidBetError",
    "Hand",
    "Outcome",
    "card_value",
    "hand_value",
]
