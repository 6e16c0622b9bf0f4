"""Pytest fixtures for blackjack tests."""

import pytest
from random import Random

from blackjack.account import Account
from blackjack.cards import Card, Deck, standard_deck
from blackjack.game import BlackjackGame
from blackjack.storage import AccountStore


class StackedRandom(Random):
    """Random whose shuffle leaves the cards in place."""

    def shuffle(self, x) -> None:
        pass


def stacked_deck(*tokens: str) -> Deck:
    """
    A deck that deals the given tokens in order, every round.

    Dealing order is player, player, dealer, dealer, then hits and dealer draws.
    """
    cards = [Card.from_string(token) for token in tokens]
    return Deck(reversed(cards), rng=StackedRandom())


class ScriptedConsole:
    """Console that answers prompts from a script and records everything shown."""

    def __init__(self, *answers: str) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def say(self, line: str) -> None:
        self.lines.append(line)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A 52-card deck."""
    return Deck(standard_deck(), rng=rng)


@pytest.fixture
def account():
    """An account with the default balance."""
    return Account(balance=1000)


@pytest.fixture
def account_path(tmp_path):
    return str(tmp_path / "user.json")


@pytest.fixture
def store(account_path):
    """An account store in a temporary directory."""
    return AccountStore(account_path)


@pytest.fixture
def make_game(account, store):
    """Factory for a game dealing a stacked deck."""

    def _make(*tokens: str) -> BlackjackGame:
        return BlackjackGame(stacked_deck(*tokens), account, store=store)

    return _make


@pytest.fixture
def stack():
    """Factory for decks that deal the given tokens in order."""
    return stacked_deck


@pytest.fixture
def make_console():
    """Factory for scripted consoles."""
    return ScriptedConsole
