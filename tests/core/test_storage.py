"""Tests for the account store and deck loading."""

import json
from pathlib import Path

import pytest

from blackjack.account import Account
from blackjack.cards import Card, Rank, Suit, standard_deck
from blackjack.errors import DeckConfigError
from blackjack.storage import AccountStore, load_deck

SHIPPED_DECK = Path(__file__).resolve().parents[2] / "deck.json"


def write(path, text: str) -> str:
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestAccountStore:
    """Tests for AccountStore."""

    def test_missing_record_uses_default_and_saves(self, store, account_path):
        account = store.load()

        assert account.balance == 1000
        with open(account_path) as f:
            assert json.load(f) == {"money": 1000}

    def test_custom_starting_balance(self, account_path):
        account = AccountStore(account_path, starting_balance=250).load()
        assert account.balance == 250

    def test_load_saved_balance(self, tmp_path):
        path = write(tmp_path / "user.json", '{"money": 1337}')
        assert AccountStore(path).load().balance == 1337

    @pytest.mark.parametrize(
        "content",
        ["not json", "[]", '{"cash": 10}', '{"money": "lots"}', '{"money": -50}', ""],
    )
    def test_unreadable_record_resets(self, tmp_path, content):
        path = write(tmp_path / "user.json", content)

        account = AccountStore(path).load()

        assert account.balance == 1000
        with open(path) as f:
            assert json.load(f) == {"money": 1000}

    def test_save_then_load(self, store):
        store.save(Account(balance=42))
        assert store.load().balance == 42

    def test_save_is_indented(self, store, account_path):
        store.save(Account(balance=42))
        with open(account_path) as f:
            assert f.read() == '{\n  "money": 42\n}'

    def test_write_failure_propagates(self, tmp_path):
        store = AccountStore(str(tmp_path / "missing-dir" / "user.json"))
        with pytest.raises(OSError):
            store.save(Account(balance=10))


class TestLoadDeck:
    """Tests for load_deck."""

    def test_shipped_deck(self):
        cards = load_deck(str(SHIPPED_DECK))
        assert len(cards) == 52
        assert set(cards) == set(standard_deck())

    def test_order_preserved(self, tmp_path):
        path = write(tmp_path / "deck.json", '["A♠", "2H", "10d"]')
        assert load_deck(path) == [
            Card(Rank.ACE, Suit.SPADES),
            Card(Rank.TWO, Suit.HEARTS),
            Card(Rank.TEN, Suit.DIAMONDS),
        ]

    def test_missing_file(self, tmp_path):
        with pytest.raises(DeckConfigError, match="not found"):
            load_deck(str(tmp_path / "deck.json"))

    @pytest.mark.parametrize(
        "content",
        ["not json", "{}", "[]", '["A♠", "Z♠"]', "[1, 2, 3]", '"A♠"'],
    )
    def test_malformed(self, tmp_path, content):
        path = write(tmp_path / "deck.json", content)
        with pytest.raises(DeckConfigError):
            load_deck(path)
