"""JSON persistence for the account record and the deck configuration."""

import json
import logging
import os

from pydantic import ValidationError

from blackjack.account import DEFAULT_BALANCE, Account
from blackjack.cards import Card
from blackjack.errors import DeckConfigError
from blackjack.schemas import AccountRecord, DeckRecord

logger = logging.getLogger(__name__)


class AccountStore:
    """Loads and saves the player's account.

    A missing or unreadable record is not an error: the account starts over
    with the default balance and is written back immediately.
    """

    def __init__(self, path: str, starting_balance: int = DEFAULT_BALANCE) -> None:
        self.path = path
        self.starting_balance = starting_balance

    def load(self) -> Account:
        """Load the account, creating it with the starting balance if needed."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                record = AccountRecord.model_validate(json.load(f))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
            logger.info("No usable account at %s (%s), starting fresh", self.path, exc)
            account = Account(balance=self.starting_balance)
            self.save(account)
            return account

        logger.debug("Loaded balance %d from %s", record.money, self.path)
        return Account(balance=record.money)

    def save(self, account: Account) -> None:
        """Write the balance. Write failures propagate to the caller."""
        record = AccountRecord(money=account.balance)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(record.model_dump(), f, indent=2)
        logger.debug("Saved balance %d to %s", account.balance, self.path)


def load_deck(path: str) -> list[Card]:
    """
    Load the canonical deck from a JSON list of card tokens.

    Raises:
        DeckConfigError: if the file is missing, unreadable or malformed
    """
    if not os.path.exists(path):
        raise DeckConfigError(f"Deck configuration not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            record = DeckRecord.model_validate(json.load(f))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
        raise DeckConfigError(f"Invalid deck configuration in {path}: {exc}") from exc

    cards = record.to_cards()
    logger.info("Loaded %d cards from %s", len(cards), path)
    return cards
