"""Player account."""

from dataclasses import dataclass

DEFAULT_BALANCE = 1000


@dataclass
class Account:
    """The player's cash balance, carried between sessions."""

    balance: int = DEFAULT_BALANCE

    @property
    def is_bankrupt(self) -> bool:
        return self.balance <= 0
