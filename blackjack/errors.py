"""Exceptions raised by the blackjack engine and its storage layer."""


class BlackjackError(Exception):
    """Base class for all blackjack errors."""


class DeckConfigError(BlackjackError):
    """The deck configuration is missing, malformed or empty."""


class InvalidBetError(BlackjackError):
    """A bet was rejected. Recoverable: the caller should ask again."""

    def __init__(self, amount: object, reason: str) -> None:
        super().__init__(reason)
        self.amount = amount
        self.reason = reason
