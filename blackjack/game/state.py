"""Round state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Round state machine states.

    Flow: START → BET_PLACED → PLAYER_TURN → DEALER_TURN → SETTLED
    A player bust goes straight from PLAYER_TURN to SETTLED.
    """

    # Waiting for a bet
    START = auto()

    # Bet accepted, opening cards being dealt
    BET_PLACED = auto()

    PLAYER_TURN = auto()

    DEALER_TURN = auto()

    # Outcome applied to the balance
    SETTLED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()
