"""Session loop: rounds until the player quits or runs out of money."""

import logging
from random import Random

from config import AppConfig
from blackjack.cards import Deck
from blackjack.errors import InvalidBetError
from blackjack.game import BlackjackGame, RoundResult
from blackjack.storage import AccountStore, load_deck
from terminal_ui.console import Console
from terminal_ui.renderer import TableRenderer

logger = logging.getLogger(__name__)

HIT_ANSWERS = ("h", "hit")


class Session:
    """Owns the game for one sitting and talks to the player through a console."""

    def __init__(self, game: BlackjackGame, console: Console) -> None:
        self.game = game
        self.console = console
        self.renderer = TableRenderer(console)
        game.subscribe(self.renderer.handle)

    @classmethod
    def from_config(cls, app_config: AppConfig, console: Console) -> "Session":
        """
        Build a session from configuration.

        Raises:
            DeckConfigError: if the deck configuration cannot be used
        """
        cards = load_deck(app_config.storage.deck_path)
        store = AccountStore(
            app_config.storage.account_path,
            starting_balance=app_config.game.starting_balance,
        )
        account = store.load()
        deck = Deck(cards, rng=Random(app_config.game.seed))
        return cls(BlackjackGame(deck, account, store=store), console)

    def collect_bet(self) -> RoundResult | None:
        """Ask for a bet until one is accepted."""
        while True:
            answer = self.console.ask(f"Enter your bet (Available: ${self.game.balance}): ")
            try:
                return self.game.bet(answer)
            except InvalidBetError as exc:
                self.console.say(f"Invalid bet. Try again. ({exc.reason})")

    def play_round(self) -> RoundResult:
        """Play one round to settlement."""
        self.game.start_round()
        self.collect_bet()

        while self.game.can_hit:
            move = self.console.ask("Hit or stand? (h/s): ").strip().lower()
            if move in HIT_ANSWERS:
                self.game.hit()
            else:
                self.game.stand()

        return self.game.result

    def run(self) -> int:
        """Play rounds until the player stops; return the final balance."""
        try:
            while not self.game.account.is_bankrupt:
                self.play_round()
                if self.game.account.is_bankrupt:
                    self.console.say("You're out of money.")
                    break
                again = self.console.ask("Play another round? (y/n): ").strip().lower()
                if again != "y":
                    break
        except (EOFError, KeyboardInterrupt):
            self.console.say("")
            logger.info("Input closed, ending session")

        balance = self.game.balance
        self.console.say(f"Game over. You finished with ${balance}")
        return balance
