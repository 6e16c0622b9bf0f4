"""Main entry point for terminal blackjack."""

import logging
import sys

from config import config
from blackjack.errors import DeckConfigError
from terminal_ui.console import StdioConsole
from terminal_ui.session import Session

logger = logging.getLogger(__name__)


def main() -> int:
    """Run one session; return the process exit status."""
    config.logging.configure()
    console = StdioConsole()

    try:
        session = Session.from_config(config, console)
    except DeckConfigError as exc:
        logger.error("Cannot start: %s", exc)
        print(f"Missing or invalid deck configuration: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        logger.error("Cannot create account at %s: %s", config.storage.account_path, exc)
        print(f"Could not save your balance: {exc}", file=sys.stderr)
        return 1

    try:
        session.run()
    except OSError as exc:
        # The balance update for the last round could not be persisted.
        logger.error("Could not save balance to %s: %s", config.storage.account_path, exc)
        print(f"Could not save your balance: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
