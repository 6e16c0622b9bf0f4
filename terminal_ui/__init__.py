"""Text interface for the blackjack engine."""
