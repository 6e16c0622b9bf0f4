"""Pydantic schemas for the files the game reads and writes."""

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

from blackjack.cards import Card


class AccountRecord(BaseModel):
    """Saved account: `{"money": 1000}`."""

    model_config = ConfigDict(extra="ignore")

    money: int = Field(..., ge=0, description="Player balance")


class DeckRecord(RootModel[list[str]]):
    """Deck configuration: an ordered list of card tokens."""

    @field_validator("root")
    @classmethod
    def _check_tokens(cls, tokens: list[str]) -> list[str]:
        if not tokens:
            raise ValueError("deck must contain at least one card")
        for token in tokens:
            Card.from_string(token)
        return tokens

    def to_cards(self) -> list[Card]:
        """Parse the tokens into cards, preserving order."""
        return [Card.from_string(token) for token in self.root]
