"""Card value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .config import DeckConfig

__all__ = ["BLANK_RANK", "JOKER_SUIT", "Card"]

BLANK_RANK: Final[str] = "Blank"
JOKER_SUIT: Final[str] = "Joker"


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing one physical card.

    ``suit_index`` equals ``len(suits)`` for jokers, in which case
    ``rank_index`` points into the joker labels instead of the ranks.
    """

    rank_index: int
    rank: str
    suit_index: int
    suit: str
    deck_id: int = 0
    is_joker: bool = False

    @classmethod
    def create(cls, rank_index: int, suit_index: int, config: DeckConfig, deck_id: int = 0) -> "Card":
        """Build a card, resolving its labels against ``config``."""

        joker = suit_index == config.joker_suit_index
        labels = config.jokers if joker else config.ranks
        rank = labels[rank_index] if 0 <= rank_index < len(labels) else ""
        if 0 <= suit_index < len(config.suits):
            suit = config.suits[suit_index]
        else:
            suit = JOKER_SUIT if joker else ""
        return cls(
            rank_index=rank_index,
            rank=rank or BLANK_RANK,
            suit_index=suit_index,
            suit=suit,
            deck_id=deck_id,
            is_joker=joker,
        )

    def __str__(self) -> str:
        return f"{self.rank} {self.suit}"
