"""Dealt hands and five-card poker pattern detection."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Iterable, Iterator, List

from .cards import Card
from .errors import UnsupportedHandSize

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .deck import Deck

__all__ = ["FIVE_CARD_HAND", "Hand", "HandReport"]

FIVE_CARD_HAND: Final[int] = 5


@dataclass(frozen=True, slots=True)
class HandReport:
    """Snapshot of every pattern query for a hand.

    Five-card-only fields are ``None`` when the hand has another size, in
    which case ``unsupported_size`` carries the error instead of raising it.
    """

    pair: int | None
    flush: bool
    full_house: int | None = None
    straight: int | None = None
    straight_flush: int | None = None
    royal_flush: bool = False
    unsupported_size: UnsupportedHandSize | None = None

    @property
    def name(self) -> str:
        """Name of the strongest detected pattern, or ``"-"``."""

        if self.royal_flush:
            return "royal flush"
        if self.straight_flush is not None:
            return "straight flush"
        if self.full_house is not None:
            return "full house"
        if self.flush:
            return "flush"
        if self.straight is not None:
            return "straight"
        if self.pair is not None:
            return "pair"
        return "-"


class Hand:
    """Cards dealt from a :class:`~carddeck.deck.Deck`.

    The hand keeps a reference to its deck only to read the rank vocabulary;
    it never mutates the deck. Rank results are indexes into
    ``deck.settings.ranks`` and ``None`` means "not found". Jokers carry no
    rank and are left out of every rank tally.
    """

    def __init__(self, deck: "Deck", cards: Iterable[Card] = ()) -> None:
        self._deck = deck
        self.cards: List[Card] = list(cards)

    @property
    def deck(self) -> "Deck":
        return self._deck

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return ", ".join(self.labels())

    def __repr__(self) -> str:
        return f"Hand([{self}])"

    def labels(self) -> list[str]:
        return [str(card) for card in self.cards]

    def add_card(self, card: Card) -> "Hand":
        self.cards.append(card)
        return self

    def _rank_tally(self, exclude_rank_indexes: Iterable[int] = ()) -> Counter[int]:
        excluded = set(exclude_rank_indexes)
        return Counter(
            card.rank_index
            for card in self.cards
            if not card.is_joker and card.rank_index not in excluded
        )

    def _require_five_cards(self) -> None:
        if len(self.cards) != FIVE_CARD_HAND:
            raise UnsupportedHandSize(len(self.cards), FIVE_CARD_HAND)

    def is_of_a_kind(self, exact_count: int, exclude_rank_indexes: Iterable[int] = ()) -> int | None:
        """Return the highest rank index held exactly ``exact_count`` times."""

        tally = self._rank_tally(exclude_rank_indexes)
        for rank_index in range(len(self._deck.settings.ranks) - 1, -1, -1):
            if tally[rank_index] == exact_count:
                return rank_index
        return None

    def is_a_pair(self) -> int | None:
        return self.is_of_a_kind(2)

    def is_a_flush(self) -> bool:
        """Return ``True`` when every card shares the first card's suit.

        An empty hand is not a flush.
        """

        if not self.cards:
            return False
        suit_index = self.cards[0].suit_index
        return all(card.suit_index == suit_index for card in self.cards)

    def is_a_full_house(self) -> int | None:
        """Return the pair's rank index when the hand is three plus two."""

        self._require_five_cards()
        trips = self.is_of_a_kind(3)
        if trips is None:
            return None
        return self.is_of_a_kind(2, exclude_rank_indexes=(trips,))

    def is_a_straight(self) -> int | None:
        """Return the high rank index of five consecutive ranks.

        Any repeated rank rules a straight out. The ace is only high.
        """

        self._require_five_cards()
        tally = self._rank_tally()
        if any(count > 1 for count in tally.values()):
            return None
        for high in range(len(self._deck.settings.ranks) - 1, FIVE_CARD_HAND - 2, -1):
            if all(tally[high - offset] == 1 for offset in range(FIVE_CARD_HAND)):
                return high
        return None

    def is_a_straight_flush(self) -> int | None:
        high = self.is_a_straight()
        if high is None or not self.is_a_flush():
            return None
        return high

    def is_a_royal_flush(self) -> bool:
        high = self.is_a_straight_flush()
        return high is not None and high == len(self._deck.settings.ranks) - 1

    def evaluate(self) -> HandReport:
        """Run every pattern query without raising for non five-card hands."""

        pair = self.is_a_pair()
        flush = self.is_a_flush()
        if len(self.cards) != FIVE_CARD_HAND:
            return HandReport(
                pair=pair,
                flush=flush,
                unsupported_size=UnsupportedHandSize(len(self.cards), FIVE_CARD_HAND),
            )
        straight_flush = self.is_a_straight_flush()
        return HandReport(
            pair=pair,
            flush=flush,
            full_house=self.is_a_full_house(),
            straight=self.is_a_straight(),
            straight_flush=straight_flush,
            royal_flush=self.is_a_royal_flush(),
        )
