"""Deck construction, shuffling, sorting and dealing."""

from __future__ import annotations

import logging
import random
from typing import Any, Iterator, List, Mapping, Protocol

from .cards import Card
from .config import DeckConfig, resolve_config
from .errors import InsufficientCards
from .hand import Hand

__all__ = ["Deck", "RandomSource"]

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Minimal protocol for the random source used by :meth:`Deck.shuffle`."""

    def randrange(self, stop: int) -> int:  # pragma: no cover - protocol only
        ...


class Deck:
    """Ordered, mutable sequence of cards built from a :class:`DeckConfig`.

    Construction populates the deck and then shuffles it, or sorts it when
    ``shuffle`` is disabled. Hands are dealt from the end of :attr:`cards`.
    A deck is not safe to share between threads without external locking.
    """

    def __init__(
        self,
        config: DeckConfig | Mapping[str, Any] | None = None,
        *,
        rng: RandomSource | None = None,
        **overrides: Any,
    ) -> None:
        self.settings: DeckConfig = resolve_config(config, **overrides)
        self.cards: List[Card] = []
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self.populate()
        if self.settings.shuffle:
            self.shuffle()
        else:
            self.sort()

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __repr__(self) -> str:
        return f"Deck(cards={len(self.cards)}, decks={self.settings.decks})"

    def create_deck(self, deck_id: int = 0) -> List[Card]:
        """Return one deck's worth of cards tagged with ``deck_id``.

        Rank and suit indexes both walk the same counter modulo their own
        lengths, so the full rank x suit set only appears when the two
        lengths are coprime (13 and 4 by default).
        """

        settings = self.settings
        num_ranks = len(settings.ranks)
        num_suits = len(settings.suits)
        cards: List[Card] = []
        for i in range(num_ranks * num_suits):
            cards.append(Card.create(i % num_ranks, i % num_suits, settings, deck_id))
        for joker_index in range(len(settings.jokers)):
            cards.append(Card.create(joker_index, settings.joker_suit_index, settings, deck_id))
        return cards

    def populate(self) -> "Deck":
        """Replace :attr:`cards` with ``decks`` freshly created decks in order."""

        cards: List[Card] = []
        for deck_id in range(self.settings.decks):
            cards.extend(self.create_deck(deck_id))
        self.cards = cards
        logger.debug("Populated %d card(s) from %d deck(s)", len(cards), self.settings.decks)
        return self

    def shuffle(self) -> "Deck":
        """Fisher-Yates shuffle of the remaining cards, in place."""

        cards = self.cards
        m = len(cards)
        while m:
            i = self._rng.randrange(m)
            m -= 1
            cards[m], cards[i] = cards[i], cards[m]
        logger.debug("Shuffled %d card(s)", len(cards))
        return self

    def sort(self) -> "Deck":
        """Stable sort by suit index, then rank index."""

        self.cards.sort(key=lambda card: (card.suit_index, card.rank_index))
        logger.debug("Sorted %d card(s)", len(self.cards))
        return self

    def deal_hand(self, size: int | None = None) -> Hand:
        """Remove ``size`` cards from the end of the deck into a new Hand.

        ``size`` defaults to ``settings.hand_size``. Asking for more cards than
        remain raises :class:`~carddeck.errors.InsufficientCards` and leaves the
        deck untouched.
        """

        if size is None:
            size = self.settings.hand_size
        if size < 0:
            raise ValueError("hand size must not be negative")
        if size > len(self.cards):
            raise InsufficientCards(size, len(self.cards))
        hand = Hand(self)
        for _ in range(size):
            hand.add_card(self.cards.pop())
        logger.debug("Dealt %d card(s); %d remain", size, len(self.cards))
        return hand
