from __future__ import annotations

import pytest

from carddeck.cards import BLANK_RANK, JOKER_SUIT, Card
from carddeck.config import DeckConfig

CONFIG = DeckConfig()


@pytest.mark.parametrize(
    ("rank_index", "suit_index", "expected"),
    [
        (0, 0, "2 Clubs"),
        (9, 1, "Jack Diamonds"),
        (12, 3, "Ace Spades"),
    ],
)
def test_standard_card_labels(rank_index: int, suit_index: int, expected: str) -> None:
    card = Card.create(rank_index, suit_index, CONFIG, deck_id=1)

    assert str(card) == expected
    assert card.deck_id == 1
    assert not card.is_joker


def test_joker_uses_joker_labels_and_sentinel_suit() -> None:
    card = Card.create(1, CONFIG.joker_suit_index, CONFIG)

    assert card.is_joker
    assert card.rank == "Red"
    assert card.suit == JOKER_SUIT
    assert str(card) == "Red Joker"


def test_out_of_range_indexes_resolve_to_fallback_labels() -> None:
    missing_rank = Card.create(20, 0, CONFIG)
    missing_joker = Card.create(5, CONFIG.joker_suit_index, CONFIG)
    missing_suit = Card.create(0, 9, CONFIG)

    assert missing_rank.rank == BLANK_RANK
    assert missing_joker.rank == BLANK_RANK
    assert missing_suit.suit == ""
    assert not missing_suit.is_joker


def test_cards_are_immutable_values() -> None:
    first = Card.create(3, 2, CONFIG)
    second = Card.create(3, 2, CONFIG)

    assert first == second
    assert hash(first) == hash(second)
    assert first != Card.create(3, 2, CONFIG, deck_id=1)
    with pytest.raises(AttributeError):
        first.rank = "Ace"  # type: ignore[misc]
