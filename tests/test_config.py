from __future__ import annotations

import pytest

from carddeck.config import DEFAULT_CONFIG, DeckConfig, resolve_config
from carddeck.errors import ConfigError


def test_defaults_match_standard_deck() -> None:
    config = resolve_config()

    assert config == DEFAULT_CONFIG
    assert config.decks == 1
    assert config.hand_size == 5
    assert config.ranks[0] == "2"
    assert config.ranks[-1] == "Ace"
    assert config.suits == ("Clubs", "Diamonds", "Hearts", "Spades")
    assert config.jokers == ("Black", "Red")
    assert config.shuffle is True
    assert config.joker_suit_index == 4
    assert config.cards_per_deck == 54


def test_caller_keys_win_over_defaults() -> None:
    config = resolve_config({"decks": 3, "handSize": 7}, shuffle=False)

    assert config.decks == 3
    assert config.hand_size == 7
    assert config.shuffle is False
    assert config.suits == DEFAULT_CONFIG.suits


def test_label_sequences_are_coerced_to_tuples() -> None:
    config = resolve_config(ranks=["Low", "High"], suits="Red,Black", jokers="")

    assert config.ranks == ("Low", "High")
    assert config.suits == ("Red", "Black")
    assert config.jokers == ()
    hash(config)


def test_existing_config_is_reused_and_overridden() -> None:
    base = DeckConfig(decks=2)

    assert resolve_config(base) is base
    assert resolve_config(base, hand_size=3) == DeckConfig(decks=2, hand_size=3)


@pytest.mark.parametrize("option", ["deck", "hand_sizes", "wild"])
def test_unknown_options_are_rejected(option: str) -> None:
    with pytest.raises(ConfigError):
        resolve_config({option: 1})


def test_nonsensical_values_are_accepted() -> None:
    config = resolve_config(decks=0, ranks=())

    assert config.decks == 0
    assert config.cards_per_deck == len(config.jokers)
