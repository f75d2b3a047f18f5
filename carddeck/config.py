"""Deck configuration and option resolution."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Final, Mapping, Sequence

from .errors import ConfigError

__all__ = ["DEFAULT_CONFIG", "DEFAULT_JOKERS", "DEFAULT_RANKS", "DEFAULT_SUITS", "DeckConfig", "resolve_config"]

DEFAULT_RANKS: Final[tuple[str, ...]] = tuple("2,3,4,5,6,7,8,9,10,Jack,Queen,King,Ace".split(","))
DEFAULT_SUITS: Final[tuple[str, ...]] = tuple("Clubs,Diamonds,Hearts,Spades".split(","))
DEFAULT_JOKERS: Final[tuple[str, ...]] = ("Black", "Red")

# camelCase spellings accepted alongside the field names
_ALIASES: Final[dict[str, str]] = {"handSize": "hand_size"}
_SEQUENCE_FIELDS: Final[frozenset[str]] = frozenset({"ranks", "suits", "jokers"})


@dataclass(frozen=True, slots=True)
class DeckConfig:
    """Immutable settings used to build a :class:`~carddeck.deck.Deck`.

    Ranks are ordered low to high; a card's rank index is its position in
    ``ranks``. Values are not range-checked: zero decks or an empty rank list
    simply produce an empty deck.
    """

    decks: int = 1
    hand_size: int = 5
    ranks: tuple[str, ...] = DEFAULT_RANKS
    suits: tuple[str, ...] = DEFAULT_SUITS
    jokers: tuple[str, ...] = DEFAULT_JOKERS
    shuffle: bool = True

    @property
    def joker_suit_index(self) -> int:
        """Sentinel suit index carried by joker cards."""

        return len(self.suits)

    @property
    def cards_per_deck(self) -> int:
        return len(self.ranks) * len(self.suits) + len(self.jokers)

    def merged(self, overrides: Mapping[str, Any]) -> "DeckConfig":
        """Return a copy with ``overrides`` applied; caller keys win."""

        return replace(self, **_normalise(overrides))


DEFAULT_CONFIG: Final[DeckConfig] = DeckConfig()


def _normalise(overrides: Mapping[str, Any]) -> dict[str, Any]:
    known = {f.name for f in fields(DeckConfig)}
    normalised: dict[str, Any] = {}
    for key, value in overrides.items():
        name = _ALIASES.get(key, key)
        if name not in known:
            raise ConfigError(f"unknown deck option '{key}'")
        if name in _SEQUENCE_FIELDS:
            value = _as_labels(value)
        normalised[name] = value
    return normalised


def _as_labels(value: str | Sequence[str]) -> tuple[str, ...]:
    if isinstance(value, str):
        return tuple(value.split(",")) if value else ()
    return tuple(value)


def resolve_config(
    config: DeckConfig | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> DeckConfig:
    """Merge defaults, ``config`` and keyword ``overrides`` into a DeckConfig.

    ``config`` may already be a :class:`DeckConfig`, a mapping of option names
    (snake_case or the camelCase ``handSize``) or ``None``. Label sequences may
    be given as comma separated strings. Unknown option names raise
    :class:`~carddeck.errors.ConfigError`.
    """

    if isinstance(config, DeckConfig):
        base = config
    elif config is None:
        base = DEFAULT_CONFIG
    else:
        base = DEFAULT_CONFIG.merged(config)
    if overrides:
        base = base.merged(overrides)
    return base
