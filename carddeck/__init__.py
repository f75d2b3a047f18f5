"""Configurable multi-deck card source with poker hand classification."""

from . import cards, config, deck, errors, hand
from .cards import Card
from .config import DeckConfig, resolve_config
from .deck import Deck
from .errors import CardDeckError, ConfigError, InsufficientCards, UnsupportedHandSize
from .hand import Hand, HandReport

__all__ = [
    "Card",
    "CardDeckError",
    "ConfigError",
    "Deck",
    "DeckConfig",
    "Hand",
    "HandReport",
    "InsufficientCards",
    "UnsupportedHandSize",
    "cards",
    "config",
    "deck",
    "errors",
    "hand",
    "resolve_config",
]
