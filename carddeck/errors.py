"""Exception types raised by the card deck library."""

from __future__ import annotations

__all__ = ["CardDeckError", "ConfigError", "InsufficientCards", "UnsupportedHandSize"]


class CardDeckError(Exception):
    """Base class for all library errors."""


class ConfigError(CardDeckError, ValueError):
    """Raised when a deck configuration contains an unknown option."""


class InsufficientCards(CardDeckError, RuntimeError):
    """Raised when a deal asks for more cards than the deck still holds."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(f"cannot deal {requested} card(s); only {available} remain")
        self.requested = requested
        self.available = available


class UnsupportedHandSize(CardDeckError, ValueError):
    """Raised by five-card pattern queries on a hand of another size."""

    def __init__(self, size: int, expected: int = 5) -> None:
        super().__init__(f"pattern requires a {expected}-card hand, got {size} card(s)")
        self.size = size
        self.expected = expected
