# blackjack/common/cards.py

import random
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from .constants import SUITS, RANKS
from .logging_utils import get_logger, format_cards
from . import rules

_log = get_logger("cards")


class DeckEmptyError(RuntimeError):
    """Raised when drawing from a deck that has no cards left."""
    pass


@dataclass(frozen=True)
class Card:
    rank: str  # "2".."10", "J", "Q", "K", "A"
    suit: str  # "♠","♥","♦","♣"

    def __post_init__(self) -> None:
        if self.rank not in RANKS:
            raise ValueError(f"Unknown rank: {self.rank!r}")
        if self.suit not in SUITS:
            raise ValueError(f"Unknown suit: {self.suit!r}")

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"


def full_deck() -> List[Card]:
    """The 52 cards in canonical (suit-major) order."""
    return [Card(r, s) for s in SUITS for r in RANKS]


class Deck:
    def __init__(self, rng: Optional[random.Random] = None, cards: Optional[Iterable[Card]] = None) -> None:
        self._rng = rng or random.Random()
        self._cards: List[Card] = list(cards) if cards is not None else full_deck()

    @classmethod
    def shuffled(cls, rng: Optional[random.Random] = None) -> "Deck":
        deck = cls(rng=rng)
        deck.shuffle()
        return deck

    def shuffle(self) -> None:
        # random.shuffle is a full Fisher-Yates pass over the whole list
        self._rng.shuffle(self._cards)
        _log.debug(f"Shuffled {len(self._cards)} cards")

    def draw(self) -> Card:
        if not self._cards:
            _log.error("Draw from an empty deck")
            raise DeckEmptyError("Deck is empty. Cannot draw a card.")
        return self._cards.pop()

    def remaining(self) -> List[Card]:
        return list(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)


class Hand:
    """Cards held by one party for the duration of a single round."""

    def __init__(self, owner: str) -> None:
        self.owner = owner
        self._cards: List[Card] = []

    def add(self, card: Card) -> None:
        self._cards.append(card)

    def clear(self) -> None:
        self._cards.clear()

    @property
    def cards(self) -> List[Card]:
        return list(self._cards)

    @property
    def score(self) -> int:
        return rules.hand_value(self._cards)

    @property
    def is_bust(self) -> bool:
        return rules.is_bust(self._cards)

    @property
    def is_blackjack(self) -> bool:
        return rules.is_natural(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Hand({self.owner}: {format_cards(self._cards)} = {self.score})"
