from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from .models import DECK_SUITS, Suit

MIN_RANK = 1
MAX_RANK = 13
NO_CARD_RANK = 0

RANK_LABELS = "A23456789TJQK"


@dataclass(frozen=True)
class Card:
    suit: Suit
    rank: int

    def __post_init__(self) -> None:
        if not isinstance(self.rank, int) or not MIN_RANK <= self.rank <= MAX_RANK:
            raise ValueError(f"Invalid rank: {self.rank}")
        if self.suit not in DECK_SUITS:
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def label(self) -> str:
        return f"{RANK_LABELS[self.rank - 1]}{self.suit.value}"


def rank_or_zero(card: Optional[Card]) -> int:
    return card.rank if card is not None else NO_CARD_RANK


class Deck:
    """Ordered pile of cards. Built in suit-major, rank-minor order."""

    def __init__(self, cards: Optional[Iterable[Card]] = None) -> None:
        if cards is None:
            self._cards = [Card(suit, rank) for suit in DECK_SUITS for rank in range(MIN_RANK, MAX_RANK + 1)]
        else:
            self._cards = list(cards)

    @classmethod
    def new(cls) -> "Deck":
        return cls()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"Deck({' '.join(self.labels())})"

    @property
    def cards(self) -> List[Card]:
        return list(self._cards)

    def labels(self) -> List[str]:
        return [card.label for card in self._cards]

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        if rng is None:
            rng = random.Random()
        rng.shuffle(self._cards)

    def split_into(self, chunk_size: int) -> List["Deck"]:
        """Cut the current order into contiguous decks of ``chunk_size`` cards.

        The final deck holds whatever is left over when the card count is not
        a multiple of ``chunk_size``.
        """
        if chunk_size < 1:
            raise ValueError(f"Invalid chunk size: {chunk_size}")
        return [Deck(self._cards[idx : idx + chunk_size]) for idx in range(0, len(self._cards), chunk_size)]

    def lowest_card(self, suit: Suit) -> Optional[Card]:
        lowest: Optional[Card] = None
        for card in self._cards:
            if card.suit != suit:
                continue
            if lowest is None or card.rank < lowest.rank:
                lowest = card
        return lowest


def parse_label(label: str) -> Card:
    if len(label) != 2:
        raise ValueError(f"Invalid card label: {label}")
    rank_label, suit_label = label[0].upper(), label[1].upper()
    if rank_label not in RANK_LABELS:
        raise ValueError(f"Invalid rank: {label[0]}")
    try:
        suit = Suit(suit_label)
    except ValueError:
        raise ValueError(f"Invalid suit: {label[1]}") from None
    return Card(suit, RANK_LABELS.index(rank_label) + 1)
