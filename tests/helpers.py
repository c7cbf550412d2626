from __future__ import annotations

from collections import Counter
from typing import Iterable, List

from lowspade.cards import Card, Deck, parse_label


def make_hand(*labels: str) -> Deck:
    """Build a deck from labels such as ``"AS"`` or ``"TH"``."""
    return Deck(parse_label(label) for label in labels)


def card_counts(cards: Iterable[Card]) -> Counter:
    return Counter(cards)


def flatten(decks: Iterable[Deck]) -> List[Card]:
    return [card for deck in decks for card in deck]
