from __future__ import annotations

import logging
import random
from typing import Iterable, Optional

from .cards import Card, Deck, rank_or_zero
from .models import Suit

LOGGER = logging.getLogger("lowspade.simulation")

HAND_SIZE = 13


def winning_low_spade(hands: Iterable[Deck]) -> Optional[Card]:
    """Highest of the per-hand lowest spades. Hands without a spade sit out."""
    winner: Optional[Card] = None
    for hand in hands:
        low = hand.lowest_card(Suit.SPADES)
        if low is None:
            continue
        if winner is None or low.rank > winner.rank:
            winner = low
    return winner


def play_deal(rng: random.Random, hand_size: int = HAND_SIZE) -> int:
    deck = Deck()
    deck.shuffle(rng)
    hands = deck.split_into(hand_size)
    return rank_or_zero(winning_low_spade(hands))


def spades_computation(
    iterations: int,
    rng: Optional[random.Random] = None,
    hand_size: int = HAND_SIZE,
) -> float:
    """Average winning low spade rank over ``iterations`` fresh deals."""
    if iterations < 1:
        raise ValueError("Iteration count must be positive")
    if rng is None:
        rng = random.Random()

    total = 0
    for _ in range(iterations):
        total += play_deal(rng, hand_size)
    return total / iterations


def run_worker(iterations: int, seed: Optional[int], hand_size: int = HAND_SIZE) -> float:
    # Runs inside a pool process; must stay importable at module level.
    LOGGER.debug("Worker starting: iterations=%d seed=%s", iterations, seed)
    mean = spades_computation(iterations, random.Random(seed), hand_size)
    LOGGER.debug("Worker finished: mean=%.4f", mean)
    return mean
