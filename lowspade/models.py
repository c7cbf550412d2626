from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Suit(str, Enum):
    SPADES = "S"
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"
    # Data-model marker for "no card found". Never dealt; Card rejects it.
    DUMMY = "X"


DECK_SUITS = (Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS)


@dataclass
class SimulationConfig:
    iterations: int = 100_000
    hand_size: int = 13
    workers: Optional[int] = None
    seed: Optional[int] = None


@dataclass
class RunResult:
    average: float
    worker_means: List[float] = field(default_factory=list)
    iterations_per_worker: int = 0
    dropped_iterations: int = 0

    @property
    def workers(self) -> int:
        return len(self.worker_means)
