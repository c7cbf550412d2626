"""Monte Carlo estimate of the winning low spade across four 13-card hands."""

from .cards import Card, Deck, parse_label
from .driver import WorkerError, format_result, run
from .models import RunResult, SimulationConfig, Suit
from .simulation import spades_computation, winning_low_spade

__all__ = [
    "Card",
    "Deck",
    "parse_label",
    "WorkerError",
    "format_result",
    "run",
    "RunResult",
    "SimulationConfig",
    "Suit",
    "spades_computation",
    "winning_low_spade",
]
