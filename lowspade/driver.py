from __future__ import annotations

import logging
import os
import random
from concurrent.futures import Future, ProcessPoolExecutor
from typing import List, Optional, Tuple

from .models import RunResult, SimulationConfig
from .simulation import run_worker

# The driver only partitions work and combines results. All card handling
# lives in lowspade.simulation and runs inside the workers.

LOGGER = logging.getLogger("lowspade.driver")


class WorkerError(RuntimeError):
    """A simulation worker failed; the whole run is abandoned."""

    def __init__(self, worker: int, cause: BaseException) -> None:
        super().__init__(f"Worker {worker} failed: {cause!r}")
        self.worker = worker


def worker_count(requested: Optional[int] = None) -> int:
    if requested is not None:
        if requested < 1:
            raise ValueError(f"Invalid worker count: {requested}")
        return requested
    return os.cpu_count() or 1


def split_iterations(total: int, workers: int) -> Tuple[int, int]:
    """Return (iterations per worker, iterations dropped)."""
    if total < 1:
        raise ValueError("Iteration count must be positive")
    per_worker, dropped = divmod(total, workers)
    if per_worker == 0:
        raise ValueError(f"Cannot split {total} iterations across {workers} workers")
    return per_worker, dropped


def worker_seeds(seed: Optional[int], workers: int) -> List[int]:
    base = random.Random(seed)
    return [base.getrandbits(64) for _ in range(workers)]


def _collect(futures: List[Future]) -> List[float]:
    means: List[float] = []
    for idx, future in enumerate(futures):
        try:
            means.append(future.result())
        except Exception as exc:
            for pending in futures[idx + 1 :]:
                pending.cancel()
            raise WorkerError(idx, exc) from exc
    return means


def run(config: Optional[SimulationConfig] = None) -> RunResult:
    """Fan the iteration budget out over the workers and average their means.

    Every worker gets the same share; the remainder of the integer division
    is not simulated. The result is the plain mean of the per-worker means.
    """
    config = config or SimulationConfig()
    workers = worker_count(config.workers)
    per_worker, dropped = split_iterations(config.iterations, workers)
    seeds = worker_seeds(config.seed, workers)

    LOGGER.info(
        "Running %d iterations on %d worker(s): %d each, %d dropped",
        config.iterations,
        workers,
        per_worker,
        dropped,
    )

    if workers == 1:
        try:
            means = [run_worker(per_worker, seeds[0], config.hand_size)]
        except Exception as exc:
            raise WorkerError(0, exc) from exc
    else:
        with ProcessPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(run_worker, per_worker, seed, config.hand_size) for seed in seeds]
            means = _collect(futures)

    average = sum(means) / len(means)
    LOGGER.info("Worker means: %s", ", ".join(f"{mean:.4f}" for mean in means))
    return RunResult(
        average=average,
        worker_means=means,
        iterations_per_worker=per_worker,
        dropped_iterations=dropped,
    )


def format_result(result: RunResult) -> str:
    return f"Average Card Won: {result.average}"
