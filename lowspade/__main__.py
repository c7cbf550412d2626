import argparse
import logging
from typing import List, Optional

from .driver import format_result, run
from .models import SimulationConfig

LOGGER = logging.getLogger("lowspade")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Estimate the average winning low spade by Monte Carlo")
    parser.add_argument("--iterations", type=int, default=100_000)
    parser.add_argument("--workers", type=int, default=None, help="Worker processes (default: one per CPU)")
    parser.add_argument("--seed", type=int, default=None, help="Base seed for reproducible runs")
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    config = SimulationConfig(iterations=args.iterations, workers=args.workers, seed=args.seed)
    try:
        result = run(config)
    except KeyboardInterrupt:
        LOGGER.info("Simulation interrupted; shutting down")
        raise SystemExit(130)
    print(format_result(result))


if __name__ == "__main__":
    main()
