"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence

from philosophers.parsing import ArgumentError, parse_arguments
from philosophers.simulation import FINISHED_MESSAGE, Config, Table


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from command-line arguments and return an exit code.

    ``argv`` holds the arguments without the program name and defaults to
    ``sys.argv[1:]``.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        numbers = parse_arguments(args)
    except ArgumentError as error:
        print(f"Error: {error}", flush=True)
        return 1
    config = Config.from_numbers(numbers)

    if config.num_philos == 1:
        print("0 1 is thinking", flush=True)
        time.sleep(config.time_to_die / 1000)
        print(f"{config.time_to_die} 1 died", flush=True)
        return 0
    if config.must_eat == 0:
        print(FINISHED_MESSAGE, flush=True)
        return 0

    Table(config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())