"""The dining philosophers simulation: table, forks, philosophers and monitor."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TextIO

INT_MAX = 2147483647
FINISHED_MESSAGE = "all philosophers have finished their meals"


def now_ms() -> int:
    """Current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class Config:
    """Simulation parameters; times are in milliseconds."""

    num_philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat: int = INT_MAX

    @classmethod
    def from_numbers(cls, numbers: Sequence[int]) -> Config:
        """Build a config from 4 or 5 numbers in command-line order."""
        if len(numbers) not in (4, 5):
            raise ValueError("expected 4 or 5 numbers")
        return cls(*numbers)


@dataclass
class Philosopher:
    """One seat at the table; ids start at 1."""

    id: int
    last_meal_ms: int
    meals_eaten: int = 0
    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def fork_order(self, count: int) -> tuple[int, int]:
        """Indices of the two forks, in the order they are picked up."""
        left = self.id - 1
        right = self.id % count
        if self.id % 2 == 0:
            return left, right
        return right, left


class Table:
    """Shared state of one simulation run."""

    def __init__(self, config: Config, out: TextIO | None = None) -> None:
        self.config = config
        self.out = out if out is not None else sys.stdout
        self.forks = [threading.Lock() for _ in range(config.num_philos)]
        self._print_lock = threading.Lock()
        self._death_lock = threading.Lock()
        self._dead = False
        start = now_ms()
        self.philosophers = [
            Philosopher(id=i + 1, last_meal_ms=start)
            for i in range(config.num_philos)
        ]
        self.start_ms = now_ms()

    def _write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def elapsed_ms(self) -> int:
        """Milliseconds since the simulation started."""
        return now_ms() - self.start_ms

    def is_over(self) -> bool:
        """Whether a death or completion has ended the simulation."""
        with self._death_lock:
            return self._dead

    def print_status(self, philosopher: Philosopher, status: str) -> None:
        """Log a status line unless the simulation is over."""
        timestamp = self.elapsed_ms()
        if self.is_over():
            return
        with self._print_lock:
            self._write(f"{timestamp} {philosopher.id} {status}\n")

    def pick_forks(self, philosopher: Philosopher) -> None:
        """Block until both forks of the philosopher are held."""
        if philosopher.id % 2 != 0:
            time.sleep(0.002)
        for index in philosopher.fork_order(self.config.num_philos):
            self.forks[index].acquire()

    def release_forks(self, philosopher: Philosopher) -> None:
        """Put both forks of the philosopher back."""
        if philosopher.id % 2 != 0:
            time.sleep(0.0001)
        for index in philosopher.fork_order(self.config.num_philos):
            self.forks[index].release()

    def sleep(self, duration_ms: int) -> None:
        """Wait for duration_ms, returning early once the simulation is over."""
        start = now_ms()
        while now_ms() - start < duration_ms and not self.is_over():
            time.sleep(0.00005)

    def check_meals(self) -> bool:
        """End the simulation if every philosopher has eaten enough."""
        done = 0
        for philosopher in self.philosophers:
            with philosopher.lock:
                if philosopher.meals_eaten >= self.config.must_eat:
                    done += 1
        if done != self.config.num_philos:
            return False
        with self._print_lock, self._death_lock:
            self._dead = True
            self._write(FINISHED_MESSAGE + "\n")
        return True

    def check_death(self, philosopher: Philosopher) -> bool:
        """End the simulation if the philosopher has starved."""
        current = now_ms()
        with philosopher.lock:
            last_meal = philosopher.last_meal_ms
        if current - last_meal < self.config.time_to_die:
            return False
        with self._death_lock:
            self._dead = True
            timestamp = self.elapsed_ms()
            with self._print_lock:
                self._write(f"{timestamp} {philosopher.id} died")
        return True

    def monitor(self) -> None:
        """Watch the table until everyone has eaten or someone dies."""
        while True:
            if self.check_meals():
                return
            for philosopher in self.philosophers:
                if self.check_death(philosopher):
                    return
            time.sleep(0.0001)

    def philosopher_routine(self, philosopher: Philosopher) -> None:
        """Think, eat and sleep until the simulation is over."""
        while True:
            if self.is_over():
                return
            self.print_status(philosopher, "is thinking")
            self.pick_forks(philosopher)
            with philosopher.lock:
                philosopher.last_meal_ms = now_ms()
            self.print_status(philosopher, "has taken a fork")
            self.print_status(philosopher, "is eating")
            with philosopher.lock:
                philosopher.meals_eaten += 1
            self.sleep(self.config.time_to_eat)
            self.release_forks(philosopher)
            if self.is_over():
                return
            self.print_status(philosopher, "is sleeping")
            self.sleep(self.config.time_to_sleep)

    def run(self) -> None:
        """Start every philosopher and the monitor, then wait for them all."""
        threads = [
            threading.Thread(target=self.philosopher_routine, args=(p,), daemon=True)
            for p in self.philosophers
        ]
        for thread in threads:
            thread.start()
        watcher = threading.Thread(target=self.monitor, daemon=True)
        watcher.start()
        for thread in threads:
            thread.join()
        watcher.join()