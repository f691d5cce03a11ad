"""Threads that run the dining philosophers and the monitor that watches them."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

from philosophers.args import Settings

_POLL_SECONDS = 0.0005
_MONITOR_POLL_SECONDS = 0.00005
_EVEN_START_DELAY_SECONDS = 0.005
_THINK_CAP_THRESHOLD = 500
_THINK_CAP = 150


def now_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def fork_indices(philosopher_id: int, count: int) -> tuple[int, int]:
    """Return the (left, right) fork indices of a philosopher numbered from 1."""
    own = philosopher_id - 1
    neighbour = (own + 1) % count
    if philosopher_id % 2:
        return own, neighbour
    return neighbour, own


@dataclass
class Philosopher:
    """One diner and the state the monitor reads."""

    id: int
    left_fork: int
    right_fork: int
    last_meal: int
    meals: int = 0
    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )


class Table:
    """The shared table: forks, philosophers, the log and the end flag."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.start_time = now_ms()
        self._ended = False
        self._end_lock = threading.Lock()
        self._print_lock = threading.Lock()
        self.forks = [threading.Lock() for _ in range(settings.count)]
        self.philosophers = [
            Philosopher(pid, *fork_indices(pid, settings.count), self.start_time)
            for pid in range(1, settings.count + 1)
        ]

    def _write(self, line: str) -> None:
        self.out.write(line + "\n")
        self.out.flush()

    def log(self, philosopher: Philosopher, message: str) -> None:
        """Write a status line unless the simulation has ended."""
        timestamp = now_ms() - self.start_time
        with self._print_lock, self._end_lock:
            if not self._ended:
                self._write(f"{timestamp} {philosopher.id} {message}")

    def is_over(self) -> bool:
        """Return True once the simulation has ended."""
        with self._end_lock:
            return self._ended

    def end(self) -> None:
        """Mark the simulation as ended."""
        with self._end_lock:
            self._ended = True

    def think_time(self, philosopher: Philosopher) -> int:
        """Return how long, in milliseconds, the philosopher should think."""
        time_to_die = self.settings.time_to_die
        with philosopher.lock:
            busy = now_ms() - philosopher.last_meal + self.settings.time_to_eat
        if busy >= time_to_die:
            return 0
        think = (time_to_die - busy) // 2
        return _THINK_CAP if think > _THINK_CAP_THRESHOLD else think

    def sleep(self, duration: int) -> None:
        """Wait *duration* milliseconds, returning early if the simulation ends."""
        start = now_ms()
        while not self.is_over() and now_ms() - start < duration:
            time.sleep(_POLL_SECONDS)

    def _dine_alone(self, philosopher: Philosopher) -> None:
        with self.forks[philosopher.left_fork]:
            self.log(philosopher, "has taken a fork")
            # The lone diner waits time_to_die microseconds; the monitor reports the death.
            time.sleep(self.settings.time_to_die / 1_000_000)

    def philosopher_routine(self, philosopher: Philosopher) -> None:
        """Eat, sleep and think until the simulation ends."""
        if self.settings.count == 1:
            self._dine_alone(philosopher)
            return
        first_index, second_index = sorted(
            (philosopher.left_fork, philosopher.right_fork)
        )
        first, second = self.forks[first_index], self.forks[second_index]
        if philosopher.id % 2 == 0:
            time.sleep(_EVEN_START_DELAY_SECONDS)
        while not self.is_over():
            first.acquire()
            self.log(philosopher, "has taken a fork")
            second.acquire()
            self.log(philosopher, "has taken a fork")
            with philosopher.lock:
                philosopher.last_meal = now_ms()
                philosopher.meals += 1
            self.log(philosopher, "is eating")
            self.sleep(self.settings.time_to_eat)
            first.release()
            second.release()
            self.log(philosopher, "is sleeping")
            self.sleep(self.settings.time_to_sleep)
            self.log(philosopher, "is thinking")
            self.sleep(self.think_time(philosopher))

    def check_philosophers(self) -> int | None:
        """Check every philosopher once.

        Returns None if one has starved (the death is logged and the
        simulation ended), otherwise the number that have eaten enough.
        """
        full = 0
        for philosopher in self.philosophers:
            with philosopher.lock:
                if now_ms() - philosopher.last_meal > self.settings.time_to_die:
                    self.end()
                    with self._print_lock:
                        self._write(
                            f"{now_ms() - self.start_time} {philosopher.id} died"
                        )
                    return None
                if (
                    self.settings.meals_limited
                    and philosopher.meals >= self.settings.max_meals
                ):
                    full += 1
        return full

    def monitor_routine(self) -> None:
        """Watch the table until someone dies or everyone has eaten enough."""
        while not self.is_over():
            full = self.check_philosophers()
            if full is None:
                return
            if self.settings.meals_limited and full == self.settings.count:
                self.end()
                return
            time.sleep(_MONITOR_POLL_SECONDS)

    def run(self) -> None:
        """Run the whole simulation and wait for every thread to finish."""
        if self.settings.count == 0 or self.settings.max_meals == 0:
            return
        diners = [
            threading.Thread(target=self.philosopher_routine, args=(philosopher,))
            for philosopher in self.philosophers
        ]
        for thread in diners:
            thread.start()
        monitor = threading.Thread(target=self.monitor_routine)
        monitor.start()
        for thread in diners:
            thread.join()
        monitor.join()