"""A thread-safe counter incremented by many threads at once."""

from __future__ import annotations

import argparse
import threading

DEFAULT_THREADS = 1000
DEFAULT_INCREMENTS = 1100


class AtomicCounter:
    """An integer updated atomically with respect to other threads."""

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self._lock = threading.Lock()

    def fetch_add(self, amount: int = 1) -> int:
        """Add ``amount`` and return the value held before the addition."""
        with self._lock:
            previous = self._value
            self._value += amount
            return previous

    def load(self) -> int:
        with self._lock:
            return self._value


def count_concurrently(threads: int = DEFAULT_THREADS, increments: int = DEFAULT_INCREMENTS) -> int:
    """Have ``threads`` threads each add one ``increments`` times; return the total."""
    counter = AtomicCounter()

    def work() -> None:
        for _ in range(increments):
            counter.fetch_add(1)

    workers = [threading.Thread(target=work) for _ in range(threads)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return counter.load()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="footgun")
    parser.add_argument("--threads", type=int, default=DEFAULT_THREADS)
    parser.add_argument("--increments", type=int, default=DEFAULT_INCREMENTS)
    args = parser.parse_args(argv)
    print(count_concurrently(args.threads, args.increments))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())