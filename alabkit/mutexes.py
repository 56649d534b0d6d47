"""Threads appending to a shared list under a lock."""

from __future__ import annotations

import argparse
import threading

THREAD_COUNT = 10


def collect_numbers(count: int = THREAD_COUNT) -> list[int]:
    """Each of ``count`` threads appends its own number; order is not fixed."""
    numbers: list[int] = []
    lock = threading.Lock()

    def push(n: int) -> None:
        with lock:
            numbers.append(n)

    workers = [threading.Thread(target=push, args=(n,)) for n in range(count)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    with lock:
        return list(numbers)


def _pretty_list(values: list[int]) -> str:
    if not values:
        return "[]"
    body = "".join(f"    {value},\n" for value in values)
    return f"[\n{body}]"


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Collect numbers pushed by threads into a shared list."
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=THREAD_COUNT,
        help="number of threads to start",
    )
    args = parser.parse_args(argv)
    if args.threads < 0:
        parser.error("--threads must not be negative")
    return args


def main(argv: list[str] | None = None) -> int:
    """Start the threads and print the collected numbers."""
    args = _parse_args(argv)
    numbers = collect_numbers(args.threads)
    print(_pretty_list(numbers))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())