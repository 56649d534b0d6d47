"""Run a small computation in several threads and print the results in order."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

THREAD_COUNT = 10


def hello_thread(n: int) -> None:
    print(f"Hello from thread {n}")


def do_math(i: int) -> int:
    """Double ``i + 1`` ten times."""
    n = i + 1
    for _ in range(10):
        n *= 2
    return n


def run_threads(count: int = THREAD_COUNT) -> list[int]:
    """Compute do_math for 0..count-1, one thread each, results in input order."""
    with ThreadPoolExecutor(max_workers=max(count, 1)) as executor:
        return list(executor.map(do_math, range(count)))


def main(argv: list[str] | None = None) -> int:
    print("Hello with from the main thread")
    for result in run_threads():
        print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())