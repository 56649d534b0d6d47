"""Sum a sequence by splitting it into chunks handled by separate threads."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from itertools import islice
from typing import Iterable, Iterator, TypeVar

T = TypeVar("T")

CHUNK_SIZE = 8


def chunked(values: Iterable[T], size: int) -> Iterator[list[T]]:
    """Yield consecutive chunks of at most ``size`` items."""
    if size <= 0:
        raise ValueError("chunk size must be non-zero")
    iterator = iter(values)
    while chunk := list(islice(iterator, size)):
        yield chunk


def threaded_sum(values: Iterable[int], chunk_size: int = CHUNK_SIZE) -> int:
    """Sum the values, each chunk in its own worker thread."""
    chunks = list(chunked(values, chunk_size))
    if not chunks:
        return 0
    with ThreadPoolExecutor(max_workers=min(len(chunks), 32)) as executor:
        futures = [executor.submit(sum, chunk) for chunk in chunks]
        return sum(future.result() for future in futures)


def main(argv: list[str] | None = None) -> int:
    total = threaded_sum(range(5000))
    print(f"Sum is {total}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())