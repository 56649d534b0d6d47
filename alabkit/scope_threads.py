"""Sum chunks of a sequence in threads that all finish before the scope ends."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from alabkit.divide_work import CHUNK_SIZE, chunked


def scoped_sum(values: Sequence[int], chunk_size: int = CHUNK_SIZE) -> int:
    """Sum the values chunk by chunk; all workers are joined on return."""
    chunks = list(chunked(values, chunk_size))
    with ThreadPoolExecutor(max_workers=max(min(len(chunks), 32), 1)) as scope:
        handles = [scope.submit(sum, chunk) for chunk in chunks]
    return sum(handle.result() for handle in handles)


def main(argv: list[str] | None = None) -> int:
    total = scoped_sum(list(range(5000)))
    print(f"Sum: {total}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())