"""A reader-writer lock around a user list, read by a background reporter."""

from __future__ import annotations

import json
import sys
import threading
from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

REPORT_INTERVAL = 3.0


class ReadWriteLock(Generic[T]):
    """Many readers at once, or a single writer, over one value."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._condition = threading.Condition()
        self._readers = 0
        self._writing = False

    @contextmanager
    def read(self) -> Iterator[T]:
        with self._condition:
            self._condition.wait_for(lambda: not self._writing)
            self._readers += 1
        try:
            yield self._value
        finally:
            with self._condition:
                self._readers -= 1
                self._condition.notify_all()

    @contextmanager
    def write(self) -> Iterator[T]:
        with self._condition:
            self._condition.wait_for(lambda: not self._writing and self._readers == 0)
            self._writing = True
        try:
            yield self._value
        finally:
            with self._condition:
                self._writing = False
                self._condition.notify_all()


def build_users() -> list[str]:
    return ["Alice", "Bob"]


def _format_users(users: list[str]) -> str:
    return "[" + ", ".join(json.dumps(user, ensure_ascii=False) for user in users) + "]"


def main(argv: list[str] | None = None) -> int:
    users = ReadWriteLock(build_users())
    stop = threading.Event()

    def report() -> None:
        while True:
            print("Current users (in a thread)")
            with users.read() as current:
                print(_format_users(current))
            if stop.wait(REPORT_INTERVAL):
                return

    reporter = threading.Thread(target=report, daemon=True)
    reporter.start()
    try:
        while True:
            print("Enter a name to add to the user list (or q to quit)")
            line = sys.stdin.readline()
            if not line:
                break
            name = line.strip()
            if name == "q":
                break
            with users.write() as current:
                current.append(name)
    finally:
        stop.set()
        reporter.join()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())