"""Start a named thread and report its name from inside it."""

from __future__ import annotations

import threading
from typing import Callable


def my_thread() -> str:
    """Print and return a greeting naming the current thread."""
    message = f"Hello from a thread named {threading.current_thread().name}"
    print(message)
    return message


def spawn_named(name: str, target: Callable[[], object]) -> threading.Thread:
    """Start ``target`` in a new thread called ``name`` and return the thread."""
    thread = threading.Thread(target=target, name=name)
    thread.start()
    return thread


def main(argv: list[str] | None = None) -> int:
    spawn_named("Named Thread", my_thread).join()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())