"""A lock-protected value that becomes poisoned when a holder fails."""

from __future__ import annotations

import threading
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class PoisonError(Exception):
    """Raised when a lock was left poisoned; the data can still be recovered."""

    def __init__(self, value: Any) -> None:
        super().__init__("PoisonError { .. }")
        self._value = value

    def into_inner(self) -> Any:
        """Return the protected data despite the poisoning."""
        return self._value


class _Guard:
    """Holds the lock of a SharedValue until released or the block ends."""

    def __init__(self, owner: SharedValue) -> None:
        self._owner = owner
        self._released = False

    @property
    def value(self) -> Any:
        return self._owner._value

    @value.setter
    def value(self, new_value: Any) -> None:
        self._owner._value = new_value

    def release(self) -> None:
        if not self._released:
            self._released = True
            self._owner._lock.release()

    def __enter__(self) -> _Guard:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is not None:
            self._owner._poisoned = True
        self.release()
        return False


class SharedValue(Generic[T]):
    """A value guarded by a mutex that is poisoned by a failing holder."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._lock = threading.Lock()
        self._poisoned = False

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    def _guard(self) -> _Guard:
        if self._poisoned:
            self._lock.release()
            raise PoisonError(self._value)
        return _Guard(self)

    def lock(self) -> _Guard:
        """Block until the lock is free and return a guard over the value."""
        self._lock.acquire()
        return self._guard()

    def try_lock(self) -> _Guard | None:
        """Return a guard if the lock is free right now, otherwise None."""
        if not self._lock.acquire(blocking=False):
            return None
        return self._guard()

    def into_inner(self) -> T:
        """Return the value, raising PoisonError if the lock is poisoned."""
        if self._poisoned:
            raise PoisonError(self._value)
        return self._value


def poisoner(shared: SharedValue) -> None:
    """Increment the value while holding the lock, then fail."""
    with shared.lock() as guard:
        guard.value += 1
        raise RuntimeError("The poisoner strikes")


def main(argv: list[str] | None = None) -> int:
    shared: SharedValue[int] = SharedValue(3)
    outcome: dict[str, BaseException] = {}

    def run() -> None:
        try:
            poisoner(shared)
        except Exception as exc:
            outcome["error"] = exc

    thread = threading.Thread(target=run)
    thread.start()
    print("Trying to return from the thread")
    thread.join()
    error = outcome.get("error")
    print(f"Err({error!r})" if error is not None else "Ok(())")

    try:
        with shared.lock() as guard:
            recovered = guard.value
            print(f"Ok({recovered})")
    except PoisonError as err:
        print(f"Err({err})")
        print("Mutex was poisoned, recovering data...")
        recovered = err.into_inner()

    print(f"data recovered = {recovered}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())