"""Small helpers around values and input echoing."""

from __future__ import annotations

from alabkit.authentication import read_line


def double_or_nothing(n: int) -> int:
    """Double a positive number; anything else becomes zero."""
    if n > 0:
        return n * 2
    return 0


def greet(name: str) -> None:
    print(f"Hello {name}")


def main(argv: list[str] | None = None) -> int:
    text = read_line()
    print(f"You typed: [{text}]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())