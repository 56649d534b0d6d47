"""Interactive login prompt allowing a limited number of attempts."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, TextIO

from alabkit.authentication import USERS_PATH, LoginRole, login, read_line

MAX_TRIES = 3


def run_login(
    path: str | Path = USERS_PATH,
    input_func: Callable[[], str] = read_line,
    output: TextIO | None = None,
) -> LoginRole | None:
    """Prompt for credentials until a login succeeds or the tries run out."""
    out = output if output is not None else sys.stdout

    def say(message: str) -> None:
        print(message, file=out)

    for _ in range(MAX_TRIES):
        say("Enter your username:")
        username = input_func()
        say("Enter your password:")
        password = input_func()

        result = login(username, password, path)
        if result is not None and result.granted:
            say(result.role.value)
            return result.role
        if result is None:
            say("New user system")
        say("Incorrect username or password")

    say("Too many failed logins")
    return None


def main(argv: list[str] | None = None) -> int:
    run_login()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())