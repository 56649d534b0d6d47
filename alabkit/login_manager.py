"""Command-line management of the stored users."""

from __future__ import annotations

import argparse
from pathlib import Path

from alabkit.authentication import (
    USERS_PATH,
    LoginRole,
    User,
    get_users,
    hash_password,
    save_users,
)


def add_user(username: str, password: str, admin: bool = False, path: str | Path = USERS_PATH) -> None:
    users = get_users(path)
    role = LoginRole.ADMIN if admin else LoginRole.USER
    users[username] = User.create(username, password, role)
    save_users(users, path)


def list_users(path: str | Path = USERS_PATH) -> None:
    print(f"{'Username':<20}{'Password':>20}")
    print("-" * 40)
    for user in get_users(path).values():
        print(f"{user.username:<20}{user.role.value:<20}")


def delete_user(username: str, path: str | Path = USERS_PATH) -> None:
    users = get_users(path)
    if username in users:
        del users[username]
        save_users(users, path)
    else:
        print(f"{username} does not exist!")


def change_password(username: str, password: str, path: str | Path = USERS_PATH) -> None:
    users = get_users(path)
    user = users.get(username)
    if user is None:
        print(f"{username} does not exist")
        return
    user.password = hash_password(password)
    save_users(users, path)


def _parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise argparse.ArgumentTypeError(f"invalid value '{text}', expected 'true' or 'false'")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="login_manager")
    commands = parser.add_subparsers(dest="command")

    commands.add_parser("list", help="List all users.")

    add = commands.add_parser("add", help="Add a user.")
    add.add_argument("username", help="The user's login name")
    add.add_argument("password", help="The user's password (plaintext)")
    add.add_argument("--admin", type=_parse_bool, default=None, help="Optional - mark as an admin")

    delete = commands.add_parser("delete", help="Delete a user.")
    delete.add_argument("username", help="User to delete")

    change = commands.add_parser("change-password", help="Change a user's password")
    change.add_argument("username", help="Username who's password should change")
    change.add_argument("new_password", help="New password")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.command == "list":
        list_users()
    elif args.command == "add":
        add_user(args.username, args.password, bool(args.admin))
    elif args.command == "delete":
        delete_user(args.username)
    elif args.command == "change-password":
        change_password(args.username, args.new_password)
    else:
        print("Run with --help to see instructions.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())