"""User records, password hashing and login checks backed by a JSON file."""

from __future__ import annotations

import hashlib
import json
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

USERS_PATH = Path("users.json")


class LoginRole(Enum):
    """Role granted to a user on a successful login."""

    ADMIN = "Admin"
    USER = "User"


@dataclass(frozen=True)
class LoginAction:
    """Outcome of a login attempt: granted with a role, or denied (role is None)."""

    role: LoginRole | None = None

    @property
    def granted(self) -> bool:
        return self.role is not None


def hash_password(password: str) -> str:
    """Return the upper-case hexadecimal SHA-256 digest of a password."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest().upper()


@dataclass
class User:
    """A stored user: lower-case name, hashed password and role."""

    username: str
    password: str
    role: LoginRole

    @classmethod
    def create(cls, username: str, password: str, role: LoginRole) -> User:
        """Build a user from a plaintext password, normalising the name."""
        return cls(username.lower(), hash_password(password), role)

    def to_dict(self) -> dict[str, str]:
        return {
            "username": self.username,
            "password": self.password,
            "role": self.role.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        return cls(data["username"], data["password"], LoginRole(data["role"]))


def greet_user(name: str) -> str:
    return f"Hello {name}"


def read_line() -> str:
    """Read one line from standard input with surrounding whitespace removed."""
    return sys.stdin.readline().strip()


def get_default_users() -> dict[str, User]:
    default_password = "password"
    return {
        "admin": User.create("admin", default_password, LoginRole.ADMIN),
        "bob": User.create("bob", default_password, LoginRole.USER),
    }


def save_users(users: dict[str, User], path: str | Path = USERS_PATH) -> None:
    """Write the users to a JSON file, replacing its contents."""
    payload = {key: user.to_dict() for key, user in users.items()}
    Path(path).write_text(json.dumps(payload, separators=(",", ":")), encoding="utf-8")


def get_users(path: str | Path = USERS_PATH) -> dict[str, User]:
    """Load users from the file, creating it with the default users if missing."""
    users_path = Path(path)
    if users_path.exists():
        data = json.loads(users_path.read_text(encoding="utf-8"))
        return {key: User.from_dict(value) for key, value in data.items()}
    users = get_default_users()
    save_users(users, users_path)
    return users


def login(username: str, password: str, path: str | Path = USERS_PATH) -> LoginAction | None:
    """Check credentials; return None when the user is unknown."""
    user = get_users(path).get(username.lower())
    if user is None:
        return None
    if user.password == hash_password(password):
        return LoginAction(user.role)
    return LoginAction()