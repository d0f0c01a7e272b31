"""Registered accounts kept as username, password and role lines in one file."""

from __future__ import annotations

from enum import Enum
from itertools import islice
from pathlib import Path


class Role(Enum):
    BUYER = "BUYER"
    SELLER = "SELLER"
    ADMIN = "ADMIN"

    @classmethod
    def parse(cls, text: str) -> "Role":
        """Accept a role name in all upper or all lower case."""
        for role in cls:
            if text in (role.value, role.value.lower()):
                return role
        raise ValueError(f"invalid role: {text!r}")


class AuthenticationError(Exception):
    """Raised when a username and password pair does not match any account."""


def _check_token(kind: str, value: str) -> None:
    if not value or any(ch.isspace() for ch in value):
        raise ValueError(f"{kind} must be a single non-empty word")


class UserStore:
    """Account records appended to a plain text file."""

    def __init__(self, path) -> None:
        self.path = Path(path)

    def register(self, username: str, password: str, role) -> None:
        """Append a new account record."""
        if not isinstance(role, Role):
            role = Role.parse(role)
        _check_token("username", username)
        _check_token("password", password)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(f"{username}\n{password}\n{role.value}\n")

    def accounts(self) -> list[tuple[str, str, str]]:
        """Return every complete (username, password, role) record in file order."""
        try:
            tokens = iter(self.path.read_text(encoding="utf-8").split())
        except FileNotFoundError:
            return []
        records = []
        while len(record := tuple(islice(tokens, 3))) == 3:
            records.append(record)
        return records

    def authenticate(self, username: str, password: str) -> Role:
        """Return the role of the first account matching the credentials."""
        for user, stored, role_text in self.accounts():
            if user == username and stored == password:
                return Role.parse(role_text)
        raise AuthenticationError("invalid username and password")