"""User — the acting identity attached to audit entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    USER = "user"


@dataclass
class User:
    id: str
    name: str
    email: str
    role: Role = Role.USER
    avatar: str = ""
    password: str | None = None  # plain credential match only
