"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

import json
from pathlib import Path

from wms.domain.exceptions import PersistenceUnavailableError
from wms.domain.model.user import Role, User
from wms.domain.repository.user_repository import UserRepository
from wms.infrastructure.persistence.seed_data import DEMO_USERS


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- UserRepository interface ---------------------------------------------

    def get_by_email(self, email: str) -> User | None:
        for raw in self._load_raw():
            if raw["email"].lower() == email.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[User]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            name=raw["name"],
            email=raw["email"],
            role=Role(raw.get("role", "user")),
            avatar=raw.get("avatar", ""),
            password=raw.get("password"),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        self._ensure_file()
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceUnavailableError(f"Cannot read users: {exc}") from exc

    def _persist_raw(self, records: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise PersistenceUnavailableError(f"Cannot write users: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist_raw(DEMO_USERS)
