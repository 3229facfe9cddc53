"""Application service: Login use case (auth collaborator).

A plain credential match. The ledger does not authorize anything itself;
it only needs the returned user's display name for the audit trail.
"""

from __future__ import annotations

from wms.domain.model.user import User
from wms.domain.repository.user_repository import UserRepository


class LoginHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, email: str, password: str) -> User | None:
        user = self._user_repo.get_by_email(email.strip())
        if user is None or user.password is None or user.password != password:
            return None
        return user
