"""Abstract repository for User records consulted by the login collaborator."""

from __future__ import annotations

from abc import ABC, abstractmethod

from wms.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return a user by email (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every user."""
