"""Abstract repository for Account aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ecommerce.domain.model.account import Account


class AccountRepository(ABC):

    @abstractmethod
    def get_by_id(self, account_id: str) -> Account | None:
        """Return an account by its ID, or None if not found."""

    @abstractmethod
    def get_by_email(self, email: str) -> Account | None:
        """Return the account registered under *email*, or None."""

    @abstractmethod
    def list_all(self) -> list[Account]:
        """Return every account."""

    @abstractmethod
    def save(self, account: Account) -> None:
        """Persist a new or updated account."""

    @abstractmethod
    def delete(self, account_id: str) -> None:
        """Remove an account."""
