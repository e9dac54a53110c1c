"""JSON-file-backed implementation of AccountRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from ecommerce.domain.model.account import Account
from ecommerce.domain.repository.account_repository import AccountRepository
from ecommerce.infrastructure.persistence.json_file import JsonFile


class JsonAccountRepository(AccountRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- AccountRepository interface ------------------------------------------

    def get_by_id(self, account_id: str) -> Account | None:
        for account in self.list_all():
            if account.id == account_id:
                return account
        return None

    def get_by_email(self, email: str) -> Account | None:
        for account in self.list_all():
            if account.email.lower() == email.lower():
                return account
        return None

    def list_all(self) -> list[Account]:
        return self._file.load_as(self._to_domain)

    def save(self, account: Account) -> None:
        with self._file.locked():
            accounts = self.list_all()
            for i, stored in enumerate(accounts):
                if stored.id == account.id:
                    accounts[i] = account
                    break
            else:
                accounts.append(account)
            self._file.persist([self._to_raw(a) for a in accounts])

    def delete(self, account_id: str) -> None:
        with self._file.locked():
            accounts = self.list_all()
            remaining = [a for a in accounts if a.id != account_id]
            if len(remaining) != len(accounts):
                self._file.persist([self._to_raw(a) for a in remaining])

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(account: Account) -> dict:
        return {
            "id": account.id,
            "name": account.name,
            "email": account.email,
            "password_hash": account.password_hash,
            "created_at": account.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Account:
        return Account(
            id=raw["id"],
            name=raw["name"],
            email=raw["email"],
            password_hash=raw["password_hash"],
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
