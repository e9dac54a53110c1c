"""Application service: Remove Account use case."""

from __future__ import annotations

from ecommerce.domain.exceptions import EntityNotFoundError
from ecommerce.domain.repository.account_repository import AccountRepository


class RemoveAccountHandler:

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    def handle(self, account_id: str) -> None:
        if self._account_repo.get_by_id(account_id) is None:
            raise EntityNotFoundError("Account", account_id)
        self._account_repo.delete(account_id)
