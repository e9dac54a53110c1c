"""Application services: account queries."""

from __future__ import annotations

from ecommerce.application.dto import AccountDTO
from ecommerce.application.presenter import account_to_dto
from ecommerce.domain.exceptions import EntityNotFoundError
from ecommerce.domain.repository.account_repository import AccountRepository


class ShowAccountHandler:

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    def handle(self, account_id: str) -> AccountDTO:
        account = self._account_repo.get_by_id(account_id)
        if account is None:
            raise EntityNotFoundError("Account", account_id)
        return account_to_dto(account)


class ListAccountsHandler:

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    def handle(self) -> list[AccountDTO]:
        return [account_to_dto(a) for a in self._account_repo.list_all()]
