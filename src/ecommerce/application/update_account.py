"""Application service: Update Account use case."""

from __future__ import annotations

from ecommerce.application.dto import AccountDTO
from ecommerce.application.presenter import account_to_dto
from ecommerce.domain.exceptions import EntityNotFoundError, ValidationError
from ecommerce.domain.repository.account_repository import AccountRepository


class UpdateAccountHandler:

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    def handle(
        self,
        account_id: str,
        name: str,
        email: str,
        password: str | None = None,
    ) -> AccountDTO:
        """Change name, email and optionally the password. The ID stays."""
        account = self._account_repo.get_by_id(account_id)
        if account is None:
            raise EntityNotFoundError("Account", account_id)

        if email:
            holder = self._account_repo.get_by_email(email.strip().lower())
            if holder is not None and holder.id != account_id:
                raise ValidationError(f"An account with email '{email}' already exists")

        account.update_profile(name=name, email=email, password=password)
        self._account_repo.save(account)
        return account_to_dto(account)
