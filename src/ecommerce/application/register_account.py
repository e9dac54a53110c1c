"""Application service: Register Account use case."""

from __future__ import annotations

import structlog

from ecommerce.application.dto import AccountDTO
from ecommerce.application.identifiers import next_sequential_id
from ecommerce.application.presenter import account_to_dto
from ecommerce.domain.exceptions import ValidationError
from ecommerce.domain.model.account import Account
from ecommerce.domain.repository.account_repository import AccountRepository

logger = structlog.get_logger(__name__)


class RegisterAccountHandler:

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    def handle(self, name: str, email: str, password: str) -> AccountDTO:
        if email and self._account_repo.get_by_email(email.strip().lower()) is not None:
            raise ValidationError(f"An account with email '{email}' already exists")

        account = Account.register(
            account_id=next_sequential_id(a.id for a in self._account_repo.list_all()),
            name=name,
            email=email,
            password=password,
        )
        self._account_repo.save(account)
        logger.info("account_registered", account_id=account.id)
        return account_to_dto(account)
