"""Account aggregate, the buyer identity an order belongs to."""

from __future__ import annotations

import hashlib
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timezone

from ecommerce.domain.exceptions import ValidationError

_HASH_ALGORITHM = "pbkdf2_sha256"
_HASH_ITERATIONS = 260_000


def hash_password(password: str, salt: str | None = None) -> str:
    """Return ``algorithm$iterations$salt$hexdigest`` for *password*."""
    if not password:
        raise ValidationError("Password is required")
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt.encode("utf-8"), _HASH_ITERATIONS
    )
    return f"{_HASH_ALGORITHM}${_HASH_ITERATIONS}${salt}${digest.hex()}"


@dataclass
class Account:
    """A registered buyer.

    ``id`` never changes once assigned; name, email and credential can.
    """

    id: str
    name: str
    email: str
    password_hash: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def register(account_id: str, name: str, email: str, password: str) -> Account:
        name, email = _validate_identity(name, email)
        return Account(
            id=account_id,
            name=name,
            email=email,
            password_hash=hash_password(password),
        )

    def update_profile(self, name: str, email: str, password: str | None = None) -> None:
        self.name, self.email = _validate_identity(name, email)
        if password:
            self.password_hash = hash_password(password)


def _validate_identity(name: str, email: str) -> tuple[str, str]:
    if not name or not name.strip():
        raise ValidationError("Account name is required")
    if not email or "@" not in email:
        raise ValidationError(f"Invalid email address: {email!r}")
    return name.strip(), email.strip().lower()
