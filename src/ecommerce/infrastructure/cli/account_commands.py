"""CLI commands for buyer accounts."""

from __future__ import annotations

import click

from ecommerce.application.register_account import RegisterAccountHandler
from ecommerce.application.remove_account import RemoveAccountHandler
from ecommerce.application.show_accounts import ListAccountsHandler, ShowAccountHandler
from ecommerce.application.update_account import UpdateAccountHandler
from ecommerce.domain.exceptions import DomainException
from ecommerce.infrastructure.bootstrap import account_repository
from ecommerce.infrastructure.config import Settings


@click.command("register")
@click.option("--name", required=True, help="Display name.")
@click.option("--email", required=True, help="Contact email, unique per account.")
@click.password_option(help="Account password.")
@click.pass_obj
def account_register(settings: Settings, name: str, email: str, password: str) -> None:
    """Register a new buyer account."""
    try:
        handler = RegisterAccountHandler(account_repository(settings))
        account = handler.handle(name=name, email=email, password=password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Account #{account.id} registered for {account.email}")


@click.command("list")
@click.pass_obj
def account_list(settings: Settings) -> None:
    """List all accounts."""
    try:
        accounts = ListAccountsHandler(account_repository(settings)).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Email':<30}")
    click.echo("-" * 58)
    for a in accounts:
        click.echo(f"{a.id:<6} {a.name:<20} {a.email:<30}")


@click.command("show")
@click.option("--id", "account_id", required=True, help="Account ID.")
@click.pass_obj
def account_show(settings: Settings, account_id: str) -> None:
    """Show one account."""
    try:
        account = ShowAccountHandler(account_repository(settings)).handle(account_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Account #{account.id}: {account.name} <{account.email}>")
    click.echo(f"Created: {account.created_at:%Y-%m-%d %H:%M} UTC")


@click.command("update")
@click.option("--id", "account_id", required=True, help="Account ID.")
@click.option("--name", required=True, help="Display name.")
@click.option("--email", required=True, help="Contact email.")
@click.option("--password", default=None, help="New password; unchanged if omitted.")
@click.pass_obj
def account_update(
    settings: Settings, account_id: str, name: str, email: str, password: str | None
) -> None:
    """Update an account's profile."""
    try:
        handler = UpdateAccountHandler(account_repository(settings))
        account = handler.handle(account_id, name=name, email=email, password=password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Account #{account.id} updated.")


@click.command("remove")
@click.option("--id", "account_id", required=True, help="Account ID.")
@click.pass_obj
def account_remove(settings: Settings, account_id: str) -> None:
    """Remove an account."""
    try:
        RemoveAccountHandler(account_repository(settings)).handle(account_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Account #{account_id} removed.")
