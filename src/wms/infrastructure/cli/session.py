"""Credential check shared by every mutating command."""

from __future__ import annotations

import click

from wms.application.login import LoginHandler
from wms.domain.exceptions import DomainException
from wms.domain.repository.ledger_store import LedgerStore
from wms.infrastructure.bootstrap import ledger_store, user_repository


def acting_user() -> str:
    """Log in with the root group's credentials and return the display name."""
    ctx = click.get_current_context()
    creds = ctx.find_root().obj or {}
    email, password = creds.get("email"), creds.get("password")
    if not email or not password:
        raise click.ClickException(
            "Credentials required: pass --email/--password or set WMS_EMAIL/WMS_PASSWORD"
        )

    try:
        user = LoginHandler(user_repository()).handle(email, password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if user is None:
        raise click.ClickException("Invalid email or password")
    return user.name


def open_store() -> LedgerStore:
    try:
        return ledger_store()
    except DomainException as exc:
        raise click.ClickException(str(exc))
