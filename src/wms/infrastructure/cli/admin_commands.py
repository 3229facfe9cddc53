"""CLI commands for the audit trail and administrative actions."""

from __future__ import annotations

import click

from wms.application.insights import InventoryInsightsHandler
from wms.application.reset_ledger import ResetLedgerHandler
from wms.application.show_history import ShowAuditLogHandler
from wms.domain.exceptions import DomainException
from wms.infrastructure.bootstrap import insight_advisor
from wms.infrastructure.cli.session import acting_user, open_store


@click.command("list")
@click.option("--limit", type=int, default=20, show_default=True)
def audit_list(limit: int) -> None:
    """Show the most recent audit entries."""
    try:
        logs = ShowAuditLogHandler(open_store()).handle(limit=limit)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not logs:
        click.echo("No audit entries.")
        return

    for log in logs:
        click.echo(f"{log.timestamp:<21} {log.user:<14} {log.action:<12} {log.details}")


@click.command("reset")
@click.confirmation_option(prompt="Discard all products, operations, movements and audit logs?")
def admin_reset() -> None:
    """Discard every ledger collection and seed it again."""
    store = open_store()
    user = acting_user()

    try:
        ResetLedgerHandler(store).handle(user)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Ledger reset to its seed data.")


@click.command("insights")
def admin_insights() -> None:
    """Ask the advisory service about the current stock."""
    try:
        insights = InventoryInsightsHandler(open_store(), insight_advisor()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not insights:
        click.echo("No insights (advisor not configured or nothing to report).")
        return

    for insight in insights:
        action = f"  -> {insight.action}" if insight.action else ""
        click.echo(f"[{insight.type}] {insight.message}{action}")
