"""CLI commands for the Operation aggregate."""

from __future__ import annotations

from datetime import date, datetime

import click

from wms.application.create_operation import CreateOperationHandler
from wms.application.dto import OperationDTO, OperationLineSpec
from wms.application.mark_operation_ready import MarkOperationReadyHandler
from wms.application.process_operation import ProcessOperationHandler
from wms.application.show_operation import ListOperationsHandler, ShowOperationHandler
from wms.domain.exceptions import DomainException, EntityNotFoundError
from wms.domain.model.operation import OperationStatus, OperationType
from wms.domain.repository.ledger_store import LedgerStore
from wms.domain.service.operation_processing import ProcessingOutcome
from wms.infrastructure.cli.session import acting_user, open_store

_TYPES = {
    "receipt": OperationType.RECEIPT,
    "delivery": OperationType.DELIVERY,
    "internal": OperationType.INTERNAL,
    "adjustment": OperationType.ADJUSTMENT,
}


def _parse_lines(raw: str) -> list[OperationLineSpec]:
    """Parse 'ELEC-001:3,ACC-552:5@LOT-7' into OperationLineSpec list."""
    specs: list[OperationLineSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'SKU:Quantity[@Batch]'."
            )
        sku, rest = pair.rsplit(":", 1)
        qty_str, _, batch = rest.partition("@")
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(f"Invalid quantity '{qty_str}' for SKU '{sku}'.")
        specs.append(OperationLineSpec(sku=sku.strip(), quantity=qty, batch_number=batch or None))
    return specs


def _resolve_id(store: LedgerStore, reference: str) -> str:
    operation = store.get_operation_by_reference(reference)
    if operation is None:
        raise EntityNotFoundError(f"Operation {reference} not found")
    return operation.id


def _display_operation(dto: OperationDTO) -> None:
    click.echo(f"{dto.reference}  ({dto.type}, status={dto.status})")
    click.echo(f"Partner:   {dto.partner}")
    click.echo(f"Scheduled: {dto.scheduled_date}")
    click.echo()
    click.echo(f"  {'Product':<28} {'Qty':>6} {'Done':>6}  Batch")
    click.echo(f"  {'-'*50}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name[:28]:<28} {item.quantity:>6} {item.done:>6}  {item.batch_number or ''}"
        )


@click.command("list")
@click.option(
    "--status", type=click.Choice([s.value for s in OperationStatus], case_sensitive=False),
    default=None, help="Only operations in this status.",
)
def operation_list(status: str | None) -> None:
    """List operations, newest first."""
    wanted = OperationStatus(status.capitalize()) if status else None
    try:
        operations = ListOperationsHandler(open_store()).handle(wanted)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not operations:
        click.echo("No operations found.")
        return

    click.echo(f"{'Reference':<16} {'Type':<22} {'Status':<7} {'Scheduled':<11} Partner")
    click.echo("-" * 76)
    for op in operations:
        click.echo(
            f"{op.reference:<16} {op.type:<22} {op.status:<7} {op.scheduled_date:<11} {op.partner}"
        )


@click.command("show")
@click.option("--ref", "reference", required=True, help="Operation reference, e.g. WH/IN/00001.")
def operation_show(reference: str) -> None:
    """Show one operation and its lines."""
    store = open_store()
    try:
        dto = ShowOperationHandler(store).handle(_resolve_id(store, reference))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_operation(dto)


@click.command("create")
@click.option("--type", "op_type", required=True, type=click.Choice(list(_TYPES)), help="Operation type.")
@click.option("--partner", required=True, help="Supplier or customer name.")
@click.option("--items", required=True, help="Lines as 'SKU:Qty[@Batch],SKU:Qty'.")
@click.option("--draft", is_flag=True, default=False, help="Create in Draft instead of Ready.")
@click.option("--date", "scheduled", default=None, help="Scheduled date (YYYY-MM-DD).")
@click.option("--ref", "reference", default=None, help="Explicit reference; generated if omitted.")
def operation_create(
    op_type: str,
    partner: str,
    items: str,
    draft: bool,
    scheduled: str | None,
    reference: str | None,
) -> None:
    """Create a receipt, delivery, transfer or adjustment."""
    specs = _parse_lines(items)
    scheduled_date: date | None = None
    if scheduled:
        try:
            scheduled_date = datetime.strptime(scheduled, "%Y-%m-%d").date()
        except ValueError:
            raise click.BadParameter(f"Invalid date '{scheduled}'. Expected YYYY-MM-DD.")

    handler = CreateOperationHandler(open_store())
    user = acting_user()

    try:
        dto = handler.handle(
            _TYPES[op_type],
            partner,
            specs,
            user,
            status=OperationStatus.DRAFT if draft else OperationStatus.READY,
            scheduled_date=scheduled_date,
            reference=reference,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Operation {dto.reference} created  (status={dto.status})")
    click.echo()
    _display_operation(dto)


@click.command("ready")
@click.option("--ref", "reference", required=True, help="Operation reference.")
def operation_ready(reference: str) -> None:
    """Move a Draft operation to Ready."""
    store = open_store()
    user = acting_user()

    try:
        MarkOperationReadyHandler(store).handle(_resolve_id(store, reference), user)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Operation {reference} is ready.")


@click.command("process")
@click.option("--ref", "reference", required=True, help="Operation reference.")
def operation_process(reference: str) -> None:
    """Validate an operation and apply it to stock."""
    store = open_store()
    user = acting_user()

    try:
        result = ProcessOperationHandler(store).handle(_resolve_id(store, reference), user)
        result.raise_for_outcome()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if result.outcome == ProcessingOutcome.ALREADY_DONE:
        click.echo(f"Operation {reference} was already done — nothing changed.")
    else:
        click.echo(
            f"Operation {reference} validated — stock updated "
            f"({len(result.changes)} movement(s) recorded)."
        )
