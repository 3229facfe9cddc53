"""CLI commands for stock levels and the movement ledger."""

from __future__ import annotations

import click

from wms.application.adjust_stock import AdjustStockHandler
from wms.application.dashboard import DashboardHandler
from wms.application.show_history import ShowMovementsHandler
from wms.domain.exceptions import DomainException, EntityNotFoundError
from wms.infrastructure.cli.session import acting_user, open_store


@click.command("adjust")
@click.option("--sku", required=True, help="Product SKU.")
@click.option("--quantity", required=True, type=int, help="Counted on-hand quantity.")
def inventory_adjust(sku: str, quantity: int) -> None:
    """Set the on-hand quantity (records a manual adjustment)."""
    handler = AdjustStockHandler(open_store())
    user = acting_user()

    try:
        dto = handler.handle(sku=sku, quantity=quantity, acting_user=user)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Inventory for {dto.sku} set to {dto.quantity} {dto.unit}")


@click.command("movements")
@click.option("--sku", default=None, help="Only this product's movements.")
def inventory_movements(sku: str | None) -> None:
    """Show the stock movement ledger, newest first."""
    store = open_store()
    try:
        product_id = None
        if sku is not None:
            product = store.get_product_by_sku(sku)
            if product is None:
                raise EntityNotFoundError(f"Product not found: SKU '{sku}'")
            product_id = product.id
        movements = ShowMovementsHandler(store).handle(product_id)
        skus = {p.id: p.sku for p in store.get_products()}
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not movements:
        click.echo("No stock movements recorded.")
        return

    click.echo(f"{'Date':<21} {'SKU':<10} {'Kind':<7} {'Qty':>6} {'Balance':>8}  Reference")
    click.echo("-" * 76)
    for m in movements:
        batch = f" [{m.batch_number}]" if m.batch_number else ""
        click.echo(
            f"{m.timestamp:<21} {skus.get(m.product_id, '(deleted)'):<10} {m.kind:<7} "
            f"{m.quantity:>+6} {m.balance_after:>8}  {m.reference}{batch}"
        )


@click.command("dashboard")
def inventory_dashboard() -> None:
    """Show stock and pending-operation counts."""
    try:
        dto = DashboardHandler(open_store()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Products:            {dto.total_products}")
    click.echo(f"Out of stock:        {dto.out_of_stock}")
    click.echo(f"Low stock (<= min):  {dto.low_stock}")
    click.echo(f"Pending receipts:    {dto.pending_receipts}")
    click.echo(f"Pending deliveries:  {dto.pending_deliveries}")
    click.echo(f"Inventory value:     {dto.inventory_value}")
