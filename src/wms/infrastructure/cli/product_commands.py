"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from wms.application.add_product import AddProductHandler
from wms.application.delete_product import DeleteProductHandler
from wms.application.dto import ProductSpec
from wms.application.list_products import ListProductsHandler
from wms.application.update_product import ProductChanges, UpdateProductHandler
from wms.domain.exceptions import DomainException, EntityNotFoundError
from wms.domain.service.stock_queries import StockFilter
from wms.infrastructure.cli.session import acting_user, open_store


@click.command("list")
@click.option(
    "--filter", "stock_filter",
    type=click.Choice([f.value for f in StockFilter]), default="all",
    help="'low' shows 0 < qty <= min level; 'out' shows qty = 0.",
)
@click.option("--search", default=None, help="Match name or SKU.")
def product_list(stock_filter: str, search: str | None) -> None:
    """List products."""
    try:
        products = ListProductsHandler(open_store()).handle(StockFilter(stock_filter), search)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'SKU':<10} {'Name':<28} {'Qty':>6} {'Min':>5} {'Price':>10}  Status")
    click.echo("-" * 76)
    for p in products:
        click.echo(
            f"{p.sku:<10} {p.name[:28]:<28} {p.quantity:>6} {p.min_level:>5} {p.price:>10}  {p.status}"
        )


@click.command("add")
@click.option("--sku", required=True, help="Unique stock keeping unit.")
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", type=int, default=0, show_default=True, help="Starting quantity.")
@click.option("--category", default="Uncategorized", show_default=True)
@click.option("--unit", default="pcs", show_default=True, help="Unit of measure.")
@click.option("--location", default="", help="Storage location.")
@click.option("--price", default="0", help="Unit price (e.g. 29.99).")
@click.option("--cost", default="0", help="Unit cost (e.g. 12.50).")
@click.option("--supplier", default="")
@click.option("--min-level", type=int, default=0, show_default=True, help="Reorder threshold.")
def product_add(**fields) -> None:
    """Add a new product (records its initial inventory)."""
    handler = AddProductHandler(open_store())
    user = acting_user()

    try:
        product = handler.handle(ProductSpec(**fields), acting_user=user)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.sku} '{product.name}' added with {product.quantity} {product.unit}")


@click.command("update")
@click.option("--sku", "current_sku", required=True, help="SKU of the product to edit.")
@click.option("--new-sku", "sku", default=None)
@click.option("--name", default=None)
@click.option("--quantity", type=int, default=None, help="Counted quantity (records an adjustment).")
@click.option("--category", default=None)
@click.option("--unit", default=None)
@click.option("--location", default=None)
@click.option("--price", default=None)
@click.option("--cost", default=None)
@click.option("--supplier", default=None)
@click.option("--min-level", type=int, default=None)
def product_update(current_sku: str, **fields) -> None:
    """Edit a product."""
    store = open_store()
    user = acting_user()

    try:
        product = store.get_product_by_sku(current_sku)
        if product is None:
            raise EntityNotFoundError(f"Product not found: SKU '{current_sku}'")
        dto = UpdateProductHandler(store).handle(product.id, ProductChanges(**fields), user)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.sku} updated (quantity {dto.quantity}, {dto.status})")


@click.command("delete")
@click.option("--sku", "skus", required=True, multiple=True, help="Repeat to delete several.")
def product_delete(skus: tuple[str, ...]) -> None:
    """Delete one or more products."""
    store = open_store()
    user = acting_user()

    handler = DeleteProductHandler(store)
    try:
        ids = []
        for sku in skus:
            product = store.get_product_by_sku(sku)
            if product is None:
                raise EntityNotFoundError(f"Product not found: SKU '{sku}'")
            ids.append(product.id)
        if len(ids) == 1:
            handler.handle(ids[0], user)
            count = 1
        else:
            count = handler.handle_bulk(ids, user)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{count} product(s) deleted.")
