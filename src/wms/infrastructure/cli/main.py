import click

from wms.infrastructure.cli.admin_commands import admin_insights, admin_reset, audit_list
from wms.infrastructure.cli.inventory_commands import (
    inventory_adjust,
    inventory_dashboard,
    inventory_movements,
)
from wms.infrastructure.cli.operation_commands import (
    operation_create,
    operation_list,
    operation_process,
    operation_ready,
    operation_show,
)
from wms.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from wms.infrastructure.config import get_settings
from wms.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--email", envvar="WMS_EMAIL", default=None, help="Acting user's email.")
@click.option("--password", envvar="WMS_PASSWORD", default=None, help="Acting user's password.")
@click.pass_context
def cli(ctx: click.Context, email: str | None, password: str | None) -> None:
    """WMS — Warehouse inventory ledger"""
    configure_logging(get_settings())
    ctx.obj = {"email": email, "password": password}


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def inventory() -> None:
    """Stock levels and movement history."""


@cli.group()
def operation() -> None:
    """Manage receipts, deliveries and transfers."""


@cli.group()
def audit() -> None:
    """Inspect the audit trail."""


@cli.group()
def admin() -> None:
    """Administrative actions."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
inventory.add_command(inventory_adjust)
inventory.add_command(inventory_dashboard)
inventory.add_command(inventory_movements)
operation.add_command(operation_create)
operation.add_command(operation_list)
operation.add_command(operation_process)
operation.add_command(operation_ready)
operation.add_command(operation_show)
audit.add_command(audit_list)
admin.add_command(admin_insights)
admin.add_command(admin_reset)
