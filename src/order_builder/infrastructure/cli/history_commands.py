"""CLI commands for finalized orders."""

from __future__ import annotations

import click

from order_builder.application.delete_order import DeleteOrderHandler
from order_builder.application.list_orders import ListOrdersHandler
from order_builder.domain.exceptions import DomainException
from order_builder.infrastructure.bootstrap import order_history_repository


@click.command("list")
def history_list() -> None:
    """List finalized orders, newest first."""
    handler = ListOrdersHandler(history_repo=order_history_repository())
    records = handler.handle()

    if not records:
        click.echo("No orders found.")
        return

    for record in records:
        click.echo(f"{record.id}  {record.created_at}")
        click.echo(f"  {record.customer_name}: {record.product_name} / {record.plan_name}")
        for line in record.add_ons:
            click.echo(f"    + {line}")
        click.echo(f"  Total {record.total}  MRR {record.mrr}  ({record.duration})")


@click.command("delete")
@click.option("--id", "record_id", required=True, help="Order ID to delete.")
def history_delete(record_id: str) -> None:
    """Delete a finalized order from the history."""
    handler = DeleteOrderHandler(history_repo=order_history_repository())

    try:
        handler.handle(record_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {record_id} deleted.")
