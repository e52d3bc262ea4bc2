import logging

import click

from order_builder.infrastructure.cli.catalog_commands import catalog_list
from order_builder.infrastructure.cli.history_commands import history_delete, history_list
from order_builder.infrastructure.cli.order_commands import (
    order_addon,
    order_back,
    order_contract,
    order_customer,
    order_finalize,
    order_goto,
    order_next,
    order_plan,
    order_reset,
    order_show,
    order_start,
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Order Builder: guided order creation with exact money arithmetic"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def order() -> None:
    """Build the order in progress."""


@cli.group()
def catalog() -> None:
    """Browse products and add-ons."""


@cli.group()
def history() -> None:
    """Manage finalized orders."""


# Register subcommands
order.add_command(order_addon)
order.add_command(order_back)
order.add_command(order_contract)
order.add_command(order_customer)
order.add_command(order_finalize)
order.add_command(order_goto)
order.add_command(order_next)
order.add_command(order_plan)
order.add_command(order_reset)
order.add_command(order_show)
order.add_command(order_start)
catalog.add_command(catalog_list)
history.add_command(history_delete)
history.add_command(history_list)
