"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from order_builder.application.formatting import format_currency, format_per_unit
from order_builder.infrastructure.bootstrap import catalog_repository


@click.command("list")
def catalog_list() -> None:
    """List products, their plans and the available add-ons."""
    repo = catalog_repository()
    products = repo.list_products()

    if not products:
        click.echo("No products found.")
        return

    for product in products:
        click.echo(f"{product.name} [{product.id}]")
        for plan in product.plans:
            click.echo(f"  {plan.id:<24} {plan.name:<24} {format_currency(plan.price):>12}/mo")

    add_ons = repo.list_add_ons()
    if add_ons:
        click.echo()
        click.echo("Add-ons")
        for addon in add_ons:
            click.echo(f"  {addon.id:<24} {addon.name:<24} {format_per_unit(addon.unit_price)}")
