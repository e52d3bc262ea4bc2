"""CLI commands for the order wizard."""

from __future__ import annotations

import click

from order_builder.application.configure_add_on import ConfigureAddOnHandler
from order_builder.application.finalize_order import FinalizeOrderHandler
from order_builder.application.formatting import (
    DEFAULT_CURRENCY,
    DEFAULT_LOCALE,
    format_currency,
)
from order_builder.application.navigate_step import NavigateStepHandler
from order_builder.application.select_plan import SelectPlanHandler
from order_builder.application.set_contract import SetContractHandler
from order_builder.application.show_order import ShowOrderHandler
from order_builder.application.start_order import StartOrderHandler
from order_builder.application.update_customer import UpdateCustomerHandler
from order_builder.domain.exceptions import (
    DomainException,
    IncompleteStepError,
    InvalidAmountError,
)
from order_builder.domain.model.order import Address
from order_builder.infrastructure.bootstrap import (
    catalog_repository,
    draft_order_repository,
    order_history_repository,
)


def _fail(exc: DomainException) -> click.ClickException:
    """Turn a domain error into a user-facing CLI error."""
    if isinstance(exc, IncompleteStepError):
        lines = [f"  {path}: {message}" for path, message in exc.errors.items()]
        return click.ClickException("Please fix the following:\n" + "\n".join(lines))
    if isinstance(exc, InvalidAmountError):
        return click.BadParameter(str(exc))
    return click.ClickException(str(exc))


def _echo_step(dto) -> None:
    click.echo(f"Step {dto.current_step}: {dto.title} ({dto.description})")


@click.command("start")
def order_start() -> None:
    """Start a new order (discards any order in progress)."""
    handler = StartOrderHandler(
        catalog_repo=catalog_repository(),
        draft_repo=draft_order_repository(),
    )
    _echo_step(handler.handle())


@click.command("reset")
def order_reset() -> None:
    """Reset the order in progress to its defaults."""
    handler = StartOrderHandler(
        catalog_repo=catalog_repository(),
        draft_repo=draft_order_repository(),
    )
    step = handler.handle()
    click.echo("Order reset.")
    _echo_step(step)


@click.command("customer")
@click.option("--name", default=None, help="Customer name.")
@click.option(
    "--pre-populated/--no-pre-populated",
    default=None,
    help="Whether the company address is required.",
)
@click.option("--line1", default=None, help="Address line 1.")
@click.option("--line2", default="", help="Address line 2.")
@click.option("--city", default=None, help="City.")
@click.option("--state", default=None, help="Two-letter state code.")
@click.option("--zip", "zip_code", default=None, help="ZIP code.")
def order_customer(
    name: str | None,
    pre_populated: bool | None,
    line1: str | None,
    line2: str,
    city: str | None,
    state: str | None,
    zip_code: str | None,
) -> None:
    """Enter customer details (step 1)."""
    address_fields = (line1, city, state, zip_code)
    address = None
    if any(f is not None for f in address_fields):
        if not all(f is not None for f in address_fields):
            raise click.BadParameter(
                "An address needs --line1, --city, --state and --zip."
            )
        address = Address(
            line1=line1, line2=line2, city=city, state=state.upper(), zip=zip_code
        )

    handler = UpdateCustomerHandler(draft_repo=draft_order_repository())
    try:
        customer = handler.handle(
            name=name, pre_populated=pre_populated, company_address=address
        )
    except DomainException as exc:
        raise _fail(exc)

    click.echo(f"Customer: {customer.name or '(no name)'}")


@click.command("plan")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--plan", "plan_id", required=True, help="Plan ID.")
@click.option("--price", default=None, help="Custom monthly price (e.g. 249.00).")
def order_plan(product_id: str, plan_id: str, price: str | None) -> None:
    """Select a product plan (step 2)."""
    handler = SelectPlanHandler(
        catalog_repo=catalog_repository(),
        draft_repo=draft_order_repository(),
    )
    try:
        plan = handler.handle(product_id=product_id, plan_id=plan_id, price=price)
    except DomainException as exc:
        raise _fail(exc)

    click.echo(f"Selected {plan.name} at {format_currency(plan.price)}")


@click.command("contract")
@click.option(
    "--start",
    "start",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Start date (YYYY-MM-DD).",
)
@click.option("--months", type=int, default=None, help="Duration in months.")
def order_contract(start, months: int | None) -> None:
    """Set the contract term (step 3)."""
    handler = SetContractHandler(draft_repo=draft_order_repository())
    try:
        contract = handler.handle(
            start_date=start.date() if start is not None else None,
            duration_months=months,
        )
    except DomainException as exc:
        raise _fail(exc)

    end = contract.end_date.isoformat() if contract.end_date else "-"
    click.echo(f"Contract: {contract.duration_months} months, ends {end}")


@click.command("addon")
@click.option("--id", "add_on_id", required=True, help="Add-on ID.")
@click.option("--include/--exclude", "included", default=None, help="Include or exclude.")
@click.option("--toggle", is_flag=True, default=False, help="Flip inclusion.")
@click.option("--quantity", type=int, default=None, help="Quantity (negative clamps to 0).")
@click.option("--price", default=None, help="Custom unit price (e.g. 0.08).")
def order_addon(
    add_on_id: str,
    included: bool | None,
    toggle: bool,
    quantity: int | None,
    price: str | None,
) -> None:
    """Configure an add-on (step 4)."""
    handler = ConfigureAddOnHandler(draft_repo=draft_order_repository())
    try:
        dto = handler.handle(
            add_on_id,
            included=included,
            toggle=toggle,
            quantity=quantity,
            price=price,
        )
    except DomainException as exc:
        raise _fail(exc)

    state = "included" if dto.included else "excluded"
    click.echo(
        f"{dto.name}: {dto.quantity} x {dto.unit_price} ({state}) = {dto.line_total}"
    )


def _display_order(dto) -> None:
    """Shared formatting for displaying the order in progress."""
    _echo_step(dto.step)
    click.echo()
    click.echo(f"Customer: {dto.customer_name or '-'}")
    if dto.company_address:
        click.echo(f"Address:  {dto.company_address}")
    plan_line = f"{dto.product_name} / {dto.plan_name} at {dto.plan_price}" if dto.plan_name else "-"
    if dto.plan_discount:
        plan_line += f" ({dto.plan_discount} off)"
    click.echo(f"Plan:     {plan_line}")
    click.echo(f"Contract: {dto.duration}  {dto.contract_period}")
    click.echo()

    included = [a for a in dto.add_ons if a.included]
    if included:
        click.echo(f"  {'Add-on':<24} {'Qty':>7} {'Price':>10} {'Total':>12}")
        click.echo(f"  {'-'*56}")
        for item in included:
            click.echo(
                f"  {item.name:<24} {item.quantity:>7} {item.unit_price:>10} {item.line_total:>12}"
            )
        click.echo(f"  {'-'*56}")

    b = dto.breakdown
    for label, value in (
        ("Plan", b.plan_total),
        ("Add-ons", b.add_ons_total),
        ("Subtotal", b.subtotal),
        ("Tax", b.tax),
        ("Order Total", b.total),
        ("Monthly (MRR)", b.mrr),
    ):
        click.echo(f"  {label:<27} {value:>29}")


@click.command("show")
@click.option("--currency", default=DEFAULT_CURRENCY, show_default=True, help="Display currency.")
@click.option("--locale", default=DEFAULT_LOCALE, show_default=True, help="Display locale.")
def order_show(currency: str, locale: str) -> None:
    """Show the order in progress with its totals."""
    handler = ShowOrderHandler(draft_repo=draft_order_repository())
    try:
        dto = handler.handle(currency=currency, locale=locale)
    except DomainException as exc:
        raise _fail(exc)

    _display_order(dto)


@click.command("next")
def order_next() -> None:
    """Move to the next step once the current one is complete."""
    handler = NavigateStepHandler(draft_repo=draft_order_repository())
    try:
        step = handler.next()
    except DomainException as exc:
        raise _fail(exc)

    _echo_step(step)


@click.command("back")
def order_back() -> None:
    """Go back to the previous step."""
    handler = NavigateStepHandler(draft_repo=draft_order_repository())
    try:
        step = handler.back()
    except DomainException as exc:
        raise _fail(exc)

    _echo_step(step)


@click.command("goto")
@click.option("--step", type=int, required=True, help="Step number (1-4).")
def order_goto(step: int) -> None:
    """Jump to a wizard step."""
    handler = NavigateStepHandler(draft_repo=draft_order_repository())
    try:
        dto = handler.go_to(step)
    except DomainException as exc:
        raise _fail(exc)

    _echo_step(dto)


@click.command("finalize")
def order_finalize() -> None:
    """Validate the order and save it to the order history."""
    handler = FinalizeOrderHandler(
        draft_repo=draft_order_repository(),
        history_repo=order_history_repository(),
    )
    try:
        dto = handler.handle()
    except DomainException as exc:
        raise _fail(exc)

    click.echo(f"Order {dto.id} saved.")
    click.echo(f"Total: {dto.total}  (MRR {dto.mrr} over {dto.duration})")
