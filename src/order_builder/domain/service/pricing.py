"""Domain service: order pricing.

Pure functions that turn an order snapshot into money figures.  They read
the order and never mutate it, so they are safe to call as often as the
caller likes, including on a half-finished order: a missing plan counts
as zero and a missing contract duration yields zero MRR.

All aggregation stays in ``Money`` until ``OrderBreakdown.to_dict()``
projects the final figures to floats for storage.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from order_builder.domain.model.catalog import AddOn
from order_builder.domain.model.order import Order
from order_builder.domain.model.value_objects import Money, MoneyLike


@dataclass(frozen=True)
class OrderBreakdown:
    """Derived totals of an order.  Recomputed on demand, never stored.

    ``subtotal == plan_total + add_ons_total`` and
    ``total == subtotal + tax`` hold exactly.
    """

    plan_total: Money
    add_ons_total: Money
    subtotal: Money
    tax: Money
    total: Money
    mrr: Money

    def to_dict(self) -> dict[str, float]:
        """Native-number projection for consumers outside the pricing core."""
        return {
            "plan_total": self.plan_total.to_number(),
            "add_ons_total": self.add_ons_total.to_number(),
            "subtotal": self.subtotal.to_number(),
            "tax": self.tax.to_number(),
            "total": self.total.to_number(),
            "mrr": self.mrr.to_number(),
        }


def line_item_total(item: AddOn) -> Money:
    if not item.included or item.quantity.value <= 0:
        return Money.zero()
    return item.unit_price.multiply(item.quantity.value)


def add_ons_total(items: Iterable[AddOn]) -> Money:
    return Money.sum(line_item_total(item) for item in items)


def plan_total(order: Order) -> Money:
    if order.selected_plan is None:
        return Money.zero()
    return order.selected_plan.price


def order_total(order: Order) -> Money:
    """Plan price plus every qualifying add-on."""
    return plan_total(order).add(add_ons_total(order.add_ons))


def calculate_mrr(order: Order) -> Money:
    """Monthly recurring revenue: the order total spread over the term.

    A contract without a positive duration is an ordinary interim state
    of the wizard, so it yields zero instead of a division error.
    """
    duration = order.contract.duration_months
    if duration <= 0:
        return Money.zero()
    return order_total(order).divide(duration)


def calculate_tax(subtotal: MoneyLike, tax_rate: MoneyLike = 0) -> Money:
    """Tax on *subtotal* at *tax_rate* percent."""
    return Money.of(subtotal).multiply(Money.of(tax_rate).divide(100))


def calculate_discount_percentage(original: MoneyLike, final: MoneyLike) -> Money:
    """Percentage by which *final* undercuts *original*; zero if original is zero."""
    original_price = Money.of(original)
    if original_price.is_zero():
        return Money.zero()
    return original_price.subtract(final).divide(original_price).multiply(100)


def order_breakdown(order: Order, tax_rate: MoneyLike = 0) -> OrderBreakdown:
    plan = plan_total(order)
    addons = add_ons_total(order.add_ons)
    subtotal = plan.add(addons)
    tax = calculate_tax(subtotal, tax_rate)
    total = subtotal.add(tax)

    duration = order.contract.duration_months
    mrr = total.divide(duration) if duration > 0 else Money.zero()

    return OrderBreakdown(
        plan_total=plan,
        add_ons_total=addons,
        subtotal=subtotal,
        tax=tax,
        total=total,
        mrr=mrr,
    )


# --- Input validation ----------------------------------------------------------


def is_valid_price(price: object) -> bool:
    """True for finite, non-negative prices."""
    if isinstance(price, bool):
        return False
    if isinstance(price, Money):
        return not price.is_negative()
    if isinstance(price, Decimal):
        return price.is_finite() and price >= 0
    if isinstance(price, (int, float)):
        return math.isfinite(price) and price >= 0
    return False


def is_valid_quantity(quantity: object) -> bool:
    """True for non-negative whole numbers (``3`` or ``3.0``)."""
    if isinstance(quantity, bool):
        return False
    if isinstance(quantity, int):
        return quantity >= 0
    if isinstance(quantity, float):
        return quantity.is_integer() and quantity >= 0
    return False
