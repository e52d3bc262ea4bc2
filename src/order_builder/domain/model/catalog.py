"""Catalog entities: products, their plans, and priceable add-ons.

The catalog itself is static data owned by the catalog repository.  An
order works on its own copies (``Plan`` and ``AddOn`` snapshots), so a
price override in one order never leaks back into the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from order_builder.domain.exceptions import EntityNotFoundError, ValidationError
from order_builder.domain.model.value_objects import Money, Quantity


@dataclass
class Plan:
    """A pricing plan of a product, billed at a monthly price."""

    id: str
    name: str
    price: Money

    def override_price(self, new_price: Money) -> None:
        """Replace the catalog price with a negotiated one."""
        if new_price.is_negative():
            raise ValidationError("Plan price must be 0 or greater")
        self.price = new_price


@dataclass
class Product:
    """A product in the catalog together with the plans it is sold under."""

    id: str
    name: str
    description: str = ""
    plans: list[Plan] = field(default_factory=list)

    def get_plan(self, plan_id: str) -> Plan:
        for plan in self.plans:
            if plan.id == plan_id:
                return plan
        raise EntityNotFoundError(
            f"Plan '{plan_id}' not found for product '{self.name}'"
        )


@dataclass
class AddOn:
    """A quantity-and-price-bearing line item attached to an order.

    Add-ons start excluded at quantity 0.  Only included add-ons with a
    positive quantity contribute to the order total; the rest simply sit
    in the order so the customer can switch them on later.
    """

    id: str
    name: str
    description: str
    unit_price: Money
    quantity: Quantity = field(default_factory=lambda: Quantity(0))
    included: bool = False

    def toggle(self) -> None:
        self.included = not self.included

    def set_quantity(self, quantity: int) -> None:
        """Set the quantity; negative input is clamped to zero."""
        self.quantity = Quantity(max(0, quantity))

    def override_price(self, new_price: Money) -> None:
        if new_price.is_negative():
            raise ValidationError("Add-on price must be 0 or greater")
        self.unit_price = new_price

    def reset(self) -> None:
        self.quantity = Quantity(0)
        self.included = False

    def fresh_copy(self) -> AddOn:
        """A copy in its default state, ready to be placed on a new order."""
        copy = replace(self)
        copy.reset()
        return copy
