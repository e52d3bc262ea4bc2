"""Per-step validation of the order wizard.

Each validator returns a mapping of field path to message; an empty
mapping means the step is complete.  Errors block moving on to the next
step or finalizing, so an order is never saved with a deceptive total.
"""

from __future__ import annotations

import re
from datetime import date
from decimal import Decimal

from order_builder.domain.exceptions import ValidationError
from order_builder.domain.model.order import FIRST_STEP, LAST_STEP, Order
from order_builder.domain.service.pricing import is_valid_price, is_valid_quantity

MAX_PRICE = Decimal("99999.99")
MIN_DURATION_MONTHS = 1
MAX_DURATION_MONTHS = 60

_ZIP = re.compile(r"^\d{5}(-\d{4})?$")

Errors = dict[str, str]


def validate_customer(order: Order) -> Errors:
    errors: Errors = {}
    name = order.customer.name.strip()
    if not name:
        errors["customer.name"] = "Name is required"
    elif len(name) < 2:
        errors["customer.name"] = "Name must be at least 2 characters"
    elif len(name) > 100:
        errors["customer.name"] = "Name cannot exceed 100 characters"

    address = order.customer.company_address
    if address is None:
        if order.customer.pre_populated:
            errors["customer.company_address"] = (
                "Address is required when pre-populated is checked"
            )
        return errors

    if len(address.line1.strip()) < 5:
        errors["customer.company_address.line1"] = "Address must be at least 5 characters"
    elif len(address.line1) > 100:
        errors["customer.company_address.line1"] = "Address line 1 cannot exceed 100 characters"
    if len(address.line2) > 100:
        errors["customer.company_address.line2"] = "Address line 2 cannot exceed 100 characters"
    if len(address.city.strip()) < 2:
        errors["customer.company_address.city"] = "City must be at least 2 characters"
    elif len(address.city) > 50:
        errors["customer.company_address.city"] = "City cannot exceed 50 characters"
    if len(address.state) != 2:
        errors["customer.company_address.state"] = "State must be 2 characters"
    if not _ZIP.match(address.zip):
        errors["customer.company_address.zip"] = (
            "ZIP code must be in format 12345 or 12345-6789"
        )
    return errors


def validate_product_plan(order: Order) -> Errors:
    errors: Errors = {}
    if order.product is None:
        errors["product"] = "Please select a product"
    if order.selected_plan is None:
        errors["selected_plan"] = "Please select a plan"
        return errors

    price = order.selected_plan.price
    if price.is_negative():
        errors["selected_plan.price"] = "Price must be 0 or greater"
    elif price.greater_than(MAX_PRICE):
        errors["selected_plan.price"] = "Price cannot exceed $99,999.99"
    return errors


def validate_contract(order: Order, today: date | None = None) -> Errors:
    errors: Errors = {}
    contract = order.contract
    today = today or date.today()

    if contract.start_date is None:
        errors["contract.start_date"] = "Start date is required"
    elif contract.start_date < today:
        errors["contract.start_date"] = "Start date cannot be in the past"

    if contract.duration_months < MIN_DURATION_MONTHS:
        errors["contract.duration_months"] = "Duration must be at least 1 month"
    elif contract.duration_months > MAX_DURATION_MONTHS:
        errors["contract.duration_months"] = "Duration cannot exceed 60 months"
    return errors


def validate_add_ons(order: Order) -> Errors:
    errors: Errors = {}
    for index, addon in enumerate(order.add_ons):
        if not is_valid_price(addon.unit_price):
            errors[f"add_ons[{index}].price"] = "Price must be 0 or greater"
        if not is_valid_quantity(addon.quantity.value):
            errors[f"add_ons[{index}].quantity"] = "Quantity must be a whole number"
    return errors


def validate_step(order: Order, step: int, today: date | None = None) -> Errors:
    if step == 1:
        return validate_customer(order)
    if step == 2:
        return validate_product_plan(order)
    if step == 3:
        return validate_contract(order, today)
    if step == 4:
        return validate_add_ons(order)
    raise ValidationError(
        f"Invalid step: {step} (expected {FIRST_STEP}-{LAST_STEP})"
    )


def validate_order(order: Order, today: date | None = None) -> Errors:
    errors: Errors = {}
    for step in range(FIRST_STEP, LAST_STEP + 1):
        errors.update(validate_step(order, step, today))
    return errors
