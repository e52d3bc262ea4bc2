"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Every money field is
already formatted for display.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StepDTO:
    """Output: where the wizard stands after a navigation request."""

    current_step: int
    title: str
    description: str


@dataclass(frozen=True)
class AddOnLineDTO:
    """Output: a single add-on as displayed to the user."""

    id: str
    name: str
    description: str
    unit_price: str  # per-unit precision, e.g. "$0.001"
    quantity: int
    included: bool
    line_total: str


@dataclass(frozen=True)
class BreakdownDTO:
    plan_total: str
    add_ons_total: str
    subtotal: str
    tax: str
    total: str
    mrr: str


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Output: the order in progress as displayed on the review step."""

    step: StepDTO
    customer_name: str
    company_address: str
    product_name: str
    plan_name: str
    plan_price: str
    plan_discount: str | None  # e.g. "10.0%" when the catalog price was lowered
    contract_period: str
    duration: str
    add_ons: list[AddOnLineDTO]
    breakdown: BreakdownDTO


@dataclass(frozen=True)
class OrderRecordDTO:
    """Output: a finalized order from the history."""

    id: str
    created_at: str
    customer_name: str
    product_name: str
    plan_name: str
    duration: str
    total: str
    mrr: str
    add_ons: list[str] = field(default_factory=list)
