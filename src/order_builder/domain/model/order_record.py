"""Finalized order as it is kept in the order history.

A record is a frozen snapshot: names instead of catalog references,
prices as exact decimal strings, and the breakdown projected to plain
numbers so the history file stays readable by anything that speaks JSON.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True)
class OrderRecordLine:
    add_on_id: str
    name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderRecord:
    id: str
    created_at: datetime
    customer_name: str
    product_name: str
    plan_name: str
    plan_price: str
    duration_months: int
    start_date: date | None
    end_date: date | None
    breakdown: dict[str, float]
    add_ons: list[OrderRecordLine] = field(default_factory=list)
