"""JSON-file-backed implementation of DraftOrderRepository.

Keeps the single order in progress so the wizard can be resumed across
CLI invocations.  Money is stored as decimal strings, dates as ISO
strings; the contract end date is written for readability only and is
re-derived on load.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path

from order_builder.domain.model.catalog import AddOn, Plan, Product
from order_builder.domain.model.order import Address, Contract, Customer, Order
from order_builder.domain.model.value_objects import Money, Quantity
from order_builder.domain.repository.draft_order_repository import DraftOrderRepository

logger = logging.getLogger(__name__)


class JsonDraftOrderRepository(DraftOrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- DraftOrderRepository interface ---------------------------------------

    def load(self) -> Order | None:
        if not self._file_path.exists():
            return None
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("Draft order %s is not valid JSON; ignoring it", self._file_path)
            return None
        if not isinstance(raw, dict):
            return None
        return self._to_domain(raw)

    def save(self, order: Order) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(self._to_raw(order), indent=2) + "\n", encoding="utf-8"
        )
        logger.debug("Saved draft order at step %d", order.current_step)

    def clear(self) -> None:
        self._file_path.unlink(missing_ok=True)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _plan_to_raw(plan: Plan) -> dict:
        return {"id": plan.id, "name": plan.name, "price": plan.price.to_string()}

    @staticmethod
    def _plan_to_domain(raw: dict) -> Plan:
        return Plan(id=raw["id"], name=raw["name"], price=Money.of(raw["price"]))

    @classmethod
    def _to_raw(cls, order: Order) -> dict:
        customer = order.customer
        address = customer.company_address
        contract = order.contract
        return {
            "current_step": order.current_step,
            "customer": {
                "name": customer.name,
                "pre_populated": customer.pre_populated,
                "company_address": (
                    {
                        "line1": address.line1,
                        "line2": address.line2,
                        "city": address.city,
                        "state": address.state,
                        "zip": address.zip,
                    }
                    if address is not None
                    else None
                ),
            },
            "product": (
                {
                    "id": order.product.id,
                    "name": order.product.name,
                    "description": order.product.description,
                    "plans": [cls._plan_to_raw(p) for p in order.product.plans],
                }
                if order.product is not None
                else None
            ),
            "selected_plan": (
                cls._plan_to_raw(order.selected_plan)
                if order.selected_plan is not None
                else None
            ),
            "contract": {
                "start_date": _date_to_raw(contract.start_date),
                "duration_months": contract.duration_months,
                "end_date": _date_to_raw(contract.end_date),
            },
            "add_ons": [
                {
                    "id": a.id,
                    "name": a.name,
                    "description": a.description,
                    "price": a.unit_price.to_string(),
                    "quantity": a.quantity.value,
                    "included": a.included,
                }
                for a in order.add_ons
            ],
        }

    @classmethod
    def _to_domain(cls, raw: dict) -> Order:
        raw_customer = raw["customer"]
        raw_address = raw_customer.get("company_address")
        raw_product = raw.get("product")
        raw_plan = raw.get("selected_plan")
        raw_contract = raw["contract"]

        return Order(
            customer=Customer(
                name=raw_customer.get("name", ""),
                pre_populated=raw_customer.get("pre_populated", False),
                company_address=Address(**raw_address) if raw_address else None,
            ),
            product=(
                Product(
                    id=raw_product["id"],
                    name=raw_product["name"],
                    description=raw_product.get("description", ""),
                    plans=[cls._plan_to_domain(p) for p in raw_product.get("plans", [])],
                )
                if raw_product
                else None
            ),
            selected_plan=cls._plan_to_domain(raw_plan) if raw_plan else None,
            contract=Contract(
                start_date=_date_to_domain(raw_contract.get("start_date")),
                duration_months=raw_contract["duration_months"],
            ),
            add_ons=[
                AddOn(
                    id=a["id"],
                    name=a["name"],
                    description=a.get("description", ""),
                    unit_price=Money.of(a["price"]),
                    quantity=Quantity(a["quantity"]),
                    included=a["included"],
                )
                for a in raw.get("add_ons", [])
            ],
            current_step=raw.get("current_step", 1),
        )


def _date_to_raw(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def _date_to_domain(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None
